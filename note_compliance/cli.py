"""
Command-Line Interface

Runs one compliance check and prints the report. The note text comes from
a file argument or, when omitted or "-", from stdin.

Usage:
    note-compliance note.txt --state GA --payer medicaid --note-type soap
    cat note.txt | python -m note_compliance --state NY --payer medicare --format json

Exit Codes:
    0 → report printed
    1 → configuration error
    2 → nothing to analyze (empty or unreadable note) or invalid arguments
"""

import argparse
import json
import sys
from typing import List, Optional

from loguru import logger

from note_compliance.core.config import CheckerConfiguration
from note_compliance.core.enums import Jurisdiction, NoteFormat, PayerCategory
from note_compliance.core.exceptions import ConfigurationError
from note_compliance.pipeline import ComplianceChecker
from note_compliance.reporting import build_view, render_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="note-compliance",
        description="Check a clinical note for documentation format compliance.",
    )
    parser.add_argument(
        "note_file",
        nargs="?",
        default="-",
        help="Path to the note text file (default: read from stdin)",
    )
    parser.add_argument(
        "--state",
        required=True,
        choices=[s.value for s in Jurisdiction],
        help="Jurisdiction whose regulations are referenced",
    )
    parser.add_argument(
        "--payer",
        required=True,
        choices=[p.value for p in PayerCategory],
        help="Payer category",
    )
    parser.add_argument(
        "--note-type",
        choices=[f.value.lower() for f in NoteFormat],
        default=None,
        help="Documentation format (default: DEFAULT_NOTE_TYPE from the environment)",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=["text", "json"],
        default="text",
        help="Report output format",
    )
    parser.add_argument("--env-file", default=None, help="Path to a .env file")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Skip the simulated processing delay",
    )
    return parser


def _read_note(note_file: str) -> str:
    if note_file == "-":
        return sys.stdin.read()
    with open(note_file, "r", encoding="utf-8") as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    # =========================================================================
    # STAGE 1: CONFIGURATION AND LOGGING
    # =========================================================================
    try:
        config = CheckerConfiguration.from_environment(env_file=args.env_file)
        if args.log_level:
            config.log_level = args.log_level.upper()
            config.validate()
    except ConfigurationError as e:
        print(f"[FAIL] {e}", file=sys.stderr)
        return 1

    if args.no_delay:
        config.simulated_delay_seconds = 0.0

    logger.remove()
    logger.add(sys.stderr, level=config.log_level)

    # =========================================================================
    # STAGE 2: FILL THE FORM
    # =========================================================================
    checker = ComplianceChecker(config)
    try:
        checker.set_note_text(_read_note(args.note_file))
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read note: {e}")
        return 2
    checker.select_jurisdiction(args.state)
    checker.select_payer(args.payer)
    checker.select_note_format(args.note_type)

    if not checker.can_analyze:
        print("Nothing to analyze: provide note text and a note type.", file=sys.stderr)
        return 2

    # =========================================================================
    # STAGE 3: ANALYZE AND PRINT
    # =========================================================================
    if config.simulated_delay_seconds > 0:
        logger.info(
            f"Running compliance checks against {args.state} regulations "
            f"and {args.payer} requirements..."
        )
    result = checker.analyze()
    view = build_view(result)

    if args.output_format == "json":
        print(json.dumps(view.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(render_text(view))
    return 0


if __name__ == "__main__":
    sys.exit(main())
