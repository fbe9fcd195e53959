"""
Section Analyzer - Per-Section Compliance Findings

This module turns a detection result into one SectionFinding per required
section.

Two Modes:
    1. Trigger mode (formats with a rule table, currently SOAP):
       a present section is compliant with 0 fired triggers, a warning
       with exactly 1, and non-compliant with 2 or more
    2. Presence mode (every other format):
       a present section is compliant, nothing more is checked

A missing section is non-compliant in both modes, with a fixed message.

Pipeline Position:
    Request → Detection → [Section Analysis] → Domain Scoring → Assembly
                          ^^^^^^^^^^^^^^^^^^
                          You are here
"""

from typing import Dict, List, Mapping, Optional, Sequence

from loguru import logger

from note_compliance.analysis.section_rules import RULES_BY_FORMAT, SectionRule
from note_compliance.core.constants import (
    DEFAULT_SECTION_REQUIREMENT,
    MISSING_SECTION_CORRECTION,
    MISSING_SECTION_ISSUE,
    SECTION_REQUIREMENTS,
)
from note_compliance.core.enums import ComplianceStatus, NoteFormat
from note_compliance.core.exceptions import RuleTableError
from note_compliance.core.models import DetectionResult, FormatDefinition, SectionFinding


def missing_section_finding(section: str) -> SectionFinding:
    """Finding for a required section the note does not contain."""
    requirement = SECTION_REQUIREMENTS.get(section, DEFAULT_SECTION_REQUIREMENT)
    return SectionFinding(
        section=section,
        status=ComplianceStatus.NON_COMPLIANT,
        issues=[MISSING_SECTION_ISSUE.format(section=section)],
        corrections=[MISSING_SECTION_CORRECTION.format(section=section, requirement=requirement)],
    )


def status_for_trigger_count(fired: int) -> ComplianceStatus:
    if fired == 0:
        return ComplianceStatus.COMPLIANT
    if fired == 1:
        return ComplianceStatus.WARNING
    return ComplianceStatus.NON_COMPLIANT


class SectionAnalyzer:
    """
    Produces per-section findings for a detected note.

    What it does:
        Iterates the rule table once per required section, collecting the
        messages of fired triggers and the section's correction text.

    Example:
        >>> analyzer = SectionAnalyzer(definitions)
        >>> findings = analyzer.analyze(note_text, detection)
        >>> [f.status.value for f in findings]
        ['compliant', 'warning', 'non-compliant', 'compliant']
    """

    def __init__(
        self,
        definitions: Mapping[NoteFormat, FormatDefinition],
        rules_by_format: Optional[Mapping[NoteFormat, Sequence[SectionRule]]] = None,
    ):
        """
        Args:
            definitions: Format definitions (section order per format)
            rules_by_format: Trigger rules; defaults to the built-in table

        Raises:
            RuleTableError: If a rule targets a section its format lacks
        """
        self._definitions = definitions
        rules_by_format = rules_by_format if rules_by_format is not None else RULES_BY_FORMAT
        self._rules: Dict[NoteFormat, List[SectionRule]] = {
            note_format: list(rules) for note_format, rules in rules_by_format.items()
        }
        self._check_rule_table()

    def _check_rule_table(self) -> None:
        for note_format, rules in self._rules.items():
            definition = self._definitions.get(note_format)
            for rule in rules:
                if definition is None or not definition.has_section(rule.section):
                    raise RuleTableError(rule.section, rule.trigger, note_format.value)

    def analyze(self, note_text: str, detection: DetectionResult) -> List[SectionFinding]:
        """
        Build one finding per required section, in definition order.

        Args:
            note_text: Raw note text
            detection: Detector output for the same text and format

        Returns:
            List of SectionFinding
        """
        definition = self._definitions[detection.note_format]
        lowered = note_text.lower()
        rules = self._rules.get(detection.note_format, [])

        findings = []
        for section in definition.section_labels:
            if section not in detection.found_sections:
                findings.append(missing_section_finding(section))
                continue

            section_rules = [rule for rule in rules if rule.section == section]
            fired = [rule for rule in section_rules if rule.fires(note_text, lowered)]
            if fired:
                logger.debug(f"{section}: fired {[rule.trigger for rule in fired]}")

            corrections: List[str] = []
            for rule in fired:
                if rule.correction not in corrections:
                    corrections.append(rule.correction)

            findings.append(
                SectionFinding(
                    section=section,
                    status=status_for_trigger_count(len(fired)),
                    issues=[rule.message for rule in fired],
                    corrections=corrections,
                )
            )

        return findings
