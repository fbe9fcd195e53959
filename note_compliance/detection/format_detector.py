"""
Format Detector - Keyword-Presence Note Format Detection

This module decides whether a note looks like the selected documentation
format by checking which required section keywords occur in it.

Matching Semantics:
    - The note is lowercased; nothing else is normalized
    - A section is present iff any of its keywords is a substring
    - No word boundaries and no stemming: "plan" inside "explanation"
      still counts

Pipeline Position:
    Request → [Detection] → Section Analysis → Domain Scoring → Assembly
              ^^^^^^^^^^^
              You are here
"""

from typing import Dict, Mapping, Optional

from loguru import logger

from note_compliance.core.constants import NOTE_FORMAT_DEFINITIONS
from note_compliance.core.enums import ComplianceStatus, NoteFormat, RiskTier
from note_compliance.core.models import DetectionResult, FormatDefinition
from note_compliance.core.thresholds import round_half_up


def load_format_definitions(
    raw: Optional[Mapping[NoteFormat, dict]] = None,
) -> Dict[NoteFormat, FormatDefinition]:
    """Build FormatDefinition objects from the constants table."""
    raw = raw if raw is not None else NOTE_FORMAT_DEFINITIONS
    return {
        note_format: FormatDefinition.from_dict(note_format, data)
        for note_format, data in raw.items()
    }


class FormatDetector:
    """
    Detects required sections of a note format by keyword presence.

    What it does:
        Computes the found/missing section split, a confidence ratio, and
        a coarse status/risk from the number of missing sections.

    How it works:
        STAGE 1: Look up the format definition
        STAGE 2: Lowercase the note and test each section's keywords
        STAGE 3: Map the missing count onto status and risk

    Example:
        >>> detector = FormatDetector()
        >>> result = detector.detect("Subjective ... Plan", NoteFormat.SOAP)
        >>> result.missing_sections
        ['Objective', 'Assessment']
    """

    def __init__(self, definitions: Optional[Dict[NoteFormat, FormatDefinition]] = None):
        self._definitions = definitions or load_format_definitions()

    @property
    def definitions(self) -> Dict[NoteFormat, FormatDefinition]:
        return dict(self._definitions)

    def definition_for(self, note_format: NoteFormat) -> FormatDefinition:
        return self._definitions[note_format]

    def detect(self, note_text: str, note_format: NoteFormat) -> DetectionResult:
        """
        Detect required sections of `note_format` in `note_text`.

        Returns:
            DetectionResult; `is_valid_format` is False when no keyword matched
        """
        # STAGE 1: Definition lookup
        definition = self.definition_for(note_format)
        normalized = note_text.lower()

        # STAGE 2: Keyword presence
        found = [s.label for s in definition.sections if s.is_present(normalized)]
        missing = [s.label for s in definition.sections if s.label not in found]

        required = len(definition.sections)
        confidence = len(found) / required if required else 0.0

        # STAGE 3: Status from missing count
        status = self._status_for_missing(len(missing), definition.max_missing_for_warning)

        logger.debug(
            f"Detected {note_format.value} sections | "
            f"Found: {found} | Missing: {missing} | Confidence: {confidence:.2f}"
        )

        return DetectionResult(
            note_format=note_format,
            found_sections=found,
            missing_sections=missing,
            confidence=confidence,
            status=status,
            risk_tier=RiskTier.for_status(status),
            overall_score=round_half_up(confidence * 100),
        )

    @staticmethod
    def _status_for_missing(missing_count: int, max_missing_for_warning: int) -> ComplianceStatus:
        if missing_count == 0:
            return ComplianceStatus.COMPLIANT
        if missing_count <= max_missing_for_warning:
            return ComplianceStatus.WARNING
        return ComplianceStatus.NON_COMPLIANT
