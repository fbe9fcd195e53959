"""
Result Assembler - Builds the AnalysisResult

Combines detector confidence, section findings and domain scores into the
final report object, and fills in the recommendation and reference
boilerplate for the selected jurisdiction and payer.

Scoring:
    domain_average = round(mean(domain scores))
    adjusted_score = round((detection score + domain_average) / 2)
    risk tier      = thresholds.final_risk applied to adjusted_score

Pipeline Position:
    Request → Detection → Section Analysis → Domain Scoring → [Assembly]
                                                              ^^^^^^^^^^
                                                              You are here
"""

from typing import Iterable, List

from loguru import logger

from note_compliance.core.constants import (
    BASE_REFERENCES,
    DSM_REFERENCE,
    MISSING_SECTION_RECOMMENDATION,
    PAYER_REFERENCES,
    SELECTION_RECOMMENDATIONS,
    UNSUPPORTED_FORMAT_LABEL,
    UNSUPPORTED_FORMAT_RECOMMENDATIONS,
)
from note_compliance.core.enums import Jurisdiction, NoteFormat, PayerCategory, RiskTier
from note_compliance.core.models import (
    AnalysisResult,
    ComplianceDomain,
    DetectionResult,
    FormatDefinition,
    SectionFinding,
)
from note_compliance.core.thresholds import (
    DEFAULT_THRESHOLDS,
    ComplianceThresholds,
    clamp_score,
    round_half_up,
)


def dedupe_preserving_order(items: Iterable[str]) -> List[str]:
    """Drop exact-duplicate strings, keeping the first occurrence."""
    seen = set()
    unique = []
    for item in items:
        if item not in seen:
            seen.add(item)
            unique.append(item)
    return unique


def build_references(jurisdiction: Jurisdiction, payer: PayerCategory) -> List[str]:
    state = jurisdiction.value
    references = [template.format(state=state) for template in BASE_REFERENCES]
    references.append(PAYER_REFERENCES[payer].format(state=state))
    references.append(DSM_REFERENCE)
    return references


def _join_labels(labels: List[str]) -> str:
    if len(labels) <= 1:
        return "".join(labels)
    return ", ".join(labels[:-1]) + f", and {labels[-1]}"


class ResultAssembler:
    """
    Assembles AnalysisResult objects.

    What it does:
        Produces either a full report (recognized format) or the designated
        unsupported-format report (no required keyword matched).
    """

    def __init__(self, thresholds: ComplianceThresholds = DEFAULT_THRESHOLDS):
        self._thresholds = thresholds

    def assemble(
        self,
        detection: DetectionResult,
        findings: List[SectionFinding],
        domains: List[ComplianceDomain],
        jurisdiction: Jurisdiction,
        payer: PayerCategory,
    ) -> AnalysisResult:
        """
        Build the report for a recognized note.

        Args:
            detection: Detector output
            findings: Section analyzer output
            domains: Domain scorer output
            jurisdiction: Selected state
            payer: Selected payer

        Returns:
            AnalysisResult with adjusted score and final risk tier
        """
        # STAGE 1: Adjusted score
        if domains:
            domain_average = round_half_up(sum(d.score for d in domains) / len(domains))
        else:
            domain_average = detection.overall_score
        adjusted_score = clamp_score((detection.overall_score + domain_average) / 2)
        risk_tier = self._thresholds.final_risk.risk_for(adjusted_score)

        # STAGE 2: Recommendations
        recommendations = [
            MISSING_SECTION_RECOMMENDATION.format(section=section)
            for section in detection.missing_sections
        ]
        for finding in findings:
            recommendations.extend(finding.corrections)
        recommendations.extend(
            template.format(state=jurisdiction.value, payer=payer.value)
            for template in SELECTION_RECOMMENDATIONS
        )

        result = AnalysisResult(
            detected_format=detection.note_format.label,
            is_valid_format=True,
            confidence=detection.confidence,
            risk_tier=risk_tier,
            overall_score=adjusted_score,
            domains=domains,
            section_findings=findings,
            missing_sections=list(detection.missing_sections),
            recommendations=dedupe_preserving_order(recommendations),
            references=build_references(jurisdiction, payer),
            jurisdiction=jurisdiction,
            payer=payer,
            note_format=detection.note_format,
        )

        logger.info(
            f"Analysis complete | Format: {result.detected_format} | "
            f"Score: {adjusted_score} | Risk: {risk_tier.value}"
        )
        return result

    def unsupported(
        self,
        definition: FormatDefinition,
        jurisdiction: Jurisdiction,
        payer: PayerCategory,
    ) -> AnalysisResult:
        """Designated zero-confidence result for a note with no required keywords."""
        note_format: NoteFormat = definition.note_format
        recommendations = [
            template.format(
                format_label=note_format.label,
                sections=_join_labels(definition.section_labels),
            )
            for template in UNSUPPORTED_FORMAT_RECOMMENDATIONS
        ]
        references = [template.format(state=jurisdiction.value) for template in BASE_REFERENCES]

        logger.warning(f"No {note_format.value} sections detected; returning unsupported result")

        return AnalysisResult(
            detected_format=UNSUPPORTED_FORMAT_LABEL,
            is_valid_format=False,
            confidence=0.0,
            risk_tier=RiskTier.HIGH,
            overall_score=0,
            domains=[],
            section_findings=[],
            missing_sections=[],
            recommendations=recommendations,
            references=references,
            jurisdiction=jurisdiction,
            payer=payer,
            note_format=note_format,
        )
