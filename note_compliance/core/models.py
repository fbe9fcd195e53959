"""
Domain Models for Clinical Note Compliance Checking

This module defines the data structures passed between the detector,
analyzers and the result assembler. Models are dataclasses designed for:
    1. Type safety and IDE support
    2. Serialization to JSON via to_dict()
    3. Clear domain semantics

Model Hierarchy:
    AnalysisRequest    → One filled-in form (text + selectors)
    SectionDefinition  → A required section and its keywords
    FormatDefinition   → A note format's ordered required sections
    DetectionResult    → Output of the format detector
    SectionFinding     → Per-section status, issues and corrections
    ComplianceDomain   → One derived domain score
    AnalysisResult     → The complete report for one run

Usage:
    from note_compliance.core.models import AnalysisRequest

    request = AnalysisRequest(
        note_text="Subjective: ...",
        jurisdiction=Jurisdiction.GA,
        payer=PayerCategory.MEDICAID,
        note_format=NoteFormat.SOAP,
    )
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from note_compliance.core.enums import (
    ComplianceStatus,
    Jurisdiction,
    NoteFormat,
    PayerCategory,
    RiskTier,
)


# =============================================================================
# STAGE 1: ANALYSIS REQUEST
# =============================================================================


@dataclass(frozen=True)
class AnalysisRequest:
    """
    The form state for a single analysis cycle.

    Any selector may be None while the form is still being filled in;
    `is_complete` reports whether the trigger precondition holds.

    Attributes:
        note_text: Raw pasted note
        jurisdiction: Selected state
        payer: Selected payer category
        note_format: Selected note type
    """

    note_text: str = ""
    jurisdiction: Optional[Jurisdiction] = None
    payer: Optional[PayerCategory] = None
    note_format: Optional[NoteFormat] = None

    @property
    def has_text(self) -> bool:
        return bool(self.note_text and self.note_text.strip())

    @property
    def is_complete(self) -> bool:
        """Non-blank text and every selector chosen."""
        return (
            self.has_text
            and self.jurisdiction is not None
            and self.payer is not None
            and self.note_format is not None
        )


# =============================================================================
# STAGE 2: FORMAT DEFINITIONS
# =============================================================================


@dataclass(frozen=True)
class SectionDefinition:
    """A required section; present iff any keyword is a substring of the note."""

    label: str
    keywords: Tuple[str, ...]

    def is_present(self, normalized_text: str) -> bool:
        return any(keyword in normalized_text for keyword in self.keywords)


@dataclass(frozen=True)
class FormatDefinition:
    """
    Required sections for one note format.

    Attributes:
        note_format: The format this definition describes
        sections: Ordered required sections
        max_missing_for_warning: Largest missing-section count that is
            still a warning rather than non-compliant
    """

    note_format: NoteFormat
    sections: Tuple[SectionDefinition, ...]
    max_missing_for_warning: int

    @property
    def section_labels(self) -> List[str]:
        return [section.label for section in self.sections]

    def has_section(self, label: str) -> bool:
        return label in self.section_labels

    @classmethod
    def from_dict(cls, note_format: NoteFormat, data: Dict[str, Any]) -> "FormatDefinition":
        """Build from a NOTE_FORMAT_DEFINITIONS entry."""
        return cls(
            note_format=note_format,
            sections=tuple(
                SectionDefinition(label=label, keywords=tuple(k.lower() for k in keywords))
                for label, keywords in data["sections"]
            ),
            max_missing_for_warning=data["max_missing_for_warning"],
        )


# =============================================================================
# STAGE 3: DETECTION RESULT
# =============================================================================


@dataclass(frozen=True)
class DetectionResult:
    """
    Outcome of keyword-presence format detection.

    Attributes:
        note_format: Format the note was checked against
        found_sections: Section labels present, in definition order
        missing_sections: Section labels absent, in definition order
        confidence: found / required, 0.0-1.0
        status: Three-tier status from the missing-section count
        risk_tier: Risk tier matching `status`
        overall_score: Confidence as an integer percentage
    """

    note_format: NoteFormat
    found_sections: List[str]
    missing_sections: List[str]
    confidence: float
    status: ComplianceStatus
    risk_tier: RiskTier
    overall_score: int

    @property
    def is_valid_format(self) -> bool:
        """At least one required section keyword matched."""
        return len(self.found_sections) > 0


# =============================================================================
# STAGE 4: FINDINGS
# =============================================================================


@dataclass(frozen=True)
class SectionFinding:
    """
    Status of one required section.

    Attributes:
        section: Section label
        status: compliant / warning / non-compliant
        issues: Deficiency messages
        corrections: Remediation text (empty when nothing fired)
    """

    section: str
    status: ComplianceStatus
    issues: List[str] = field(default_factory=list)
    corrections: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "section": self.section,
            "status": self.status.value,
            "issues": list(self.issues),
            "corrections": list(self.corrections),
        }


@dataclass(frozen=True)
class ComplianceDomain:
    """
    A derived compliance domain score.

    Carries no independent evidence: every field is a function of the
    overall detection score.
    """

    domain: str
    score: int
    status: ComplianceStatus
    findings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "domain": self.domain,
            "score": self.score,
            "status": self.status.value,
            "findings": list(self.findings),
        }


# =============================================================================
# STAGE 5: ANALYSIS RESULT
# =============================================================================


@dataclass(frozen=True)
class AnalysisResult:
    """
    The complete compliance report for one analysis run.

    What it does:
        Aggregates detection, section findings, domain scores and the
        boilerplate recommendations/references into the object the
        presenter renders.

    Attributes:
        detected_format: Format label, or the unsupported-format label
        is_valid_format: Whether any required section keyword matched
        confidence: Detector confidence ratio (0 for unsupported)
        risk_tier: Final risk tier from the adjusted score
        overall_score: Adjusted score, integer 0-100
        domains: Five derived compliance domains (empty if unsupported)
        section_findings: One finding per required section (empty if unsupported)
        missing_sections: Required sections not found
        recommendations: De-duplicated remediation list
        references: Citation strings with jurisdiction/payer substituted
        jurisdiction: State the report was produced for
        payer: Payer the report was produced for
        note_format: Note type the report was produced for
        analyzed_at: Timestamp of the run
    """

    detected_format: str
    is_valid_format: bool
    confidence: float
    risk_tier: RiskTier
    overall_score: int
    domains: List[ComplianceDomain]
    section_findings: List[SectionFinding]
    missing_sections: List[str]
    recommendations: List[str]
    references: List[str]
    jurisdiction: Jurisdiction
    payer: PayerCategory
    note_format: NoteFormat
    analyzed_at: datetime = field(default_factory=datetime.now)

    @property
    def non_compliant_domains(self) -> List[ComplianceDomain]:
        return [d for d in self.domains if d.status == ComplianceStatus.NON_COMPLIANT]

    @property
    def deficient_sections(self) -> List[SectionFinding]:
        """Sections whose status is anything but compliant."""
        return [f for f in self.section_findings if f.status != ComplianceStatus.COMPLIANT]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "detected_format": self.detected_format,
            "is_valid_format": self.is_valid_format,
            "confidence": self.confidence,
            "risk_level": self.risk_tier.value,
            "overall_score": self.overall_score,
            "compliance_domains": [d.to_dict() for d in self.domains],
            "section_findings": [f.to_dict() for f in self.section_findings],
            "missing_sections": list(self.missing_sections),
            "recommendations": list(self.recommendations),
            "references": list(self.references),
            "jurisdiction": self.jurisdiction.value,
            "payer": self.payer.value,
            "note_format": self.note_format.value,
            "analyzed_at": self.analyzed_at.isoformat(),
        }
