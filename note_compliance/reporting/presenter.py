"""
Report Presenter - Read-Only Report View

Derives the display-only parts of the report from an AnalysisResult:
audit readiness, primary concerns, per-domain action text and risk badge,
per-section summaries, and the corrections for missing sections. Renders
them as plain text or a JSON-ready dictionary.

Nothing here changes the analysis; every field is a pure function of the
result and the threshold configuration.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from note_compliance.core.constants import (
    MISSING_SECTION_REPORT_CORRECTION,
    MISSING_SECTION_STATUS,
)
from note_compliance.core.enums import ComplianceStatus, RiskTier
from note_compliance.core.models import AnalysisResult, ComplianceDomain
from note_compliance.core.thresholds import DEFAULT_THRESHOLDS, ComplianceThresholds

MAX_PRIMARY_CONCERNS = 3

READINESS_LABELS = {
    ComplianceStatus.COMPLIANT: "Audit Ready",
    ComplianceStatus.WARNING: "Minor Issues",
    ComplianceStatus.NON_COMPLIANT: "Needs Attention",
}

STATUS_MARKERS = {
    ComplianceStatus.COMPLIANT: "[OK]",
    ComplianceStatus.WARNING: "[WARN]",
    ComplianceStatus.NON_COMPLIANT: "[FAIL]",
}


@dataclass(frozen=True)
class DomainRow:
    """One row of the domain matrix."""

    domain: ComplianceDomain
    action: str
    risk_badge: RiskTier

    def to_dict(self) -> Dict[str, Any]:
        row = self.domain.to_dict()
        row["action"] = self.action
        row["risk"] = self.risk_badge.badge
        return row


@dataclass(frozen=True)
class MissingSectionRow:
    """A required section the note lacks, with its report correction."""

    section: str
    correction: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "section": self.section,
            "status": MISSING_SECTION_STATUS,
            "correction": self.correction,
        }


@dataclass(frozen=True)
class ReportView:
    """
    Everything the report shows for one result.

    Attributes:
        result: The analysis being presented
        audit_readiness: Readiness tier of the overall score
        primary_concerns: At most three summary concerns
        domain_rows: Domain matrix rows with action text and risk badge
        missing_rows: Missing sections with their corrections
    """

    result: AnalysisResult
    audit_readiness: ComplianceStatus
    primary_concerns: List[str] = field(default_factory=list)
    domain_rows: List[DomainRow] = field(default_factory=list)
    missing_rows: List[MissingSectionRow] = field(default_factory=list)

    @property
    def audit_readiness_label(self) -> str:
        return READINESS_LABELS[self.audit_readiness]

    def to_dict(self) -> Dict[str, Any]:
        data = self.result.to_dict()
        data["audit_readiness"] = self.audit_readiness_label
        data["primary_concerns"] = list(self.primary_concerns)
        data["compliance_domains"] = [row.to_dict() for row in self.domain_rows]
        for finding in data["section_findings"]:
            finding["summary"] = issue_summary(len(finding["issues"]))
        data["missing_section_corrections"] = [row.to_dict() for row in self.missing_rows]
        return data


def issue_summary(issue_count: int) -> str:
    """Per-section summary line, e.g. "2 issue(s) identified"."""
    if issue_count == 0:
        return "All requirements met"
    return f"{issue_count} issue(s) identified"


def primary_concerns(result: AnalysisResult) -> List[str]:
    """Top concerns: missing sections, non-compliant domains, deficient sections."""
    concerns = []
    format_name = result.note_format.label.replace(" Note", "")

    if result.missing_sections:
        concerns.append(
            f"Missing {len(result.missing_sections)} required {format_name} section(s)"
        )

    critical_domains = result.non_compliant_domains
    if critical_domains:
        concerns.append(f"{len(critical_domains)} domain(s) non-compliant")

    deficient = result.deficient_sections
    if deficient:
        concerns.append(f"{len(deficient)} section(s) with deficiencies")

    return concerns[:MAX_PRIMARY_CONCERNS]


def build_view(
    result: AnalysisResult, thresholds: ComplianceThresholds = DEFAULT_THRESHOLDS
) -> ReportView:
    rows = []
    for domain in result.domains:
        if domain.status != ComplianceStatus.COMPLIANT:
            action = f"Improve {domain.domain.lower()} documentation"
        else:
            action = "Maintain current standards"
        rows.append(
            DomainRow(
                domain=domain,
                action=action,
                risk_badge=thresholds.domain_risk_badge.risk_for(domain.score),
            )
        )

    missing_rows = [
        MissingSectionRow(
            section=section,
            correction=MISSING_SECTION_REPORT_CORRECTION.format(section=section.lower()),
        )
        for section in result.missing_sections
    ]

    return ReportView(
        result=result,
        audit_readiness=thresholds.audit_readiness.status_for(result.overall_score),
        primary_concerns=primary_concerns(result),
        domain_rows=rows,
        missing_rows=missing_rows,
    )


def render_text(view: ReportView) -> str:
    """Render a report view as plain text."""
    result = view.result
    lines = [
        "CLINICAL NOTE COMPLIANCE REPORT",
        "=" * 80,
        f"Jurisdiction: {result.jurisdiction.display_name} | Payer: {result.payer.display_name}",
        f"Detected format: {result.detected_format} "
        f"(confidence {result.confidence * 100:.0f}%)",
        f"Compliance score: {result.overall_score}/100 | "
        f"Risk level: {result.risk_tier.value} | {view.audit_readiness_label}",
        "",
        "Primary concerns:",
    ]
    if view.primary_concerns:
        lines.extend(f"  - {concern}" for concern in view.primary_concerns)
    else:
        lines.append("  - None identified")

    if view.domain_rows:
        lines += ["", "Compliance domains:"]
        for row in view.domain_rows:
            domain = row.domain
            lines.append(
                f"  {STATUS_MARKERS[domain.status]:<6} {domain.domain:<34} "
                f"{domain.score:>3}  {row.risk_badge.badge:<4}  {row.action}"
            )
            lines.extend(f"         - {finding}" for finding in domain.findings[:2])

    if result.section_findings:
        lines += ["", "Section analysis:"]
        for finding in result.section_findings:
            lines.append(
                f"  {STATUS_MARKERS[finding.status]:<6} {finding.section} | "
                f"{finding.status.label} | {issue_summary(len(finding.issues))}"
            )
            lines.extend(f"         - {issue}" for issue in finding.issues)
            if finding.corrections:
                lines.append("         Example correction:")
                lines.extend(f"           {correction}" for correction in finding.corrections)

    if view.missing_rows:
        lines += ["", "Missing sections:"]
        for row in view.missing_rows:
            lines.append(
                f"  {STATUS_MARKERS[ComplianceStatus.NON_COMPLIANT]:<6} "
                f"{row.section}: {MISSING_SECTION_STATUS}"
            )
            lines.append(f"         Correction: {row.correction}")

    lines += ["", "Recommendations:"]
    lines.extend(f"  {i}. {rec}" for i, rec in enumerate(result.recommendations, start=1))

    lines += ["", "References:"]
    lines.extend(f"  - {ref}" for ref in result.references)

    return "\n".join(lines)
