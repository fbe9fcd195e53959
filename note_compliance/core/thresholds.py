"""
Score Thresholds for Compliance Checking

Every cutoff that turns a numeric score into a status, risk tier or
readiness label lives here. Components never hard-code their own cutoffs;
they receive a `ComplianceThresholds` instance (the module-level
`DEFAULT_THRESHOLDS` unless a caller overrides it).

Band Semantics:
    score >= compliant_min  → COMPLIANT / LOW
    score >= warning_min    → WARNING / MEDIUM
    otherwise               → NON_COMPLIANT / HIGH
"""

import math
from dataclasses import dataclass, field
from typing import Dict

from note_compliance.core.enums import ComplianceStatus, RiskTier


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative scores (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float, low: int = 0, high: int = 100) -> int:
    """Round and clamp a score into [low, high]."""
    return max(low, min(high, round_half_up(value)))


# =============================================================================
# STAGE 1: SCORE BAND
# =============================================================================


@dataclass(frozen=True)
class ScoreBand:
    """
    A pair of cutoffs splitting 0-100 into three tiers.

    Attributes:
        compliant_min: Lowest score still considered compliant
        warning_min: Lowest score still considered a warning
    """

    compliant_min: int
    warning_min: int

    def __post_init__(self):
        if not (0 <= self.warning_min <= self.compliant_min <= 100):
            raise ValueError(
                f"Invalid score band: compliant_min={self.compliant_min}, "
                f"warning_min={self.warning_min}"
            )

    def status_for(self, score: float) -> ComplianceStatus:
        if score >= self.compliant_min:
            return ComplianceStatus.COMPLIANT
        if score >= self.warning_min:
            return ComplianceStatus.WARNING
        return ComplianceStatus.NON_COMPLIANT

    def risk_for(self, score: float) -> RiskTier:
        return RiskTier.for_status(self.status_for(score))


# =============================================================================
# STAGE 2: THRESHOLD CONFIGURATION
# =============================================================================


def _default_domain_bands() -> Dict[str, ScoreBand]:
    return {
        "Medical Necessity Demonstration": ScoreBand(compliant_min=80, warning_min=65),
        "Documentation Completeness": ScoreBand(compliant_min=85, warning_min=70),
        "Individualization Requirements": ScoreBand(compliant_min=75, warning_min=60),
        "Regulatory Compliance": ScoreBand(compliant_min=90, warning_min=75),
        "Audit Defensibility": ScoreBand(compliant_min=85, warning_min=70),
    }


@dataclass(frozen=True)
class ComplianceThresholds:
    """
    Named threshold configuration consumed by every scoring component.

    Attributes:
        final_risk: Adjusted overall score → final risk tier
        domain_status: Per-domain band, keyed by domain name, applied to
            the overall score
        domain_risk_badge: A domain's own score → LOW/MED/HIGH badge
        audit_readiness: Overall score → readiness label
    """

    final_risk: ScoreBand = ScoreBand(compliant_min=80, warning_min=65)
    domain_status: Dict[str, ScoreBand] = field(default_factory=_default_domain_bands)
    domain_risk_badge: ScoreBand = ScoreBand(compliant_min=80, warning_min=65)
    audit_readiness: ScoreBand = ScoreBand(compliant_min=90, warning_min=75)

    def band_for_domain(self, domain: str) -> ScoreBand:
        try:
            return self.domain_status[domain]
        except KeyError:
            raise KeyError(f"No status band configured for domain '{domain}'") from None


DEFAULT_THRESHOLDS = ComplianceThresholds()
