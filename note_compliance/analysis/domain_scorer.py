"""
Domain Scorer - Derived Compliance Domain Scores

Five fixed domains, each scored as the overall detection score shifted by
a constant offset, floored, capped, and finally clamped into [0, 100].
Status comes from the domain's band in the shared threshold
configuration, applied to the overall score.

The formulas are placeholder heuristics: they add no evidence beyond the
overall score.
"""

from typing import Any, Dict, List, Optional, Sequence

from loguru import logger

from note_compliance.core.constants import COMPLIANCE_DOMAINS
from note_compliance.core.models import ComplianceDomain
from note_compliance.core.thresholds import (
    DEFAULT_THRESHOLDS,
    ComplianceThresholds,
    clamp_score,
)


class DomainScorer:
    """Derives the five compliance domains from an overall score."""

    def __init__(
        self,
        thresholds: ComplianceThresholds = DEFAULT_THRESHOLDS,
        domains: Optional[Sequence[Dict[str, Any]]] = None,
    ):
        self._thresholds = thresholds
        self._domains = list(domains if domains is not None else COMPLIANCE_DOMAINS)

    def score(self, overall_score: int) -> List[ComplianceDomain]:
        """
        Score every domain.

        Args:
            overall_score: Detector overall score (0-100)

        Returns:
            One ComplianceDomain per configured domain, in table order
        """
        results = []
        for entry in self._domains:
            band = self._thresholds.band_for_domain(entry["name"])
            shifted = max(entry["floor"], overall_score + entry["offset"])
            score = clamp_score(min(entry["ceiling"], shifted))
            findings = list(entry["findings"]) if overall_score < band.compliant_min else []

            results.append(
                ComplianceDomain(
                    domain=entry["name"],
                    score=score,
                    status=band.status_for(overall_score),
                    findings=findings,
                )
            )

        logger.debug(f"Domain scores: {[(d.domain, d.score) for d in results]}")
        return results
