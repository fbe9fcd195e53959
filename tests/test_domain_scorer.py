"""Tests for derived compliance domain scores."""

from __future__ import annotations

import pytest

from note_compliance.analysis import DomainScorer
from note_compliance.core.enums import ComplianceStatus
from note_compliance.core.thresholds import ComplianceThresholds, ScoreBand


@pytest.fixture
def scorer() -> DomainScorer:
    return DomainScorer()


def _by_name(domains):
    return {d.domain: d for d in domains}


class TestDomainScores:
    def test_five_fixed_domains_in_order(self, scorer: DomainScorer) -> None:
        assert [d.domain for d in scorer.score(100)] == [
            "Medical Necessity Demonstration",
            "Documentation Completeness",
            "Individualization Requirements",
            "Regulatory Compliance",
            "Audit Defensibility",
        ]

    def test_perfect_score(self, scorer: DomainScorer) -> None:
        domains = _by_name(scorer.score(100))
        assert [d.score for d in domains.values()] == [90, 100, 100, 85, 80]
        assert all(d.status == ComplianceStatus.COMPLIANT for d in domains.values())
        assert all(d.findings == [] for d in domains.values())

    def test_floors_apply_at_zero(self, scorer: DomainScorer) -> None:
        domains = scorer.score(0)
        assert [d.score for d in domains] == [60, 0, 5, 50, 40]
        assert all(d.status == ComplianceStatus.NON_COMPLIANT for d in domains)
        assert all(len(d.findings) == 2 for d in domains)

    def test_status_uses_overall_score_not_domain_score(self, scorer: DomainScorer) -> None:
        domains = _by_name(scorer.score(80))
        assert domains["Medical Necessity Demonstration"].score == 70
        assert domains["Medical Necessity Demonstration"].status == ComplianceStatus.COMPLIANT
        assert domains["Documentation Completeness"].status == ComplianceStatus.WARNING
        assert domains["Individualization Requirements"].status == ComplianceStatus.COMPLIANT
        assert domains["Regulatory Compliance"].status == ComplianceStatus.WARNING
        assert domains["Audit Defensibility"].score == 60
        assert domains["Audit Defensibility"].status == ComplianceStatus.WARNING

    def test_findings_only_below_compliant_cutoff(self, scorer: DomainScorer) -> None:
        domains = _by_name(scorer.score(80))
        assert domains["Medical Necessity Demonstration"].findings == []
        assert domains["Regulatory Compliance"].findings == [
            "Regulatory requirements not fully met",
            "Risk of audit findings",
        ]

    @pytest.mark.parametrize("overall", range(0, 101))
    def test_scores_are_integers_in_range(self, scorer: DomainScorer, overall: int) -> None:
        for domain in scorer.score(overall):
            assert isinstance(domain.score, int)
            assert 0 <= domain.score <= 100


class TestCustomThresholds:
    def test_domain_band_override(self) -> None:
        bands = dict(ComplianceThresholds().domain_status)
        bands["Documentation Completeness"] = ScoreBand(compliant_min=50, warning_min=40)
        scorer = DomainScorer(ComplianceThresholds(domain_status=bands))
        completeness = _by_name(scorer.score(60))["Documentation Completeness"]
        assert completeness.status == ComplianceStatus.COMPLIANT
        assert completeness.findings == []

    def test_missing_band_raises(self) -> None:
        scorer = DomainScorer(ComplianceThresholds(domain_status={}))
        with pytest.raises(KeyError):
            scorer.score(50)
