"""Tests for result assembly: adjusted score, recommendations, references."""

from __future__ import annotations

import json

from note_compliance.core.enums import (
    ComplianceStatus,
    Jurisdiction,
    NoteFormat,
    PayerCategory,
    RiskTier,
)
from note_compliance.core.thresholds import ComplianceThresholds, ScoreBand
from note_compliance.pipeline import ComplianceChecker
from note_compliance.reporting import ResultAssembler, dedupe_preserving_order
from note_compliance.reporting.assembler import build_references


class TestAdjustedScore:
    def test_complete_note(self, checker: ComplianceChecker, fill, complete_soap_note) -> None:
        result = fill(checker, complete_soap_note).analyze()
        # domains 90/100/100/85/80 average 91; (100 + 91) / 2 = 95.5 rounds up
        assert result.overall_score == 96
        assert result.risk_tier == RiskTier.LOW
        assert result.detected_format == "SOAP Note"
        assert result.confidence == 1.0

    def test_two_missing_sections(
        self, checker: ComplianceChecker, fill, two_section_soap_note
    ) -> None:
        result = fill(checker, two_section_soap_note).analyze()
        # domains 60/50/55/50/40 average 51; (50 + 51) / 2 = 50.5 rounds up
        assert result.overall_score == 51
        assert result.risk_tier == RiskTier.HIGH
        assert result.missing_sections == ["Objective", "Assessment"]
        assert all(d.status == ComplianceStatus.NON_COMPLIANT for d in result.domains)

    def test_section_findings_do_not_affect_score(
        self, checker: ComplianceChecker, fill, bare_soap_note
    ) -> None:
        bare = fill(checker, bare_soap_note).analyze()
        assert bare.overall_score == 96
        assert len(bare.section_findings) == 4
        assert len(bare.deficient_sections) == 4

    def test_final_risk_follows_threshold_config(
        self, fast_config, fill, complete_soap_note
    ) -> None:
        strict = ComplianceThresholds(final_risk=ScoreBand(compliant_min=99, warning_min=98))
        checker = ComplianceChecker(fast_config, thresholds=strict)
        result = fill(checker, complete_soap_note).analyze()
        assert result.overall_score == 96
        assert result.risk_tier == RiskTier.HIGH


class TestRecommendations:
    def test_complete_note_only_boilerplate(
        self, checker: ComplianceChecker, fill, complete_soap_note
    ) -> None:
        result = fill(checker, complete_soap_note, state="NY", payer="medicare").analyze()
        assert result.recommendations == [
            "Ensure full compliance with NY state regulations",
            "Verify medicare billing and documentation requirements",
            "Include provider signature, credentials, and date",
            "Review against audit checklist before submission",
        ]

    def test_missing_sections_and_corrections_come_first(
        self, checker: ComplianceChecker, fill, two_section_soap_note
    ) -> None:
        result = fill(checker, two_section_soap_note).analyze()
        assert result.recommendations[:2] == [
            "Add missing Objective section with comprehensive documentation",
            "Add missing Assessment section with comprehensive documentation",
        ]
        assert result.recommendations[2].startswith("Missing required Objective section")
        assert result.recommendations[3].startswith("Missing required Assessment section")
        assert len(result.recommendations) == 8

    def test_no_duplicates(
        self,
        checker: ComplianceChecker,
        fill,
        complete_soap_note,
        bare_soap_note,
        two_section_soap_note,
    ) -> None:
        for text in (complete_soap_note, bare_soap_note, two_section_soap_note):
            result = fill(checker, text).analyze()
            assert len(result.recommendations) == len(set(result.recommendations))

    def test_dedupe_preserves_first_occurrence(self) -> None:
        assert dedupe_preserving_order(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


class TestReferences:
    def test_medicaid_reference_uses_state(self) -> None:
        refs = build_references(Jurisdiction.GA, PayerCategory.MEDICAID)
        assert refs == [
            "GA Medicaid Provider Manual - Clinical Documentation Standards",
            "CMS Medicare Progress Note Guidelines - Section 1861(s)(2)",
            "GA Administrative Code - Mental Health Documentation Requirements",
            "GA Medicaid Mental Health Services Coverage",
            "DSM-5-TR Diagnostic Criteria and Documentation Standards",
        ]

    def test_payer_specific_reference(self) -> None:
        medicare = build_references(Jurisdiction.CA, PayerCategory.MEDICARE)
        commercial = build_references(Jurisdiction.CA, PayerCategory.COMMERCIAL)
        assert medicare[3] == "Medicare Claims Processing Manual Chapter 12"
        assert commercial[3] == "Commercial Insurance Prior Authorization Guidelines"


class TestUnsupportedFormat:
    def test_no_keywords_yields_unsupported_result(
        self, checker: ComplianceChecker, fill, no_keyword_note
    ) -> None:
        result = fill(checker, no_keyword_note, state="CA").analyze()
        assert not result.is_valid_format
        assert result.detected_format == "Unsupported format"
        assert result.confidence == 0.0
        assert result.overall_score == 0
        assert result.risk_tier == RiskTier.HIGH
        assert result.domains == []
        assert result.section_findings == []
        assert result.missing_sections == []
        assert result.recommendations == [
            "The note was not recognized as a SOAP Note",
            "Please ensure your note contains Subjective, Objective, Assessment, "
            "and Plan sections",
        ]
        assert len(result.references) == 3
        assert result.references[0].startswith("CA Medicaid Provider Manual")

    def test_unsupported_names_selected_format(self, detector) -> None:
        result = ResultAssembler().unsupported(
            detector.definition_for(NoteFormat.DAP), Jurisdiction.NY, PayerCategory.COMMERCIAL
        )
        assert result.note_format == NoteFormat.DAP
        assert result.recommendations[1] == (
            "Please ensure your note contains Data, Assessment, and Plan sections"
        )


class TestSerialization:
    def test_to_dict_is_json_serializable(
        self, checker: ComplianceChecker, fill, two_section_soap_note
    ) -> None:
        result = fill(checker, two_section_soap_note).analyze()
        data = json.loads(json.dumps(result.to_dict()))
        assert data["risk_level"] == "High"
        assert data["section_findings"][1]["status"] == "non-compliant"
        assert len(data["compliance_domains"]) == 5
