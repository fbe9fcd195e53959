"""Tests for the ComplianceChecker form state and run lifecycle."""

from __future__ import annotations

import pytest

from note_compliance import analyze_note
from note_compliance.core.config import CheckerConfiguration
from note_compliance.core.enums import Jurisdiction, NoteFormat, PayerCategory
from note_compliance.core.models import AnalysisRequest
from note_compliance.detection import FormatDetector
from note_compliance.pipeline import ComplianceChecker


class TestTriggerPrecondition:
    def test_empty_text_produces_no_result(self, checker: ComplianceChecker, fill) -> None:
        fill(checker, "")
        assert not checker.can_analyze
        assert checker.analyze() is None
        assert checker.result is None

    def test_whitespace_text_produces_no_result(self, checker: ComplianceChecker, fill) -> None:
        fill(checker, "   \n\t ")
        assert checker.analyze() is None

    def test_missing_selector_produces_no_result(
        self, checker: ComplianceChecker, fill, complete_soap_note
    ) -> None:
        fill(checker, complete_soap_note, payer=None)
        assert not checker.can_analyze
        assert checker.analyze() is None

    def test_empty_selection_clears_selector(
        self, checker: ComplianceChecker, fill, complete_soap_note
    ) -> None:
        fill(checker, complete_soap_note)
        checker.select_jurisdiction("")
        assert checker.request.jurisdiction is None
        assert not checker.can_analyze

    def test_complete_form_enables_trigger(
        self, checker: ComplianceChecker, fill, complete_soap_note
    ) -> None:
        fill(checker, complete_soap_note)
        assert checker.can_analyze
        assert checker.request == AnalysisRequest(
            note_text=complete_soap_note,
            jurisdiction=Jurisdiction.GA,
            payer=PayerCategory.MEDICAID,
            note_format=NoteFormat.SOAP,
        )

    def test_default_note_type_models_single_format_form(
        self, fill, complete_soap_note
    ) -> None:
        config = CheckerConfiguration(simulated_delay_seconds=0, default_note_type=NoteFormat.SOAP)
        checker = ComplianceChecker(config)
        fill(checker, complete_soap_note, note_format=None)
        result = checker.analyze()
        assert result is not None
        assert result.note_format == NoteFormat.SOAP

    def test_unknown_selector_value_raises(self, checker: ComplianceChecker) -> None:
        with pytest.raises(ValueError):
            checker.select_jurisdiction("TX")


class TestRunLifecycle:
    def test_soap_keywords_scenario(self, checker: ComplianceChecker, fill) -> None:
        fill(checker, "SUBJECTIVE objective Assessment plAN", state="CA", payer="commercial")
        result = checker.analyze()
        assert result.is_valid_format
        assert len(result.section_findings) == 4

    def test_result_is_stored(self, checker: ComplianceChecker, fill, complete_soap_note) -> None:
        result = fill(checker, complete_soap_note).analyze()
        assert checker.result is result

    def test_new_run_replaces_result(
        self, checker: ComplianceChecker, fill, complete_soap_note, no_keyword_note
    ) -> None:
        first = fill(checker, complete_soap_note).analyze()
        checker.set_note_text(no_keyword_note)
        second = checker.analyze()
        assert second is not first
        assert checker.result is second
        assert not checker.result.is_valid_format

    def test_simulated_delay_is_applied(self, fill, complete_soap_note) -> None:
        calls = []
        checker = ComplianceChecker(
            CheckerConfiguration(simulated_delay_seconds=1.5), sleep=calls.append
        )
        fill(checker, complete_soap_note).analyze()
        assert calls == [1.5]

    def test_zero_delay_skips_sleep(self, fill, complete_soap_note) -> None:
        calls = []
        checker = ComplianceChecker(
            CheckerConfiguration(simulated_delay_seconds=0.0), sleep=calls.append
        )
        fill(checker, complete_soap_note).analyze()
        assert calls == []

    def test_retrigger_during_run_is_ignored(self, fill, complete_soap_note) -> None:
        observed = {}

        def sleep(seconds: float) -> None:
            observed["is_analyzing"] = checker.is_analyzing
            observed["can_analyze"] = checker.can_analyze
            observed["nested"] = checker.analyze()

        checker = ComplianceChecker(CheckerConfiguration(simulated_delay_seconds=0.1), sleep=sleep)
        result = fill(checker, complete_soap_note).analyze()

        assert observed == {"is_analyzing": True, "can_analyze": False, "nested": None}
        assert result is not None
        assert not checker.is_analyzing

    def test_flag_cleared_when_a_stage_fails(self, fast_config, fill, complete_soap_note) -> None:
        class BrokenDetector(FormatDetector):
            def detect(self, note_text, note_format):
                raise RuntimeError("boom")

        checker = ComplianceChecker(fast_config, detector=BrokenDetector())
        fill(checker, complete_soap_note)
        with pytest.raises(RuntimeError):
            checker.analyze()
        assert not checker.is_analyzing
        assert checker.result is None

    def test_run_requires_complete_request(self, checker: ComplianceChecker) -> None:
        with pytest.raises(ValueError):
            checker.run(AnalysisRequest(note_text="plan"))

    def test_run_is_pure(self, checker: ComplianceChecker, complete_request) -> None:
        result = checker.run(complete_request)
        assert result.overall_score == 96
        assert checker.result is None


class TestAnalyzeNote:
    def test_one_shot_helper(self, two_section_soap_note) -> None:
        result = analyze_note(two_section_soap_note, "NY", "medicare", "soap")
        assert result.jurisdiction == Jurisdiction.NY
        assert result.payer == PayerCategory.MEDICARE
        assert result.missing_sections == ["Objective", "Assessment"]

    def test_one_shot_helper_incomplete(self, complete_soap_note) -> None:
        assert analyze_note("", "NY", "medicare", "soap") is None
        assert analyze_note(complete_soap_note, "NY", "medicare") is None
