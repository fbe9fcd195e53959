"""Shared fixtures for note-compliance tests."""

from __future__ import annotations

from typing import Callable

import pytest

from note_compliance.core.config import CheckerConfiguration
from note_compliance.core.enums import Jurisdiction, NoteFormat, PayerCategory
from note_compliance.core.models import AnalysisRequest
from note_compliance.detection import FormatDetector
from note_compliance.pipeline import ComplianceChecker


@pytest.fixture
def complete_soap_note() -> str:
    """SOAP note that satisfies every trigger."""
    return (
        "Subjective: Patient reports feeling anxious and depressed for the past 2 weeks.\n"
        "Objective: Patient appears well-groomed, cooperative, with appropriate eye contact.\n"
        "Assessment: Major depressive disorder, single episode, moderate (F32.1), "
        "based on reported symptoms.\n"
        "Plan: Continue sertraline 50mg daily. Follow-up in 2 weeks. Goal: PHQ-9 below 10."
    )


@pytest.fixture
def bare_soap_note() -> str:
    """Section keywords only; nearly every trigger fires."""
    return "subjective objective assessment plan"


@pytest.fixture
def two_section_soap_note() -> str:
    """Subjective and Plan present and clean; Objective and Assessment absent."""
    return "Subjective: Patient reports feeling low. Plan: follow-up next week, goal to sleep better."


@pytest.fixture
def no_keyword_note() -> str:
    return "Client doing well today. No concerns raised."


@pytest.fixture
def detector() -> FormatDetector:
    return FormatDetector()


@pytest.fixture
def fast_config() -> CheckerConfiguration:
    """Configuration with no simulated delay."""
    return CheckerConfiguration(simulated_delay_seconds=0.0)


@pytest.fixture
def checker(fast_config: CheckerConfiguration) -> ComplianceChecker:
    return ComplianceChecker(fast_config)


@pytest.fixture
def complete_request(complete_soap_note: str) -> AnalysisRequest:
    return AnalysisRequest(
        note_text=complete_soap_note,
        jurisdiction=Jurisdiction.GA,
        payer=PayerCategory.MEDICAID,
        note_format=NoteFormat.SOAP,
    )


@pytest.fixture
def fill() -> Callable[..., ComplianceChecker]:
    """Populate every form field on a checker and return it."""

    def _fill(checker, text, state="GA", payer="medicaid", note_format="SOAP"):
        checker.set_note_text(text)
        checker.select_jurisdiction(state)
        checker.select_payer(payer)
        checker.select_note_format(note_format)
        return checker

    return _fill
