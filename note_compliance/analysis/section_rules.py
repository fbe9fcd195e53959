"""
Section Rules - Trigger Table for Section Content Analysis

Each rule is one row: which section it belongs to, the trigger name, the
predicate that decides whether it fires, the deficiency message, and the
correction text. A trigger FIRES when the documentation element it looks
for is absent from the note.

Predicates receive the raw note and its lowercased form and inspect the
whole note, not just the section body.

Rule Table (SOAP):
    Subjective  → missing_patient_voice, vague_mood_symptoms
    Objective   → no_measurable_data, vague_observation
    Assessment  → missing_dsm_code, no_rationale, no_severity
    Plan        → no_timeline, no_measurable_goal
"""

import re
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from note_compliance.core.constants import SECTION_CORRECTIONS
from note_compliance.core.enums import NoteFormat

# (raw_text, lowered_text) -> fired
TriggerPredicate = Callable[[str, str], bool]

# F-chapter diagnosis code such as F32.1; matched case-sensitively on the raw note
DSM_CODE_PATTERN = re.compile(r"F\d{2}\.\d")


@dataclass(frozen=True)
class SectionRule:
    """
    One trigger in the rule table.

    Attributes:
        section: Section label the rule belongs to
        trigger: Stable trigger name
        predicate: Returns True when the deficiency is present
        message: Issue text added to the section finding
        correction: Remediation text added when the rule fires
    """

    section: str
    trigger: str
    predicate: TriggerPredicate
    message: str
    correction: str

    def fires(self, raw_text: str, lowered_text: str) -> bool:
        return self.predicate(raw_text, lowered_text)


def lacks_all(*phrases: str) -> TriggerPredicate:
    """Predicate that fires when none of `phrases` occurs in the lowered note."""

    def predicate(raw_text: str, lowered_text: str) -> bool:
        return not any(phrase in lowered_text for phrase in phrases)

    return predicate


def _lacks_dsm_code(raw_text: str, lowered_text: str) -> bool:
    return DSM_CODE_PATTERN.search(raw_text) is None and "dsm" not in lowered_text


def _rule(section: str, trigger: str, predicate: TriggerPredicate, message: str) -> SectionRule:
    return SectionRule(
        section=section,
        trigger=trigger,
        predicate=predicate,
        message=message,
        correction=SECTION_CORRECTIONS[section],
    )


# =============================================================================
# STAGE 1: SOAP RULES
# =============================================================================

SOAP_RULES: Tuple[SectionRule, ...] = (
    # Subjective
    _rule(
        "Subjective",
        "missing_patient_voice",
        lacks_all("patient reports", "client states", "patient describes"),
        "Missing patient's own words - document direct quotes or paraphrased statements",
    ),
    _rule(
        "Subjective",
        "vague_mood_symptoms",
        lacks_all("feeling", "mood", "anxiety", "depression"),
        "Vague mood/symptom description - specify emotional states and symptoms",
    ),
    # Objective
    _rule(
        "Objective",
        "no_measurable_data",
        lacks_all("appears", "observed", "vital", "mse"),
        "No measurable observational data - include appearance, behavior, MSE findings",
    ),
    _rule(
        "Objective",
        "vague_observation",
        lacks_all("well-groomed", "cooperative", "eye contact"),
        "Vague observations - provide specific behavioral and physical descriptions",
    ),
    # Assessment
    _rule(
        "Assessment",
        "missing_dsm_code",
        _lacks_dsm_code,
        "Missing DSM-5-TR diagnostic code - include specific F-code diagnosis",
    ),
    _rule(
        "Assessment",
        "no_rationale",
        lacks_all("based on", "evidenced by", "due to"),
        "No diagnostic rationale provided - explain clinical reasoning",
    ),
    _rule(
        "Assessment",
        "no_severity",
        lacks_all("mild", "moderate", "severe"),
        "Missing severity specifier - document mild/moderate/severe classification",
    ),
    # Plan
    _rule(
        "Plan",
        "no_timeline",
        lacks_all("week", "month", "follow-up", "next"),
        "No treatment timeline specified - include follow-up schedule and timeframes",
    ),
    _rule(
        "Plan",
        "no_measurable_goal",
        lacks_all("goal", "target", "objective"),
        "No measurable treatment goals - define specific, achievable objectives",
    ),
)


# =============================================================================
# STAGE 2: RULE REGISTRY
# =============================================================================
# Formats without an entry only get bare presence checks.

RULES_BY_FORMAT: Dict[NoteFormat, Tuple[SectionRule, ...]] = {
    NoteFormat.SOAP: SOAP_RULES,
}
