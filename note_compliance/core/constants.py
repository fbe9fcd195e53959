"""
Constants for Clinical Note Compliance Checking

This module defines the fixed tables the checker runs on. Constants are:
    1. Centralized for easy modification
    2. Type-hinted for IDE support
    3. Plain data (no behaviour), consumed by detection/analysis/reporting

Constant Categories:
    NOTE_FORMAT_DEFINITIONS   → Required sections and keywords per format
    SECTION_REQUIREMENTS      → What each section must document
    SECTION_CORRECTIONS       → Remediation text for SOAP sections
    COMPLIANCE_DOMAINS        → Derived domain score formulas
    REPORT_TEMPLATES          → Recommendation / reference boilerplate
"""

from typing import Any, Dict, List

from note_compliance.core.enums import NoteFormat, PayerCategory


# =============================================================================
# STAGE 1: NOTE FORMAT DEFINITIONS
# =============================================================================
# Each section lists the lowercase keywords that count as "present".
# Matching is plain substring containment on the lowercased note text.

NOTE_FORMAT_DEFINITIONS: Dict[NoteFormat, Dict[str, Any]] = {
    NoteFormat.SOAP: {
        "sections": [
            ("Subjective", ["subjective"]),
            ("Objective", ["objective"]),
            ("Assessment", ["assessment"]),
            ("Plan", ["plan"]),
        ],
        "max_missing_for_warning": 2,
    },
    NoteFormat.GIRP: {
        "sections": [
            ("Goal", ["goal"]),
            ("Intervention", ["intervention"]),
            ("Response", ["response"]),
            ("Plan", ["plan"]),
        ],
        "max_missing_for_warning": 2,
    },
    NoteFormat.BIRP: {
        "sections": [
            ("Behavior", ["behavior", "behaviour"]),
            ("Intervention", ["intervention"]),
            ("Response", ["response"]),
            ("Plan", ["plan"]),
        ],
        "max_missing_for_warning": 2,
    },
    NoteFormat.DAP: {
        "sections": [
            ("Data", ["data", "session", "attendance"]),
            ("Assessment", ["assessment"]),
            ("Plan", ["plan"]),
        ],
        # Three sections only, so a single gap already counts as a warning
        "max_missing_for_warning": 1,
    },
    NoteFormat.TREATMENT_PLAN: {
        "sections": [
            ("Diagnosis", ["diagnosis", "diagnoses"]),
            ("Goals", ["goal"]),
            ("Objectives", ["objective"]),
            ("Interventions", ["intervention"]),
        ],
        "max_missing_for_warning": 2,
    },
}


# =============================================================================
# STAGE 2: SECTION REQUIREMENTS AND CORRECTIONS
# =============================================================================

SECTION_REQUIREMENTS: Dict[str, str] = {
    "Subjective": "client's perspective and reported symptoms in their own words",
    "Objective": "observed and measured facts including appearance, behavior, MSE, and vitals",
    "Assessment": "clinical impressions with DSM-5-TR diagnosis codes and severity",
    "Plan": "treatment goals, interventions, and next steps with measurable outcomes",
    "Goal": "the treatment goal addressed during the session",
    "Intervention": "the clinical interventions used during the session",
    "Response": "the client's response to the interventions",
    "Behavior": "observed client behavior and presenting problems",
    "Data": "session data including attendance, observations, and client statements",
    "Diagnosis": "the DSM-5-TR diagnosis the treatment plan addresses",
    "Goals": "long-term treatment goals in the client's words",
    "Objectives": "measurable short-term objectives with target dates",
    "Interventions": "interventions, frequency, and responsible provider",
}

DEFAULT_SECTION_REQUIREMENT = "comprehensive documentation"

SECTION_CORRECTIONS: Dict[str, str] = {
    "Subjective": (
        "Add client's direct statements about symptoms, feelings, and concerns "
        "using quotes or clear paraphrasing"
    ),
    "Objective": (
        "Include specific observations: appearance, behavior, speech, mood, affect, "
        "thought process, and mental status exam findings"
    ),
    "Assessment": (
        "Provide DSM-5-TR diagnosis with F-code, severity specifier, "
        "and clinical rationale for diagnosis"
    ),
    "Plan": (
        "Document specific treatment interventions, measurable goals, "
        "timeline for follow-up, and next appointment date"
    ),
}

DEFAULT_SECTION_CORRECTION = "Improve documentation completeness"


# =============================================================================
# STAGE 3: COMPLIANCE DOMAINS
# =============================================================================
# score = max(floor, overall + offset), capped at ceiling.
# These are placeholder heuristics carried over unchanged.

COMPLIANCE_DOMAINS: List[Dict[str, Any]] = [
    {
        "name": "Medical Necessity Demonstration",
        "offset": -10,
        "floor": 60,
        "ceiling": 100,
        "findings": [
            "Insufficient documentation of medical necessity",
            "Need stronger clinical justification",
        ],
    },
    {
        "name": "Documentation Completeness",
        "offset": 0,
        "floor": 0,
        "ceiling": 100,
        "findings": [
            "Missing required documentation elements",
            "Incomplete section coverage",
        ],
    },
    {
        "name": "Individualization Requirements",
        "offset": 5,
        "floor": 0,
        "ceiling": 100,
        "findings": [
            "Treatment plan lacks individualization",
            "Generic approach documented",
        ],
    },
    {
        "name": "Regulatory Compliance",
        "offset": -15,
        "floor": 50,
        "ceiling": 100,
        "findings": [
            "Regulatory requirements not fully met",
            "Risk of audit findings",
        ],
    },
    {
        "name": "Audit Defensibility",
        "offset": -20,
        "floor": 40,
        "ceiling": 100,
        "findings": [
            "Documentation may not withstand audit scrutiny",
            "Strengthen evidence base",
        ],
    },
]


# =============================================================================
# STAGE 4: REPORT TEMPLATES
# =============================================================================
# {state} is the jurisdiction code, {payer} the payer selector value.

MISSING_SECTION_ISSUE = "{section} section missing from note"
MISSING_SECTION_CORRECTION = "Missing required {section} section - must document {requirement}"
MISSING_SECTION_RECOMMENDATION = "Add missing {section} section with comprehensive documentation"

# Shown in the report's missing-sections block; {section} is lowercased
MISSING_SECTION_STATUS = "Missing required element"
MISSING_SECTION_REPORT_CORRECTION = (
    "Add comprehensive {section} section with all required documentation elements "
    "per regulatory guidelines."
)

SELECTION_RECOMMENDATIONS: List[str] = [
    "Ensure full compliance with {state} state regulations",
    "Verify {payer} billing and documentation requirements",
    "Include provider signature, credentials, and date",
    "Review against audit checklist before submission",
]

UNSUPPORTED_FORMAT_LABEL = "Unsupported format"
UNSUPPORTED_FORMAT_RECOMMENDATIONS: List[str] = [
    "The note was not recognized as a {format_label}",
    "Please ensure your note contains {sections} sections",
]

BASE_REFERENCES: List[str] = [
    "{state} Medicaid Provider Manual - Clinical Documentation Standards",
    "CMS Medicare Progress Note Guidelines - Section 1861(s)(2)",
    "{state} Administrative Code - Mental Health Documentation Requirements",
]

PAYER_REFERENCES: Dict[PayerCategory, str] = {
    PayerCategory.MEDICAID: "{state} Medicaid Mental Health Services Coverage",
    PayerCategory.MEDICARE: "Medicare Claims Processing Manual Chapter 12",
    PayerCategory.COMMERCIAL: "Commercial Insurance Prior Authorization Guidelines",
}

DSM_REFERENCE = "DSM-5-TR Diagnostic Criteria and Documentation Standards"
