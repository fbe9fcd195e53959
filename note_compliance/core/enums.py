"""
Enumerations for Clinical Note Compliance Checking

This module defines all enumeration types used throughout the compliance
checker. Enums provide:
    1. Type safety for the form selectors
    2. A single place for display labels
    3. Clear domain semantics for statuses and risk tiers

Enumeration Categories:
    NoteFormat        → Documentation formats a note can be checked against
    Jurisdiction      → State whose regulations are referenced
    PayerCategory     → Payer whose documentation rules are referenced
    ComplianceStatus  → Per-section / per-domain outcome
    RiskTier          → Ordinal audit risk classification
"""

from enum import Enum


def _normalize(value: str) -> str:
    """Uppercase and collapse separators for case-insensitive lookup."""
    return value.strip().upper().replace(" ", "_").replace("-", "_")


# =============================================================================
# STAGE 1: NOTE FORMAT ENUMERATION
# =============================================================================
# The documentation formats the detector knows how to recognize.
# Each format has a fixed, ordered set of required sections (see constants).


class NoteFormat(str, Enum):
    """
    Clinical note documentation formats.

    What it does:
        Selects which required-section table the detector uses and whether
        the section analyzer runs trigger rules or bare presence checks.

    Format Overview:
        SOAP            → Subjective, Objective, Assessment, Plan
        GIRP            → Goal, Intervention, Response, Plan
        BIRP            → Behavior, Intervention, Response, Plan
        DAP             → Data, Assessment, Plan
        TREATMENT_PLAN  → Diagnosis, Goals, Objectives, Interventions
    """

    SOAP = "SOAP"
    GIRP = "GIRP"
    BIRP = "BIRP"
    DAP = "DAP"
    TREATMENT_PLAN = "TREATMENT_PLAN"

    @property
    def label(self) -> str:
        """Human-readable format name used in reports."""
        return _NOTE_FORMAT_LABELS[self]

    @classmethod
    def get_all_formats(cls) -> list:
        """Return all format values as a list."""
        return [note_format.value for note_format in cls]

    @classmethod
    def from_string(cls, value: str) -> "NoteFormat":
        """
        Convert string to NoteFormat with case-insensitive matching.

        Accepts both the value ("TREATMENT_PLAN") and the label
        ("Treatment Plan").

        Raises:
            ValueError: If string doesn't match any format
        """
        normalized = _normalize(value)
        for note_format in cls:
            if normalized in (note_format.value, _normalize(note_format.label)):
                return note_format
        raise ValueError(
            f"Unknown note format: '{value}'. " f"Valid formats: {cls.get_all_formats()}"
        )


_NOTE_FORMAT_LABELS = {
    NoteFormat.SOAP: "SOAP Note",
    NoteFormat.GIRP: "GIRP Note",
    NoteFormat.BIRP: "BIRP Note",
    NoteFormat.DAP: "DAP Note",
    NoteFormat.TREATMENT_PLAN: "Treatment Plan",
}


# =============================================================================
# STAGE 2: SELECTOR ENUMERATIONS
# =============================================================================
# Jurisdiction and payer only feed the boilerplate text of the report.


class Jurisdiction(str, Enum):
    """State jurisdictions offered by the checker."""

    GA = "GA"
    NY = "NY"
    CA = "CA"

    @property
    def display_name(self) -> str:
        """e.g. 'Georgia (GA)'."""
        return f"{_STATE_NAMES[self]} ({self.value})"

    @classmethod
    def from_string(cls, value: str) -> "Jurisdiction":
        normalized = _normalize(value)
        for state in cls:
            if normalized in (state.value, _normalize(_STATE_NAMES[state])):
                return state
        raise ValueError(
            f"Unknown jurisdiction: '{value}'. " f"Valid jurisdictions: {[s.value for s in cls]}"
        )


_STATE_NAMES = {
    Jurisdiction.GA: "Georgia",
    Jurisdiction.NY: "New York",
    Jurisdiction.CA: "California",
}


class PayerCategory(str, Enum):
    """Payer categories offered by the checker."""

    MEDICAID = "medicaid"
    MEDICARE = "medicare"
    COMMERCIAL = "commercial"

    @property
    def display_name(self) -> str:
        if self is PayerCategory.COMMERCIAL:
            return "Commercial Insurance"
        return self.value.capitalize()

    @classmethod
    def from_string(cls, value: str) -> "PayerCategory":
        normalized = value.strip().lower()
        for payer in cls:
            if normalized in (payer.value, payer.display_name.lower()):
                return payer
        raise ValueError(f"Unknown payer: '{value}'. " f"Valid payers: {[p.value for p in cls]}")


# =============================================================================
# STAGE 3: OUTCOME ENUMERATIONS
# =============================================================================


class ComplianceStatus(str, Enum):
    """Outcome of a section or domain check."""

    COMPLIANT = "compliant"
    WARNING = "warning"
    NON_COMPLIANT = "non-compliant"

    @property
    def label(self) -> str:
        """Title-cased label, e.g. 'Non-Compliant'."""
        return "-".join(part.capitalize() for part in self.value.split("-"))


class RiskTier(str, Enum):
    """Ordinal audit risk classification."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @property
    def badge(self) -> str:
        """Short upper-case badge used in the domain matrix."""
        return {RiskTier.LOW: "LOW", RiskTier.MEDIUM: "MED", RiskTier.HIGH: "HIGH"}[self]

    @classmethod
    def for_status(cls, status: ComplianceStatus) -> "RiskTier":
        """Map a three-tier status onto the matching risk tier."""
        return {
            ComplianceStatus.COMPLIANT: cls.LOW,
            ComplianceStatus.WARNING: cls.MEDIUM,
            ComplianceStatus.NON_COMPLIANT: cls.HIGH,
        }[status]
