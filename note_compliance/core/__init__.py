"""
Core Layer - Domain Models, Enums, Thresholds and Configuration

This layer contains PURE, side-effect-free components that form the
foundation of the compliance checker.

Submodules:
    models.py     → Data structures (AnalysisRequest, AnalysisResult, ...)
    enums.py      → Enumerations (NoteFormat, Jurisdiction, RiskTier, ...)
    thresholds.py → Named score cutoffs shared by every component
    constants.py  → Fixed format, domain and template tables
    config.py     → Configuration dataclass
    exceptions.py → Domain-specific exceptions

Dependency Rule:
    This layer depends on NOTHING else in the package.
"""

from note_compliance.core.models import (
    AnalysisRequest,
    AnalysisResult,
    ComplianceDomain,
    DetectionResult,
    FormatDefinition,
    SectionDefinition,
    SectionFinding,
)
from note_compliance.core.enums import (
    ComplianceStatus,
    Jurisdiction,
    NoteFormat,
    PayerCategory,
    RiskTier,
)
from note_compliance.core.thresholds import (
    ComplianceThresholds,
    DEFAULT_THRESHOLDS,
    ScoreBand,
)
from note_compliance.core.config import CheckerConfiguration
from note_compliance.core.exceptions import (
    ConfigurationError,
    NoteComplianceError,
    RuleTableError,
)

__all__ = [
    # Models
    "AnalysisRequest",
    "AnalysisResult",
    "ComplianceDomain",
    "DetectionResult",
    "FormatDefinition",
    "SectionDefinition",
    "SectionFinding",
    # Enums
    "ComplianceStatus",
    "Jurisdiction",
    "NoteFormat",
    "PayerCategory",
    "RiskTier",
    # Thresholds
    "ComplianceThresholds",
    "DEFAULT_THRESHOLDS",
    "ScoreBand",
    # Configuration
    "CheckerConfiguration",
    # Exceptions
    "NoteComplianceError",
    "ConfigurationError",
    "RuleTableError",
]
