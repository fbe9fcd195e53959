"""
Clinical Note Compliance Checker

Detects the documentation format of a pasted clinical note
(SOAP, GIRP, BIRP, DAP, Treatment Plan) by keyword presence and produces a
simulated compliance report: section findings, derived domain scores, a
risk tier, recommendations and references.

Architecture Overview:
    note_compliance/
    ├── core/        → Models, enums, thresholds, configuration (Layer 0 - Pure)
    ├── detection/   → Keyword-presence format detection (Layer 1)
    ├── analysis/    → Section rules and domain scoring (Layer 2)
    ├── reporting/   → Result assembly and presentation (Layer 3)
    ├── pipeline.py  → ComplianceChecker orchestrator (Layer 4 - Public API)
    └── cli.py       → Command-line front end

Quick Start:
    from note_compliance import analyze_note

    result = analyze_note(text, jurisdiction="GA", payer="medicaid", note_format="SOAP")
    print(result.overall_score, result.risk_tier.value)
"""

__version__ = "1.0.0"

# =============================================================================
# PUBLIC API EXPORTS
# =============================================================================

# Main Entry Points
from note_compliance.pipeline import ComplianceChecker, analyze_note

# Core Models
from note_compliance.core.models import (
    AnalysisRequest,
    AnalysisResult,
    ComplianceDomain,
    SectionFinding,
)

# Enums
from note_compliance.core.enums import (
    ComplianceStatus,
    Jurisdiction,
    NoteFormat,
    PayerCategory,
    RiskTier,
)

# Configuration
from note_compliance.core.config import CheckerConfiguration
from note_compliance.core.thresholds import ComplianceThresholds, ScoreBand

# Presentation
from note_compliance.reporting import ReportView, build_view, render_text

__all__ = [
    # Main Entry Points
    "ComplianceChecker",
    "analyze_note",
    # Core Models
    "AnalysisRequest",
    "AnalysisResult",
    "ComplianceDomain",
    "SectionFinding",
    # Enums
    "ComplianceStatus",
    "Jurisdiction",
    "NoteFormat",
    "PayerCategory",
    "RiskTier",
    # Configuration
    "CheckerConfiguration",
    "ComplianceThresholds",
    "ScoreBand",
    # Presentation
    "ReportView",
    "build_view",
    "render_text",
]
