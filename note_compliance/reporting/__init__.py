"""
Reporting Layer - Result Assembly and Presentation

Submodules:
    assembler.py → AnalysisResult construction
    presenter.py → Read-only report view and text rendering

Dependency Rule:
    This layer depends on: core
    This layer is used by: pipeline, cli
"""

from note_compliance.reporting.assembler import ResultAssembler, dedupe_preserving_order
from note_compliance.reporting.presenter import ReportView, build_view, render_text

__all__ = [
    "ResultAssembler",
    "dedupe_preserving_order",
    "ReportView",
    "build_view",
    "render_text",
]
