"""
Detection Layer - Note Format Detection

Submodules:
    format_detector.py → Keyword-presence section detection

Dependency Rule:
    This layer depends on: core
    This layer is used by: analysis, pipeline
"""

from note_compliance.detection.format_detector import FormatDetector, load_format_definitions

__all__ = [
    "FormatDetector",
    "load_format_definitions",
]
