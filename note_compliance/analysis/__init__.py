"""
Analysis Layer - Section Findings and Domain Scores

Submodules:
    section_rules.py    → Trigger rule table
    section_analyzer.py → Per-section findings
    domain_scorer.py    → Derived compliance domains

Dependency Rule:
    This layer depends on: core
    This layer is used by: reporting, pipeline
"""

from note_compliance.analysis.section_rules import RULES_BY_FORMAT, SectionRule
from note_compliance.analysis.section_analyzer import SectionAnalyzer
from note_compliance.analysis.domain_scorer import DomainScorer

__all__ = [
    "RULES_BY_FORMAT",
    "SectionRule",
    "SectionAnalyzer",
    "DomainScorer",
]
