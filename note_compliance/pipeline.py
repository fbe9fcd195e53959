"""
Compliance Checker - Main Orchestrator

This is the PUBLIC API entry point for the compliance checker. It holds
the form state (note text and selectors), enforces the trigger
precondition, and runs the analysis stages in order.

Flow:
    ┌──────────────────────────────────────────────────────────────────┐
    │                        ComplianceChecker                         │
    ├──────────────────────────────────────────────────────────────────┤
    │  ┌──────────┐   ┌──────────┐   ┌──────────┐   ┌──────────────┐   │
    │  │ Detector │ → │ Sections │ → │ Domains  │ → │  Assembler   │   │
    │  └──────────┘   └──────────┘   └──────────┘   └──────────────┘   │
    └──────────────────────────────────────────────────────────────────┘

Execution is single-threaded and synchronous. The only pause is a fixed
simulated delay; while it runs the trigger is disabled, so a second
analyze() call returns None instead of starting another run. Each run
replaces the stored result wholesale.

Usage:
    from note_compliance import ComplianceChecker

    checker = ComplianceChecker.from_environment()
    checker.set_note_text(text)
    checker.select_jurisdiction("GA")
    checker.select_payer("medicaid")
    checker.select_note_format("SOAP")
    result = checker.analyze()
"""

import time
from typing import Callable, Optional, Union

from loguru import logger

from note_compliance.analysis import DomainScorer, SectionAnalyzer
from note_compliance.core.config import CheckerConfiguration
from note_compliance.core.enums import Jurisdiction, NoteFormat, PayerCategory
from note_compliance.core.models import AnalysisRequest, AnalysisResult
from note_compliance.core.thresholds import DEFAULT_THRESHOLDS, ComplianceThresholds
from note_compliance.detection import FormatDetector
from note_compliance.reporting import ResultAssembler


def _coerce(value, enum_cls):
    """Accept an enum member, its string form, or an empty selection."""
    if value is None or isinstance(value, enum_cls):
        return value
    if not value.strip():
        return None
    return enum_cls.from_string(value)


# =============================================================================
# STAGE 1: CHECKER CLASS
# =============================================================================


class ComplianceChecker:
    """
    Form-state holder and analysis orchestrator.

    What it does:
        Mirrors the input form: a note text box and the jurisdiction,
        payer and note-type selectors. `analyze()` only runs when the
        form is complete and no run is in progress.

    How it works:
        STAGE 1: Initialize components from configuration
        STAGE 2: On analyze():
            2.1 Check the trigger precondition (silent no-op if unmet)
            2.2 Wait for the simulated delay
            2.3 Detect → analyze sections → score domains → assemble
            2.4 Replace the stored result

    Example:
        >>> checker = ComplianceChecker(CheckerConfiguration(simulated_delay_seconds=0))
        >>> checker.set_note_text("Subjective ... Objective ... Assessment ... Plan")
        >>> checker.select_jurisdiction("NY")
        >>> checker.select_payer("medicare")
        >>> checker.select_note_format("soap")
        >>> checker.analyze().is_valid_format
        True
    """

    def __init__(
        self,
        config: Optional[CheckerConfiguration] = None,
        thresholds: ComplianceThresholds = DEFAULT_THRESHOLDS,
        detector: Optional[FormatDetector] = None,
        section_analyzer: Optional[SectionAnalyzer] = None,
        domain_scorer: Optional[DomainScorer] = None,
        assembler: Optional[ResultAssembler] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the checker with configuration and optional component overrides.

        Args:
            config: Checker configuration (defaults if not given)
            thresholds: Shared threshold configuration
            detector: Optional detector override (for testing)
            section_analyzer: Optional section analyzer override
            domain_scorer: Optional domain scorer override
            assembler: Optional assembler override
            sleep: Function used for the simulated delay
        """
        # =====================================================================
        # STAGE 1.1: CONFIGURATION
        # =====================================================================
        self._config = config or CheckerConfiguration()
        self._thresholds = thresholds
        self._sleep = sleep

        # =====================================================================
        # STAGE 1.2: COMPONENTS
        # =====================================================================
        self._detector = detector or FormatDetector()
        self._section_analyzer = section_analyzer or SectionAnalyzer(self._detector.definitions)
        self._domain_scorer = domain_scorer or DomainScorer(thresholds)
        self._assembler = assembler or ResultAssembler(thresholds)

        # =====================================================================
        # STAGE 1.3: FORM STATE
        # =====================================================================
        self._note_text = ""
        self._jurisdiction: Optional[Jurisdiction] = None
        self._payer: Optional[PayerCategory] = None
        self._note_format: Optional[NoteFormat] = None
        self._is_analyzing = False
        self._result: Optional[AnalysisResult] = None

        logger.debug(f"ComplianceChecker initialized | Config: {self._config.to_dict()}")

    # =========================================================================
    # STAGE 2: FORM STATE
    # =========================================================================

    def set_note_text(self, note_text: str) -> None:
        self._note_text = note_text or ""

    def select_jurisdiction(self, jurisdiction: Union[Jurisdiction, str, None]) -> None:
        self._jurisdiction = _coerce(jurisdiction, Jurisdiction)

    def select_payer(self, payer: Union[PayerCategory, str, None]) -> None:
        self._payer = _coerce(payer, PayerCategory)

    def select_note_format(self, note_format: Union[NoteFormat, str, None]) -> None:
        self._note_format = _coerce(note_format, NoteFormat)

    @property
    def request(self) -> AnalysisRequest:
        """Current form state; the note type falls back to the configured default."""
        return AnalysisRequest(
            note_text=self._note_text,
            jurisdiction=self._jurisdiction,
            payer=self._payer,
            note_format=self._note_format or self._config.default_note_type,
        )

    @property
    def can_analyze(self) -> bool:
        """Whether the trigger control is enabled."""
        return self.request.is_complete and not self._is_analyzing

    @property
    def is_analyzing(self) -> bool:
        return self._is_analyzing

    @property
    def result(self) -> Optional[AnalysisResult]:
        """Most recent result, or None before the first run."""
        return self._result

    @property
    def config(self) -> CheckerConfiguration:
        return self._config

    # =========================================================================
    # STAGE 3: ANALYSIS
    # =========================================================================

    def analyze(self) -> Optional[AnalysisResult]:
        """
        Run one analysis cycle on the current form state.

        Returns:
            The new AnalysisResult, or None when the trigger is disabled
            (incomplete form or a run already in progress)
        """
        # =====================================================================
        # STAGE 3.1: TRIGGER PRECONDITION
        # =====================================================================
        if not self.can_analyze:
            logger.debug("Analyze ignored: form incomplete or analysis in progress")
            return None

        request = self.request
        self._is_analyzing = True
        try:
            # =================================================================
            # STAGE 3.2: SIMULATED LATENCY
            # =================================================================
            if self._config.simulated_delay_seconds > 0:
                self._sleep(self._config.simulated_delay_seconds)

            # =================================================================
            # STAGE 3.3: RUN STAGES
            # =================================================================
            result = self.run(request)
        finally:
            self._is_analyzing = False

        # =====================================================================
        # STAGE 3.4: REPLACE STORED RESULT
        # =====================================================================
        self._result = result
        return result

    def run(self, request: AnalysisRequest) -> AnalysisResult:
        """
        Run detection, analysis, scoring and assembly for a complete request.

        No delay and no form-state changes; `analyze()` wraps this.

        Raises:
            ValueError: If the request is incomplete
        """
        if not request.is_complete:
            raise ValueError(
                "Analysis request requires note text, jurisdiction, payer and note type"
            )

        detection = self._detector.detect(request.note_text, request.note_format)

        if not detection.is_valid_format:
            return self._assembler.unsupported(
                self._detector.definition_for(request.note_format),
                request.jurisdiction,
                request.payer,
            )

        findings = self._section_analyzer.analyze(request.note_text, detection)
        domains = self._domain_scorer.score(detection.overall_score)

        return self._assembler.assemble(
            detection=detection,
            findings=findings,
            domains=domains,
            jurisdiction=request.jurisdiction,
            payer=request.payer,
        )

    # =========================================================================
    # STAGE 4: FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_environment(cls, env_file: Optional[str] = None) -> "ComplianceChecker":
        """
        Create a checker from environment configuration.

        Raises:
            ConfigurationError: If settings are invalid
        """
        config = CheckerConfiguration.from_environment(env_file=env_file, validate_on_load=True)
        return cls(config)


# =============================================================================
# STAGE 5: ONE-SHOT HELPER
# =============================================================================


def analyze_note(
    note_text: str,
    jurisdiction: Union[Jurisdiction, str, None],
    payer: Union[PayerCategory, str, None],
    note_format: Union[NoteFormat, str, None] = None,
    config: Optional[CheckerConfiguration] = None,
) -> Optional[AnalysisResult]:
    """
    Analyze a single note without keeping a checker around.

    Uses a zero delay unless a config is supplied. Returns None when the
    inputs do not satisfy the trigger precondition.
    """
    checker = ComplianceChecker(config or CheckerConfiguration(simulated_delay_seconds=0.0))
    checker.set_note_text(note_text)
    checker.select_jurisdiction(jurisdiction)
    checker.select_payer(payer)
    checker.select_note_format(note_format)
    return checker.analyze()
