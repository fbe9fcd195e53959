"""
Domain Exceptions for Clinical Note Compliance Checking

Analysis itself never raises for bad notes: an unrecognized format is a
normal result, and an incomplete form simply does nothing. Exceptions are
reserved for misconfiguration of the checker.

Exception Hierarchy:
    NoteComplianceError (base)
    ├── ConfigurationError  → Invalid environment / configuration values
    └── RuleTableError      → A section rule that cannot apply to its format

Usage:
    from note_compliance.core.exceptions import ConfigurationError

    try:
        config = CheckerConfiguration.from_environment()
    except ConfigurationError as e:
        logger.error(f"Bad configuration: {e.context}")
"""

from typing import Optional


# =============================================================================
# STAGE 1: BASE EXCEPTION
# =============================================================================


class NoteComplianceError(Exception):
    """
    Base exception for all compliance checker errors.

    Attributes:
        message: Human-readable error description
        context: Dictionary of additional context for debugging
    """

    def __init__(self, message: str, context: Optional[dict] = None):
        self.message = message
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format message with context for display."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} [{context_str}]"
        return self.message


# =============================================================================
# STAGE 2: CONFIGURATION ERRORS
# =============================================================================


class ConfigurationError(NoteComplianceError):
    """
    Error in checker configuration.

    When raised:
        - Negative simulated delay
        - Unknown default note type
        - Unknown log level

    Example:
        >>> raise ConfigurationError(
        ...     "Simulated delay must be non-negative",
        ...     context={"setting": "SIMULATED_DELAY_SECONDS", "value": -1.0}
        ... )
    """

    pass


# =============================================================================
# STAGE 3: RULE TABLE ERRORS
# =============================================================================


class RuleTableError(NoteComplianceError):
    """
    A section rule references a section its note format does not define.

    Attributes:
        section: The unknown section label
        trigger: The rule's trigger name
    """

    def __init__(self, section: str, trigger: str, note_format: str):
        self.section = section
        self.trigger = trigger
        super().__init__(
            f"Rule '{trigger}' targets unknown section '{section}'",
            context={"section": section, "trigger": trigger, "format": note_format},
        )
