"""
moostats exception hierarchy.

Every moostats-specific exception inherits from MoostatsError and carries an
optional suggestion shown below the message.

Example:
    try:
        problem = make_problem("zdt3", n_var=1)
    except MoostatsError as e:
        logger.error("Setup failed: %s", e)
"""

from __future__ import annotations

from typing import Any


class MoostatsError(Exception):
    """
    Base exception for all moostats errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(MoostatsError):
    """Raised when configuration is invalid, malformed or cannot be applied at setup."""

    pass


class MissingConfigError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, field: str, config_class: str | None = None) -> None:
        message = f"Missing required configuration: '{field}'."
        suggestion = f"Add '{field}' to your configuration"
        if config_class:
            suggestion += f" or use {config_class}() for the defaults"
        super().__init__(message, suggestion, {"field": field})


class InvalidParameterError(ConfigurationError):
    """Raised when a configuration value cannot be parsed or is out of range."""

    def __init__(self, field: str, value: Any, expected: str) -> None:
        message = f"Invalid value for '{field}': {value!r}."
        suggestion = f"'{field}' must be {expected}"
        super().__init__(message, suggestion, {"field": field, "value": value})


# =============================================================================
# Problem Errors
# =============================================================================


class ProblemError(MoostatsError):
    """Base class for problem-related errors."""

    pass


class InvalidProblemError(ProblemError):
    """Raised when an unknown problem is specified."""

    def __init__(self, problem: str, available: list[str] | None = None) -> None:
        message = f"Unknown problem '{problem}'."
        if available:
            suggestion = f"Available problems: {', '.join(available)}"
        else:
            suggestion = "Use available_problem_names() to see registered problems."
        super().__init__(message, suggestion, {"problem": problem})


class ProblemDimensionError(ProblemError, ConfigurationError):
    """Raised when problem dimensions are invalid."""

    def __init__(
        self,
        message: str,
        n_var: int | None = None,
        n_obj: int | None = None,
    ) -> None:
        suggestion = "Check problem dimensions: n_var (variables), n_obj (objectives)"
        MoostatsError.__init__(self, message, suggestion, {"n_var": n_var, "n_obj": n_obj})


# =============================================================================
# Output Errors
# =============================================================================


class SinkOpenError(ConfigurationError):
    """Raised when the statistics output destination cannot be opened."""

    def __init__(self, path: str, reason: str) -> None:
        message = f"Could not open statistics log '{path}': {reason}"
        suggestion = "Check that the directory exists and is writable, or leave 'file' unset to log to stdout"
        super().__init__(message, suggestion, {"path": path})


__all__ = [
    # Base
    "MoostatsError",
    # Configuration
    "ConfigurationError",
    "MissingConfigError",
    "InvalidParameterError",
    # Problem
    "ProblemError",
    "InvalidProblemError",
    "ProblemDimensionError",
    # Output
    "SinkOpenError",
]
