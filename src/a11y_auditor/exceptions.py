# src/a11y_auditor/exceptions.py
from typing import Any


class AuditorError(Exception):
    """Base class for engine errors (programmer errors, not HTML defects)."""


class InvalidInputError(AuditorError, TypeError):
    """Raised when the parser receives None or a non-string value."""


class UnknownRuleError(AuditorError, LookupError):
    """Raised when a rule or category name is not registered."""

    def __init__(self, name: str):
        super().__init__(f"Unknown accessibility rule or category: '{name}'")
        self.name = name


class AccessibilityAssertionError(AssertionError):
    """
    Raised by the assertion-style API when a rule reports violations.
    The rendered failure message is the exception text; the full
    RuleResult stays available on `result`.
    """

    def __init__(self, result: Any):
        super().__init__(result.message)
        self.result = result

    @property
    def violations(self):
        return self.result.violations
