"""
Exceptions raised by the design token pipeline.

Only configuration problems are fatal. Resolution misses are absorbed
and logged unless the unresolved policy asks for a failure.
"""

from __future__ import annotations


class DesignSystemError(ValueError):
    """Base class for design system errors."""


class UtilityConfigError(DesignSystemError):
    """A utility-class spec cannot be emitted (e.g. no CSS property)."""

    def __init__(self, message: str, group: str | None = None, utility: str | None = None):
        super().__init__(message)
        self.group = group
        self.utility = utility


class UnresolvedReferenceError(DesignSystemError):
    """A collection reference did not resolve and the policy is 'fail'."""

    def __init__(self, message: str, reference: str):
        super().__init__(message)
        self.reference = reference
