"""
Design System Validator - reports problems generation would absorb.

Validates:
- Utility specs declare a CSS property
- Utility token references resolve to a collection
- Semantic references address an existing token and point at a
  variable that will be emitted
- Primitive leaf names are unique across groups (shallow resolution
  cannot tell them apart)
- Token mappings are proper light/dark pairs
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from chuk_mcp_design.core.naming import to_kebab_case, variable_name
from chuk_mcp_design.core.references import (
    Reference,
    Unresolved,
    find_token,
    parse_value,
    resolve_collection,
)
from chuk_mcp_design.models.tokens import DesignSystem, as_theme_pair, is_opaque


class ValidationSeverity(str, Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Generation will abort
    WARNING = "warning"  # Generation succeeds but output is suspect
    INFO = "info"  # Informational only


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: ValidationSeverity
    code: str
    message: str
    location: str | None = None

    def __str__(self) -> str:
        prefix = f"[{self.severity.value.upper()}]"
        location = f" at {self.location}" if self.location else ""
        return f"{prefix} {self.code}: {self.message}{location}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "severity": self.severity.value,
            "code": self.code,
            "message": self.message,
            "location": self.location,
        }


class ValidationResult:
    """Result of validating a design system."""

    def __init__(self) -> None:
        self.issues: list[ValidationIssue] = []

    def add_error(self, code: str, message: str, location: str | None = None) -> None:
        """Add an error issue."""
        self.issues.append(ValidationIssue(ValidationSeverity.ERROR, code, message, location))

    def add_warning(self, code: str, message: str, location: str | None = None) -> None:
        """Add a warning issue."""
        self.issues.append(ValidationIssue(ValidationSeverity.WARNING, code, message, location))

    def add_info(self, code: str, message: str, location: str | None = None) -> None:
        """Add an info issue."""
        self.issues.append(ValidationIssue(ValidationSeverity.INFO, code, message, location))

    @property
    def is_valid(self) -> bool:
        """Return True if no errors (warnings/info are OK)."""
        return not any(i.severity == ValidationSeverity.ERROR for i in self.issues)

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get all error issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get all warning issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    def codes(self) -> list[str]:
        """Issue codes, in discovery order."""
        return [i.code for i in self.issues]

    def __bool__(self) -> bool:
        """Boolean conversion returns is_valid."""
        return self.is_valid

    def __str__(self) -> str:
        if not self.issues:
            return "Validation passed: no issues found"
        return "\n".join(str(issue) for issue in self.issues)


class DesignSystemValidator:
    """Validates a design system's token graph."""

    def validate(self, system: DesignSystem) -> ValidationResult:
        """
        Validate a design system.

        Args:
            system: The token graph to validate

        Returns:
            ValidationResult with any issues found
        """
        result = ValidationResult()

        self._validate_primitives(system, result)
        self._validate_semantic_tokens(system, result)
        self._validate_utilities(system, result)

        return result

    def _validate_primitives(self, system: DesignSystem, result: ValidationResult) -> None:
        """Check pairs, empty categories and cross-group leaf collisions."""
        owners: dict[str, list[str]] = {}

        for group, categories in system.primitives.items():
            for category, tokens in categories.items():
                location = f"primitives/{group}/{category}"
                if not tokens:
                    result.add_info("EMPTY_CATEGORY", f"Category '{category}' has no tokens", location)
                for key, value in tokens.items():
                    self._check_opaque(key, value, f"{location}/{key}", result)
                    leaf = to_kebab_case(key)
                    if group not in owners.setdefault(leaf, []):
                        owners[leaf].append(group)

        for leaf, groups in owners.items():
            if len(groups) > 1:
                result.add_warning(
                    "LEAF_COLLISION",
                    f"Variable --{leaf} is defined by several groups: {', '.join(groups)}",
                    "primitives",
                )

    def _validate_semantic_tokens(self, system: DesignSystem, result: ValidationResult) -> None:
        """Check that every reference addresses a token and lands on an emitted variable."""
        defined = _defined_variables(system)

        for group, categories in system.semantic_tokens.items():
            for category, tokens in categories.items():
                location = f"semanticTokens/{group}/{category}"
                if not tokens:
                    result.add_info("EMPTY_CATEGORY", f"Category '{category}' has no tokens", location)
                for key, value in tokens.items():
                    token_location = f"{location}/{key}"
                    self._check_opaque(key, value, token_location, result)
                    pair = as_theme_pair(value)
                    sides = [pair.light, pair.dark] if pair is not None else [value]
                    for side in sides:
                        parsed = parse_value(side)
                        if not isinstance(parsed, Reference):
                            continue
                        # Full token paths must address an existing token
                        if len(parsed.path) >= 3 and find_token(system, parsed) is None:
                            result.add_warning(
                                "DANGLING_REFERENCE",
                                f"Reference {parsed} does not address a token",
                                token_location,
                            )
                            continue
                        handle = variable_name(parsed.leaf)
                        if handle not in defined:
                            result.add_warning(
                                "DANGLING_REFERENCE",
                                f"Reference {parsed} resolves to undefined variable {handle}",
                                token_location,
                            )

    def _validate_utilities(self, system: DesignSystem, result: ValidationResult) -> None:
        """Check properties and collection references."""
        for group, utilities in system.utility_classes.items():
            for utility, spec in utilities.items():
                location = f"utilityClasses/{group}/{utility}"

                if not spec.css_property:
                    if system.settings.legacy_property_fallback:
                        result.add_info(
                            "MISSING_PROPERTY",
                            f"Property for prefix '{spec.prefix}' will be derived from the prefix",
                            location,
                        )
                    else:
                        result.add_error(
                            "MISSING_PROPERTY",
                            f"Utility with prefix '{spec.prefix}' requires a 'property' field",
                            location,
                        )

                if isinstance(spec.tokens, dict):
                    continue
                parsed = parse_value(spec.tokens)
                reference = parsed if isinstance(parsed, Reference) else Reference(path=(spec.tokens,))
                resolution = resolve_collection(system, reference)
                if isinstance(resolution, Unresolved):
                    result.add_warning(
                        "UNRESOLVED_COLLECTION",
                        f"Tokens {reference} do not resolve: {resolution.reason}",
                        location,
                    )

    def _check_opaque(self, key: str, value: Any, location: str, result: ValidationResult) -> None:
        if is_opaque(value):
            result.add_warning(
                "OPAQUE_TOKEN",
                f"Token '{key}' is a mapping without both 'light' and 'dark'",
                location,
            )


def _defined_variables(system: DesignSystem) -> set[str]:
    """Every CSS variable the style-sheet emitter will declare."""
    defined: set[str] = set()
    for categories in system.primitives.values():
        for tokens in categories.values():
            defined.update(variable_name(key) for key in tokens)
    for categories in system.semantic_tokens.values():
        for category, tokens in categories.items():
            defined.update(variable_name(key, category) for key in tokens)
    return defined


def validate_design_system(system: DesignSystem) -> ValidationResult:
    """
    Convenience function to validate a design system.

    Args:
        system: The design system to validate

    Returns:
        ValidationResult with any issues found
    """
    validator = DesignSystemValidator()
    return validator.validate(system)
