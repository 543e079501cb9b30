"""
Token graph models - the three-tier design token namespace.

    primitives      group → category → token → value | {light, dark}
    semanticTokens  group → category → token → literal | reference | {light, dark}
    utilityClasses  group → utility  → UtilityClassSpec

The graph is built once from a definition file and never mutated
during emission.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_design.constants import (
    ALTERNATE_THEME_SELECTOR,
    DARK_KEY,
    DEFAULT_OUTPUT_DIR_NAME,
    DEFAULT_THEME_SELECTOR,
    LIGHT_KEY,
    Namespace,
    UnresolvedPolicy,
)

# category name → {token name → raw value}
TokenCollection = dict[str, Any]
TokenGroup = dict[str, TokenCollection]


@dataclass(frozen=True)
class ThemePair:
    """Per-theme values of a single token."""

    light: Any
    dark: Any


def as_theme_pair(value: Any) -> ThemePair | None:
    """
    Interpret a raw token value as a theme pair.

    Only a mapping carrying both ``light`` and ``dark`` is a pair.
    Anything else (scalars, partial mappings) returns None.
    """
    if isinstance(value, dict) and LIGHT_KEY in value and DARK_KEY in value:
        return ThemePair(light=value[LIGHT_KEY], dark=value[DARK_KEY])
    return None


def is_opaque(value: Any) -> bool:
    """True for mappings that are not recognisable theme pairs."""
    return isinstance(value, dict) and as_theme_pair(value) is None


class UtilityClassSpec(BaseModel):
    """One utility-class family bound to a token collection."""

    prefix: str = Field(..., description="Class-name prefix, e.g. 'background'")
    css_property: str | None = Field(
        default=None,
        alias="property",
        description="CSS property the classes set (required in strict mode)",
    )
    pseudo: str | None = Field(
        default=None,
        description="Optional pseudo-selector appended to the class, e.g. ':hover'",
    )
    tokens: str | dict[str, Any] = Field(
        ...,
        description="Reference to a token collection, or an inline mapping",
    )

    model_config = {"frozen": True, "populate_by_name": True}


class GeneratorSettings(BaseModel):
    """Output layout and resolution policies."""

    output_dir_name: str = Field(default=DEFAULT_OUTPUT_DIR_NAME)
    default_theme_selector: str = Field(default=DEFAULT_THEME_SELECTOR)
    alternate_theme_selector: str = Field(default=ALTERNATE_THEME_SELECTOR)
    unresolved_policy: UnresolvedPolicy = Field(
        default=UnresolvedPolicy.SKIP,
        description="Behaviour when a utility's token reference does not resolve",
    )
    legacy_property_fallback: bool = Field(
        default=False,
        description="Derive a missing utility property from its prefix",
    )
    emit_global_aggregates: bool = Field(default=True)
    emit_index: bool = Field(default=True)
    sort_index_imports: bool = Field(default=False)

    model_config = {"frozen": True}


class DesignSystem(BaseModel):
    """
    A complete design system definition.

    This is the token graph every resolver and emitter receives
    explicitly.
    """

    schema_version: str = Field("design-system/v1", alias="schema")
    name: str = Field("untitled", description="Design system name")
    description: str = Field("", description="Design system description")
    settings: GeneratorSettings = Field(default_factory=GeneratorSettings)

    primitives: dict[str, TokenGroup] = Field(default_factory=dict)
    semantic_tokens: dict[str, TokenGroup] = Field(
        default_factory=dict,
        alias="semanticTokens",
    )
    utility_classes: dict[str, dict[str, UtilityClassSpec]] = Field(
        default_factory=dict,
        alias="utilityClasses",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    def namespace(self, namespace: Namespace) -> dict[str, Any]:
        """Get the groups of a namespace."""
        if namespace == Namespace.PRIMITIVES:
            return self.primitives
        if namespace == Namespace.SEMANTIC_TOKENS:
            return self.semantic_tokens
        return self.utility_classes

    def get_collection(
        self,
        namespace: Namespace,
        group: str,
        category: str,
    ) -> TokenCollection | None:
        """Get a token collection, or None if the path does not exist."""
        if namespace == Namespace.UTILITY_CLASSES:
            return None
        collection = self.namespace(namespace).get(group, {}).get(category)
        return collection if isinstance(collection, dict) else None

    def token_count(self) -> int:
        """Count primitive and semantic tokens."""
        return sum(
            len(tokens)
            for groups in (self.primitives, self.semantic_tokens)
            for categories in groups.values()
            for tokens in categories.values()
        )

    def with_settings(self, **overrides: Any) -> DesignSystem:
        """Return a copy with some settings replaced."""
        settings = GeneratorSettings.model_validate(
            {**self.settings.model_dump(), **overrides}
        )
        return self.model_copy(update={"settings": settings})

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
            "settings": self.settings.model_dump(mode="json"),
            "primitives": self.primitives,
            "semanticTokens": self.semantic_tokens,
            "utilityClasses": {
                group: {
                    key: spec.model_dump(by_alias=True, exclude_none=True)
                    for key, spec in utilities.items()
                }
                for group, utilities in self.utility_classes.items()
            },
        }


class DesignSystemMetadata(BaseModel):
    """Lightweight metadata for listing design systems."""

    name: str
    description: str
    groups: list[str]
    token_count: int
    utility_count: int

    model_config = {"frozen": True}

    @classmethod
    def from_system(cls, system: DesignSystem) -> DesignSystemMetadata:
        """Create metadata from a design system."""
        groups: list[str] = []
        for namespace in Namespace:
            for group in system.namespace(namespace):
                if group not in groups:
                    groups.append(group)
        return cls(
            name=system.name,
            description=system.description,
            groups=groups,
            token_count=system.token_count(),
            utility_count=sum(len(u) for u in system.utility_classes.values()),
        )
