"""
Pydantic models for the design token system.

This module provides:
- DesignSystem: The token graph (primitives, semantic tokens, utilities)
- UtilityClassSpec: One utility-class family
- GeneratorSettings: Output layout and resolution policies
- Artifact / GenerationResult: In-memory generation output
"""

from chuk_mcp_design.models.artifacts import Artifact, GenerationResult
from chuk_mcp_design.models.tokens import (
    DesignSystem,
    DesignSystemMetadata,
    GeneratorSettings,
    ThemePair,
    TokenCollection,
    UtilityClassSpec,
    as_theme_pair,
    is_opaque,
)

__all__ = [
    "Artifact",
    "DesignSystem",
    "DesignSystemMetadata",
    "GenerationResult",
    "GeneratorSettings",
    "ThemePair",
    "TokenCollection",
    "UtilityClassSpec",
    "as_theme_pair",
    "is_opaque",
]
