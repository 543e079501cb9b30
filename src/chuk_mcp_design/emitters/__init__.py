"""
Emitters - token collections to artifact text.

The emitters are pure: they receive the token graph and settings
explicitly and return strings. Nothing here writes files.
"""

from chuk_mcp_design.emitters.index import emit_index
from chuk_mcp_design.emitters.stylesheet import (
    ThemeBlocks,
    build_theme_blocks,
    emit_primitive_css,
    emit_semantic_css,
    emit_stylesheet,
    format_value,
)
from chuk_mcp_design.emitters.typings import (
    ArtifactPair,
    aggregate,
    emit_artifact_pair,
    export_names,
    sorted_unique,
)
from chuk_mcp_design.emitters.utilities import (
    UtilityEmission,
    UtilityRule,
    build_utility_rules,
    derive_property,
    emit_utility_css,
    resolve_property,
)

__all__ = [
    # Index
    "emit_index",
    # Style sheets
    "ThemeBlocks",
    "build_theme_blocks",
    "emit_primitive_css",
    "emit_semantic_css",
    "emit_stylesheet",
    "format_value",
    # Artifact pairs
    "ArtifactPair",
    "aggregate",
    "emit_artifact_pair",
    "export_names",
    "sorted_unique",
    # Utility classes
    "UtilityEmission",
    "UtilityRule",
    "build_utility_rules",
    "derive_property",
    "emit_utility_css",
    "resolve_property",
]
