"""
Constants and enums for the design token system.

No magic strings - use enums for constrained values.
"""

from enum import Enum


class Namespace(str, Enum):
    """Top-level sections of a design system definition."""

    PRIMITIVES = "primitives"
    SEMANTIC_TOKENS = "semanticTokens"
    UTILITY_CLASSES = "utilityClasses"


class ArtifactKind(str, Enum):
    """Kinds of generated artifact, one output tree each."""

    CSS = "css"
    TS = "ts"
    NAMES = "names"
    INDEX = "index"


class UnresolvedPolicy(str, Enum):
    """What to do when a collection reference addresses nothing."""

    SKIP = "skip"  # Emit no rules, log a warning
    DANGLING = "dangling"  # Emit a rule pointing at an undefined variable
    FAIL = "fail"  # Abort the run


# Folder name per namespace, under each artifact tree
NAMESPACE_FOLDERS: dict[Namespace, str] = {
    Namespace.PRIMITIVES: "variables",
    Namespace.SEMANTIC_TOKENS: "tokens",
    Namespace.UTILITY_CLASSES: "utils",
}

# Base name of the per-group and global aggregate files
AGGREGATE_NAMES: dict[Namespace, str] = {
    Namespace.PRIMITIVES: "primitives",
    Namespace.SEMANTIC_TOKENS: "tokens",
    Namespace.UTILITY_CLASSES: "utils",
}

# (type alias, typed array) export names; the name list is the alias + "Names"
EXPORT_STEMS: dict[Namespace, tuple[str, str]] = {
    Namespace.PRIMITIVES: ("PrimitiveToken", "PrimitiveTokens"),
    Namespace.SEMANTIC_TOKENS: ("SemanticToken", "SemanticTokens"),
    Namespace.UTILITY_CLASSES: ("UtilityClass", "UtilityClasses"),
}

# Human label used in generated file headers
KIND_LABELS: dict[Namespace, str] = {
    Namespace.PRIMITIVES: "primitives",
    Namespace.SEMANTIC_TOKENS: "semantic tokens",
    Namespace.UTILITY_CLASSES: "utility classes",
}

TYPES_SUFFIX = "-types.d.ts"
NAMES_SUFFIX = "-names.js"
INDEX_FILENAME = "index.css"

# Property that gets the shorthand `1px solid` treatment
BORDER_PROPERTY = "border"

# Theme pair keys
LIGHT_KEY = "light"
DARK_KEY = "dark"

DEFAULT_OUTPUT_DIR_NAME = "theme"
DEFAULT_THEME_SELECTOR = "html"
ALTERNATE_THEME_SELECTOR = 'html[data-theme="dark"]'


class ErrorMessages:
    """Standardized error messages."""

    MISSING_PROPERTY = 'Utility config for prefix "{prefix}" requires a "property" field.'
    SYSTEM_NOT_FOUND = "Design system '{name}' not found."
    UNRESOLVED_COLLECTION = "Reference {reference} does not address a token collection."
    INVALID_REFERENCE = "Not a reference: {value!r}."
    DUPLICATE_ARTIFACT = "Two artifacts map to the same path: {path}."


class SuccessMessages:
    """Standardized success messages."""

    SYSTEM_GENERATED = "Generated {count} artifacts for '{name}' in {path}."
    SYSTEM_COPIED = "Design system copied to project"

# Server working layout; the base path defaults to the current directory
BASE_PATH_ENV = "CHUK_MCP_DESIGN_HOME"
SYSTEMS_DIRNAME = "design-systems"
OUTPUT_DIRNAME = "output"
