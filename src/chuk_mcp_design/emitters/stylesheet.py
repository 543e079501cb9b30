"""
Style-sheet emitter - token collections to theme-scoped CSS variables.

Every collection becomes two rule blocks: the default theme under an
unconditional selector, the alternate theme under an attribute
selector. A token without a theme pair declares the same value in
both blocks.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from chuk_mcp_design.constants import ALTERNATE_THEME_SELECTOR, DEFAULT_THEME_SELECTOR
from chuk_mcp_design.core.naming import variable_name
from chuk_mcp_design.core.references import resolve_shallow
from chuk_mcp_design.models.tokens import GeneratorSettings, TokenCollection, as_theme_pair

INDENT = "  "


def format_value(value: Any) -> str:
    """
    Render a resolved token value as CSS text.

    Strings pass through, numbers use their shortest form, booleans
    and None use their JSON spelling. Mappings and lists are written as
    compact JSON; any other scalar (e.g. a YAML date) uses str().
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or value is None:
        return json.dumps(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, int | float):
        return str(value)
    if isinstance(value, dict | list | tuple):
        return json.dumps(value, separators=(",", ":"), sort_keys=True, default=str)
    return str(value)


def _resolve(value: Any) -> str:
    """Shallow-resolve string values, then format."""
    if isinstance(value, str):
        value = resolve_shallow(value)
    return format_value(value)


@dataclass
class ThemeBlocks:
    """Declarations for the default and alternate theme blocks."""

    default: list[tuple[str, str]] = field(default_factory=list)
    alternate: list[tuple[str, str]] = field(default_factory=list)

    def declare(self, name: str, default_value: str, alternate_value: str) -> None:
        """Add one variable to both blocks."""
        self.default.append((name, default_value))
        self.alternate.append((name, alternate_value))

    @property
    def variable_names(self) -> list[str]:
        """Declared variable names, in declaration order."""
        return [name for name, _ in self.default]

    def render(
        self,
        default_selector: str = DEFAULT_THEME_SELECTOR,
        alternate_selector: str = ALTERNATE_THEME_SELECTOR,
    ) -> str:
        """Render both blocks as CSS text."""
        return (
            _render_block(default_selector, self.default)
            + "\n"
            + _render_block(alternate_selector, self.alternate)
        )


def _render_block(selector: str, declarations: list[tuple[str, str]]) -> str:
    body = "".join(f"{INDENT}{name}: {value};\n" for name, value in declarations)
    return f"{selector} {{\n{body}}}\n"


def build_theme_blocks(tokens: TokenCollection, stem: str | None = None) -> ThemeBlocks:
    """
    Build the declarations for one token collection.

    Args:
        tokens: Mapping of token key → value (scalar, reference or pair)
        stem: Variable-name stem; the category for semantic tokens,
            None for primitives

    Returns:
        ThemeBlocks in collection insertion order
    """
    blocks = ThemeBlocks()
    for key, value in tokens.items():
        name = variable_name(key, stem)
        pair = as_theme_pair(value)
        if pair is not None:
            blocks.declare(name, _resolve(pair.light), _resolve(pair.dark))
        else:
            resolved = _resolve(value)
            blocks.declare(name, resolved, resolved)
    return blocks


def emit_stylesheet(
    tokens: TokenCollection,
    stem: str | None = None,
    settings: GeneratorSettings | None = None,
) -> str:
    """
    Emit the CSS text for one token collection.

    Args:
        tokens: Token collection
        stem: Variable-name stem (None for primitives)
        settings: Generator settings supplying the theme selectors

    Returns:
        Two rule blocks separated by a blank line
    """
    settings = settings or GeneratorSettings()
    return build_theme_blocks(tokens, stem).render(
        settings.default_theme_selector,
        settings.alternate_theme_selector,
    )


def emit_primitive_css(tokens: TokenCollection, settings: GeneratorSettings | None = None) -> str:
    """Emit primitives: variables are named by the token key alone."""
    return emit_stylesheet(tokens, None, settings)


def emit_semantic_css(
    category: str,
    tokens: TokenCollection,
    settings: GeneratorSettings | None = None,
) -> str:
    """Emit semantic tokens: variables are named ``--<category>-<key>``."""
    return emit_stylesheet(tokens, category, settings)
