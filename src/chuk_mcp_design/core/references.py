"""
Reference resolution - bracketed dotted paths across the token graph.

A reference is a string of the exact shape ``{segment(.segment)*}``.
Anything else, including malformed brackets, is a literal.

Two strategies coexist:

- Shallow: only the final segment matters. It becomes ``var(--leaf)``.
  Two groups defining the same leaf collide in the variable space;
  the validator reports such collisions.
- Graph-walk: the path is followed through the namespaces to fetch
  the actual token collection, for utility classes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from chuk_mcp_design.constants import ErrorMessages, Namespace
from chuk_mcp_design.core.naming import variable_name
from chuk_mcp_design.models.tokens import DesignSystem, TokenCollection

REFERENCE_PATTERN = re.compile(r"^\{([^}]+)\}$")

# Namespaces probed when a path does not name one explicitly
_FALLBACK_ORDER = (Namespace.PRIMITIVES, Namespace.SEMANTIC_TOKENS)


@dataclass(frozen=True)
class LiteralValue:
    """A token value used as-is."""

    value: Any


@dataclass(frozen=True)
class Reference:
    """A parsed ``{a.b.c}`` reference."""

    path: tuple[str, ...]

    @property
    def leaf(self) -> str:
        """Final path segment."""
        return self.path[-1]

    @property
    def explicit_namespace(self) -> Namespace | None:
        """Namespace named by the first segment, if any."""
        head = self.path[0]
        for namespace in _FALLBACK_ORDER:
            if head == namespace.value:
                return namespace
        return None

    def __str__(self) -> str:
        return "{" + ".".join(self.path) + "}"


@dataclass(frozen=True)
class Resolved:
    """A reference that addressed a token collection."""

    namespace: Namespace
    group: str
    category: str
    tokens: TokenCollection

    @property
    def variable_stem(self) -> str | None:
        """
        Stem of the variables the style-sheet emitter wrote for this
        collection: the category for semantic tokens, none for primitives.
        """
        if self.namespace == Namespace.SEMANTIC_TOKENS:
            return self.category
        return None


@dataclass(frozen=True)
class Unresolved:
    """A reference that addressed nothing."""

    reference: Reference
    reason: str


@dataclass(frozen=True)
class TokenLocation:
    """Where a single token lives in the graph."""

    namespace: Namespace
    group: str
    category: str
    token: str
    value: Any


def parse_value(value: Any) -> LiteralValue | Reference:
    """
    Split a raw value into a literal or a reference.

    Args:
        value: Raw token value from the definition

    Returns:
        Reference for ``{a.b}`` strings, LiteralValue otherwise
    """
    if isinstance(value, str):
        match = REFERENCE_PATTERN.match(value)
        if match:
            return Reference(path=tuple(match.group(1).split(".")))
    return LiteralValue(value)


def is_reference(value: Any) -> bool:
    """True if the value parses as a reference."""
    return isinstance(parse_value(value), Reference)


def resolve_shallow(value: Any) -> Any:
    """
    Resolve a value using only a reference's final segment.

    Examples:
        "{colors.gray150}" → "var(--gray150)"
        "{data-viz.colors.dataVizLilac}" → "var(--data-viz-lilac)"
        "#ffffff" → "#ffffff"
    """
    parsed = parse_value(value)
    if isinstance(parsed, Reference):
        return f"var({variable_name(parsed.leaf)})"
    return parsed.value


def resolve_collection(system: DesignSystem, value: str | Reference) -> Resolved | Unresolved:
    """
    Walk a reference through the graph to a token collection.

    Order:
    1. ``{primitives.<group>.<category>}``
    2. ``{semanticTokens.<group>.<category>}``
    3. ``{<group>.<category>}`` probing primitives, then semantic tokens

    Args:
        system: The token graph
        value: Reference string or parsed reference

    Returns:
        Resolved with the collection and its origin, or Unresolved.
        Never raises for a miss.
    """
    if isinstance(value, Reference):
        reference = value
    else:
        parsed = parse_value(value)
        if not isinstance(parsed, Reference):
            raise ValueError(ErrorMessages.INVALID_REFERENCE.format(value=value))
        reference = parsed

    path = reference.path
    namespace = reference.explicit_namespace

    if namespace is not None:
        if len(path) < 3:
            return Unresolved(reference, f"'{namespace.value}' references need a group and category")
        group, category = path[1], path[2]
        tokens = system.get_collection(namespace, group, category)
        if tokens is not None:
            return Resolved(namespace, group, category, tokens)
        return Unresolved(reference, f"no {namespace.value} collection '{group}.{category}'")

    if len(path) < 2:
        return Unresolved(reference, "a group and category are required")

    group, category = path[0], path[1]
    for candidate in _FALLBACK_ORDER:
        tokens = system.get_collection(candidate, group, category)
        if tokens is not None:
            return Resolved(candidate, group, category, tokens)

    return Unresolved(reference, f"no collection '{group}.{category}' in primitives or semanticTokens")


def find_token(system: DesignSystem, value: str | Reference) -> TokenLocation | None:
    """
    Walk a token-level reference to the token it addresses.

    Accepts ``{<namespace>.<group>.<category>.<token>}`` and the
    implicit ``{<group>.<category>.<token>}`` form.

    Returns:
        TokenLocation or None if nothing matches
    """
    reference = value if isinstance(value, Reference) else parse_value(value)
    if not isinstance(reference, Reference):
        return None

    path = reference.path
    namespace = reference.explicit_namespace
    if namespace is not None:
        candidates: tuple[Namespace, ...] = (namespace,)
        path = path[1:]
    else:
        candidates = _FALLBACK_ORDER

    if len(path) != 3:
        return None

    group, category, token = path
    for candidate in candidates:
        tokens = system.get_collection(candidate, group, category)
        if tokens is not None and token in tokens:
            return TokenLocation(candidate, group, category, token, tokens[token])
    return None
