"""
Artifact pair emitter - typed enumerations and plain name lists.

Every identifier list is emitted twice from one rendered sequence:

    // <group>/<category>-types.d.ts
    export const growwprimaryColorsPrimitiveTokens = [...] as const;
    export type growwprimaryColorsPrimitiveToken = typeof growwprimaryColorsPrimitiveTokens[number];

    // <group>/<category>-names.js
    export const growwprimaryColorsPrimitiveTokenNames = [...];

Rendering the sequence once and embedding it in both files keeps the
two artifacts textually identical.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import chain

from chuk_mcp_design.constants import EXPORT_STEMS, KIND_LABELS, Namespace
from chuk_mcp_design.core.naming import to_identifier, to_pascal_case


@dataclass(frozen=True)
class ArtifactPair:
    """The typed enumeration and plain list for one identifier sequence."""

    identifiers: tuple[str, ...]
    typed: str
    names: str


def sorted_unique(identifiers: Iterable[str]) -> list[str]:
    """Deduplicate and sort lexicographically."""
    return sorted(set(identifiers))


def aggregate(identifier_lists: Iterable[Iterable[str]]) -> list[str]:
    """Union several identifier lists, re-applying dedupe and sort."""
    return sorted_unique(chain.from_iterable(identifier_lists))


def render_sequence(identifiers: Iterable[str]) -> str:
    """Render identifiers as a two-space indented JSON array."""
    return json.dumps(list(identifiers), indent=2, ensure_ascii=False)


def export_names(
    namespace: Namespace,
    group: str | None = None,
    category: str | None = None,
) -> tuple[str, str, str]:
    """
    Build the exported symbol names.

    Args:
        namespace: Namespace the identifiers come from
        group: Group name, None for the global aggregate
        category: Category name, None for aggregates

    Returns:
        (typed array name, type alias name, name list name)
    """
    singular, plural = EXPORT_STEMS[namespace]
    qualifier = to_identifier(group) if group else ""
    if category:
        qualifier += to_pascal_case(category)
    return (qualifier + plural, qualifier + singular, f"{qualifier}{singular}Names")


def _header(kind: str, namespace: Namespace, group: str | None, category: str | None) -> str:
    label = KIND_LABELS[namespace]
    if group is None:
        return f"// Auto-generated aggregated {kind} for all {label}"
    if category is None:
        return f"// Auto-generated aggregated {kind} for {group} {label}"
    return f"// Auto-generated {kind} for {group} {label} ({category})"


def emit_artifact_pair(
    identifiers: Iterable[str],
    namespace: Namespace,
    group: str | None = None,
    category: str | None = None,
) -> ArtifactPair:
    """
    Emit the typed enumeration and plain list for an identifier list.

    Args:
        identifiers: Resolved identifiers (deduplicated and sorted here)
        namespace: Namespace the identifiers come from
        group: Group name; None for the global aggregate
        category: Category name; None for a group aggregate

    Returns:
        ArtifactPair with .d.ts and .js contents
    """
    ordered = sorted_unique(identifiers)
    sequence = render_sequence(ordered)
    array_name, type_name, names_name = export_names(namespace, group, category)

    typed = (
        f"{_header('types', namespace, group, category)}\n"
        f"export const {array_name} = {sequence} as const;\n"
        f"export type {type_name} = typeof {array_name}[number];\n"
    )
    names = (
        f"{_header('names', namespace, group, category)}\n"
        f"export const {names_name} = {sequence};\n"
    )
    return ArtifactPair(identifiers=tuple(ordered), typed=typed, names=names)
