"""
Core primitives - naming transforms and reference resolution.

These are the invariants every emitter composes on:
- to_kebab_case / to_pascal_case: the naming transform
- parse_value: typed split between literals and references
- resolve_shallow: leaf-only resolution to a var() handle
- resolve_collection: graph-walk resolution to a token collection
"""

from chuk_mcp_design.core.naming import (
    class_name,
    to_identifier,
    to_kebab_case,
    to_pascal_case,
    variable_name,
)
from chuk_mcp_design.core.references import (
    LiteralValue,
    Reference,
    Resolved,
    TokenLocation,
    Unresolved,
    find_token,
    is_reference,
    parse_value,
    resolve_collection,
    resolve_shallow,
)

__all__ = [
    # Naming
    "class_name",
    "to_identifier",
    "to_kebab_case",
    "to_pascal_case",
    "variable_name",
    # References
    "LiteralValue",
    "Reference",
    "Resolved",
    "TokenLocation",
    "Unresolved",
    "find_token",
    "is_reference",
    "parse_value",
    "resolve_collection",
    "resolve_shallow",
]
