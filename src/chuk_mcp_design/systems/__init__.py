"""
Design system definitions - discovery and loading.

Definitions are plain YAML or JSON files with three sections:
primitives, semanticTokens and utilityClasses. The built-in library
ships a starter definition that can be copied into a project.
"""

from chuk_mcp_design.systems.loader import (
    DesignSystemLoader,
    load_design_system,
    parse_design_system,
)

__all__ = [
    "DesignSystemLoader",
    "load_design_system",
    "parse_design_system",
]
