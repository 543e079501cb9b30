"""
CHUK Design - design-token compiler and MCP server.

Resolves a three-tier token definition (primitives, semantic tokens,
utility classes) into synchronized build artifacts:
- Theme-aware CSS custom-property sheets
- Utility-class style sheets
- Typed TypeScript enumerations and plain JavaScript name lists
- An index.css import manifest
"""

__version__ = "0.1.0"
