"""
MCP tool implementations.

Tools are organized by domain:
- design - Design system discovery, validation and generation
"""

from chuk_mcp_design.tools.design import register_design_tools

__all__ = [
    "register_design_tools",
]
