#!/usr/bin/env python3
"""
Async Design Token MCP Server using chuk-mcp-server

This server provides MCP tools for turning a design token definition
into ready-to-ship theme assets. Definitions follow the shadcn/ui idea:
a starter library ships with the package, and you copy it into your
project to own and customize it.

The server provides tools for:
- Listing and describing design systems
- Validating token graphs before generation
- Resolving token references
- Previewing and writing CSS, TypeScript and name-list artifacts
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_design.constants import BASE_PATH_ENV, OUTPUT_DIRNAME, SYSTEMS_DIRNAME
from chuk_mcp_design.systems import DesignSystemLoader
from chuk_mcp_design.tools import register_design_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-design")

# Paths - project definitions and output live under the base path
BASE_PATH = Path(os.environ.get(BASE_PATH_ENV, Path.cwd()))
SYSTEMS_DIR = BASE_PATH / SYSTEMS_DIRNAME
OUTPUT_DIR = BASE_PATH / OUTPUT_DIRNAME
LIBRARY_PATH = Path(__file__).parent / "systems" / "library"

# Create loader
design_loader = DesignSystemLoader(
    library_path=LIBRARY_PATH,
    project_path=SYSTEMS_DIR,
)

# Register all tools
design_tools = register_design_tools(mcp, design_loader, OUTPUT_DIR)

# Export tool functions for direct access
design_list_systems = design_tools["design_list_systems"]
design_describe_system = design_tools["design_describe_system"]
design_validate = design_tools["design_validate"]
design_resolve_reference = design_tools["design_resolve_reference"]
design_preview_artifact = design_tools["design_preview_artifact"]
design_generate = design_tools["design_generate"]
design_copy_system_to_project = design_tools["design_copy_system_to_project"]

logger.info("CHUK Design MCP Server initialized")
logger.info(f"  Library path: {LIBRARY_PATH}")
logger.info(f"  Design systems dir: {SYSTEMS_DIR}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
