#!/usr/bin/env python3
"""
Async Scales MCP Server using chuk-mcp-server

This server provides MCP tools for working with musical scales. Scales are
interval patterns from a YAML catalog that you can copy into your project
and customize.

The server provides tools for:
- Listing and describing catalog scales on any root
- Classifying interval patterns (direction, chromatic, diatonic)
- Comparing scales and recognising modes and relative scales
- Locating notes in a scale
- Copying library scales into your project to customize
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_scales.catalog import ScaleCatalog
from chuk_mcp_scales.tools import register_scale_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-scales")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
SCALES_DIR = BASE_PATH / "scales"
LIBRARY_PATH = Path(__file__).parent / "catalog" / "library"

catalog = ScaleCatalog(
    library_path=LIBRARY_PATH,
    project_path=SCALES_DIR,
)

# Register all tools
scale_tools = register_scale_tools(mcp, catalog)

# Export tool functions for direct access
scale_list = scale_tools["scale_list"]
scale_describe = scale_tools["scale_describe"]
scale_classify = scale_tools["scale_classify"]
scale_compare = scale_tools["scale_compare"]
scale_find_note = scale_tools["scale_find_note"]
scale_identify = scale_tools["scale_identify"]
scale_copy_to_project = scale_tools["scale_copy_to_project"]

logger.info("CHUK Scales MCP Server initialized")
logger.info(f"  Library path: {LIBRARY_PATH}")
logger.info(f"  Scales dir: {SCALES_DIR}")
