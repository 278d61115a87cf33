#!/usr/bin/env python3
"""
Async Scales MCP Server using chuk-mcp-server

This server provides MCP tools for computing musical scales from a tonic
and an interval pattern, with sharp or flat spelling chosen per key.

The server provides tools for:
- Chromatic scales in sharp, flat or key-appropriate spelling
- Single interval steps (half step, whole step, augmented second)
- Scales from raw patterns like 'MMmMMMm'
- Named scales from the catalog (major, dorian, harmonic-minor, ...)
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
CATALOG_LIBRARY_PATH = Path(__file__).parent / "catalog" / "library"

# Create catalog
scale_catalog = ScaleCatalog(
    library_path=CATALOG_LIBRARY_PATH,
    project_path=SCALES_DIR,
)

# Register all tools
scale_tools = register_scale_tools(mcp, scale_catalog)

# Export tool functions for direct access
music_chromatic_scale = scale_tools["music_chromatic_scale"]
music_step = scale_tools["music_step"]
music_scale = scale_tools["music_scale"]
music_named_scale = scale_tools["music_named_scale"]
music_list_scales = scale_tools["music_list_scales"]
music_describe_scale = scale_tools["music_describe_scale"]

logger.info("CHUK Scales MCP Server initialized")
logger.info(f"  Library path: {CATALOG_LIBRARY_PATH}")
logger.info(f"  Project scales dir: {SCALES_DIR}")
