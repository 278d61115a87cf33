"""
MCP tool implementations.

Tools are organized by domain:
- scales - Chromatic scales, interval steps, pattern and named scales
"""

from chuk_mcp_scales.tools.scales import register_scale_tools

__all__ = [
    "register_scale_tools",
]
