"""
Pydantic models for the scale system.

This module provides:
- ScaleDefinition: Named interval pattern from the catalog
- ScaleResult: A pattern applied to a tonic
"""

from chuk_mcp_scales.models.scale import ScaleDefinition, ScaleResult

__all__ = [
    "ScaleDefinition",
    "ScaleResult",
]
