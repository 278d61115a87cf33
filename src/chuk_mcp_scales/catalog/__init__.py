"""
Scale catalog - named interval patterns.

Scales are plain YAML files: a name, a pattern of interval codes,
and optional aliases and tags. Projects can add their own or override
the built-in ones.
"""

from chuk_mcp_scales.catalog.loader import ScaleCatalog

__all__ = [
    "ScaleCatalog",
]
