"""
Scale catalog - the table of standard scales.

Definitions are YAML templates; the catalog turns them into Scale objects
on request.
"""

from chuk_mcp_scales.catalog.loader import ScaleCatalog

__all__ = [
    "ScaleCatalog",
]
