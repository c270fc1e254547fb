"""
Pydantic models for the scale system.

This module provides:
- ScaleDefinition: Named interval pattern from the catalog
- ScaleMetadata: Listing entry for a catalog scale
"""

from chuk_mcp_scales.models.scale import ScaleDefinition, ScaleMetadata

__all__ = [
    "ScaleDefinition",
    "ScaleMetadata",
]
