"""
Calling layer for geodesic shapes.

Null-argument short-circuiting, linear unit conversion and the
row-level query functions live here; the geometry itself is built by
the geospatial package.
"""

from spatial_functions.shapes import build_spike, build_wedge
from spatial_functions.functions import (
    ST_BearingLine,
    ST_Wedge,
    OidIncrement,
    distance_in_meters,
)

__all__ = [
    "build_spike",
    "build_wedge",
    "ST_BearingLine",
    "ST_Wedge",
    "OidIncrement",
    "distance_in_meters",
]
