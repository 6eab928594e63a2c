"""
Common utilities and infrastructure for geodesic shape construction.

This package provides foundational components used across all modules:
- Geodetic constants with provenance
- Unit registry for linear distance conversion
- Geometry value types (Point, Polyline, Polygon)
- Logging infrastructure
"""

from common.constants import GeodesicConstants
from common.units import UnitRegistry, to_meters
from common.types import (
    Point,
    Polyline,
    Polygon,
)
from common.logging_config import get_logger, log_arguments_null

__all__ = [
    "GeodesicConstants",
    "UnitRegistry",
    "to_meters",
    "Point",
    "Polyline",
    "Polygon",
    "get_logger",
    "log_arguments_null",
]
