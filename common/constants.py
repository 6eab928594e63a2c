"""
Geodetic Constants for Geodesic Shape Construction.

This module provides the constants used by the spike and wedge builders,
each carrying its uncertainty, unit and source.

References
----------
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
- Nautical mile: IEEE/ASTM SI 10-2016
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class Constant:
    """A constant with uncertainty and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    uncertainty : float
        The standard uncertainty (1-sigma) of the constant.
    unit : str
        The SI unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    uncertainty: float
    unit: str
    source: str
    description: str


class GeodesicConstants:
    """Registry of constants used for geodesic shape construction.

    Earth Geometry (WGS84)
    ----------------------
    These constants define the reference ellipsoid on which every
    spike and wedge is computed.

    Construction Tolerances
    -----------------------
    The densification step and the distance epsilon shared by the
    spike and wedge builders.
    """

    # =========================================================================
    # WGS84 Ellipsoid Parameters
    # Reference: NIMA TR8350.2, Third Edition, 2000
    # =========================================================================

    EARTH_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="WGS84, NIMA TR8350.2",
        description="Semi-major axis (equatorial radius) of WGS84 ellipsoid"
    )

    EARTH_FLATTENING: Final[Constant] = Constant(
        value=1.0 / 298.257223563,
        uncertainty=0.0,  # Defined exactly
        unit="dimensionless",
        source="WGS84, NIMA TR8350.2",
        description="Flattening of WGS84 ellipsoid: f = (a - b) / a"
    )

    # =========================================================================
    # Construction Tolerances
    # =========================================================================

    DENSIFY_STEP: Final[Constant] = Constant(
        value=50_000.0,
        uncertainty=0.0,
        unit="m",
        source="Geodesic shape construction",
        description="Along-path spacing of intermediate spike vertices"
    )

    DISTANCE_EPSILON: Final[Constant] = Constant(
        value=1e-5,
        uncertainty=0.0,
        unit="m",
        source="Geodesic shape construction",
        description="Minimum admissible distance and duplicate-vertex guard"
    )

    # =========================================================================
    # Linear Unit Conversion
    # =========================================================================

    NAUTICAL_MILE_TO_M: Final[Constant] = Constant(
        value=1852.0,
        uncertainty=0.0,  # Defined exactly
        unit="m per nmi",
        source="IEEE/ASTM SI 10-2016",
        description="Conversion factor from nautical miles to meters; "
                    "reference value for the unit registry's nautical_mile"
    )
