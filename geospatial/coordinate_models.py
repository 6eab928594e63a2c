"""
Ellipsoid Model for Geodesic Calculations.

This module defines the reference ellipsoid on which every spike and
wedge is constructed. All shapes assume a non-planar Earth using the
WGS84 reference ellipsoid.

Scientific Context
------------------
Domain: Geodesy, Earth geometry
Model: WGS84 reference ellipsoid (not spherical approximation)

Why Simpler Models Are Invalid
------------------------------
1. Spherical Earth assumption: Introduces up to 0.3% error in distances,
   which for a 200 nautical mile wedge radius is more than a kilometer.

2. Planar/Cartesian approximation: Straight lines in longitude/latitude
   space are not geodesics. The error grows with distance and latitude.

References
----------
- NIMA TR8350.2: WGS84 parameters
- Karney, C.F.F. (2013). Algorithms for geodesics. Journal of Geodesy, 87(1), 43-55.
"""

from dataclasses import dataclass

from pyproj import Geod

from common.constants import GeodesicConstants


@dataclass(frozen=True)
class EllipsoidParameters:
    """Parameters defining a reference ellipsoid.

    Attributes
    ----------
    a : float
        Semi-major axis (equatorial radius) in meters.
    f : float
        Flattening: f = (a - b) / a
    name : str
        Identifier for the ellipsoid.

    Derived Parameters
    ------------------
    b : float
        Semi-minor axis (polar radius) in meters.
    e2 : float
        First eccentricity squared: e² = (a² - b²) / a²
    """
    a: float
    f: float
    name: str

    @property
    def b(self) -> float:
        """Semi-minor axis in meters."""
        return self.a * (1 - self.f)

    @property
    def e2(self) -> float:
        """First eccentricity squared."""
        return self.f * (2 - self.f)

    def to_geod(self) -> Geod:
        """Build the pyproj geodesic calculator for this ellipsoid."""
        return Geod(a=self.a, f=self.f)


# WGS84 ellipsoid - the standard reference for this system
WGS84Ellipsoid = EllipsoidParameters(
    a=GeodesicConstants.EARTH_SEMI_MAJOR_AXIS.value,
    f=GeodesicConstants.EARTH_FLATTENING.value,
    name="WGS84"
)
