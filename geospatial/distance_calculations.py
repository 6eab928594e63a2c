"""
Geodesic Direct and Inverse Problems on the WGS84 Ellipsoid.

This module is the boundary to the geodesic solver. It exposes the
direct problem (origin, azimuth, distance) and the inverse problem
(two points) as path objects that can be queried for the position at
any along-path distance.

Scientific Context
------------------
Domain: Geodesy, differential geometry on curved surfaces
Model: Geodesic (shortest path) on reference ellipsoid

Implementation
--------------
This module wraps the `pyproj` library, which uses the GeographicLib
algorithms by Charles Karney. These provide:
- Full double precision accuracy (better than 15 nm)
- Convergence for all point configurations including antipodal
- Numerical stability at all latitudes

All angles at this boundary are in DEGREES. Azimuths are measured
clockwise from true north.

References
----------
- Karney, C.F.F. (2013). Algorithms for geodesics. Journal of Geodesy, 87(1), 43-55.
- GeographicLib: https://geographiclib.sourceforge.io/
"""

from dataclasses import dataclass
from typing import Tuple
import numpy as np
from numpy.typing import NDArray

from pyproj import Geod

from common.types import Point
from geospatial.coordinate_models import WGS84Ellipsoid, EllipsoidParameters


class GeodesicSolverError(ValueError):
    """The solver produced no usable position for a requested distance."""


@dataclass
class GeodesicResult:
    """Result of an inverse geodesic calculation.

    Attributes
    ----------
    distance_m : float
        Geodesic (shortest path) distance in meters.
    azimuth_forward_deg : float
        Forward azimuth (direction from point 1 to point 2) in degrees,
        clockwise from north, in [0, 360).
    azimuth_back_deg : float
        Back azimuth (direction from point 2 to point 1) in degrees,
        clockwise from north, in [0, 360).
    """
    distance_m: float
    azimuth_forward_deg: float
    azimuth_back_deg: float


@dataclass(frozen=True)
class GeodesicPath:
    """A geodesic from an origin along a fixed initial azimuth.

    Instances are created by `GeodesicSolver` and are only meaningful
    for the call that requested them.

    Attributes
    ----------
    geod : pyproj.Geod
        The calculator for the ellipsoid the path lives on.
    origin : Point
        Start of the path.
    azimuth_deg : float
        Initial azimuth at the origin, degrees clockwise from north.
    total_distance : float
        Length of the path in meters.
    """
    geod: Geod
    origin: Point
    azimuth_deg: float
    total_distance: float

    def position_at(self, distance_m: float) -> Tuple[float, float]:
        """Longitude and latitude in degrees at an along-path distance."""
        lon, lat, _ = self.geod.fwd(
            self.origin.x, self.origin.y, self.azimuth_deg, distance_m
        )
        return float(lon), float(lat)

    def positions_at(
        self,
        distances_m: NDArray[np.float64]
    ) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        """Vectorised `position_at` for an array of along-path distances.

        Returns
        -------
        Tuple[ndarray, ndarray]
            (longitudes_deg, latitudes_deg)
        """
        distances_m = np.asarray(distances_m, dtype=np.float64)
        if distances_m.size == 0:
            return np.empty(0), np.empty(0)

        lons, lats, _ = self.geod.fwd(
            np.full(distances_m.shape, self.origin.x),
            np.full(distances_m.shape, self.origin.y),
            np.full(distances_m.shape, self.azimuth_deg),
            distances_m,
        )
        return np.asarray(lons, dtype=np.float64), np.asarray(lats, dtype=np.float64)


class GeodesicSolver:
    """Direct and inverse geodesic problems on a reference ellipsoid.

    The solver holds only an immutable `pyproj.Geod`, so one instance can
    be shared between concurrent callers.

    Examples
    --------
    >>> solver = GeodesicSolver()
    >>> path = solver.solve_direct(Point(0.0, 0.0), 90.0, 1_000_000)
    >>> lon, lat = path.position_at(1_000_000)
    >>> print(f"{lon:.4f}, {lat:.4f}")
    8.9832, 0.0000
    """

    def __init__(self, ellipsoid: EllipsoidParameters = WGS84Ellipsoid):
        self.ellipsoid = ellipsoid
        self._geod = ellipsoid.to_geod()

    def solve_direct(
        self,
        origin: Point,
        azimuth_deg: float,
        distance_m: float
    ) -> GeodesicPath:
        """Solve the direct geodesic problem.

        Parameters
        ----------
        origin : Point
            Starting point.
        azimuth_deg : float
            Forward azimuth in degrees (clockwise from north).
        distance_m : float
            Length of the path in meters.

        Returns
        -------
        GeodesicPath
            Path queryable for any along-path position.
        """
        return GeodesicPath(
            geod=self._geod,
            origin=origin,
            azimuth_deg=float(azimuth_deg),
            total_distance=float(distance_m),
        )

    def solve_inverse(self, origin: Point, destination: Point) -> GeodesicPath:
        """Solve the inverse geodesic problem.

        Given two points, find the geodesic that joins them.

        Parameters
        ----------
        origin, destination : Point
            End points of the geodesic.

        Returns
        -------
        GeodesicPath
            Path from origin whose `total_distance` is the separation.
        """
        result = self.inverse(origin, destination)
        return GeodesicPath(
            geod=self._geod,
            origin=origin,
            azimuth_deg=result.azimuth_forward_deg,
            total_distance=result.distance_m,
        )

    def inverse(self, point1: Point, point2: Point) -> GeodesicResult:
        """Distance and azimuths between two points.

        Notes
        -----
        For the WGS84 ellipsoid, this calculation is accurate to better
        than 15 nanometers for any pair of points.
        """
        az_forward_deg, az_back_deg, distance_m = self._geod.inv(
            point1.x, point1.y, point2.x, point2.y
        )

        return GeodesicResult(
            distance_m=float(distance_m),
            azimuth_forward_deg=float(az_forward_deg) % 360.0,
            azimuth_back_deg=float(az_back_deg) % 360.0,
        )

    def segment_lengths(self, vertices: NDArray[np.float64]) -> NDArray[np.float64]:
        """Geodesic length of each segment of a vertex sequence.

        Parameters
        ----------
        vertices : ndarray
            (N, 2) array of lon/lat in degrees.

        Returns
        -------
        ndarray
            (N - 1,) segment lengths in meters.
        """
        vertices = np.asarray(vertices, dtype=np.float64)
        if len(vertices) < 2:
            return np.empty(0, dtype=np.float64)

        _, _, distances = self._geod.inv(
            vertices[:-1, 0], vertices[:-1, 1], vertices[1:, 0], vertices[1:, 1]
        )
        return np.asarray(distances, dtype=np.float64)


# Shared solver for the WGS84 ellipsoid
_wgs84_solver = GeodesicSolver()


def default_solver() -> GeodesicSolver:
    """The process-wide WGS84 solver."""
    return _wgs84_solver


def geodesic_inverse(point1: Point, point2: Point) -> GeodesicResult:
    """Solve the inverse geodesic problem on WGS84.

    Examples
    --------
    >>> # New York to London
    >>> result = geodesic_inverse(Point(-74.0060, 40.7128), Point(-0.1278, 51.5074))
    >>> 5500_000 < result.distance_m < 5600_000
    True
    """
    return _wgs84_solver.inverse(point1, point2)


def geodesic_distance(point1: Point, point2: Point) -> float:
    """Geodesic distance in meters between two points on WGS84."""
    return geodesic_inverse(point1, point2).distance_m
