"""
Densified Geodesic Spikes.

A spike is a polyline that approximates one geodesic on the ellipsoid,
either from an origin along a bearing for a distance, or between two
points.

Why Densify
-----------
Geodesics are curved in longitude/latitude space, so a single straight
segment between the end points drifts away from the true path as the
distance grows. Inserting a vertex every `densify_step_m` along the
geodesic bounds the chord-to-arc deviation independently of the total
length.

Exact End Points
----------------
The first vertex of every spike is the caller's origin object, not a
solver round-trip of it. A spike between two points also ends on the
caller's destination object.
"""

from dataclasses import dataclass
from typing import Optional
import math
import numpy as np
from numpy.typing import NDArray

from common.constants import GeodesicConstants
from common.logging_config import get_logger
from common.types import Point, Polyline
from geospatial.distance_calculations import (
    GeodesicPath,
    GeodesicSolver,
    GeodesicSolverError,
    default_solver,
)

logger = get_logger(__name__)


CONNECTOR_GEODESIC = "geodesic"
CONNECTOR_STRAIGHT = "straight"


@dataclass
class GeodesicShapeConfig:
    """Configuration for spike and wedge construction.

    Attributes
    ----------
    densify_step_m : float
        Along-path spacing of intermediate vertices in meters.
    epsilon_m : float
        Minimum admissible distance, also the margin that keeps the last
        densified vertex from duplicating the exact end point.
    connector : str
        How wedge radii are joined at the far end: "geodesic" densifies
        the connecting geodesic, "straight" adds only its end vertex.
    """
    densify_step_m: float = GeodesicConstants.DENSIFY_STEP.value
    epsilon_m: float = GeodesicConstants.DISTANCE_EPSILON.value
    connector: str = CONNECTOR_GEODESIC

    def __post_init__(self):
        if not self.densify_step_m > 0:
            raise ValueError("densify_step_m must be positive")
        if not self.epsilon_m > 0:
            raise ValueError("epsilon_m must be positive")
        if self.connector not in (CONNECTOR_GEODESIC, CONNECTOR_STRAIGHT):
            raise ValueError(
                f"Unknown connector {self.connector!r}; "
                f"expected {CONNECTOR_GEODESIC!r} or {CONNECTOR_STRAIGHT!r}"
            )


def densify_distances(
    total_distance_m: float,
    step_m: float,
    epsilon_m: float
) -> NDArray[np.float64]:
    """Along-path distances of the intermediate vertices of a spike.

    Returns step, 2*step, ... while ``distance + epsilon_m`` stays below
    ``total_distance_m``. The end point itself is never included.
    """
    if not math.isfinite(total_distance_m):
        raise ValueError(f"Cannot densify a geodesic of length {total_distance_m}")

    distances = []
    distance_along = step_m
    while distance_along + epsilon_m < total_distance_m:
        distances.append(distance_along)
        distance_along += step_m
    return np.asarray(distances, dtype=np.float64)


class SpikeBuilder:
    """Builds densified geodesic polylines.

    Parameters
    ----------
    config : GeodesicShapeConfig, optional
        Densification step and epsilon. Defaults are 50 km and 1e-5 m.
    solver : GeodesicSolver, optional
        Direct/inverse solver. Defaults to the shared WGS84 solver.

    Examples
    --------
    >>> builder = SpikeBuilder()
    >>> spike = builder.create_from_bearing(Point(0.0, 0.0), 45.0, 120_000)
    >>> spike.point_count
    4
    """

    def __init__(
        self,
        config: Optional[GeodesicShapeConfig] = None,
        solver: Optional[GeodesicSolver] = None
    ):
        self.config = config or GeodesicShapeConfig()
        self.solver = solver or default_solver()

    def create_from_bearing(
        self,
        origin: Point,
        bearing_deg: float,
        distance_m: float
    ) -> Polyline:
        """Create a spike from an origin along a bearing.

        Parameters
        ----------
        origin : Point
            Start point, stored verbatim as the first vertex.
        bearing_deg : float
            Azimuth in degrees, clockwise from north.
        distance_m : float
            Length of the spike in meters, at least `epsilon_m`.

        Returns
        -------
        Polyline
            Single-path polyline from origin to the geodesic end point.

        Raises
        ------
        ValueError
            If origin is missing, or distance is non-finite or below epsilon.
        GeodesicSolverError
            If the solver returns a non-finite position.
        """
        if origin is None:
            raise ValueError("The from point must not be null!")
        self.check_distance(distance_m)

        path = self.solver.solve_direct(origin, bearing_deg, distance_m)
        spike = self._densify(path, origin)
        lon, lat = path.position_at(distance_m)
        spike.line_to(self._checked_point(lon, lat, distance_m))

        logger.debug(
            f"Spike from bearing {bearing_deg:.6f} deg over {distance_m:.3f} m "
            f"has {spike.point_count} vertices"
        )
        return spike

    def create_between_points(self, origin: Point, destination: Point) -> Polyline:
        """Create a spike along the geodesic joining two points.

        Both end points are stored verbatim, so the last vertex is
        ``destination`` itself regardless of solver rounding.

        Raises
        ------
        ValueError
            If either point is missing.
        """
        if origin is None:
            raise ValueError("The from point must not be null!")
        if destination is None:
            raise ValueError("The to point must not be null!")

        path = self.solver.solve_inverse(origin, destination)
        spike = self._densify(path, origin)
        spike.line_to(destination)

        logger.debug(
            f"Spike between points over {path.total_distance:.3f} m "
            f"has {spike.point_count} vertices"
        )
        return spike

    def check_distance(self, distance_m: float) -> None:
        """Reject a missing, non-finite or sub-epsilon distance with ValueError."""
        if distance_m is None or not math.isfinite(distance_m):
            raise ValueError(f"The distance in meters must be finite! Got {distance_m}")
        if distance_m < self.config.epsilon_m:
            raise ValueError(
                f"The distance in meters must not be less than {self.config.epsilon_m:g}! "
                f"Got {distance_m}"
            )

    def _densify(self, path: GeodesicPath, origin: Point) -> Polyline:
        """Open a spike at the origin and add the intermediate vertices."""
        spike = Polyline()
        spike.start_path(origin)

        distances = densify_distances(
            path.total_distance, self.config.densify_step_m, self.config.epsilon_m
        )
        lons, lats = path.positions_at(distances)
        for distance_along, lon, lat in zip(distances, lons, lats):
            spike.line_to(self._checked_point(lon, lat, distance_along))
        return spike

    @staticmethod
    def _checked_point(lon: float, lat: float, distance_along: float) -> Point:
        if not (math.isfinite(lon) and math.isfinite(lat)):
            raise GeodesicSolverError(
                f"Solver returned no position at {distance_along:.3f} m along the geodesic"
            )
        return Point(float(lon), float(lat))
