"""
Geodesic Wedges (Sectors).

A wedge is a closed pie-slice polygon on the ellipsoid: two geodesic
radii from a common origin (left and right bearing) joined at the far
end by an arc that passes through the end of the center-bearing radius.

Ring Layout
-----------
    origin -> left radius -> left end
           -> connector   -> center end
           -> connector   -> right end
           -> right radius (reversed) -> origin

Construction is all-or-nothing. Each radius and connector is a leg that
is either present or absent; the first absent leg turns the whole result
into `Polygon.empty()`.
"""

from dataclasses import dataclass
from typing import Optional

from pyproj.exceptions import GeodError

from common.logging_config import get_logger
from common.types import Point, Polygon, Polyline
from geospatial.distance_calculations import GeodesicSolver, GeodesicSolverError
from geospatial.spikes import (
    CONNECTOR_STRAIGHT,
    GeodesicShapeConfig,
    SpikeBuilder,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class SpikeLeg:
    """Outcome of building one leg of a wedge.

    Attributes
    ----------
    name : str
        Which leg ("left", "center", "right" or a connector).
    spike : Polyline, optional
        The leg geometry, or None when the leg could not be formed.
    reason : str
        Why the leg is absent; empty when present.
    """
    name: str
    spike: Optional[Polyline] = None
    reason: str = ""

    @property
    def present(self) -> bool:
        return self.spike is not None and not self.spike.is_empty

    @property
    def endpoint(self) -> Point:
        return self.spike.end_point

    @classmethod
    def absent(cls, name: str, reason: str) -> 'SpikeLeg':
        return cls(name=name, spike=None, reason=reason)


class WedgeBuilder:
    """Builds closed sector polygons from three geodesic radii.

    Parameters
    ----------
    config : GeodesicShapeConfig, optional
        Densification settings and connector style.
    solver : GeodesicSolver, optional
        Direct/inverse solver. Defaults to the shared WGS84 solver.

    Examples
    --------
    >>> builder = WedgeBuilder()
    >>> wedge = builder.create_wedge(Point(0.0, 0.0), 45.0, 10_000, 35.0, 55.0)
    >>> wedge.is_closed
    True
    """

    def __init__(
        self,
        config: Optional[GeodesicShapeConfig] = None,
        solver: Optional[GeodesicSolver] = None
    ):
        self.config = config or GeodesicShapeConfig()
        self.spikes = SpikeBuilder(self.config, solver)

    def create_wedge(
        self,
        origin: Point,
        center_bearing_deg: float,
        distance_m: float,
        left_bearing_deg: float,
        right_bearing_deg: float
    ) -> Polygon:
        """Create a wedge polygon.

        Parameters
        ----------
        origin : Point
            Apex of the wedge, stored verbatim as the first ring vertex.
        center_bearing_deg : float
            Bearing of the radius whose end the far arc passes through.
        distance_m : float
            Radius of the wedge in meters, at least `epsilon_m`.
        left_bearing_deg, right_bearing_deg : float
            Bearings of the two bounding radii.

        Returns
        -------
        Polygon
            A single closed ring, or `Polygon.empty()` when any leg
            could not be formed.

        Raises
        ------
        ValueError
            If origin is missing, or distance is non-finite or below epsilon.
        """
        if origin is None:
            raise ValueError("The from point must not be null!")
        self.spikes.check_distance(distance_m)

        wedge = Polygon()

        left = self._radius("left", origin, left_bearing_deg, distance_m)
        if not left.present:
            return self._abort(left)
        wedge.add_path(left.spike.points)

        center = self._radius("center", origin, center_bearing_deg, distance_m)
        if not center.present:
            return self._abort(center)
        left_to_center = self._connector("left-center", left.endpoint, center.endpoint)
        if not left_to_center.present:
            return self._abort(left_to_center)
        wedge.add_path(left_to_center.spike.points, skip_first=True)

        right = self._radius("right", origin, right_bearing_deg, distance_m)
        if not right.present:
            return self._abort(right)
        center_to_right = self._connector(
            "center-right", left_to_center.endpoint, right.endpoint
        )
        if not center_to_right.present:
            return self._abort(center_to_right)
        wedge.add_path(center_to_right.spike.points, skip_first=True)
        wedge.add_path(right.spike.points, reverse=True, skip_first=True)

        wedge.close_rings()

        logger.debug(
            f"Wedge with bearings {left_bearing_deg:.6f}/{center_bearing_deg:.6f}/"
            f"{right_bearing_deg:.6f} deg over {distance_m:.3f} m "
            f"has {wedge.point_count} vertices"
        )
        return wedge

    def _radius(
        self,
        name: str,
        origin: Point,
        bearing_deg: float,
        distance_m: float
    ) -> SpikeLeg:
        try:
            spike = self.spikes.create_from_bearing(origin, bearing_deg, distance_m)
        except (GeodesicSolverError, GeodError) as e:
            return SpikeLeg.absent(name, str(e))
        return self._leg(name, spike)

    def _connector(self, name: str, start: Point, end: Point) -> SpikeLeg:
        if self.config.connector == CONNECTOR_STRAIGHT:
            spike = Polyline()
            spike.start_path(start)
            spike.line_to(end)
            return SpikeLeg(name=name, spike=spike)

        try:
            spike = self.spikes.create_between_points(start, end)
        except (GeodesicSolverError, GeodError) as e:
            return SpikeLeg.absent(name, str(e))
        return self._leg(name, spike)

    @staticmethod
    def _leg(name: str, spike: Polyline) -> SpikeLeg:
        if spike.is_empty:
            return SpikeLeg.absent(name, "spike has no vertices")
        return SpikeLeg(name=name, spike=spike)

    @staticmethod
    def _abort(leg: SpikeLeg) -> Polygon:
        logger.warning(f"Wedge cannot be formed: {leg.name} leg is absent ({leg.reason})")
        return Polygon.empty()
