"""
Query Functions over Geodesic Shapes.

These classes are the row-level functions a query engine calls with
nullable scalar arguments:

- ST_BearingLine(x, y, bearing, distance[, linear_unit]) -> Polyline
- ST_Wedge(x, y, bearing, distance, linear_unit, left_bearing, right_bearing) -> Polygon
- OidIncrement() -> next int32

A null argument yields a null result and a warning in the log, never an
exception. Invalid non-null arguments (for instance a distance below the
construction epsilon) raise ValueError from the geometry builders.
"""

import threading
from typing import Optional

from common.logging_config import get_logger, log_arguments_null
from common.types import Point, Polygon, Polyline
from common.units import resolve_linear_unit, to_meters
from spatial_functions.shapes import build_spike, build_wedge


def distance_in_meters(distance: float, linear_unit: Optional[str], logger) -> float:
    """Convert a distance given in a linear unit code to meters.

    Unknown unit codes are logged and the distance is taken as meters.
    """
    if linear_unit is not None and resolve_linear_unit(linear_unit) is None:
        logger.warning(f"Unknown linear unit {linear_unit!r}; distance is taken as meters")
        return float(distance)
    return to_meters(distance, linear_unit)


class ST_BearingLine:
    """Bearing line from POINT (x y) along a bearing for a distance.

    Example: ``ST_BearingLine(1, 2, 45.1, 150)`` is the geodesic line from
    POINT (1 2) with a bearing of 45.1 degrees and a length of 150 meters.
    """

    name = "ST_BearingLine"
    _logger = get_logger("ST_BearingLine")

    def evaluate(
        self,
        x: Optional[float],
        y: Optional[float],
        bearing: Optional[float],
        distance: Optional[float],
        linear_unit: Optional[str] = None
    ) -> Optional[Polyline]:
        if None in (x, y, bearing, distance):
            log_arguments_null(self._logger)
            return None

        distance_m = distance_in_meters(distance, linear_unit, self._logger)

        # Construct the bearing line
        from_point = Point(x, y)
        return build_spike(from_point, bearing, distance_m)


class ST_Wedge:
    """Wedge polygon from POINT (x y) around a bearing.

    Example: ``ST_Wedge(1, 2, 17.05, 150, 'NM', 7.12, 27.79)`` is the wedge
    from POINT (1 2) with a center bearing of 17.05 degrees, a radius of
    150 nautical miles, a left bearing of 7.12 and a right bearing of 27.79.
    """

    name = "ST_Wedge"
    _logger = get_logger("ST_Wedge")

    def evaluate(
        self,
        x: Optional[float],
        y: Optional[float],
        bearing: Optional[float],
        distance: Optional[float],
        linear_unit: Optional[str],
        left_bearing: Optional[float],
        right_bearing: Optional[float]
    ) -> Optional[Polygon]:
        if None in (x, y, bearing, distance, linear_unit, left_bearing, right_bearing):
            log_arguments_null(self._logger)
            return None

        distance_m = distance_in_meters(distance, linear_unit, self._logger)

        # Construct the wedge
        from_point = Point(x, y)
        return build_wedge(from_point, bearing, distance_m, left_bearing, right_bearing)


class OidIncrement:
    """Returns the next incremented int32 on every call.

    The counter is per instance and starts at 1. Past the int32 maximum
    it wraps to the int32 minimum.
    """

    name = "incr"

    def __init__(self):
        self._counter = 0
        self._lock = threading.Lock()

    def evaluate(self) -> int:
        with self._lock:
            self._counter += 1
            if self._counter > 2**31 - 1:
                self._counter = -2**31
            return self._counter
