"""
Entry points for spike and wedge construction.

Both functions accept plain numbers and points and return geometry
value objects. Distances are in meters; unit conversion belongs to the
caller (see `spatial_functions.functions`).
"""

from typing import Optional, Union

from common.types import Point, Polygon, Polyline
from geospatial.spikes import SpikeBuilder
from geospatial.wedges import WedgeBuilder

# Builders hold no per-call state and are shared between callers
_SPIKE_BUILDER = SpikeBuilder()
_WEDGE_BUILDER = WedgeBuilder()


def build_spike(
    origin: Point,
    bearing_or_destination: Union[float, Point],
    distance_m: Optional[float] = None
) -> Polyline:
    """Build a densified geodesic spike.

    Parameters
    ----------
    origin : Point
        Start of the spike.
    bearing_or_destination : float or Point
        A bearing in degrees (requires ``distance_m``) or the end point.
    distance_m : float, optional
        Length in meters when a bearing is given. Must be omitted when a
        destination point is given.

    Returns
    -------
    Polyline
        The spike.
    """
    if isinstance(bearing_or_destination, Point):
        if distance_m is not None:
            raise ValueError("A distance cannot be combined with a destination point")
        return _SPIKE_BUILDER.create_between_points(origin, bearing_or_destination)

    if bearing_or_destination is None:
        raise ValueError("A bearing or a destination point is required")
    if distance_m is None:
        raise ValueError("A distance is required when building a spike from a bearing")
    return _SPIKE_BUILDER.create_from_bearing(origin, bearing_or_destination, distance_m)


def build_wedge(
    origin: Point,
    center_bearing_deg: float,
    distance_m: float,
    left_bearing_deg: float,
    right_bearing_deg: float
) -> Polygon:
    """Build a geodesic wedge; see `WedgeBuilder.create_wedge`."""
    return _WEDGE_BUILDER.create_wedge(
        origin, center_bearing_deg, distance_m, left_bearing_deg, right_bearing_deg
    )
