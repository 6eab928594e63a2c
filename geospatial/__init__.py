"""
Geospatial Module for Geodesic Shape Construction.

All Earth-surface calculations MUST originate from this module. No other
package may implement geodesic calculations independently.

This module provides:
- WGS84 ellipsoid model
- Geodesic direct/inverse problems (globally valid)
- Densified geodesic spikes
- Geodesic wedges (sectors)
"""

from geospatial.coordinate_models import (
    EllipsoidParameters,
    WGS84Ellipsoid,
)

from geospatial.distance_calculations import (
    GeodesicPath,
    GeodesicResult,
    GeodesicSolver,
    GeodesicSolverError,
    default_solver,
    geodesic_inverse,
    geodesic_distance,
)

from geospatial.spikes import (
    GeodesicShapeConfig,
    SpikeBuilder,
    densify_distances,
)

from geospatial.wedges import (
    SpikeLeg,
    WedgeBuilder,
)

__all__ = [
    # Ellipsoid
    "EllipsoidParameters",
    "WGS84Ellipsoid",
    # Solver
    "GeodesicPath",
    "GeodesicResult",
    "GeodesicSolver",
    "GeodesicSolverError",
    "default_solver",
    "geodesic_inverse",
    "geodesic_distance",
    # Shapes
    "GeodesicShapeConfig",
    "SpikeBuilder",
    "densify_distances",
    "SpikeLeg",
    "WedgeBuilder",
]
