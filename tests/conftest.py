import math

import numpy as np
import pytest
from pyproj.exceptions import GeodError

from common.constants import GeodesicConstants
from common.types import Point
from geospatial.distance_calculations import GeodesicPath, GeodesicSolver


# Reference scenario: a wedge north-north-east of Hawaii
SCENARIO_LONGITUDE = -158.41586225679893
SCENARIO_LATITUDE = 27.668196685574735
SCENARIO_BEARING = 17.05277505911702
SCENARIO_DISTANCE_NM = 123.95472310931031


@pytest.fixture
def origin():
    return Point(SCENARIO_LONGITUDE, SCENARIO_LATITUDE)


@pytest.fixture
def scenario_distance_m():
    return SCENARIO_DISTANCE_NM * GeodesicConstants.NAUTICAL_MILE_TO_M.value


@pytest.fixture
def solver():
    return GeodesicSolver()


class NanPath(GeodesicPath):
    """A path whose positions are all non-finite."""

    def position_at(self, distance_m):
        return math.nan, math.nan

    def positions_at(self, distances_m):
        distances_m = np.asarray(distances_m, dtype=np.float64)
        return np.full(distances_m.shape, np.nan), np.full(distances_m.shape, np.nan)


class FailingSolver(GeodesicSolver):
    """WGS84 solver that fails for selected azimuths.

    Azimuths in ``nan_azimuths`` produce non-finite positions, azimuths
    in ``error_azimuths`` make the solver raise GeodError.
    """

    def __init__(self, nan_azimuths=(), error_azimuths=()):
        super().__init__()
        self.nan_azimuths = set(nan_azimuths)
        self.error_azimuths = set(error_azimuths)

    def solve_direct(self, origin, azimuth_deg, distance_m):
        if azimuth_deg in self.error_azimuths:
            raise GeodError("forward calculation failed")
        path = super().solve_direct(origin, azimuth_deg, distance_m)
        if azimuth_deg in self.nan_azimuths:
            return NanPath(path.geod, path.origin, path.azimuth_deg, path.total_distance)
        return path


@pytest.fixture
def failing_solver_factory():
    return FailingSolver
