import numpy as np
import pytest

from common.types import Point
from geospatial.coordinate_models import WGS84Ellipsoid
from geospatial.distance_calculations import (
    default_solver,
    geodesic_distance,
    geodesic_inverse,
)


def test_wgs84_parameters():
    assert WGS84Ellipsoid.a == 6_378_137.0
    assert WGS84Ellipsoid.b == pytest.approx(6_356_752.314245, abs=1e-6)
    assert WGS84Ellipsoid.e2 == pytest.approx(0.00669437999014, rel=1e-10)


def test_direct_along_equator(solver):
    path = solver.solve_direct(Point(0.0, 0.0), 90.0, 1_000_000)

    lon, lat = path.position_at(1_000_000)

    # Along the equator the geodesic is an arc of radius a
    assert lon == pytest.approx(np.degrees(1_000_000 / WGS84Ellipsoid.a), abs=1e-9)
    assert lat == pytest.approx(0.0, abs=1e-9)


def test_direct_azimuth_is_in_degrees(solver):
    path = solver.solve_direct(Point(10.0, 45.0), 0.0, 100_000)

    lon, lat = path.position_at(100_000)

    # Due north keeps the meridian
    assert lon == pytest.approx(10.0, abs=1e-9)
    assert lat > 45.0


def test_direct_then_inverse_recovers_distance(solver, origin):
    path = solver.solve_direct(origin, 17.05, 229_564.0)
    lon, lat = path.position_at(229_564.0)

    result = solver.inverse(origin, Point(lon, lat))

    assert result.distance_m == pytest.approx(229_564.0, abs=1e-6)
    assert result.azimuth_forward_deg == pytest.approx(17.05, abs=1e-9)


def test_inverse_path_reaches_destination(solver):
    a, b = Point(-158.4, 27.7), Point(-150.0, 35.0)

    path = solver.solve_inverse(a, b)
    lon, lat = path.position_at(path.total_distance)

    assert path.total_distance == pytest.approx(geodesic_distance(a, b))
    assert lon == pytest.approx(b.x, abs=1e-9)
    assert lat == pytest.approx(b.y, abs=1e-9)


def test_positions_at_matches_position_at(solver, origin):
    path = solver.solve_direct(origin, 250.0, 300_000)
    distances = np.array([50_000.0, 150_000.0, 250_000.0])

    lons, lats = path.positions_at(distances)

    for distance, lon, lat in zip(distances, lons, lats):
        assert (lon, lat) == pytest.approx(path.position_at(distance))


def test_positions_at_empty(solver, origin):
    lons, lats = solver.solve_direct(origin, 0.0, 10.0).positions_at(np.array([]))

    assert lons.size == 0 and lats.size == 0


def test_inverse_azimuths_are_normalised():
    result = geodesic_inverse(Point(0.0, 0.0), Point(-1.0, 0.0))

    assert result.azimuth_forward_deg == pytest.approx(270.0)
    assert 0.0 <= result.azimuth_back_deg < 360.0


def test_segment_lengths():
    solver = default_solver()
    vertices = np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0]])

    lengths = solver.segment_lengths(vertices)

    assert lengths.shape == (2,)
    assert lengths[0] == pytest.approx(geodesic_distance(Point(0.0, 0.0), Point(1.0, 0.0)))
    assert solver.segment_lengths(vertices[:1]).size == 0
