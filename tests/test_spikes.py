import numpy as np
import pytest

from common.types import Point
from geospatial.distance_calculations import GeodesicSolverError
from geospatial.spikes import GeodesicShapeConfig, SpikeBuilder, densify_distances

STEP = 50_000.0
EPSILON = 1e-5


@pytest.fixture
def builder():
    return SpikeBuilder()


def test_densify_distances_stops_short_of_end():
    np.testing.assert_array_equal(
        densify_distances(229_564.6, STEP, EPSILON),
        [50_000.0, 100_000.0, 150_000.0, 200_000.0],
    )


def test_densify_distances_epsilon_guard_on_step_boundary():
    assert densify_distances(STEP, STEP, EPSILON).size == 0
    np.testing.assert_array_equal(densify_distances(2 * STEP, STEP, EPSILON), [STEP])
    # Within epsilon of a boundary: no near-duplicate before the exact end
    np.testing.assert_array_equal(densify_distances(2 * STEP + 5e-6, STEP, EPSILON), [STEP])


def test_spike_starts_at_origin_verbatim(builder, origin, solver):
    spike = builder.create_from_bearing(origin, 17.05, 229_564.0)

    assert spike.get_point(0) is origin
    assert len(spike.paths) == 1
    assert solver.inverse(origin, spike.end_point).distance_m == pytest.approx(229_564.0, abs=EPSILON)


@pytest.mark.parametrize("distance", [EPSILON, 1.0, 1_000.0, STEP - 1.0])
def test_short_spike_has_two_vertices(builder, origin, distance):
    spike = builder.create_from_bearing(origin, 45.0, distance)

    assert spike.point_count == 2


def test_spike_of_exactly_one_step_has_two_vertices(builder, origin):
    assert builder.create_from_bearing(origin, 45.0, STEP).point_count == 2


@pytest.mark.parametrize("distance, expected", [(2 * STEP, 3), (120_000.0, 4), (2 * STEP + 5e-6, 3)])
def test_spike_vertex_count(builder, origin, distance, expected):
    assert builder.create_from_bearing(origin, 300.0, distance).point_count == expected


def test_spike_vertices_lie_on_the_geodesic(builder, origin, solver):
    spike = builder.create_from_bearing(origin, 80.0, 500_000.0)

    # Every densified vertex is step * i from the origin along the bearing
    for i, vertex in enumerate(spike.points[1:-1], start=1):
        result = solver.inverse(origin, vertex)
        assert result.distance_m == pytest.approx(i * STEP, abs=1e-6)
        assert result.azimuth_forward_deg == pytest.approx(80.0, abs=1e-9)


def test_long_spike_curves_away_from_straight_line(builder):
    spike = builder.create_from_bearing(Point(0.0, 45.0), 90.0, 3_000_000.0)
    vertices = spike.to_array()

    # Heading due east at 45N is the northernmost point of the geodesic,
    # whereas a straight lon/lat line would stay on the parallel
    assert vertices[1:, 1].max() < 45.0
    assert np.all(np.diff(vertices[:, 1]) < 0)
    assert spike.point_count == 61


def test_custom_step(origin):
    builder = SpikeBuilder(GeodesicShapeConfig(densify_step_m=10_000.0))

    assert builder.create_from_bearing(origin, 0.0, 35_000.0).point_count == 5


@pytest.mark.parametrize("distance", [0.0, EPSILON / 2, -10.0])
def test_spike_rejects_sub_epsilon_distance(builder, origin, distance):
    with pytest.raises(ValueError, match="must not be less than"):
        builder.create_from_bearing(origin, 10.0, distance)


@pytest.mark.parametrize("distance", [float("nan"), float("inf"), float("-inf")])
def test_spike_rejects_non_finite_distance(builder, origin, distance):
    with pytest.raises(ValueError, match="must be finite"):
        builder.create_from_bearing(origin, 10.0, distance)


@pytest.mark.parametrize("total", [float("inf"), float("nan")])
def test_densify_distances_rejects_non_finite_length(total):
    with pytest.raises(ValueError, match="Cannot densify"):
        densify_distances(total, STEP, EPSILON)


def test_spike_rejects_missing_origin(builder):
    with pytest.raises(ValueError, match="from point"):
        builder.create_from_bearing(None, 10.0, 1_000.0)


def test_between_points_ends_on_destination_verbatim(builder):
    a = Point(-158.41586225679893, 27.668196685574735)
    b = Point(-150.123456789, 35.987654321)

    spike = builder.create_between_points(a, b)

    assert spike.get_point(0) is a
    assert spike.get_point(-1) is b
    assert spike.get_point(-1) == b


def test_between_points_densifies(builder, solver):
    a, b = Point(0.0, 0.0), Point(2.0, 0.0)
    total = solver.inverse(a, b).distance_m

    spike = builder.create_between_points(a, b)

    assert spike.point_count == int(total // STEP) + 2
    for vertex in spike.points[1:-1]:
        assert vertex.y == pytest.approx(0.0, abs=1e-9)


def test_between_coincident_points(builder):
    a = Point(5.0, 5.0)

    spike = builder.create_between_points(a, Point(5.0, 5.0))

    assert spike.point_count == 2


def test_between_points_rejects_missing_points(builder):
    with pytest.raises(ValueError, match="from point"):
        builder.create_between_points(None, Point(0.0, 0.0))
    with pytest.raises(ValueError, match="to point"):
        builder.create_between_points(Point(0.0, 0.0), None)


def test_non_finite_solver_output_raises(failing_solver_factory, origin):
    builder = SpikeBuilder(solver=failing_solver_factory(nan_azimuths={10.0}))

    with pytest.raises(GeodesicSolverError):
        builder.create_from_bearing(origin, 10.0, 1_000.0)


@pytest.mark.parametrize(
    "kwargs",
    [{"densify_step_m": 0.0}, {"epsilon_m": -1.0}, {"connector": "spline"}],
)
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        GeodesicShapeConfig(**kwargs)
