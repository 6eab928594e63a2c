"""
Geometric Consistency Checks for Geodesic Shapes.

This module verifies that spikes and wedges satisfy the properties the
builders promise.

Check Categories
----------------
1. End point identity (origin and destination stored verbatim)
2. Geodesic accuracy (spike length matches the requested distance)
3. Densification bound (no segment longer than the densify step)
4. Ring validity (wedge ring is closed)
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Any
import numpy as np

from common.logging_config import get_logger
from common.types import Point, Polygon, Polyline
from geospatial.distance_calculations import GeodesicSolver, default_solver
from geospatial.spikes import GeodesicShapeConfig


@dataclass
class ValidationResult:
    """Result of a validation check.

    Attributes
    ----------
    test_name : str
        Name of the check.
    passed : bool
        Whether the check passed.
    message : str
        Description of result.
    details : dict
        Additional details.
    """
    test_name: str
    passed: bool
    message: str
    details: Dict[str, Any]


class GeometryConsistencyChecker:
    """Checker for geometric consistency of spikes and wedges."""

    def __init__(
        self,
        config: Optional[GeodesicShapeConfig] = None,
        solver: Optional[GeodesicSolver] = None,
        strict_mode: bool = False,
        log_violations: bool = True
    ):
        """Initialize geometry checker.

        Parameters
        ----------
        config : GeodesicShapeConfig, optional
            Densify step the shapes were built with.
        solver : GeodesicSolver, optional
            Solver used to measure geodesic lengths.
        strict_mode : bool
            If True, raise ValueError on a failed check.
        log_violations : bool
            Whether to log failed checks.
        """
        self.config = config or GeodesicShapeConfig()
        self.solver = solver or default_solver()
        self.strict_mode = strict_mode
        self.log_violations = log_violations
        self._logger = get_logger("GeometryConsistencyChecker")

    def check_spike(
        self,
        spike: Polyline,
        origin: Point,
        distance_m: float,
        tolerance_m: float = 0.1
    ) -> List[ValidationResult]:
        """Run all checks that apply to a spike built from a bearing."""
        return [
            self._report(self.check_origin_preserved(spike.points, origin)),
            self._report(self.check_endpoint_distance(spike, origin, distance_m, tolerance_m)),
            self._report(self.check_vertex_spacing(spike.to_array())),
        ]

    def check_wedge(self, wedge: Polygon, origin: Point) -> List[ValidationResult]:
        """Run all checks that apply to a non-empty wedge."""
        return [
            self._report(self.check_origin_preserved(wedge.points, origin)),
            self._report(self.check_ring_closed(wedge)),
            self._report(self.check_vertex_spacing(wedge.to_array())),
        ]

    def check_origin_preserved(self, vertices: List[Point], origin: Point) -> ValidationResult:
        """Check that the first vertex is exactly the origin."""
        first = vertices[0] if vertices else None
        return ValidationResult(
            test_name="origin_preserved",
            passed=first == origin,
            message=f"First vertex {first} vs origin {origin}",
            details={'first_vertex': first, 'origin': origin}
        )

    def check_endpoint_distance(
        self,
        spike: Polyline,
        origin: Point,
        distance_m: float,
        tolerance_m: float
    ) -> ValidationResult:
        """Check the geodesic distance from origin to the last vertex."""
        if spike.is_empty:
            return ValidationResult(
                test_name="endpoint_distance",
                passed=False,
                message="Spike has no vertices",
                details={}
            )

        measured = self.solver.inverse(origin, spike.end_point).distance_m
        residual = measured - distance_m

        return ValidationResult(
            test_name="endpoint_distance",
            passed=abs(residual) <= tolerance_m,
            message=f"Endpoint distance residual {residual:.6e} m",
            details={
                'measured_m': measured,
                'expected_m': distance_m,
                'tolerance_m': tolerance_m,
            }
        )

    def check_vertex_spacing(
        self,
        vertices: np.ndarray,
        tolerance_m: float = 1e-3
    ) -> ValidationResult:
        """Check that no segment is longer than the densify step."""
        lengths = self.solver.segment_lengths(vertices)
        if lengths.size == 0:
            return ValidationResult(
                test_name="vertex_spacing",
                passed=True,
                message="Not enough vertices to check spacing",
                details={}
            )

        limit = self.config.densify_step_m + tolerance_m
        num_violations = int(np.sum(lengths > limit))

        return ValidationResult(
            test_name="vertex_spacing",
            passed=num_violations == 0,
            message=f"Vertex spacing check: {num_violations} violations",
            details={
                'max_segment_m': float(np.max(lengths)),
                'limit_m': limit,
                'num_violations': num_violations,
            }
        )

    def check_ring_closed(self, polygon: Polygon) -> ValidationResult:
        """Check that every ring ends on its first vertex."""
        return ValidationResult(
            test_name="ring_closed",
            passed=polygon.is_closed,
            message=f"Ring closure check over {len(polygon.rings)} ring(s)",
            details={'ring_sizes': [len(ring) for ring in polygon.rings]}
        )

    def _report(self, result: ValidationResult) -> ValidationResult:
        if not result.passed:
            if self.log_violations:
                self._logger.warning(f"GEOMETRY CHECK | {result.test_name} | FAIL | {result.message}")
            if self.strict_mode:
                raise ValueError(f"Geometry check {result.test_name} failed: {result.message}")
        return result
