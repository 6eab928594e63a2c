"""
Geometry Value Types for Geodesic Shapes.

This module defines the point, polyline and polygon containers returned
by the spike and wedge builders. They are deliberately minimal: ordered
vertex storage, path/ring construction, and vertex access.

Design Rationale
----------------
Using typed dataclasses instead of raw arrays provides:
1. Self-documenting code - x is longitude, y is latitude
2. Validation at construction time
3. Exact vertex identity (origin and destination are stored verbatim)
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional
import math

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Point:
    """A geographic position on the WGS84 ellipsoid.

    Attributes
    ----------
    x : float
        Longitude in DEGREES. Stored as given (not normalised).
    y : float
        Latitude in DEGREES. Range: [-90, 90].

    Examples
    --------
    >>> origin = Point(-158.41586225679893, 27.668196685574735)
    >>> origin.longitude, origin.latitude
    (-158.41586225679893, 27.668196685574735)
    """
    x: float  # longitude, degrees
    y: float  # latitude, degrees

    def __post_init__(self):
        """Validate coordinate values."""
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise ValueError(f"Point coordinates must be finite, got ({self.x}, {self.y})")
        if not -90.0 <= self.y <= 90.0:
            raise ValueError(
                f"Latitude {self.y} out of range [-90, 90]. "
                f"Did you swap x (longitude) and y (latitude)?"
            )

    @property
    def longitude(self) -> float:
        return self.x

    @property
    def latitude(self) -> float:
        return self.y


def _points_to_array(points: List[Point]) -> NDArray[np.float64]:
    """Stack points into an (N, 2) array of lon/lat."""
    if not points:
        return np.empty((0, 2), dtype=np.float64)
    return np.array([(p.x, p.y) for p in points], dtype=np.float64)


@dataclass
class Polyline:
    """An ordered collection of paths, each an ordered list of points.

    A path is opened with `start_path` and extended with `line_to`.
    Vertex order encodes the direction of travel.
    """
    paths: List[List[Point]] = field(default_factory=list)

    def start_path(self, point: Point) -> None:
        """Open a new path at ``point``."""
        self.paths.append([point])

    def line_to(self, point: Point) -> None:
        """Append ``point`` to the current path."""
        if not self.paths:
            raise ValueError("No open path; call start_path first")
        self.paths[-1].append(point)

    @property
    def points(self) -> List[Point]:
        """All vertices across paths, in order."""
        return [p for path in self.paths for p in path]

    @property
    def point_count(self) -> int:
        return sum(len(path) for path in self.paths)

    @property
    def is_empty(self) -> bool:
        return self.point_count == 0

    def get_point(self, index: int) -> Point:
        """Get a vertex by flat index (negative indices count from the end)."""
        return self.points[index]

    @property
    def start_point(self) -> Optional[Point]:
        return self.paths[0][0] if self.paths else None

    @property
    def end_point(self) -> Optional[Point]:
        return self.paths[-1][-1] if self.paths else None

    def to_array(self) -> NDArray[np.float64]:
        """Vertices as an (N, 2) array of lon/lat in degrees."""
        return _points_to_array(self.points)


@dataclass
class Polygon:
    """An ordered collection of rings.

    Rings are built by appending vertices in insertion order; winding
    direction is whatever that order produces. `close_rings` makes the
    last vertex of every ring equal to its first.
    """
    rings: List[List[Point]] = field(default_factory=list)

    @classmethod
    def empty(cls) -> 'Polygon':
        """The explicitly empty polygon."""
        return cls()

    def start_ring(self, point: Point) -> None:
        """Open a new ring at ``point``."""
        self.rings.append([point])

    def line_to(self, point: Point) -> None:
        """Append ``point`` to the current ring."""
        if not self.rings:
            raise ValueError("No open ring; call start_ring first")
        self.rings[-1].append(point)

    def add_path(
        self,
        points: Iterable[Point],
        reverse: bool = False,
        skip_first: bool = False
    ) -> None:
        """Extend the current ring with a sequence of points.

        Parameters
        ----------
        points : iterable of Point
            Vertices to append. Opens a ring when none is open.
        reverse : bool
            Traverse ``points`` from last to first.
        skip_first : bool
            Drop the first vertex of the (possibly reversed) sequence,
            used when it coincides with the current ring end.

        A vertex equal to the current ring end is not appended, so the
        ring never holds consecutive duplicates.
        """
        sequence = list(points)
        if reverse:
            sequence.reverse()
        if skip_first:
            sequence = sequence[1:]
        for point in sequence:
            if self.rings and self.rings[-1][-1] == point:
                continue
            if self.rings:
                self.line_to(point)
            else:
                self.start_ring(point)

    def close_rings(self) -> None:
        """Ensure first == last vertex on every non-empty ring."""
        for ring in self.rings:
            if ring and ring[0] != ring[-1]:
                ring.append(ring[0])

    @property
    def points(self) -> List[Point]:
        return [p for ring in self.rings for p in ring]

    @property
    def point_count(self) -> int:
        return sum(len(ring) for ring in self.rings)

    @property
    def is_empty(self) -> bool:
        return self.point_count == 0

    @property
    def is_closed(self) -> bool:
        """True when every ring has at least 4 vertices and first == last."""
        return bool(self.rings) and all(
            len(ring) >= 4 and ring[0] == ring[-1] for ring in self.rings
        )

    def get_point(self, index: int) -> Point:
        return self.points[index]

    def to_array(self) -> NDArray[np.float64]:
        """Vertices as an (N, 2) array of lon/lat in degrees."""
        return _points_to_array(self.points)
