"""Core geometric types for polyline representation.

This module defines the fundamental geometric types of the generation pass:
- Point: A 2D point in source (SVG, Y-down) space
- Polyline: An ordered sequence of points, closed or open
- Bounds: Axis-aligned bounding box of a polyline collection
- Offset: Translation applied to every point of a pass
- Alignment: Which reference point of the bounds maps to the origin
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from svg2librepcb.exceptions import GeometryError


class Alignment(str, Enum):
    """Reference point of the bounding box that is moved to the origin.

    - NONE: Keep the drawing coordinates as they are
    - CENTER: Center of the bounding box
    - TOP_LEFT: Top left corner (as seen in the SVG)
    - BOTTOM_LEFT: Bottom left corner (as seen in the SVG)
    """

    NONE = "none"
    CENTER = "center"
    TOP_LEFT = "top-left"
    BOTTOM_LEFT = "bottom-left"


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable. Equality is exact coordinate equality,
    which is what polyline closedness is based on.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)


@dataclass
class Polyline:
    """An ordered sequence of points approximating a path.

    A polyline is closed when its first and last points are equal.
    Closed polylines describe filled regions, open ones describe strokes.

    Attributes:
        points: List of points in drawing order
    """

    points: list[Point] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def is_empty(self) -> bool:
        """Check if the polyline has no points."""
        return not self.points

    def is_closed(self) -> bool:
        """Check if the first and last points are exactly equal.

        No epsilon is applied. An empty polyline is not closed.

        Returns:
            True if the polyline describes a closed region
        """
        if not self.points:
            return False
        return self.points[0] == self.points[-1]

    @classmethod
    def from_tuples(cls, coords: list[tuple[float, float]]) -> "Polyline":
        """Build a polyline from (x, y) tuples.

        Args:
            coords: Coordinate pairs in drawing order

        Returns:
            Polyline instance
        """
        return cls(points=[Point(float(x), float(y)) for x, y in coords])


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned bounding box.

    Attributes:
        x_min: Smallest x coordinate
        x_max: Largest x coordinate
        y_min: Smallest y coordinate
        y_max: Largest y coordinate
    """

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    def __post_init__(self) -> None:
        if self.x_min > self.x_max or self.y_min > self.y_max:
            raise GeometryError(
                f"Inverted bounds: x [{self.x_min}, {self.x_max}], "
                f"y [{self.y_min}, {self.y_max}]"
            )

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min


@dataclass(frozen=True, slots=True)
class Offset:
    """Translation applied to source coordinates before Y inversion."""

    dx: float = 0.0
    dy: float = 0.0
