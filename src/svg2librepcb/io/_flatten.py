"""Internal Bezier curve flattening algorithms.

This is an internal module containing helper functions for the SVG reader.
Not intended for public use.
"""

import math

from svg2librepcb.domain import Point

# Subdivision stops here even if the curve is not flat yet
MAX_DEPTH = 16


def _distance_to_chord(point: Point, start: Point, end: Point) -> float:
    """Distance from a point to the line through start and end."""
    dx = end.x - start.x
    dy = end.y - start.y
    length = math.hypot(dx, dy)
    if length == 0.0:
        return math.hypot(point.x - start.x, point.y - start.y)
    return abs(dx * (start.y - point.y) - dy * (start.x - point.x)) / length


def _midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def flatten_quadratic(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    The curve deviates from its chord by at most half the distance of the
    control point to the chord, which is used as flatness measure.

    Args:
        points: List of 3 control points [p0, p1, p2]
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, including both endpoints
    """
    p0, p1, p2 = points

    if depth >= MAX_DEPTH or _distance_to_chord(p1, p0, p2) / 2 <= tolerance:
        return [p0, p2]

    # Subdivide at t=0.5
    q1 = _midpoint(p0, p1)
    r1 = _midpoint(p1, p2)
    mid = _midpoint(q1, r1)

    left = flatten_quadratic([p0, q1, mid], tolerance, depth + 1)
    right = flatten_quadratic([mid, r1, p2], tolerance, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def flatten_cubic(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm for subdivision. The curve is flat enough
    when both control points are within tolerance of the chord.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, including both endpoints
    """
    p0, p1, p2, p3 = points

    deviation = max(_distance_to_chord(p1, p0, p3), _distance_to_chord(p2, p0, p3))
    if depth >= MAX_DEPTH or deviation <= tolerance:
        return [p0, p3]

    # First level
    q1 = _midpoint(p0, p1)
    q2 = _midpoint(p1, p2)
    q3 = _midpoint(p2, p3)

    # Second level
    r1 = _midpoint(q1, q2)
    r2 = _midpoint(q2, q3)

    # Third level (point on the curve at t=0.5)
    mid = _midpoint(r1, r2)

    left = flatten_cubic([p0, q1, r1, mid], tolerance, depth + 1)
    right = flatten_cubic([mid, r2, q3, p3], tolerance, depth + 1)

    return left[:-1] + right
