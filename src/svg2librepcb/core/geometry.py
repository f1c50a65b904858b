"""Geometric operations for normalizing a drawing before emission.

This module provides the coordinate utilities of a generation pass:
- Bounding box calculation over a polyline collection
- Alignment offset derivation
- Translation with Y axis inversion (SVG is Y-down, LibrePCB is Y-up)
- Bounds of the transformed drawing, for label placement

All functions are pure and stateless.
"""

from collections.abc import Iterable

from svg2librepcb.domain import Alignment, Bounds, Offset, Point, Polyline


def compute_bounds(polylines: Iterable[Polyline]) -> Bounds | None:
    """Calculate the bounding box of every point of every polyline.

    Args:
        polylines: Polylines in source space

    Returns:
        Bounds of all points, or None if there are no points at all

    Examples:
        >>> compute_bounds([Polyline.from_tuples([(0, 0), (4, 2)])])
        Bounds(x_min=0.0, x_max=4.0, y_min=0.0, y_max=2.0)
        >>> compute_bounds([]) is None
        True
    """
    x_min = x_max = y_min = y_max = None

    for polyline in polylines:
        for point in polyline:
            if x_min is None:
                x_min = x_max = point.x
                y_min = y_max = point.y
                continue
            x_min = min(x_min, point.x)
            x_max = max(x_max, point.x)
            y_min = min(y_min, point.y)
            y_max = max(y_max, point.y)

    if x_min is None:
        return None
    return Bounds(x_min=x_min, x_max=x_max, y_min=y_min, y_max=y_max)


def alignment_offset(bounds: Bounds | None, alignment: Alignment) -> Offset:
    """Derive the translation that moves the alignment point to the origin.

    The offset is computed in source (Y-down) space, so "top" refers to
    the smallest y value of the drawing.

    Args:
        bounds: Drawing bounds, None for an empty drawing
        alignment: Selected alignment mode

    Returns:
        Offset to add to every point before Y inversion
    """
    if bounds is None or alignment is Alignment.NONE:
        return Offset(0.0, 0.0)

    if alignment is Alignment.CENTER:
        half_width = bounds.width / 2.0
        half_height = bounds.height / 2.0
        return Offset(-bounds.x_min - half_width, -bounds.y_min - half_height)

    if alignment is Alignment.TOP_LEFT:
        return Offset(-bounds.x_min, -bounds.y_min)

    if alignment is Alignment.BOTTOM_LEFT:
        return Offset(-bounds.x_min, -bounds.y_max)

    raise ValueError(f"Unknown alignment: {alignment!r}")


def transform_point(point: Point, offset: Offset) -> Point:
    """Translate a source point and invert its Y axis.

    Args:
        point: Point in source space
        offset: Pass offset

    Returns:
        Point in target (Y-up) space

    Examples:
        >>> transform_point(Point(0.0, 0.0), Offset(-2.0, -2.0))
        Point(x=-2.0, y=2.0)
    """
    return Point(point.x + offset.dx, -(point.y + offset.dy))


def transformed_bounds(bounds: Bounds | None, offset: Offset) -> Bounds | None:
    """Express source bounds in target space.

    Inverting the Y axis swaps the roles of the minimum and maximum.

    Args:
        bounds: Bounds in source space
        offset: Pass offset

    Returns:
        Bounds in target space, or None if bounds is None
    """
    if bounds is None:
        return None
    return Bounds(
        x_min=bounds.x_min + offset.dx,
        x_max=bounds.x_max + offset.dx,
        y_min=-(bounds.y_max + offset.dy),
        y_max=-(bounds.y_min + offset.dy),
    )
