"""SVG reader for loading drawings as polylines.

This module provides the SvgReader class for loading SVG files and the
parse_vector_art function that flattens SVG shapes into polylines using
svgelements.
"""

import io
from pathlib import Path
from xml.etree import ElementTree
from xml.etree.ElementTree import ParseError

import structlog
from svgelements import SVG, Arc, Close, CubicBezier, Line, Move, QuadraticBezier, Shape

from svg2librepcb.domain import Point, Polyline
from svg2librepcb.exceptions import SvgLoadError, SvgParseError
from svg2librepcb.io._flatten import flatten_cubic, flatten_quadratic

logger = structlog.get_logger(__name__)

# Root attributes that map user units onto a physical viewport
_VIEWPORT_ATTRIBUTES = ("x", "y", "width", "height", "viewBox", "preserveAspectRatio")


def _point(svg_point: object) -> Point:
    return Point(float(svg_point.x), float(svg_point.y))  # type: ignore[attr-defined]


class _PolylineCollector:
    """Accumulates flattened path segments into polylines."""

    def __init__(self, tolerance: float) -> None:
        self.tolerance = tolerance
        self.polylines: list[Polyline] = []
        self._current: list[Point] = []
        self._subpath_start: Point | None = None

    def _flush(self) -> None:
        # A single point is not a drawable line
        if len(self._current) > 1:
            self.polylines.append(Polyline(points=self._current))
        self._current = []

    def _extend(self, points: list[Point]) -> None:
        if not self._current:
            if self._subpath_start is None:
                self._subpath_start = points[0]
            self._current.append(points[0])
        self._current.extend(points[1:])

    def move_to(self, point: Point) -> None:
        self._flush()
        self._subpath_start = point
        self._current = [point]

    def line_to(self, start: Point, end: Point) -> None:
        self._extend([start, end])

    def close(self) -> None:
        if self._subpath_start is not None and self._current:
            if self._current[-1] != self._subpath_start:
                self._current.append(self._subpath_start)
        self._flush()

    def quadratic(self, start: Point, control: Point, end: Point) -> None:
        self._extend(flatten_quadratic([start, control, end], self.tolerance))

    def cubic(self, start: Point, control1: Point, control2: Point, end: Point) -> None:
        self._extend(flatten_cubic([start, control1, control2, end], self.tolerance))

    def finish(self) -> list[Polyline]:
        self._flush()
        self._subpath_start = None
        return self.polylines


def _user_unit_source(text: str) -> io.BytesIO:
    """SVG source with the root viewport removed.

    Drawing coordinates are taken as millimetres exactly as written, so a
    document sized in mm (or any other unit) must not be rescaled to
    pixels by its viewBox.
    """
    root = ElementTree.fromstring(text.encode("utf-8"))
    for name in _VIEWPORT_ATTRIBUTES:
        root.attrib.pop(name, None)
    return io.BytesIO(ElementTree.tostring(root, encoding="utf-8"))


def _collect_shape(shape: Shape, collector: _PolylineCollector) -> None:
    for segment in shape.segments(transformed=True):
        if isinstance(segment, Move):
            collector.move_to(_point(segment.end))
        elif isinstance(segment, Close):
            collector.close()
        elif isinstance(segment, Line):
            collector.line_to(_point(segment.start), _point(segment.end))
        elif isinstance(segment, QuadraticBezier):
            collector.quadratic(
                _point(segment.start), _point(segment.control), _point(segment.end)
            )
        elif isinstance(segment, CubicBezier):
            collector.cubic(
                _point(segment.start),
                _point(segment.control1),
                _point(segment.control2),
                _point(segment.end),
            )
        elif isinstance(segment, Arc):
            for curve in segment.as_cubic_curves():
                collector.cubic(
                    _point(curve.start),
                    _point(curve.control1),
                    _point(curve.control2),
                    _point(curve.end),
                )
    # Shapes never share a subpath
    collector.finish()


def parse_vector_art(text: str, tolerance: float) -> list[Polyline]:
    """Parse SVG markup into polylines.

    Every visible shape is converted to path segments with its transforms
    applied. The root viewport (width, height and viewBox) is ignored so
    coordinates stay in user units. Each move-to starts a new polyline, close-path returns to the
    subpath start (making the polyline closed) and curves are flattened
    so that no point of the curve is further than tolerance from the
    polyline.

    Args:
        text: SVG document text
        tolerance: Flattening tolerance in drawing units, must be positive

    Returns:
        Polylines in SVG (Y-down) coordinates, in document order

    Raises:
        SvgParseError: If text is not well-formed SVG markup
        ValueError: If tolerance is not positive
    """
    if tolerance <= 0:
        raise ValueError(f"Flattening tolerance must be positive, got {tolerance}")

    try:
        document = SVG.parse(_user_unit_source(text))
    except (ParseError, ValueError) as e:
        raise SvgParseError(str(e)) from e

    collector = _PolylineCollector(tolerance)
    shape_count = 0
    for element in document.elements():
        if isinstance(element, Shape):
            shape_count += 1
            _collect_shape(element, collector)

    polylines = collector.polylines
    logger.debug(
        "SVG parsed",
        shapes=shape_count,
        polylines=len(polylines),
        tolerance=tolerance,
    )
    return polylines


class SvgReader:
    """Loads SVG files and extracts polylines.

    Example:
        with SvgReader(Path("logo.svg")) as reader:
            polylines = reader.polylines(tolerance=0.15)
    """

    def __init__(self, svg_path: Path) -> None:
        """Initialize the SVG reader.

        Args:
            svg_path: Path to the SVG file
        """
        self._svg_path = svg_path
        self._text: str | None = None

    def load(self) -> None:
        """Read the SVG file.

        Raises:
            SvgLoadError: If the file does not exist or cannot be decoded
        """
        if not self._svg_path.exists():
            raise SvgLoadError(str(self._svg_path), "file not found")

        try:
            self._text = self._svg_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SvgLoadError(str(self._svg_path), str(e)) from e

    @property
    def text(self) -> str:
        """Raw SVG text.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._text is None:
            raise RuntimeError("SVG not loaded. Call load() first.")
        return self._text

    def polylines(self, tolerance: float) -> list[Polyline]:
        """Parse the loaded SVG into polylines.

        Args:
            tolerance: Flattening tolerance

        Returns:
            Polylines in SVG coordinates

        Raises:
            RuntimeError: If the file has not been loaded yet
            SvgParseError: If the file is not valid SVG
        """
        return parse_vector_art(self.text, tolerance)

    def close(self) -> None:
        """Release the loaded text."""
        self._text = None

    def __enter__(self) -> "SvgReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
