"""Tests for domain models to verify they work correctly."""

import pytest

from svg2librepcb.domain import (
    Alignment,
    Bounds,
    Document,
    EntityKind,
    EntityMetadata,
    FootprintLayer,
    Offset,
    Point,
    Polyline,
)
from svg2librepcb.exceptions import GeometryError


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        p = Point(100.0, 200.0)
        assert p.to_tuple() == (100.0, 200.0)

    def test_point_equality_is_exact(self) -> None:
        """Test that points compare by exact coordinates."""
        assert Point(1.0, 2.0) == Point(1.0, 2.0)
        assert Point(1.0, 2.0) != Point(1.0, 2.0 + 1e-12)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore


class TestPolyline:
    """Tests for Polyline class."""

    def test_from_tuples(self) -> None:
        """Test building a polyline from coordinate pairs."""
        polyline = Polyline.from_tuples([(0, 0), (1, 2)])
        assert len(polyline) == 2
        assert polyline.points[1] == Point(1.0, 2.0)

    def test_closed_when_first_equals_last(self) -> None:
        """Test that a polyline returning to its start is closed."""
        polyline = Polyline.from_tuples([(0, 0), (10, 0), (10, 10), (0, 0)])
        assert polyline.is_closed()

    def test_removing_trailing_point_opens_polyline(self) -> None:
        """Test that dropping the duplicate end point makes it open."""
        polyline = Polyline.from_tuples([(0, 0), (10, 0), (10, 10), (0, 0)])
        opened = Polyline(points=polyline.points[:-1])
        assert not opened.is_closed()

    def test_nearly_closed_is_open(self) -> None:
        """Test that closedness uses no epsilon."""
        polyline = Polyline.from_tuples([(0, 0), (10, 0), (0, 0.0001)])
        assert not polyline.is_closed()

    def test_empty_polyline(self) -> None:
        """Test empty polyline."""
        polyline = Polyline()
        assert polyline.is_empty()
        assert not polyline.is_closed()

    def test_iteration(self) -> None:
        """Test iterating over points."""
        polyline = Polyline.from_tuples([(0, 0), (1, 1)])
        assert [p.to_tuple() for p in polyline] == [(0.0, 0.0), (1.0, 1.0)]


class TestBounds:
    """Tests for Bounds class."""

    def test_size(self) -> None:
        """Test width and height."""
        bounds = Bounds(x_min=1.0, x_max=4.0, y_min=-2.0, y_max=3.0)
        assert bounds.width == 3.0
        assert bounds.height == 5.0

    def test_zero_area(self) -> None:
        """Test that a degenerate box is allowed."""
        bounds = Bounds(x_min=1.0, x_max=1.0, y_min=2.0, y_max=2.0)
        assert bounds.width == 0.0
        assert bounds.height == 0.0

    def test_inverted_bounds_rejected(self) -> None:
        """Test that min greater than max is rejected."""
        with pytest.raises(GeometryError):
            Bounds(x_min=5.0, x_max=1.0, y_min=0.0, y_max=1.0)


class TestEnums:
    """Tests for alignment and library enums."""

    def test_alignment_values(self) -> None:
        """Test CLI spelling of alignment modes."""
        assert Alignment("top-left") is Alignment.TOP_LEFT
        assert Alignment("bottom-left") is Alignment.BOTTOM_LEFT
        assert Alignment.CENTER.value == "center"

    def test_entity_kind_layout(self) -> None:
        """Test library directory layout of element kinds."""
        assert EntityKind.PACKAGE.keyword == "librepcb_package"
        assert EntityKind.PACKAGE.directory == "pkg"
        assert EntityKind.PACKAGE.filename == "package.lp"
        assert EntityKind.PACKAGE.marker_filename == ".librepcb-pkg"
        assert EntityKind.DEVICE.marker_filename == ".librepcb-dev"

    def test_footprint_layer_order(self) -> None:
        """Test that layers are declared in package order."""
        assert [layer.layer_name for layer in FootprintLayer] == [
            "top_cu",
            "top_placement",
            "top_stop_mask",
        ]
        assert FootprintLayer.STOP_MASK.title == "Top Stop Mask"


class TestLibraryTypes:
    """Tests for metadata and documents."""

    def test_metadata_defaults(self) -> None:
        """Test metadata default values."""
        meta = EntityMetadata(name="Logo", author="Jane")
        assert meta.description == ""
        assert meta.version == "0.1.0"
        assert meta.category is None

    def test_document_text(self) -> None:
        """Test that document lines are joined by newlines."""
        doc = Document(kind=EntityKind.DEVICE, uuid="u", lines=["(a", " (b)", ")"])
        assert doc.text == "(a\n (b)\n)"

    def test_offset_default(self) -> None:
        """Test zero offset."""
        assert Offset() == Offset(0.0, 0.0)
