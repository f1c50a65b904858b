"""Tests for the generation orchestrator."""

import pytest

from svg2librepcb.config import build_settings
from svg2librepcb.core import GeneratedLibrary, LibraryGenerator
from svg2librepcb.core.context import GenerationContext
from svg2librepcb.domain import EntityKind, Polyline

PKGCAT = "aaaaaaaa-bbbb-4ccc-8ddd-eeeeeeeeeeee"
SYM_UUID = "11111111-1111-4111-8111-111111111111"
PKG_UUID = "22222222-2222-4222-8222-222222222222"


@pytest.fixture
def drawing() -> list[Polyline]:
    """A closed square and an open stroke."""
    return [
        Polyline.from_tuples([(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]),
        Polyline.from_tuples([(2, 2), (8, 8)]),
    ]


def _generator(**overrides) -> LibraryGenerator:
    values = {
        "metadata": {"name": "Logo", "author": "Jane"},
        "uuids": {"pkgcat": PKGCAT},
    }
    values.update(overrides)
    return LibraryGenerator(build_settings(**values), GenerationContext.deterministic())


class TestLibraryGenerator:
    """Tests for LibraryGenerator.generate."""

    def test_default_package_only(self, drawing: list[Polyline]) -> None:
        """Test that only a package is generated by default."""
        library = _generator().generate(drawing)

        assert [doc.kind for doc in library.documents] == [EntityKind.PACKAGE]
        package = library[EntityKind.PACKAGE]
        assert package.lines[0].startswith("(librepcb_package ")
        assert sum(line.startswith(" (footprint ") for line in package.lines) == 3
        # Two polygons per footprint
        assert sum(line.startswith("  (polygon ") for line in package.lines) == 6

    def test_footprint_layers_in_order(self, drawing: list[Polyline]) -> None:
        """Test footprint names and layer selection."""
        library = _generator(layers={"copper": True, "placement": False, "stopmask": True}).generate(
            drawing
        )
        text = library[EntityKind.PACKAGE].text
        assert '(name "Top Copper")' in text
        assert '(name "Top Placement")' not in text
        assert text.index("(layer top_cu)") < text.index("(layer top_stop_mask)")
        assert library.stats.footprint_count == 2

    def test_device_generates_everything(self, drawing: list[Polyline]) -> None:
        """Test dependency order and cross references."""
        library = _generator(entities={"package": False, "device": True}).generate(drawing)

        assert [doc.kind for doc in library.documents] == [
            EntityKind.SYMBOL,
            EntityKind.COMPONENT,
            EntityKind.PACKAGE,
            EntityKind.DEVICE,
        ]
        symbol = library[EntityKind.SYMBOL]
        component = library[EntityKind.COMPONENT]
        package = library[EntityKind.PACKAGE]
        device = library[EntityKind.DEVICE]
        assert f"   (symbol {symbol.uuid})" in component.lines
        assert f" (component {component.uuid})" in device.lines
        assert f" (package {package.uuid})" in device.lines

    def test_identifiers_unique(self, drawing: list[Polyline]) -> None:
        """Test that no identifier is allocated twice in a pass."""
        library = _generator(entities={"device": True}).generate(drawing)
        uuids = [doc.uuid for doc in library.documents]
        assert len(set(uuids)) == len(uuids)

    def test_caller_uuids(self, drawing: list[Polyline]) -> None:
        """Test that caller UUIDs are used for elements."""
        library = _generator(
            entities={"package": True, "component": True},
            uuids={"pkgcat": PKGCAT, "sym": SYM_UUID, "pkg": PKG_UUID},
        ).generate(drawing)
        assert library[EntityKind.SYMBOL].uuid == SYM_UUID
        assert library[EntityKind.PACKAGE].uuid == PKG_UUID
        assert f"   (symbol {SYM_UUID})" in library[EntityKind.COMPONENT].lines

    def test_categories(self, drawing: list[Polyline]) -> None:
        """Test that each element references its own category."""
        symcat = "33333333-3333-4333-8333-333333333333"
        library = _generator(
            entities={"symbol": True},
            uuids={"pkgcat": PKGCAT, "symcat": symcat},
        ).generate(drawing)
        assert f" (category {symcat})" in library[EntityKind.SYMBOL].lines
        assert f" (category {PKGCAT})" in library[EntityKind.PACKAGE].lines

    def test_empty_drawing(self) -> None:
        """Test that an empty drawing still gives well-formed elements."""
        library = _generator(entities={"device": True}).generate([])
        assert len(library.documents) == 4
        assert "(polygon" not in library[EntityKind.PACKAGE].text
        assert library.stats.polyline_count == 0
        assert library.stats.point_count == 0

    def test_nothing_requested(self, drawing: list[Polyline]) -> None:
        """Test that switching everything off gives no documents."""
        library = _generator(entities={"package": False}).generate(drawing)
        assert library.documents == []
        assert EntityKind.PACKAGE not in library

    def test_stats(self, drawing: list[Polyline]) -> None:
        """Test generation statistics."""
        library = _generator(entities={"symbol": True}).generate(drawing)
        stats = library.stats
        assert stats.polyline_count == 2
        assert stats.point_count == 7
        assert stats.footprint_count == 3
        assert stats.document_count == 2
        assert stats.duration_seconds >= 0

    def test_alignment_applies_to_package(self) -> None:
        """Test that the package follows the configured alignment."""
        drawing = [Polyline.from_tuples([(5, 5), (7, 8)])]
        library = _generator(
            parameters={"alignment": "top-left"},
            layers={"copper": True, "placement": False, "stopmask": False},
        ).generate(drawing)
        vertices = [
            line.strip() for line in library[EntityKind.PACKAGE].lines if "(vertex" in line
        ]
        assert vertices == [
            "(vertex (position 0.0 0.0) (angle 0.0))",
            "(vertex (position 2.0 -3.0) (angle 0.0))",
        ]


class TestGeneratedLibrary:
    """Tests for GeneratedLibrary lookups."""

    def test_missing_kind(self) -> None:
        """Test lookup of an element that was not generated."""
        library = GeneratedLibrary()
        assert library.get(EntityKind.DEVICE) is None
        with pytest.raises(KeyError):
            _ = library[EntityKind.DEVICE]
