"""Tests for configuration models."""

import pytest

from svg2librepcb.config import (
    EntityConfig,
    LayerConfig,
    ParametersConfig,
    Svg2LibrePcbSettings,
    UuidConfig,
    build_settings,
)
from svg2librepcb.domain import Alignment, EntityKind, FootprintLayer
from svg2librepcb.exceptions import ConfigurationError

PKGCAT = "AAAAAAAA-BBBB-4CCC-8DDD-EEEEEEEEEEEE"


def _settings(**overrides) -> Svg2LibrePcbSettings:
    values = {
        "metadata": {"name": "Logo", "author": "Jane"},
        "uuids": {"pkgcat": PKGCAT},
    }
    values.update(overrides)
    return build_settings(**values)


class TestBuildSettings:
    """Tests for build_settings validation."""

    def test_defaults(self) -> None:
        """Test default values."""
        settings = _settings()
        assert settings.metadata.version == "0.1.0"
        assert settings.parameters.flattening_tolerance == 0.15
        assert settings.parameters.alignment is Alignment.NONE
        assert settings.entities.requested() == [EntityKind.PACKAGE]

    def test_missing_name(self) -> None:
        """Test that a name is required."""
        with pytest.raises(ConfigurationError, match="name"):
            build_settings(metadata={"author": "Jane"}, uuids={"pkgcat": PKGCAT})

    def test_blank_author(self) -> None:
        """Test that a blank author is rejected."""
        with pytest.raises(ConfigurationError, match="author"):
            _settings(metadata={"name": "Logo", "author": "  "})

    def test_package_category_required(self) -> None:
        """Test that packages need a category."""
        with pytest.raises(ConfigurationError, match="package category"):
            build_settings(metadata={"name": "Logo", "author": "Jane"})

    def test_package_category_not_needed_without_package(self) -> None:
        """Test that a symbol-only run needs no package category."""
        settings = build_settings(
            metadata={"name": "Logo", "author": "Jane"},
            entities={"package": False, "symbol": True},
        )
        assert settings.entities.requested() == [EntityKind.SYMBOL]

    def test_invalid_uuid(self) -> None:
        """Test that malformed UUIDs are rejected."""
        with pytest.raises(ConfigurationError, match="pkgcat"):
            _settings(uuids={"pkgcat": "not-a-uuid"})

    def test_control_character_rejected(self) -> None:
        """Test that unrepresentable metadata is rejected up front."""
        with pytest.raises(ConfigurationError, match="description"):
            _settings(metadata={"name": "Logo", "author": "Jane", "description": "a\x00b"})

    def test_newline_accepted(self) -> None:
        """Test that escapable whitespace is accepted."""
        settings = _settings(metadata={"name": "Logo", "author": "Jane", "description": "a\nb"})
        assert settings.metadata.description == "a\nb"

    def test_tolerance_must_be_positive(self) -> None:
        """Test flattening tolerance validation."""
        with pytest.raises(ConfigurationError, match="flattening_tolerance"):
            _settings(parameters={"flattening_tolerance": 0})

    def test_metadata_for(self) -> None:
        """Test per-element metadata and category selection."""
        settings = _settings(uuids={"pkgcat": PKGCAT, "symcat": "11111111-1111-4111-8111-111111111111"})
        package_meta = settings.metadata_for(EntityKind.PACKAGE)
        assert package_meta.name == "Logo"
        assert package_meta.category == PKGCAT.lower()
        assert settings.metadata_for(EntityKind.SYMBOL).category == "11111111-1111-4111-8111-111111111111"
        assert settings.metadata_for(EntityKind.DEVICE).category is None


class TestUuidConfig:
    """Tests for UuidConfig."""

    def test_canonical_text(self) -> None:
        """Test that UUIDs are rendered lowercase."""
        config = UuidConfig(pkg=PKGCAT)
        assert config.element_uuid(EntityKind.PACKAGE) == PKGCAT.lower()
        assert config.element_uuid(EntityKind.SYMBOL) is None


class TestLayerConfig:
    """Tests for LayerConfig."""

    def test_all_layers_default(self) -> None:
        """Test that all layers are on by default."""
        assert LayerConfig().selected() == [
            FootprintLayer.COPPER,
            FootprintLayer.PLACEMENT,
            FootprintLayer.STOP_MASK,
        ]

    def test_subset(self) -> None:
        """Test that disabled layers are skipped in order."""
        config = LayerConfig(copper=False, placement=True, stopmask=True)
        assert config.selected() == [FootprintLayer.PLACEMENT, FootprintLayer.STOP_MASK]


class TestEntityConfig:
    """Tests for EntityConfig dependency resolution."""

    def test_component_implies_symbol(self) -> None:
        """Test that a component brings its symbol."""
        config = EntityConfig(package=False, component=True)
        assert config.requested() == [EntityKind.SYMBOL, EntityKind.COMPONENT]

    def test_device_implies_everything(self) -> None:
        """Test that a device brings component, symbol and package."""
        config = EntityConfig(package=False, device=True)
        assert config.requested() == [
            EntityKind.SYMBOL,
            EntityKind.COMPONENT,
            EntityKind.PACKAGE,
            EntityKind.DEVICE,
        ]

    def test_nothing(self) -> None:
        """Test that everything can be switched off."""
        assert EntityConfig(package=False).requested() == []


class TestParametersConfig:
    """Tests for ParametersConfig."""

    def test_alignment_from_text(self) -> None:
        """Test alignment parsing from its CLI spelling."""
        assert ParametersConfig(alignment="top-left").alignment is Alignment.TOP_LEFT
