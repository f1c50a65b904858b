"""Configuration settings for svg2librepcb."""

from pathlib import Path
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, ValidationError, ValidationInfo, field_validator, model_validator

from svg2librepcb.core.formatting import quote
from svg2librepcb.domain import Alignment, EntityKind, EntityMetadata, FootprintLayer
from svg2librepcb.exceptions import ConfigurationError, MetadataError


class MetadataConfig(BaseModel):
    """Metadata shared by all generated library elements."""

    name: str = Field(description="Library element name")
    author: str = Field(description="Library element author")
    description: str = Field(default="", description="Library element description")
    version: str = Field(default="0.1.0", description="Library element version")
    keywords: str = Field(default="", description="Comma separated keywords")

    @field_validator("name", "author")
    @classmethod
    def _not_blank(cls, value: str, info: ValidationInfo) -> str:
        if not value.strip():
            raise ValueError(f"{info.field_name} must not be empty")
        return value

    @field_validator("name", "author", "description", "version", "keywords")
    @classmethod
    def _representable(cls, value: str, info: ValidationInfo) -> str:
        try:
            quote(value, info.field_name or "text")
        except MetadataError as e:
            raise ValueError(e.reason) from e
        return value


class UuidConfig(BaseModel):
    """Element UUIDs and category UUIDs.

    Element UUIDs are random when omitted. Categories are optional except
    for packages, see Svg2LibrePcbSettings.
    """

    pkg: UUID | None = Field(default=None, description="Package UUID")
    sym: UUID | None = Field(default=None, description="Symbol UUID")
    cmp: UUID | None = Field(default=None, description="Component UUID")
    dev: UUID | None = Field(default=None, description="Device UUID")
    pkgcat: UUID | None = Field(default=None, description="Package category UUID")
    symcat: UUID | None = Field(default=None, description="Symbol category UUID")
    cmpcat: UUID | None = Field(default=None, description="Component category UUID")
    devcat: UUID | None = Field(default=None, description="Device category UUID")

    def element_uuid(self, kind: EntityKind) -> str | None:
        """Caller-supplied UUID of an element, in canonical text form."""
        value = getattr(self, kind.directory)
        return str(value) if value is not None else None

    def category_uuid(self, kind: EntityKind) -> str | None:
        """Category UUID of an element, in canonical text form."""
        value = getattr(self, f"{kind.directory}cat")
        return str(value) if value is not None else None


class LayerConfig(BaseModel):
    """Board layers to generate package footprints for."""

    copper: bool = Field(default=True, description="Generate top copper footprint")
    placement: bool = Field(default=True, description="Generate top placement footprint")
    stopmask: bool = Field(default=True, description="Generate top stop mask footprint")

    def selected(self) -> list[FootprintLayer]:
        """Enabled layers in package order."""
        enabled = {
            FootprintLayer.COPPER: self.copper,
            FootprintLayer.PLACEMENT: self.placement,
            FootprintLayer.STOP_MASK: self.stopmask,
        }
        return [layer for layer in FootprintLayer if enabled[layer]]


class EntityConfig(BaseModel):
    """Library elements to generate."""

    package: bool = Field(default=True, description="Generate a package")
    symbol: bool = Field(default=False, description="Generate a symbol")
    component: bool = Field(default=False, description="Generate a component (implies symbol)")
    device: bool = Field(
        default=False,
        description="Generate a device (implies component, symbol and package)",
    )

    def requested(self) -> list[EntityKind]:
        """Elements to generate after resolving dependencies.

        A device references a component and a package, and a component
        references a symbol, so those are generated as well.
        """
        device = self.device
        component = self.component or device
        symbol = self.symbol or component
        package = self.package or device

        kinds = []
        if symbol:
            kinds.append(EntityKind.SYMBOL)
        if component:
            kinds.append(EntityKind.COMPONENT)
        if package:
            kinds.append(EntityKind.PACKAGE)
        if device:
            kinds.append(EntityKind.DEVICE)
        return kinds


class ParametersConfig(BaseModel):
    """Geometry processing parameters."""

    flattening_tolerance: float = Field(
        default=0.15,
        gt=0.0,
        description="Maximum deviation when approximating curves with line segments",
    )
    alignment: Alignment = Field(
        default=Alignment.NONE,
        description="Reference point moved to the origin (symbols are always centered)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class Svg2LibrePcbSettings(BaseModel):
    """Main application settings."""

    metadata: MetadataConfig
    uuids: UuidConfig = Field(default_factory=UuidConfig)
    layers: LayerConfig = Field(default_factory=LayerConfig)
    entities: EntityConfig = Field(default_factory=EntityConfig)
    parameters: ParametersConfig = Field(default_factory=ParametersConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def _package_category_required(self) -> "Svg2LibrePcbSettings":
        if EntityKind.PACKAGE in self.entities.requested() and self.uuids.pkgcat is None:
            raise ValueError("a package category UUID is required to generate a package")
        return self

    def metadata_for(self, kind: EntityKind) -> EntityMetadata:
        """Metadata of one element, referencing that element's category."""
        return EntityMetadata(
            name=self.metadata.name,
            author=self.metadata.author,
            description=self.metadata.description,
            keywords=self.metadata.keywords,
            version=self.metadata.version,
            category=self.uuids.category_uuid(kind),
        )


def build_settings(**values: Any) -> Svg2LibrePcbSettings:
    """Validate settings, reporting problems as ConfigurationError.

    Args:
        **values: Keyword arguments of Svg2LibrePcbSettings

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If any value is missing or invalid
    """
    try:
        return Svg2LibrePcbSettings(**values)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'settings'}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigurationError(f"Invalid settings: {problems}") from e
