"""Orchestration of one generation pass.

This module coordinates the full workflow from polylines to library
element documents:

1. Resolve which elements are requested
2. Build the symbol and component (if requested)
3. Build one footprint per selected layer and the package
4. Build the device pairing component and package

Key classes:
- GeneratedLibrary: Documents produced by a pass
- LibraryGenerator: Main orchestrator
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import structlog

from svg2librepcb.core.builder import build_component, build_device, build_package
from svg2librepcb.core.context import GenerationContext
from svg2librepcb.core.emitter import build_footprint, build_symbol
from svg2librepcb.core.geometry import compute_bounds
from svg2librepcb.domain import Document, EntityKind, Polyline
from svg2librepcb.utils import GenerationStats

if TYPE_CHECKING:
    from svg2librepcb.config import Svg2LibrePcbSettings


@dataclass
class GeneratedLibrary:
    """Documents produced by one generation pass.

    Attributes:
        documents: Documents in generation order
        stats: Counts and timing of the pass
    """

    documents: list[Document] = field(default_factory=list)
    stats: GenerationStats = field(default_factory=GenerationStats)

    def get(self, kind: EntityKind) -> Document | None:
        """Document of the given kind, or None if it was not requested."""
        for document in self.documents:
            if document.kind is kind:
                return document
        return None

    def __getitem__(self, kind: EntityKind) -> Document:
        document = self.get(kind)
        if document is None:
            raise KeyError(kind)
        return document

    def __contains__(self, kind: object) -> bool:
        return any(document.kind is kind for document in self.documents)


class LibraryGenerator:
    """Turns a drawing into LibrePCB library element documents.

    Everything is built in memory in one pass; nothing is written here.

    Example:
        settings = build_settings(metadata={"name": "Logo", "author": "Jane"},
                                  uuids={"pkgcat": category})
        generator = LibraryGenerator(settings)
        library = generator.generate(polylines)
        package = library[EntityKind.PACKAGE]
    """

    def __init__(
        self,
        settings: Svg2LibrePcbSettings,
        context: GenerationContext | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            settings: Validated application settings
            context: Identifier source and clock (random UUIDs and UTC now
                by default)
        """
        self.settings = settings
        self.context = context or GenerationContext()
        self.logger = structlog.get_logger(__name__)

    def _footprints(self, polylines: Sequence[Polyline]) -> list[list[str]]:
        alignment = self.settings.parameters.alignment
        return [
            build_footprint(
                layer=layer.layer_name,
                name=layer.title,
                description="",
                polylines=polylines,
                alignment=alignment,
                context=self.context,
            )
            for layer in self.settings.layers.selected()
        ]

    def generate(self, polylines: Sequence[Polyline]) -> GeneratedLibrary:
        """Generate every requested element from a drawing.

        Args:
            polylines: Polylines in source (SVG) space

        Returns:
            GeneratedLibrary holding the documents
        """
        library = GeneratedLibrary()
        stats = library.stats
        stats.start_time = time.time()
        stats.polyline_count = len(polylines)
        stats.point_count = sum(len(polyline) for polyline in polylines)

        requested = self.settings.entities.requested()
        uuids = self.settings.uuids

        self.logger.info(
            "Starting generation",
            polylines=stats.polyline_count,
            points=stats.point_count,
            elements=[kind.directory for kind in requested],
            alignment=self.settings.parameters.alignment.value,
        )

        bounds = compute_bounds(polylines)
        if bounds is None:
            self.logger.warning("Drawing is empty, generating empty elements")
        else:
            self.logger.debug(
                "Drawing bounds",
                x_min=bounds.x_min,
                x_max=bounds.x_max,
                y_min=bounds.y_min,
                y_max=bounds.y_max,
            )

        symbol: Document | None = None
        component: Document | None = None
        package: Document | None = None

        if EntityKind.SYMBOL in requested:
            symbol = build_symbol(
                self.settings.metadata_for(EntityKind.SYMBOL),
                polylines,
                self.context,
                uuid=uuids.element_uuid(EntityKind.SYMBOL),
            )
            library.documents.append(symbol)

        if EntityKind.COMPONENT in requested and symbol is not None:
            component = build_component(
                self.settings.metadata_for(EntityKind.COMPONENT),
                symbol.uuid,
                self.context,
                uuid=uuids.element_uuid(EntityKind.COMPONENT),
            )
            library.documents.append(component)

        if EntityKind.PACKAGE in requested:
            footprints = self._footprints(polylines)
            stats.footprint_count = len(footprints)
            package = build_package(
                self.settings.metadata_for(EntityKind.PACKAGE),
                footprints,
                self.context,
                uuid=uuids.element_uuid(EntityKind.PACKAGE),
            )
            library.documents.append(package)

        if EntityKind.DEVICE in requested and component is not None and package is not None:
            device = build_device(
                self.settings.metadata_for(EntityKind.DEVICE),
                component.uuid,
                package.uuid,
                self.context,
                uuid=uuids.element_uuid(EntityKind.DEVICE),
            )
            library.documents.append(device)

        stats.document_count = len(library.documents)
        stats.end_time = time.time()

        for document in library.documents:
            self.logger.info(
                "Element generated",
                kind=document.kind.directory,
                uuid=document.uuid,
                lines=len(document.lines),
            )

        return library
