"""Core generation pipeline for svg2librepcb.

This module contains the core algorithms for:

- Number and text rendering (canonical floats, quoted fields)
- Geometry normalization (bounds, alignment, Y axis inversion)
- Polygon, footprint and symbol emission
- Package, component and device documents

All services are designed to be:
- Stateless (identifiers and time come from a GenerationContext)
- Pure (no file system access)

Key functions:
- format_float: Canonical decimal rendering of coordinates
- quote: Escaped double-quoted text fields
- compute_bounds: Bounding box of a drawing
- alignment_offset: Translation for an alignment mode
- transform_point: Translation plus Y inversion
- emit_polygon: One polyline as a polygon block
- build_footprint / build_symbol: Drawing-bearing blocks
- build_package / build_component / build_device: Element documents

Key classes:
- GenerationContext: Identifier source and clock
- LibraryGenerator: Runs a complete generation pass
"""

from svg2librepcb.core.builder import build_component, build_device, build_package
from svg2librepcb.core.context import (
    GenerationContext,
    IdentifierSource,
    RandomIdentifierSource,
    SequentialIdentifierSource,
    utc_timestamp,
)
from svg2librepcb.core.emitter import (
    build_footprint,
    build_symbol,
    emit_polygon,
    emit_polygons,
)
from svg2librepcb.core.formatting import format_float, quote
from svg2librepcb.core.generator import GeneratedLibrary, LibraryGenerator
from svg2librepcb.core.geometry import (
    alignment_offset,
    compute_bounds,
    transform_point,
    transformed_bounds,
)

__all__ = [
    # Context
    "GenerationContext",
    "IdentifierSource",
    "RandomIdentifierSource",
    "SequentialIdentifierSource",
    # Generator
    "GeneratedLibrary",
    "LibraryGenerator",
    # Geometry functions
    "alignment_offset",
    # Builders
    "build_component",
    "build_device",
    "build_footprint",
    "build_package",
    "build_symbol",
    "compute_bounds",
    "emit_polygon",
    "emit_polygons",
    # Formatting
    "format_float",
    "quote",
    "transform_point",
    "transformed_bounds",
    "utc_timestamp",
]
