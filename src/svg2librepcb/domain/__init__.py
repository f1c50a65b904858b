"""Domain models for svg2librepcb.

This module contains the core domain models representing the drawing
geometry and the generated library elements. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Independent of svgelements implementation details

Key classes:
- Point: A 2D point in source (Y-down) space
- Polyline: An ordered sequence of points, closed or open
- Bounds: Axis-aligned bounding box of a drawing
- Offset: Translation derived from bounds and alignment
- EntityMetadata: Name, author, version and category of an element
- Document: A rendered library element
"""

from svg2librepcb.domain.library import (
    SYMBOL_NAME_LAYER,
    SYMBOL_OUTLINE_LAYER,
    SYMBOL_VALUE_LAYER,
    Document,
    EntityKind,
    EntityMetadata,
    FootprintLayer,
)
from svg2librepcb.domain.polyline import Alignment, Bounds, Offset, Point, Polyline

__all__: list[str] = [
    # Enums
    "Alignment",
    "EntityKind",
    "FootprintLayer",
    # Core types
    "Point",
    "Polyline",
    "Bounds",
    "Offset",
    "EntityMetadata",
    "Document",
    # Layer names
    "SYMBOL_NAME_LAYER",
    "SYMBOL_OUTLINE_LAYER",
    "SYMBOL_VALUE_LAYER",
]
