"""Polygon, footprint and symbol emission.

This module turns polylines into LibrePCB S-expression lines. Every block
is returned as a list of lines whose nesting is expressed by a leading
space per level, so a parent can nest a child block by indenting it once.

Key functions:
- emit_polygon: One polyline as a polygon block
- emit_polygons: A whole drawing on one layer, aligned once per pass
- build_footprint: A named footprint holding the polygons of one layer
- build_symbol: A complete symbol document with name and value labels
"""

from collections.abc import Sequence

import structlog

from svg2librepcb.core.context import GenerationContext
from svg2librepcb.core.formatting import format_bool, format_float, quote
from svg2librepcb.core.geometry import (
    alignment_offset,
    compute_bounds,
    transform_point,
    transformed_bounds,
)
from svg2librepcb.domain import (
    SYMBOL_NAME_LAYER,
    SYMBOL_OUTLINE_LAYER,
    SYMBOL_VALUE_LAYER,
    Alignment,
    Document,
    EntityKind,
    EntityMetadata,
    Offset,
    Polyline,
)

logger = structlog.get_logger(__name__)

CLOSED_WIDTH = 0.0
OPEN_WIDTH = 0.2

# Clearance between the outline and the symbol labels (100 mil)
LABEL_CLEARANCE = 1.27
LABEL_HEIGHT = 2.5


def indent(lines: Sequence[str], levels: int = 1) -> list[str]:
    """Nest lines one or more levels deeper."""
    prefix = " " * levels
    return [prefix + line for line in lines]


def emit_header(metadata: EntityMetadata, context: GenerationContext) -> list[str]:
    """Emit the metadata attributes shared by all top-level documents.

    Order is fixed: name, description, keywords, author, version,
    created, deprecated and, when present, category.

    Args:
        metadata: Element metadata
        context: Generation context providing the timestamp

    Returns:
        Attribute lines, already nested one level
    """
    lines = [
        f"(name {quote(metadata.name, 'name')})",
        f"(description {quote(metadata.description, 'description')})",
        f"(keywords {quote(metadata.keywords, 'keywords')})",
        f"(author {quote(metadata.author, 'author')})",
        f"(version {quote(metadata.version, 'version')})",
        f"(created {context.now()})",
        f"(deprecated {format_bool(False)})",
    ]
    if metadata.category:
        lines.append(f"(category {metadata.category})")
    return indent(lines)


def emit_polygon(
    layer: str,
    polyline: Polyline,
    offset: Offset,
    context: GenerationContext,
) -> list[str]:
    """Emit one polyline as a polygon block.

    Closed polylines become filled regions without outline width, open
    polylines become strokes. The grab area follows the fill flag, so
    only filled shapes are selectable by clicking their inside.

    Args:
        layer: Target layer name
        polyline: Polyline in source space
        offset: Translation of the current pass
        context: Generation context providing the polygon UUID

    Returns:
        Lines of the polygon block
    """
    closed = polyline.is_closed()
    width = CLOSED_WIDTH if closed else OPEN_WIDTH

    lines = [f"(polygon {context.new_id()} (layer {layer})"]
    lines.append(
        f" (width {format_float(width)}) (fill {format_bool(closed)})"
        f" (grab_area {format_bool(closed)})"
    )
    for point in polyline:
        target = transform_point(point, offset)
        lines.append(
            f" (vertex (position {format_float(target.x)} {format_float(target.y)})"
            f" (angle {format_float(0.0)}))"
        )
    lines.append(")")
    return lines


def emit_polygons(
    layer: str,
    polylines: Sequence[Polyline],
    alignment: Alignment,
    context: GenerationContext,
) -> list[str]:
    """Emit every polyline of a drawing on one layer.

    Bounds and offset are computed once for the whole drawing so all
    polygons move together. Empty polylines are skipped and an empty
    drawing yields no lines at all.

    Args:
        layer: Target layer name
        polylines: Polylines in source space
        alignment: Alignment mode of the pass
        context: Generation context

    Returns:
        Lines of all polygon blocks, in input order
    """
    offset = alignment_offset(compute_bounds(polylines), alignment)

    lines: list[str] = []
    for polyline in polylines:
        if polyline.is_empty():
            continue
        lines.extend(emit_polygon(layer, polyline, offset, context))
    return lines


def build_footprint(
    layer: str,
    name: str,
    description: str,
    polylines: Sequence[Polyline],
    alignment: Alignment,
    context: GenerationContext,
) -> list[str]:
    """Build a footprint block holding the drawing on one layer.

    Args:
        layer: Board layer name, e.g. "top_cu"
        name: Footprint name
        description: Footprint description
        polylines: Polylines in source space
        alignment: Alignment mode
        context: Generation context

    Returns:
        Lines of the footprint block, ready to be nested in a package
    """
    lines = [f"(footprint {context.new_id()}"]
    lines.append(f" (name {quote(name, 'name')})")
    lines.append(f" (description {quote(description, 'description')})")
    lines.extend(indent(emit_polygons(layer, polylines, alignment, context)))
    lines.append(")")
    return lines


def _emit_text(
    layer: str,
    value: str,
    vertical_align: str,
    y: float,
    context: GenerationContext,
) -> list[str]:
    return [
        f"(text {context.new_id()} (layer {layer}) (value {quote(value)})",
        f" (align center {vertical_align}) (height {format_float(LABEL_HEIGHT)})"
        f" (position {format_float(0.0)} {format_float(y)})"
        f" (rotation {format_float(0.0)})",
        ")",
    ]


def build_symbol(
    metadata: EntityMetadata,
    polylines: Sequence[Polyline],
    context: GenerationContext,
    uuid: str | None = None,
) -> Document:
    """Build a symbol document from a drawing.

    Symbols are always centered on the origin. The value label is placed
    below the outline and the name label above it, both with a fixed
    clearance so they never overlap the drawing.

    Args:
        metadata: Symbol metadata, category optional
        polylines: Polylines in source space
        context: Generation context
        uuid: Symbol UUID, allocated when None

    Returns:
        Symbol document
    """
    symbol_uuid = context.resolve_id(uuid)

    bounds = compute_bounds(polylines)
    offset = alignment_offset(bounds, Alignment.CENTER)
    target_bounds = transformed_bounds(bounds, offset)
    if target_bounds is None:
        y_min = y_max = 0.0
    else:
        y_min, y_max = target_bounds.y_min, target_bounds.y_max

    lines = [f"({EntityKind.SYMBOL.keyword} {symbol_uuid}"]
    lines.extend(emit_header(metadata, context))
    lines.extend(indent(emit_polygons(SYMBOL_OUTLINE_LAYER, polylines, Alignment.CENTER, context)))
    lines.extend(
        indent(
            _emit_text(SYMBOL_VALUE_LAYER, "{{VALUE}}", "top", y_min - LABEL_CLEARANCE, context)
        )
    )
    lines.extend(
        indent(
            _emit_text(SYMBOL_NAME_LAYER, "{{NAME}}", "bottom", y_max + LABEL_CLEARANCE, context)
        )
    )
    lines.append(")")

    logger.debug("Symbol built", uuid=symbol_uuid, polylines=len(polylines))
    return Document(kind=EntityKind.SYMBOL, uuid=symbol_uuid, lines=lines)
