"""Top-level library element documents.

Packages hold the footprints generated from a drawing, components tie a
symbol into a gate of a default variant, and devices pair a component
with a package. Every document starts with the common metadata header.
"""

from collections.abc import Sequence

import structlog

from svg2librepcb.core.context import GenerationContext
from svg2librepcb.core.emitter import emit_header, indent
from svg2librepcb.core.formatting import format_bool, format_float, quote
from svg2librepcb.domain import Document, EntityKind, EntityMetadata

logger = structlog.get_logger(__name__)

DEFAULT_VARIANT_NAME = "default"


def build_package(
    metadata: EntityMetadata,
    footprints: Sequence[list[str]],
    context: GenerationContext,
    uuid: str | None = None,
) -> Document:
    """Build a package document.

    Args:
        metadata: Package metadata including the package category
        footprints: Footprint blocks, in the order they should appear
        context: Generation context
        uuid: Package UUID, allocated when None

    Returns:
        Package document
    """
    package_uuid = context.resolve_id(uuid)

    lines = [f"({EntityKind.PACKAGE.keyword} {package_uuid}"]
    lines.extend(emit_header(metadata, context))
    for footprint in footprints:
        lines.extend(indent(footprint))
    lines.append(")")

    logger.debug("Package built", uuid=package_uuid, footprints=len(footprints))
    return Document(kind=EntityKind.PACKAGE, uuid=package_uuid, lines=lines)


def _emit_variant(symbol_uuid: str, context: GenerationContext) -> list[str]:
    zero = format_float(0.0)
    return [
        f"(variant {context.new_id()} (norm {quote('')})",
        f" (name {quote(DEFAULT_VARIANT_NAME)})",
        f" (description {quote('')})",
        f" (gate {context.new_id()}",
        f"  (symbol {symbol_uuid})",
        f"  (position {zero} {zero}) (rotation {zero})"
        f" (required {format_bool(True)}) (suffix {quote('')})",
        " )",
        ")",
    ]


def build_component(
    metadata: EntityMetadata,
    symbol_uuid: str,
    context: GenerationContext,
    uuid: str | None = None,
) -> Document:
    """Build a component document with one gate referencing a symbol.

    The component has no prefix, no default value, is not schematic-only
    and has a single default variant.

    Args:
        metadata: Component metadata, category optional
        symbol_uuid: UUID of the symbol placed by the gate
        context: Generation context
        uuid: Component UUID, allocated when None

    Returns:
        Component document
    """
    component_uuid = context.resolve_id(uuid)

    lines = [f"({EntityKind.COMPONENT.keyword} {component_uuid}"]
    lines.extend(emit_header(metadata, context))
    lines.append(f" (schematic_only {format_bool(False)})")
    lines.append(f" (default_value {quote('')})")
    lines.append(f" (prefix {quote('')})")
    lines.extend(indent(_emit_variant(symbol_uuid, context)))
    lines.append(")")

    logger.debug("Component built", uuid=component_uuid, symbol=symbol_uuid)
    return Document(kind=EntityKind.COMPONENT, uuid=component_uuid, lines=lines)


def build_device(
    metadata: EntityMetadata,
    component_uuid: str,
    package_uuid: str,
    context: GenerationContext,
    uuid: str | None = None,
) -> Document:
    """Build a device document pairing a component with a package."""
    device_uuid = context.resolve_id(uuid)

    lines = [f"({EntityKind.DEVICE.keyword} {device_uuid}"]
    lines.extend(emit_header(metadata, context))
    lines.append(f" (component {component_uuid})")
    lines.append(f" (package {package_uuid})")
    lines.append(")")

    logger.debug(
        "Device built", uuid=device_uuid, component=component_uuid, package=package_uuid
    )
    return Document(kind=EntityKind.DEVICE, uuid=device_uuid, lines=lines)
