"""LibrePCB library element types.

This module defines the library-side domain model: which kinds of elements
are generated, which board layers a footprint can be drawn on, the metadata
every element carries, and the rendered document itself.
"""

from dataclasses import dataclass, field
from enum import Enum


class EntityKind(Enum):
    """Kind of generated library element.

    Each kind knows its top-level node keyword and where it lives inside a
    LibrePCB library directory.
    """

    PACKAGE = ("librepcb_package", "pkg", "package.lp")
    SYMBOL = ("librepcb_symbol", "sym", "symbol.lp")
    COMPONENT = ("librepcb_component", "cmp", "component.lp")
    DEVICE = ("librepcb_device", "dev", "device.lp")

    def __init__(self, keyword: str, directory: str, filename: str) -> None:
        self.keyword = keyword
        self.directory = directory
        self.filename = filename

    @property
    def marker_filename(self) -> str:
        """Name of the version marker file, e.g. ``.librepcb-pkg``."""
        return f".librepcb-{self.directory}"


class FootprintLayer(Enum):
    """Board layers a package footprint can be generated for.

    Declaration order is the order footprints appear in a package.
    """

    COPPER = ("top_cu", "Top Copper")
    PLACEMENT = ("top_placement", "Top Placement")
    STOP_MASK = ("top_stop_mask", "Top Stop Mask")

    def __init__(self, layer_name: str, title: str) -> None:
        self.layer_name = layer_name
        self.title = title


# Layers used by symbols
SYMBOL_OUTLINE_LAYER = "sym_outlines"
SYMBOL_NAME_LAYER = "sym_names"
SYMBOL_VALUE_LAYER = "sym_values"


@dataclass(frozen=True)
class EntityMetadata:
    """Metadata written at the top of every library element.

    Attributes:
        name: Element name
        description: Free text description
        keywords: Comma separated keywords
        author: Author name
        version: Element version string
        category: Category UUID, omitted from the document when None
    """

    name: str
    author: str
    description: str = ""
    keywords: str = ""
    version: str = "0.1.0"
    category: str | None = None


@dataclass
class Document:
    """A rendered library element.

    Attributes:
        kind: Element kind
        uuid: UUID of the top-level node
        lines: Document lines without trailing newlines
    """

    kind: EntityKind
    uuid: str
    lines: list[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Document text with lines joined by newlines."""
        return "\n".join(self.lines)
