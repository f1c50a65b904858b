"""I/O layer for svg2librepcb.

This module handles reading SVG drawings using svgelements and writing
generated elements into a LibrePCB library directory. It provides a
clean abstraction layer between svgelements and the domain models.

Key responsibilities:
- Load SVG files
- Flatten SVG shapes into domain polylines
- Create the library directory layout and write element files

Key classes:
- SvgReader: Load SVG files and extract polylines
- LibraryWriter: Save generated elements
"""

from svg2librepcb.io.reader import SvgReader, parse_vector_art
from svg2librepcb.io.writer import LibraryWriter

__all__ = [
    "LibraryWriter",
    "SvgReader",
    "parse_vector_art",
]
