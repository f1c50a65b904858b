"""Library writer for saving generated elements.

This module provides the LibraryWriter class that places generated
documents into a LibrePCB library directory, one directory per element:

    <library>/pkg/<uuid>/.librepcb-pkg
    <library>/pkg/<uuid>/package.lp
"""

from collections.abc import Iterable
from pathlib import Path

import structlog

from svg2librepcb.domain import Document
from svg2librepcb.exceptions import OutputPathError

# Content of the per-element version marker file
FILE_FORMAT_VERSION = "0.1"

logger = structlog.get_logger(__name__)


class LibraryWriter:
    """Writes generated documents into a LibrePCB library.

    Example:
        writer = LibraryWriter(Path("Logos.lplib"))
        writer.validate()
        writer.write_all(library.documents)
    """

    def __init__(self, library_path: Path) -> None:
        """Initialize the library writer.

        Args:
            library_path: Root directory of the LibrePCB library
        """
        self._library_path = library_path

    @property
    def library_path(self) -> Path:
        return self._library_path

    def validate(self) -> Path:
        """Check that the library path is an existing directory.

        Returns:
            Resolved library path

        Raises:
            OutputPathError: If the path does not exist or is not a directory
        """
        try:
            resolved = self._library_path.resolve(strict=True)
        except (OSError, RuntimeError) as e:
            raise OutputPathError(str(self._library_path), "does not exist") from e

        if not resolved.is_dir():
            raise OutputPathError(str(resolved), "is not a directory")

        self._library_path = resolved
        return resolved

    def element_dir(self, document: Document) -> Path:
        """Directory an element is stored in."""
        return self._library_path / document.kind.directory / document.uuid

    def write(self, document: Document) -> Path:
        """Write one document and its version marker.

        Args:
            document: Generated document

        Returns:
            Path of the written document file

        Raises:
            OutputPathError: If the element directory cannot be written
        """
        element_dir = self.element_dir(document)
        target = element_dir / document.kind.filename
        try:
            element_dir.mkdir(parents=True, exist_ok=True)
            (element_dir / document.kind.marker_filename).write_text(
                FILE_FORMAT_VERSION, encoding="utf-8"
            )
            target.write_text(document.text, encoding="utf-8")
        except OSError as e:
            raise OutputPathError(str(element_dir), str(e)) from e

        logger.info("Element written", kind=document.kind.directory, path=str(target))
        return target

    def write_all(self, documents: Iterable[Document]) -> list[Path]:
        """Write several documents.

        Args:
            documents: Generated documents

        Returns:
            Paths of the written document files, in input order
        """
        return [self.write(document) for document in documents]
