"""Command-line interface for svg2librepcb.

This module provides the CLI using Typer with rich output for
user-friendly feedback on stderr.

Key features:
- Metadata, UUID, layer and element selection options
- Inkscape extension compatibility (SVG echo on stdout)
- Detailed error reporting
"""

from svg2librepcb.cli.app import cli, main

__all__ = ["cli", "main"]
