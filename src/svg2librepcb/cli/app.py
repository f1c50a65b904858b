"""CLI application entry point for svg2librepcb.

This module provides the main CLI interface using Typer. It can also be
used as an Inkscape output extension: the original SVG is echoed on
stdout and the --id option Inkscape passes is accepted.
"""

from pathlib import Path
from typing import Annotated

import typer

from svg2librepcb import __version__
from svg2librepcb.cli.output import (
    print_drawing_info,
    print_error,
    print_header,
    print_step,
    print_success,
)
from svg2librepcb.config import build_settings
from svg2librepcb.core import LibraryGenerator, compute_bounds
from svg2librepcb.domain import Alignment
from svg2librepcb.exceptions import (
    ConfigurationError,
    InputError,
    Svg2LibrePcbError,
)
from svg2librepcb.io import LibraryWriter, SvgReader
from svg2librepcb.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="svg2librepcb",
    help="Generate LibrePCB packages, symbols, components and devices from SVG files.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"svg2librepcb v{__version__}")
        raise typer.Exit()


@app.command()
def generate(
    svgfile: Annotated[
        Path,
        typer.Argument(
            help="The SVG file to load",
            show_default=False,
        ),
    ],
    outpath: Annotated[
        Path,
        typer.Option(
            "--outpath",
            help="LibrePCB library directory",
            rich_help_panel="Directories",
        ),
    ],
    name: Annotated[
        str,
        typer.Option("--name", help="Library element name", rich_help_panel="Metadata"),
    ],
    author: Annotated[
        str,
        typer.Option("--author", help="Library element author", rich_help_panel="Metadata"),
    ],
    description: Annotated[
        str,
        typer.Option("--description", help="Library element description", rich_help_panel="Metadata"),
    ] = "",
    version: Annotated[
        str,
        typer.Option("--version", help="Library element version", rich_help_panel="Metadata"),
    ] = "0.1.0",
    keywords: Annotated[
        str,
        typer.Option("--keywords", help="Library element keywords", rich_help_panel="Metadata"),
    ] = "",
    uuid_pkg: Annotated[
        str | None,
        typer.Option("--uuid-pkg", help="Package UUID [default: random]", rich_help_panel="UUIDs"),
    ] = None,
    uuid_sym: Annotated[
        str | None,
        typer.Option("--uuid-sym", help="Symbol UUID [default: random]", rich_help_panel="UUIDs"),
    ] = None,
    uuid_cmp: Annotated[
        str | None,
        typer.Option("--uuid-cmp", help="Component UUID [default: random]", rich_help_panel="UUIDs"),
    ] = None,
    uuid_dev: Annotated[
        str | None,
        typer.Option("--uuid-dev", help="Device UUID [default: random]", rich_help_panel="UUIDs"),
    ] = None,
    uuid_pkgcat: Annotated[
        str | None,
        typer.Option(
            "--uuid-pkgcat",
            help="Package category UUID (required when generating a package)",
            rich_help_panel="UUIDs",
        ),
    ] = None,
    uuid_symcat: Annotated[
        str | None,
        typer.Option("--uuid-symcat", help="Symbol category UUID", rich_help_panel="UUIDs"),
    ] = None,
    uuid_cmpcat: Annotated[
        str | None,
        typer.Option("--uuid-cmpcat", help="Component category UUID", rich_help_panel="UUIDs"),
    ] = None,
    uuid_devcat: Annotated[
        str | None,
        typer.Option("--uuid-devcat", help="Device category UUID", rich_help_panel="UUIDs"),
    ] = None,
    layer_copper: Annotated[
        bool,
        typer.Option(
            "--layer-copper/--no-layer-copper",
            help="Generate copper layer footprint",
            rich_help_panel="Layers",
        ),
    ] = True,
    layer_placement: Annotated[
        bool,
        typer.Option(
            "--layer-placement/--no-layer-placement",
            help="Generate placement layer footprint",
            rich_help_panel="Layers",
        ),
    ] = True,
    layer_stopmask: Annotated[
        bool,
        typer.Option(
            "--layer-stopmask/--no-layer-stopmask",
            help="Generate stop mask layer footprint",
            rich_help_panel="Layers",
        ),
    ] = True,
    package: Annotated[
        bool,
        typer.Option(
            "--package/--no-package",
            help="Generate a package",
            rich_help_panel="Elements",
        ),
    ] = True,
    symbol: Annotated[
        bool,
        typer.Option("--symbol", help="Generate a symbol", rich_help_panel="Elements"),
    ] = False,
    component: Annotated[
        bool,
        typer.Option(
            "--component",
            help="Generate a component (implies --symbol)",
            rich_help_panel="Elements",
        ),
    ] = False,
    device: Annotated[
        bool,
        typer.Option(
            "--device",
            help="Generate a device (implies --component and --package)",
            rich_help_panel="Elements",
        ),
    ] = False,
    flattening_tolerance: Annotated[
        float,
        typer.Option(
            "--flattening-tolerance",
            help="Flattening tolerance",
            rich_help_panel="Parameters",
        ),
    ] = 0.15,
    align: Annotated[
        Alignment,
        typer.Option(
            "--align",
            help="Align the drawing (symbols are always centered)",
            case_sensitive=False,
            rich_help_panel="Parameters",
        ),
    ] = Alignment.NONE,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _inkscape_ids: Annotated[  # noqa: ARG001
        list[str] | None,
        typer.Option(
            "--id",
            hidden=True,
            help="Passed in by Inkscape, ignored",
        ),
    ] = None,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version-info",
            "-V",
            help="Show program version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Convert the paths of an SVG file into LibrePCB library elements.

    Closed paths become filled polygons, open paths become 0.2 mm strokes.
    A package gets one footprint per selected layer; --symbol, --component
    and --device add the schematic side.

    Example:
        svg2librepcb logo.svg --outpath Logos.lplib --name Logo \\
            --author Jane --uuid-pkgcat <uuid>

    The original SVG is printed on stdout for Inkscape.
    """
    try:
        settings = build_settings(
            metadata={
                "name": name,
                "author": author,
                "description": description,
                "version": version,
                "keywords": keywords,
            },
            uuids={
                "pkg": uuid_pkg,
                "sym": uuid_sym,
                "cmp": uuid_cmp,
                "dev": uuid_dev,
                "pkgcat": uuid_pkgcat,
                "symcat": uuid_symcat,
                "cmpcat": uuid_cmpcat,
                "devcat": uuid_devcat,
            },
            layers={
                "copper": layer_copper,
                "placement": layer_placement,
                "stopmask": layer_stopmask,
            },
            entities={
                "package": package,
                "symbol": symbol,
                "component": component,
                "device": device,
            },
            parameters={
                "flattening_tolerance": flattening_tolerance,
                "alignment": align,
            },
            logging={
                "log_file": log_file,
                "log_level": log_level,
            },
        )
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    try:
        # Output location is checked before any geometry work
        writer = LibraryWriter(outpath)
        library_path = writer.validate()

        if not quiet:
            print_step("Loading drawing")

        reader = SvgReader(svgfile)
        reader.load()
        svg_text = reader.text
        polylines = reader.polylines(settings.parameters.flattening_tolerance)
        reader.close()

        if not quiet:
            print_drawing_info(
                svg_path=str(svgfile),
                polylines=len(polylines),
                points=sum(len(polyline) for polyline in polylines),
                bounds=compute_bounds(polylines),
            )
            print_step("Generating")

        generator = LibraryGenerator(settings)
        library = generator.generate(polylines)
        written = writer.write_all(library.documents)

        if not quiet:
            print_success(
                library_path=str(library_path),
                documents=library.documents,
                written=written,
                total_time_s=library.stats.duration_seconds,
            )

    except InputError as e:
        print_error(str(e), details="Nothing was written to the library.")
        raise typer.Exit(code=1)
    except Svg2LibrePcbError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)

    # Echo original SVG on stdout for compatibility with Inkscape
    typer.echo(svg_text)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
