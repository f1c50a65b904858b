"""svg2librepcb - Generate LibrePCB library elements from SVG line art.

svg2librepcb is a CLI tool that turns the outlines of an SVG drawing into
LibrePCB library elements: a package with one footprint per selected board
layer and, optionally, a symbol, a component and a device that tie them
together.

Example:
    $ svg2librepcb logo.svg --outpath ~/LibrePCB/libs/Logos.lplib \\
        --name "Logo" --author "Jane" --uuid-pkgcat <category-uuid>

This will create a package with copper, placement and stop mask footprints
whose polygons follow the paths of logo.svg.
"""

__version__ = "0.1.0"
__author__ = "svg2librepcb contributors"

__all__ = ["__author__", "__version__"]
