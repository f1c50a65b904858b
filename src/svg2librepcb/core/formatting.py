"""Text rendering of numbers and strings for LibrePCB documents.

All numeric fields of a document go through format_float and all
free-text fields go through quote, so the output is canonical regardless
of where a value came from.
"""

import math
import unicodedata

from svg2librepcb.exceptions import GeometryError, MetadataError

# Escape sequences understood by the LibrePCB S-expression reader
_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def format_float(value: float) -> str:
    """Render a coordinate with at most 3 decimals in canonical form.

    The value is rounded to 3 decimals, then trailing zeros are removed
    while keeping at least one fractional digit. Anything that rounds to
    zero, including negative zero, renders as "0.0".

    Args:
        value: Finite number to render

    Returns:
        Canonical decimal text

    Raises:
        GeometryError: If value is NaN or infinite

    Examples:
        >>> format_float(3.14456)
        '3.145'
        >>> format_float(-7.0)
        '-7.0'
        >>> format_float(0.4)
        '0.4'
        >>> format_float(-0.0)
        '0.0'
    """
    if not math.isfinite(value):
        raise GeometryError(f"Cannot format non-finite value {value!r}")

    text = f"{value:.3f}"
    if text in ("0.000", "-0.000"):
        return "0.0"

    integral, fractional = text.split(".")
    fractional = fractional.rstrip("0") or "0"
    return f"{integral}.{fractional}"


def format_bool(value: bool) -> str:
    """Render a boolean as the literal true/false."""
    return "true" if value else "false"


def quote(text: str, field: str = "text") -> str:
    """Wrap a free-text field in double quotes, escaping its content.

    Backslashes, double quotes, newlines, carriage returns and tabs are
    escaped. Other control characters cannot be represented and are
    rejected.

    Args:
        text: Field content
        field: Field name used in error messages

    Returns:
        Quoted text

    Raises:
        MetadataError: If text contains an unsupported control character
    """
    parts: list[str] = []
    for char in text:
        escaped = _ESCAPES.get(char)
        if escaped is not None:
            parts.append(escaped)
        elif unicodedata.category(char) == "Cc":
            raise MetadataError(field, f"unsupported control character U+{ord(char):04X}")
        else:
            parts.append(char)
    return '"' + "".join(parts) + '"'
