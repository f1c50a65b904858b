"""Exception hierarchy for svg2librepcb."""


class Svg2LibrePcbError(Exception):
    """Base exception for all svg2librepcb errors."""

    pass


class InputError(Svg2LibrePcbError):
    """Errors related to reading or parsing the source drawing."""

    pass


class SvgLoadError(InputError):
    """Error reading an SVG file from disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read SVG file '{path}': {reason}")


class SvgParseError(InputError):
    """The source text is not well-formed vector markup."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Could not parse SVG: {reason}")


class ConfigurationError(Svg2LibrePcbError):
    """Invalid or missing settings, reported before any geometry is processed."""

    pass


class MetadataError(ConfigurationError):
    """A metadata field cannot be written to a library element."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid metadata field '{field}': {reason}")


class OutputPathError(ConfigurationError):
    """The library output path is unusable."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid output path '{path}': {reason}")


class GeometryError(Svg2LibrePcbError):
    """Errors in geometric values, such as non-finite coordinates."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
