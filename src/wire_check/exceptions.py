from typing import Optional


class WireCheckError(Exception):
    """Base class for every error raised by wire_check."""


class ParseError(WireCheckError):
    """
    A Go source file could not be read or contains syntax errors.
    `line` and `col` are 1-based when the error has a location.
    """

    def __init__(self, path: str, message: str, line: Optional[int] = None, col: Optional[int] = None):
        location = f"{path}:{line}:{col}" if line is not None else path
        super().__init__(f"{location}: {message}")
        self.path = path
        self.message = message
        self.line = line
        self.col = col


class SettingsError(WireCheckError):
    """Analyzer settings could not be decoded."""


class PackageLoadError(WireCheckError):
    """A directory does not hold a loadable Go package."""
