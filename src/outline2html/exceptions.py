"""Custom exceptions for outline2html."""


class Outline2htmlError(Exception):
    """Base exception for outline2html operations."""


class SourceNotAvailableError(Outline2htmlError):
    """Source document does not exist or cannot be read."""


class ParseError(Outline2htmlError):
    """Source text does not describe a valid document."""
