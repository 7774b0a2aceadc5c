"""
isoenc Exceptions

Error types raised by the encoder and the file converter.
"""


class IsoEncError(Exception):
    """Base class for isoenc errors."""


class InvalidReplacementError(IsoEncError, ValueError):
    """Raised when a replacement cannot be stored as a single ISO-8859-1 character."""

    def __init__(self, replacement):
        super().__init__(
            f"Replacement must be a single ISO-8859-1 character, got {replacement!r}"
        )
        self.replacement = replacement


class ConversionError(IsoEncError):
    """Raised when a file cannot be read, decoded or written."""
