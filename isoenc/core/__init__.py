"""
isoenc Core

Encoder, text inspection and file conversion.
"""

from .encoder import (
    FallbackAction,
    encode_bytes,
    encode_default,
    encode_ignore,
    encode_unicode_escape,
    encode_with_replacement,
    iso_can_store,
    transcode,
)
from .converter import ConversionResult, convert_file, convert_text
from .exceptions import ConversionError, InvalidReplacementError, IsoEncError
from .report import CharsetReport, UnstorableChar, analyze_text

__all__ = [
    "FallbackAction", "encode_bytes", "encode_default", "encode_ignore",
    "encode_unicode_escape", "encode_with_replacement", "iso_can_store", "transcode",
    "ConversionResult", "convert_file", "convert_text",
    "ConversionError", "InvalidReplacementError", "IsoEncError",
    "CharsetReport", "UnstorableChar", "analyze_text",
]
