"""
isoenc - ISO-8859-1 text encoding toolkit

Encodes Unicode text into ISO-8859-1 with replace, ignore, default
substitution and U+<hex> escape strategies for unstorable characters.
"""

__version__ = "0.1.0"
__author__ = "isoenc Team"

# Core imports
from .core.encoder import (
    FallbackAction,
    encode_bytes,
    encode_default,
    encode_ignore,
    encode_unicode_escape,
    encode_with_replacement,
    iso_can_store,
    transcode,
)
from .core.exceptions import ConversionError, InvalidReplacementError, IsoEncError
from .core.report import CharsetReport, analyze_text
from .core.converter import ConversionResult, convert_file
from .utils.config import ConfigManager, IsoEncConfig, get_config, load_config

__all__ = [
    "FallbackAction", "encode_bytes", "encode_default", "encode_ignore",
    "encode_unicode_escape", "encode_with_replacement", "iso_can_store", "transcode",
    "ConversionError", "InvalidReplacementError", "IsoEncError",
    "CharsetReport", "analyze_text",
    "ConversionResult", "convert_file",
    "ConfigManager", "IsoEncConfig", "get_config", "load_config",
]
