"""
isoenc CLI Encode Command

Encodes inline text with the configured or requested fallback action.
"""

from typing import Optional

from ...core.encoder import FallbackAction, ISO_8859_1, transcode
from ...core.report import analyze_text
from ...utils.config import IsoEncConfig
from ...utils.logger import IsoEncLogger


def encode_text(text: str,
                config: IsoEncConfig,
                logger: IsoEncLogger,
                action: Optional[str] = None,
                replacement: Optional[str] = None,
                as_hex: bool = False) -> str:
    """
    Encode text for printing.

    Args:
        text: Text to encode
        config: Loaded configuration, supplies defaults
        logger: Logging system
        action: Fallback action, overrides the configured one
        replacement: Replacement character, overrides the configured one
        as_hex: Return the ISO-8859-1 bytes as space separated hex

    Returns:
        Encoded text, or its bytes as hex
    """
    fallback = FallbackAction(action or config.encoding.action)
    if replacement is not None and fallback is not FallbackAction.REPLACE:
        logger.get_logger("isoenc.encode").warning(
            f"Replacement {replacement!r} ignored for action '{fallback.value}'"
        )
    if replacement is None:
        replacement = config.encoding.replacement

    encoded = transcode(text, fallback, replacement)
    data = encoded.encode(ISO_8859_1)

    report = analyze_text(text)
    logger.log_conversion(
        source="<text>",
        action=fallback.value,
        characters=report.total_code_points,
        bytes_written=len(data),
        unstorable=report.unstorable_count,
    )

    if as_hex:
        return data.hex(" ")
    return encoded
