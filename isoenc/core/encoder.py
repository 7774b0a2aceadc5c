"""
isoenc Encoder

Encodes Unicode text into ISO-8859-1. Characters the encoding cannot store
are handled by one of four fallback actions:

- REPLACE: substitute a fixed, caller supplied character
- DEFAULT: substitute the codec's own replacement, ``?``
- IGNORE: drop the character
- ESCAPE: write the character as ``U+<hex>``, e.g. ``"\\u2260"`` becomes ``"U+2260"``

Every ``encode_*`` function returns the text as it reads after a round trip
through ISO-8859-1, so code points 0x00-0xFF come back unchanged.
"""

import codecs
import logging
from enum import Enum
from functools import lru_cache
from typing import Optional

from .exceptions import InvalidReplacementError

logger = logging.getLogger(__name__)

ISO_8859_1 = "iso-8859-1"
QUESTION_BYTES = "?".encode(ISO_8859_1)


class FallbackAction(str, Enum):
    """Policy applied to characters ISO-8859-1 cannot store."""
    REPLACE = "replace"
    DEFAULT = "default"
    IGNORE = "ignore"
    ESCAPE = "escape"


def join_surrogates(text: str) -> str:
    """
    Join UTF-16 surrogate pairs held as two code units into one code point.

    Lone surrogates are left in place.
    """
    if not any("\ud800" <= ch <= "\udfff" for ch in text):
        return text
    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def check_replacement(replacement: Optional[str]) -> str:
    """
    Validate a replacement character.

    Args:
        replacement: Candidate replacement

    Returns:
        The replacement, unchanged

    Raises:
        InvalidReplacementError: If it is not exactly one storable character
    """
    if not isinstance(replacement, str) or len(replacement) != 1:
        raise InvalidReplacementError(replacement)
    if ord(replacement) > 0xFF:
        raise InvalidReplacementError(replacement)
    return replacement


@lru_cache(maxsize=None)
def _register_replacement(replacement: str) -> str:
    name = f"isoenc.replace.{ord(replacement):02x}"

    def handler(exc):
        if not isinstance(exc, UnicodeEncodeError):
            raise exc
        return replacement * (exc.end - exc.start), exc.end

    codecs.register_error(name, handler)
    return name


def replacement_error_handler(replacement: str) -> str:
    """
    Return the name of a codec error handler that substitutes ``replacement``.

    The handler is registered with ``codecs.register_error`` on first use.

    Raises:
        InvalidReplacementError: If the replacement is not one storable character
    """
    return _register_replacement(check_replacement(replacement))


def _require_text(text) -> str:
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")
    return text


def encode_with_replacement(text: str, replacement: str) -> str:
    """
    Encode text, substituting ``replacement`` for every unstorable character.

    Lone surrogates are replaced the same way, so the output has exactly one
    character per input code point.

    Args:
        text: Text to encode
        replacement: Single ISO-8859-1 character used as the substitute

    Returns:
        The encoded text decoded back from ISO-8859-1

    Raises:
        InvalidReplacementError: If the replacement itself is not storable
    """
    text = join_surrogates(_require_text(text))
    encoded = text.encode(ISO_8859_1, errors=replacement_error_handler(replacement))
    return encoded.decode(ISO_8859_1)


def encode_ignore(text: str) -> str:
    """Encode text, dropping every character ISO-8859-1 cannot store."""
    encoded = join_surrogates(_require_text(text)).encode(ISO_8859_1, errors="ignore")
    return encoded.decode(ISO_8859_1)


def encode_default(text: str) -> str:
    """Encode text with the codec's own ``?`` substitute."""
    encoded = join_surrogates(_require_text(text)).encode(ISO_8859_1, errors="replace")
    return encoded.decode(ISO_8859_1)


def iso_can_store(code_point: int) -> bool:
    """
    Return True if ISO-8859-1 can store ``code_point``.

    The code point is encoded on its own with the default substitute. If the
    result is the encoded ``?`` the code point was not storable, except for
    ``?`` itself.
    """
    if code_point == ord("?"):
        return True
    encoded = chr(code_point).encode(ISO_8859_1, errors="replace")
    return encoded != QUESTION_BYTES


def escape_code_point(code_point: int) -> str:
    """Return the ``U+<hex>`` form of a code point, lowercase and unpadded."""
    return "U+" + format(code_point, "x")


def encode_unicode_escape(text: str) -> str:
    """
    Encode text, writing each unstorable code point as ``U+<hex>``.

    Not optimized: the encoder runs once per code point.

    Args:
        text: Text to encode

    Returns:
        Text with every storable character unchanged and every other
        code point replaced by its escape
    """
    text = join_surrogates(_require_text(text))
    return "".join(
        ch if iso_can_store(ord(ch)) else escape_code_point(ord(ch))
        for ch in text
    )


def transcode(text: str,
              action: FallbackAction = FallbackAction.DEFAULT,
              replacement: Optional[str] = None) -> str:
    """
    Encode text with the given fallback action.

    Args:
        text: Text to encode
        action: Fallback action for unstorable characters
        replacement: Substitute character, required for REPLACE

    Returns:
        The encoded text decoded back from ISO-8859-1

    Raises:
        InvalidReplacementError: If REPLACE is used without a valid replacement
    """
    action = FallbackAction(action)
    logger.debug(f"Transcoding {len(text)} characters with action={action.value}")

    if action is FallbackAction.REPLACE:
        return encode_with_replacement(text, replacement)
    if action is FallbackAction.IGNORE:
        return encode_ignore(text)
    if action is FallbackAction.ESCAPE:
        return encode_unicode_escape(text)
    return encode_default(text)


def encode_bytes(text: str,
                 action: FallbackAction = FallbackAction.DEFAULT,
                 replacement: Optional[str] = None) -> bytes:
    """Return the ISO-8859-1 bytes of ``text`` under ``action``."""
    return transcode(text, action, replacement).encode(ISO_8859_1)
