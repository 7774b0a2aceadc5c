"""
isoenc Text Inspection

Per code point and per byte views of text, used to find out what would be
lost before encoding it as ISO-8859-1.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from .encoder import (
    FallbackAction,
    encode_bytes,
    escape_code_point,
    iso_can_store,
    join_surrogates,
)


@dataclass
class UnstorableChar:
    """A character ISO-8859-1 cannot store, with its code point position."""
    position: int
    char: str
    code_point: int
    escape: str

    def __str__(self) -> str:
        return f"{self.position}: {self.escape}"


@dataclass
class CharsetReport:
    """Result of checking a text against the ISO-8859-1 repertoire."""
    total_code_points: int
    storable_count: int
    unstorable: List[UnstorableChar] = field(default_factory=list)

    @property
    def unstorable_count(self) -> int:
        return len(self.unstorable)

    @property
    def is_storable(self) -> bool:
        """True when the text survives an ISO-8859-1 round trip unchanged."""
        return not self.unstorable


def iter_code_points(text: str) -> Iterator[int]:
    """Yield the code points of ``text``, joining surrogate pairs first."""
    for ch in join_surrogates(text):
        yield ord(ch)


def analyze_text(text: str) -> CharsetReport:
    """
    Find every code point in ``text`` that ISO-8859-1 cannot store.

    Args:
        text: Text to check

    Returns:
        CharsetReport with positions counted in code points
    """
    unstorable = []
    total = 0
    for position, code_point in enumerate(iter_code_points(text)):
        total += 1
        if not iso_can_store(code_point):
            unstorable.append(UnstorableChar(
                position=position,
                char=chr(code_point),
                code_point=code_point,
                escape=escape_code_point(code_point),
            ))

    return CharsetReport(
        total_code_points=total,
        storable_count=total - len(unstorable),
        unstorable=unstorable,
    )


def byte_values(text: str, action: FallbackAction = FallbackAction.DEFAULT) -> List[int]:
    """Return the ISO-8859-1 bytes of ``text`` as a list of ints."""
    return list(encode_bytes(text, action))


def split_code_unit(char: str) -> Tuple[int, int]:
    """
    Split a 16-bit code unit into its high and low byte.

    Raises:
        ValueError: If ``char`` is not a single character in the BMP
    """
    if len(char) != 1 or ord(char) > 0xFFFF:
        raise ValueError(f"Expected a single BMP character, got {char!r}")
    unit = ord(char)
    return (unit & 0xFF00) >> 8, unit & 0x00FF
