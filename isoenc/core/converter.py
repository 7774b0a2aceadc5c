"""
isoenc File Converter

Re-encodes text files as ISO-8859-1 using one of the fallback actions.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .encoder import FallbackAction, ISO_8859_1, transcode
from .exceptions import ConversionError
from .report import analyze_text

logger = logging.getLogger(__name__)

NEWLINES = {
    "keep": None,
    "lf": "\n",
    "crlf": "\r\n",
}


@dataclass
class ConversionResult:
    """Summary of a single file conversion."""
    input_path: Path
    output_path: Path
    action: FallbackAction
    characters: int
    bytes_written: int
    unstorable: int

    def to_dict(self):
        return {
            'input_path': str(self.input_path),
            'output_path': str(self.output_path),
            'action': self.action.value,
            'characters': self.characters,
            'bytes_written': self.bytes_written,
            'unstorable': self.unstorable,
        }


def _normalize_newlines(text: str, newline: str) -> str:
    if newline not in NEWLINES:
        raise ValueError(f"Invalid newline mode '{newline}'. Must be one of: {list(NEWLINES)}")
    target = NEWLINES[newline]
    if target is None:
        return text
    return text.replace("\r\n", "\n").replace("\r", "\n").replace("\n", target)


def convert_text(text: str,
                 action: FallbackAction = FallbackAction.DEFAULT,
                 replacement: Optional[str] = None,
                 newline: str = "keep") -> bytes:
    """
    Encode text as ISO-8859-1 bytes ready to be written to disk.

    Args:
        text: Text to encode
        action: Fallback action for unstorable characters
        replacement: Substitute character for REPLACE
        newline: Newline handling, one of keep, lf or crlf

    Returns:
        Encoded bytes
    """
    text = _normalize_newlines(text, newline)
    return transcode(text, action, replacement).encode(ISO_8859_1)


def convert_file(input_path: Union[str, Path],
                 output_path: Union[str, Path],
                 action: FallbackAction = FallbackAction.DEFAULT,
                 replacement: Optional[str] = None,
                 source_encoding: str = "utf-8",
                 newline: str = "keep",
                 overwrite: bool = False) -> ConversionResult:
    """
    Convert a text file to ISO-8859-1.

    Args:
        input_path: File to read
        output_path: File to write
        action: Fallback action for unstorable characters
        replacement: Substitute character for REPLACE
        source_encoding: Encoding of the input file
        newline: Newline handling, one of keep, lf or crlf
        overwrite: Replace an existing output file

    Returns:
        ConversionResult describing the conversion

    Raises:
        ConversionError: If the input cannot be read or decoded, or the
            output exists and ``overwrite`` is not set
    """
    input_path = Path(input_path)
    output_path = Path(output_path)
    action = FallbackAction(action)

    if output_path.exists() and not overwrite:
        raise ConversionError(f"Output file already exists: {output_path}")

    try:
        # newline="" keeps line endings as they are on disk
        with open(input_path, 'r', encoding=source_encoding, newline='') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise ConversionError(f"Cannot read {input_path}: {e}") from e

    report = analyze_text(text)
    data = convert_text(text, action, replacement, newline)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(data)
    except OSError as e:
        raise ConversionError(f"Cannot write {output_path}: {e}") from e

    logger.debug(
        f"Converted {input_path} -> {output_path}: {report.total_code_points} code points, "
        f"{report.unstorable_count} unstorable"
    )

    return ConversionResult(
        input_path=input_path,
        output_path=output_path,
        action=action,
        characters=report.total_code_points,
        bytes_written=len(data),
        unstorable=report.unstorable_count,
    )
