from pathlib import Path

import pytest

from isoenc.core.converter import convert_file, convert_text
from isoenc.core.encoder import FallbackAction
from isoenc.core.exceptions import ConversionError


def test_convert_file_escape(tmp_path: Path):
    src = tmp_path / "in.txt"
    src.write_text("x ≠ y\ncafé\n", encoding="utf-8")
    dst = tmp_path / "out" / "out.txt"

    result = convert_file(src, dst, action=FallbackAction.ESCAPE)

    assert dst.read_bytes() == b"x U+2260 y\ncaf\xe9\n"
    assert result.characters == 11
    assert result.bytes_written == 16
    assert result.unstorable == 1
    assert result.action is FallbackAction.ESCAPE
    assert result.to_dict()["action"] == "escape"


def test_convert_file_replace(tmp_path: Path):
    src = tmp_path / "in.txt"
    src.write_text("x ≠ y", encoding="utf-8")
    dst = tmp_path / "out.txt"

    convert_file(src, dst, action="replace", replacement="!")

    assert dst.read_bytes() == b"x ! y"


def test_convert_file_refuses_overwrite(tmp_path: Path):
    src = tmp_path / "in.txt"
    src.write_text("abc", encoding="utf-8")
    dst = tmp_path / "out.txt"
    dst.write_bytes(b"old")

    with pytest.raises(ConversionError):
        convert_file(src, dst)
    assert dst.read_bytes() == b"old"

    convert_file(src, dst, overwrite=True)
    assert dst.read_bytes() == b"abc"


def test_convert_missing_input(tmp_path: Path):
    with pytest.raises(ConversionError):
        convert_file(tmp_path / "missing.txt", tmp_path / "out.txt")


def test_convert_undecodable_input(tmp_path: Path):
    src = tmp_path / "in.txt"
    src.write_bytes(b"\xff\xfe\xfa")

    with pytest.raises(ConversionError):
        convert_file(src, tmp_path / "out.txt")


def test_convert_other_source_encoding(tmp_path: Path):
    src = tmp_path / "in.txt"
    src.write_bytes("€uro".encode("cp1252"))
    dst = tmp_path / "out.txt"

    result = convert_file(src, dst, action=FallbackAction.ESCAPE, source_encoding="cp1252")

    assert dst.read_bytes() == b"U+20acuro"
    assert result.unstorable == 1


def test_convert_text_newlines():
    assert convert_text("a\nb\r\nc", newline="crlf") == b"a\r\nb\r\nc"
    assert convert_text("a\r\nb\rc", newline="lf") == b"a\nb\nc"
    assert convert_text("a\r\nb", newline="keep") == b"a\r\nb"


def test_convert_text_invalid_newline():
    with pytest.raises(ValueError):
        convert_text("a", newline="cr")
