import io
import logging
import os
import sys
from pathlib import Path
from types import SimpleNamespace

from isoenc.core.report import analyze_text
from isoenc.utils.config import LoggingConfig
from isoenc.utils import logger as logger_module
from isoenc.utils.encoding import force_utf8_stdio, safe_console_text
from isoenc.utils.env_loader import find_env_file, load_environment_variables
from isoenc.utils.logger import IsoEncLogger, get_isoenc_logger, get_logger


def test_safe_console_text_utf8():
    stream = SimpleNamespace(encoding="UTF-8")
    assert safe_console_text("x ≠ y", stream) == "x ≠ y"


def test_safe_console_text_latin1():
    stream = SimpleNamespace(encoding="latin-1")
    assert safe_console_text("x ≠ y", stream) == "x U+2260 y"


def test_load_environment_variables(tmp_path: Path, monkeypatch):
    # registers the variable with monkeypatch so it is removed afterwards
    monkeypatch.setenv("ISOENC_TEST_MARKER", "unset")
    monkeypatch.delenv("ISOENC_TEST_MARKER")
    env_file = tmp_path / ".env"
    env_file.write_text("ISOENC_TEST_MARKER=loaded\n", encoding="utf-8")

    assert load_environment_variables(env_file)
    assert os.environ["ISOENC_TEST_MARKER"] == "loaded"


def test_load_environment_variables_missing(tmp_path: Path):
    assert not load_environment_variables(tmp_path / "missing.env")


def test_find_env_file_in_parent(tmp_path: Path):
    (tmp_path / ".env").write_text("", encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert find_env_file(nested) == (tmp_path / ".env").resolve()


def test_logger_writes_file(tmp_path: Path, restore_root_logger):
    log_file = tmp_path / "logs" / "isoenc.log"
    logger = IsoEncLogger(LoggingConfig(level="INFO", console_format="simple", log_file=str(log_file)))

    logger.log_conversion("sample.txt", "escape", characters=5, bytes_written=10, unstorable=1)
    logger.cleanup()

    content = log_file.read_text(encoding="utf-8")
    assert "Converted sample.txt: 5 code points, 10 bytes, 1 unstorable (escape)" in content
    assert restore_root_logger.level == logging.INFO


def test_logger_report_table(capsys, restore_root_logger):
    logger = IsoEncLogger(LoggingConfig(console_format="simple"))

    logger.log_report(analyze_text("x ≠ y"))

    captured = capsys.readouterr()
    assert "U+2260" in captured.err
    assert "4/5 code points storable" in captured.err


def test_safe_console_text_recorded_encoding():
    stream = SimpleNamespace(encoding="utf-8")
    assert safe_console_text("x ≠ y", stream, utf8=False) == "x U+2260 y"


def test_force_utf8_stdio_reports_previous_encoding(monkeypatch):
    monkeypatch.setenv("PYTHONUTF8", "1")
    stdout = io.TextIOWrapper(io.BytesIO(), encoding="latin-1")
    stderr = io.TextIOWrapper(io.BytesIO(), encoding="latin-1")
    monkeypatch.setattr(sys, "stdout", stdout)
    monkeypatch.setattr(sys, "stderr", stderr)

    assert force_utf8_stdio() is False
    assert stdout.encoding == "utf-8"
    assert force_utf8_stdio() is True


def test_get_logger_creates_default(monkeypatch, restore_root_logger):
    monkeypatch.setattr(logger_module, "_global_logger", None)

    log = get_logger("isoenc.test")

    assert isinstance(log, logging.Logger)
    assert log.name == "isoenc.test"
    assert isinstance(logger_module._global_logger, IsoEncLogger)
    assert get_isoenc_logger() is logger_module._global_logger
    assert restore_root_logger.level == logging.WARNING
