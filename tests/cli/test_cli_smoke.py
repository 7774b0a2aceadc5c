import os
import subprocess, sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]


def run_cli(*args, cwd: Path = ROOT, io_encoding: str = "utf-8"):
    env = {k: v for k, v in os.environ.items() if not k.startswith("ISOENC_")}
    env["PYTHONIOENCODING"] = io_encoding
    return subprocess.run(
        [sys.executable, "-m", "isoenc.cli.main", *args],
        capture_output=True, text=True, encoding="utf-8", cwd=cwd, env=env,
    )


def test_cli_help():
    res = run_cli("--help")
    assert res.returncode == 0
    assert "isoenc" in res.stdout


def test_encode_escape():
    res = run_cli("encode", "x ≠ y", "--action", "escape")
    assert res.returncode == 0
    assert res.stdout.strip() == "x U+2260 y"


def test_encode_default_uses_config():
    res = run_cli("-q", "encode", "x ≠ y")
    assert res.returncode == 0
    assert res.stdout.strip() == "x ? y"


def test_encode_replace():
    res = run_cli("encode", "x ≠ y", "-a", "replace", "-r", "!")
    assert res.returncode == 0
    assert res.stdout.strip() == "x ! y"


def test_encode_replace_without_replacement_fails():
    res = run_cli("encode", "x ≠ y", "-a", "replace")
    assert res.returncode == 1
    assert "Encoding failed" in res.stderr


def test_encode_hex():
    res = run_cli("encode", "x ≠ y", "--hex")
    assert res.returncode == 0
    assert res.stdout.strip() == "78 20 3f 20 79"


def test_inspect_reports_unstorable():
    res = run_cli("inspect", "-q", "≠x ≠")
    assert res.returncode == 2
    assert res.stdout.split() == ["0:", "U+2260", "3:", "U+2260"]


def test_inspect_storable_text():
    res = run_cli("inspect", "café")
    assert res.returncode == 0
    assert "All 4 code points are storable" in res.stdout


def test_inspect_requires_input():
    res = run_cli("inspect")
    assert res.returncode == 1


def test_convert_file(tmp_path: Path):
    src = tmp_path / "in.txt"
    src.write_text("x ≠ y", encoding="utf-8")
    dst = tmp_path / "out.txt"

    res = run_cli("convert", str(src), str(dst), "--action", "ignore")
    assert res.returncode == 0
    assert "Unstorable: 1 (ignore)" in res.stdout
    assert dst.read_bytes() == b"x  y"

    res = run_cli("convert", str(src), str(dst))
    assert res.returncode == 1
    assert "Conversion failed" in res.stderr


def test_config_show_quiet():
    res = run_cli("config", "show", "--quiet")
    assert res.returncode == 0
    assert "encoding.action=default" in res.stdout
    assert "output.newline=keep" in res.stdout


def test_config_show_unknown_section():
    res = run_cli("config", "show", "--section", "nope")
    assert res.returncode == 1


def test_config_validate():
    res = run_cli("config", "validate")
    assert res.returncode == 0
    assert "Configuration is valid" in res.stdout


def test_custom_config_file(tmp_path: Path):
    config_file = tmp_path / "custom.yaml"
    config_file.write_text("encoding:\n  action: escape\n", encoding="utf-8")

    res = run_cli("--config", str(config_file), "encode", "x ≠ y")
    assert res.returncode == 0
    assert res.stdout.strip() == "x U+2260 y"


def test_custom_config_file_yml(tmp_path: Path):
    config_file = tmp_path / "custom.yml"
    config_file.write_text("encoding:\n  action: escape\n", encoding="utf-8")

    res = run_cli("--config", str(config_file), "encode", "x ≠ y")
    assert res.returncode == 0
    assert res.stdout.strip() == "x U+2260 y"


def test_encode_replacement_without_replace_action_warns():
    res = run_cli("encode", "x ≠ y", "-r", "!")
    assert res.returncode == 0
    assert res.stdout.strip() == "x ? y"
    assert "ignored" in res.stderr


def test_inspect_escapes_on_latin1_console():
    res = run_cli("inspect", "x ≠", io_encoding="latin-1")
    assert res.returncode == 2
    assert "1 unstorable: U+2260 U+2260" in res.stdout
    assert "≠" not in res.stdout
