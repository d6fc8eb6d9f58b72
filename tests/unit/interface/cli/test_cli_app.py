from __future__ import annotations

"""
Unit tests for the CLI controller.

Each subcommand is driven through main() with an isolated HOME so that
settings and directories never touch the real user profile.
"""

import io
import os

import pytest

from vimbutil.interface.cli.app import main
from vimbutil.interface.cli.args import build_parser

pytestmark = pytest.mark.usefixtures("reset_logging", "isolated_home")


def test_parser_requires_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_path_command(tmp_path, capsys) -> None:
    base = str(tmp_path / "base")
    assert main(["path", "c.txt", "--dir", base]) == 0
    assert capsys.readouterr().out.strip() == f"{base}/c.txt"
    assert os.path.isdir(base)


def test_uniq_command(tmp_path, capsys) -> None:
    f = tmp_path / "history"
    f.write_text("a\nB\nb\nA\n", encoding="utf-8")

    assert main(["uniq", str(f), "--ignore-case"]) == 0
    assert capsys.readouterr().out.splitlines() == ["b", "A"]


def test_uniq_missing_file_prints_nothing(tmp_path, capsys) -> None:
    assert main(["uniq", str(tmp_path / "missing")]) == 0
    assert capsys.readouterr().out == ""


def test_find_command(capsys) -> None:
    assert main(["find", "HeLLo World", "world"]) == 0
    assert capsys.readouterr().out.strip() == "6"
    assert main(["find", "abc", "abcd"]) == 1


def test_replace_command(capsys) -> None:
    assert main(["replace", "a", "bb", "banana"]) == 0
    assert capsys.readouterr().out.strip() == "bbbnbbnbb"


def test_tmp_command_from_argument(capsys) -> None:
    assert main(["tmp", "payload"]) == 0
    path = capsys.readouterr().out.strip()
    try:
        with open(path, "r", encoding="utf-8") as f:
            assert f.read() == "payload"
    finally:
        os.unlink(path)


def test_tmp_command_from_stdin(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("from stdin\n"))
    assert main(["tmp"]) == 0
    path = capsys.readouterr().out.strip()
    try:
        with open(path, "r", encoding="utf-8") as f:
            assert f.read() == "from stdin\n"
    finally:
        os.unlink(path)


def test_dirs_command(isolated_home, capsys) -> None:
    assert main(["dirs"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        f"config: {os.path.join(isolated_home, '.config', 'vimb')}",
        f"cache: {os.path.join(isolated_home, '.cache', 'vimb')}",
        f"home: {isolated_home}",
    ]


def test_settings_option_is_used(tmp_path, capsys) -> None:
    settings = tmp_path / "settings.json"
    settings.write_text('{"project": "custom"}', encoding="utf-8")

    assert main(["--settings", str(settings), "tmp", "x"]) == 0
    path = capsys.readouterr().out.strip()
    try:
        assert os.path.basename(path).startswith("custom-")
    finally:
        os.unlink(path)


def test_log_flag_writes_default_log_file(isolated_home) -> None:
    assert main(["--log", "find", "abc", "b"]) == 0
    log_file = os.path.join(isolated_home, ".cache", "vimb", "logs", "vimbutil.log")
    assert os.path.isfile(log_file)


def test_bad_encoding_in_settings_does_not_break_uniq(tmp_path, capsys) -> None:
    settings = tmp_path / "settings.json"
    settings.write_text('{"encoding": "bogus"}', encoding="utf-8")
    f = tmp_path / "list"
    f.write_text("x\ny\nx\n", encoding="utf-8")

    assert main(["--settings", str(settings), "uniq", str(f)]) == 0
    assert capsys.readouterr().out.splitlines() == ["y", "x"]
