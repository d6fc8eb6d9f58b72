from __future__ import annotations

"""
Unit tests for settings persistence.
"""

import json
import os

from vimbutil.domain.settings import (
    UtilSettings,
    get_settings_path,
    load_settings,
    save_settings,
)


def test_defaults() -> None:
    s = UtilSettings()
    assert s.project == "vimb"
    assert s.encoding == "utf-8"
    assert s.tmp_prefix == "vimb-"


def test_missing_file_gives_defaults(tmp_path) -> None:
    assert load_settings(str(tmp_path / "none.json")) == UtilSettings()


def test_round_trip(tmp_path) -> None:
    path = str(tmp_path / "nested" / "settings.json")
    settings = UtilSettings(project="demo", encoding="latin-1")

    assert save_settings(settings, path) is True
    assert load_settings(path) == settings


def test_partial_file_merges_defaults_and_ignores_unknown(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"encoding": "latin-1", "theme": "dark"}), encoding="utf-8")

    assert load_settings(str(path)) == UtilSettings(encoding="latin-1")


def test_corrupted_file_gives_defaults(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_settings(str(path)) == UtilSettings()

    path.write_text("[1, 2]", encoding="utf-8")
    assert load_settings(str(path)) == UtilSettings()


def test_default_path_lives_in_config_dir(isolated_home) -> None:
    path = get_settings_path()
    assert path == os.path.join(isolated_home, ".config", "vimb", "settings.json")


def test_save_failure_returns_false(tmp_path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x")
    assert save_settings(UtilSettings(), str(blocker / "settings.json")) is False


def test_unknown_encoding_gives_defaults(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"project": "demo", "encoding": "bogus"}), encoding="utf-8")
    assert load_settings(str(path)) == UtilSettings()


def test_non_string_values_give_defaults(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"encoding": 8}), encoding="utf-8")
    assert load_settings(str(path)) == UtilSettings()

    path.write_text(json.dumps({"project": ["vimb"]}), encoding="utf-8")
    assert load_settings(str(path)) == UtilSettings()
