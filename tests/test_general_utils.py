# tests/test_general_utils.py
"""End-to-end tests for general utils (load_config, log) with env overrides."""

from __future__ import annotations

import io
import json
from importlib import import_module

import pytest

# the package re-exports a function named load_config, so fetch the modules by path
LC = import_module("color_describer.description.general.utils.load_config")
LOG = import_module("color_describer.description.general.utils.log")

ConfigFileNotFound = LC.ConfigFileNotFound
ConfigParseError = LC.ConfigParseError
ConfigTypeError = LC.ConfigTypeError
DataDirNotFound = LC.DataDirNotFound
load_config = LC.load_config


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point loader via DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("DATA_DIR", str(data))
    return data


# ---------- load_config tests ----------
def test_default_data_dir_holds_the_palette():
    data = load_config("simple_palette")
    assert "colors" in data and "aliases" in data
    assert data["colors"]["transparent"] == "#00000000"


def test_load_config_runs_validator(tmp_data_dir):
    (tmp_data_dir / "settings.json").write_text(json.dumps({"alpha": 1}), encoding="utf-8")

    def validator(d: dict) -> dict:
        return {**d, "beta": "ok"}

    assert load_config("settings", validator=validator) == {"alpha": 1, "beta": "ok"}
    assert load_config("settings.json") == {"alpha": 1}


def test_load_config_validator_errors_become_parse_errors(tmp_data_dir):
    (tmp_data_dir / "settings.json").write_text(json.dumps({"alpha": 1}), encoding="utf-8")

    def failing(d: dict) -> dict:
        raise ValueError("nope")

    with pytest.raises(ConfigParseError, match="nope"):
        load_config("settings", validator=failing)


@pytest.mark.parametrize("content", ["[1, 2]", '"fern"', "3"])
def test_load_config_requires_an_object(tmp_data_dir, content):
    (tmp_data_dir / "oops.json").write_text(content, encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        load_config("oops")


def test_load_config_missing_file(tmp_data_dir):
    with pytest.raises(ConfigFileNotFound):
        load_config("does_not_exist")


def test_load_config_invalid_json(tmp_data_dir):
    (tmp_data_dir / "broken.json").write_text('{"a": 1,', encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("broken")


def test_load_config_allow_comments(tmp_data_dir):
    cfg = tmp_data_dir / "cmt.json"
    cfg.write_text('{"a": 1, /* note */ "b": 2, // trailing\n}', encoding="utf-8")

    with pytest.raises(ConfigParseError):
        load_config("cmt")
    assert load_config("cmt", allow_comments=True) == {"a": 1, "b": 2}


def test_load_config_refuses_escape_from_data_dir(tmp_data_dir):
    outside = tmp_data_dir.parent / "secret.json"
    outside.write_text(json.dumps({"x": 1}), encoding="utf-8")
    with pytest.raises(ConfigFileNotFound):
        load_config("../secret")


def test_secondary_env_var_is_honoured(tmp_path, monkeypatch):
    data = tmp_path / "alt"
    data.mkdir()
    (data / "x.json").write_text('{"k": [1, 2]}', encoding="utf-8")
    monkeypatch.setenv("COLOR_DESCRIBER_DATA_DIR", str(data))
    assert load_config("x") == {"k": [1, 2]}


def test_explicit_base_dir_beats_env(tmp_path, tmp_data_dir):
    (tmp_path / "only.json").write_text('{"k": "v"}', encoding="utf-8")
    assert LC.resolve_data_dir(tmp_path) == tmp_path.resolve()
    assert load_config("only", base_dir=tmp_path) == {"k": "v"}


def test_env_override_must_be_a_directory(tmp_path, monkeypatch):
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "missing"))
    with pytest.raises(DataDirNotFound):
        load_config("simple_palette")


# ---------- log.debug tests ----------
def test_log_debug_respects_topics_env(monkeypatch):
    monkeypatch.setenv(LOG.TOPICS_ENV_VAR, "match")
    LOG.reload_topics()

    buf = io.StringIO()
    LOG.debug("hello on match", topic="match", stream=buf)
    LOG.debug("should be silent", topic="parse", stream=buf)

    out = buf.getvalue()
    assert "[match][DEBUG] hello on match" in out
    assert "should be silent" not in out


def test_log_debug_all_and_level(monkeypatch):
    monkeypatch.setenv(LOG.TOPICS_ENV_VAR, "all")
    LOG.reload_topics()

    buf = io.StringIO()
    LOG.debug("anything", topic="Parse ", level="warning", stream=buf)
    assert "[parse][WARNING] anything" in buf.getvalue()


def test_log_debug_defaults_to_stderr(capsys):
    LOG.debug("to stderr")
    captured = capsys.readouterr()
    assert "to stderr" in captured.err
    assert captured.out == ""
