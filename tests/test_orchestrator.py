# tests/test_orchestrator.py
"""Orchestrator entry points and the color-describer CLI."""

from __future__ import annotations

import json

import pytest

from color_describer import demo
from color_describer.description import orchestrator as orch
from color_describer.description.color.recovery import UnknownColorError
from color_describer.description.color.recovery import target_resolution as tr
from color_describer.description.color.utils.oklab import from_hex
from color_describer.description.color.vocab import lookup


@pytest.fixture(autouse=True)
def no_matplotlib(monkeypatch):
    """Keep XKCD lookups offline and tiny."""
    monkeypatch.setattr(tr, "_get_xkcd_colors", lambda: {})


# ---------- describe ----------
def test_describe_plain_name():
    out = orch.describe("fern")
    assert out["description"] == "fern"
    assert out["hex"] == "#4e7942"
    assert out["in_gamut"] is True
    assert set(out["oklab"]) == {"L", "A", "B", "alpha"}
    assert out["oklab"]["alpha"] == 1.0


def test_describe_unknown_is_neutral():
    out = orch.describe("nothing here")
    assert out["hex"] == "#000000"
    assert out["oklab"] == {"L": 0.0, "A": 0.5, "B": 0.5, "alpha": 0.0}


# ---------- match ----------
def test_match_palette_name():
    out = orch.match("fern")
    assert out["description"] == "fern"
    assert out["distance"] == 0.0
    assert out["names"] == ["fern"]
    assert out["intensity"] == 40
    assert out["target"] == "fern"
    assert out["target_hex"] == out["hex"] == "#4e7942"


def test_match_color_value():
    out = orch.match(lookup("denim"), 1)
    assert out["target"] == "#3088b8"
    assert out["description"] == "denim"


def test_match_unknown_raises():
    with pytest.raises(UnknownColorError):
        orch.match("blorple")


@pytest.mark.parametrize("raw,expected", [("3", 3), ("0", 1), ("-2", 1), ("abc", 1)])
def test_default_mix_count_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv(orch.MIX_COUNT_ENV_VAR, raw)
    assert orch.default_mix_count() == expected


def test_default_mix_count_unset():
    assert orch.default_mix_count() == 1


# ---------- gradient / palette ----------
def test_gradient_hex_codes():
    out = orch.gradient("fern", "#3088b8", 4)
    assert len(out) == 4
    assert out[0] == "#4e7942"
    assert out[-1] == "#3088b8"
    assert orch.gradient(from_hex("#000000"), "white", 0) == []


def test_gradient_chain_passes_through_stops():
    out = orch.gradient_chain(["fern", "tan", "#3088b8"], 9)
    assert len(out) == 9
    assert out[0] == "#4e7942"
    assert out[-1] == "#3088b8"
    assert orch.gradient_chain(["fern"], 5) == ["#4e7942"]
    assert orch.gradient_chain([], 5) == []


@pytest.mark.parametrize("order,first", [("alpha", "apricot"), ("hue", "transparent"), ("lightness", "black")])
def test_palette_listing(order, first):
    out = orch.palette_listing(order)
    assert len(out) == 50
    assert out[0]["name"] == first
    assert all(len(item["hex"]) == 9 for item in out)


def test_palette_listing_rejects_unknown_order():
    with pytest.raises(ValueError):
        orch.palette_listing("random")


# ---------- CLI ----------
def test_cli_parse(capsys):
    demo.main(["parse", "light", "fern"])
    out = json.loads(capsys.readouterr().out)
    assert out["description"] == "light fern"
    assert out["hex"].startswith("#")


def test_cli_match(capsys):
    demo.main(["match", "fern", "--mix", "1"])
    out = json.loads(capsys.readouterr().out)
    assert out["description"] == "fern"


def test_cli_gradient_and_palette(capsys):
    demo.main(["gradient", "fern", "denim", "--steps", "3"])
    assert len(json.loads(capsys.readouterr().out)) == 3

    demo.main(["palette", "--order", "hue"])
    assert json.loads(capsys.readouterr().out)[0]["name"] == "transparent"


def test_cli_gradient_through_several_colors(capsys):
    demo.main(["gradient", "fern", "tan", "#3088b8", "--steps", "5"])
    out = json.loads(capsys.readouterr().out)
    assert out == orch.gradient_chain(["fern", "tan", "#3088b8"], 5)
    assert out[-1] == "#3088b8"


def test_cli_debug_traces_to_stderr(capsys):
    demo.main(["--debug", "parse", "fern"])
    captured = capsys.readouterr()
    assert "[orchestrator]" in captured.err
    assert json.loads(captured.out)["hex"] == "#4e7942"


def test_cli_error_exit_code(capsys):
    with pytest.raises(SystemExit) as ei:
        demo.main(["match", "blorple"])
    assert ei.value.code == 1
    assert "Unknown color 'blorple'" in capsys.readouterr().err
