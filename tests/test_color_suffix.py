# tests/test_color_suffix_rules.py
from __future__ import annotations

import pytest

# Module under test
from color_describer.description.color.suffix import rules as r
from color_describer.description.color.constants import ADJECTIVE_TIER_DELTAS

WORDS = {
    "light": ("light", "lighter", "lightest", "lightmost"),
    "dark": ("dark", "darker", "darkest", "darkmost"),
    "rich": ("rich", "richer", "richest", "richmost"),
    "dull": ("dull", "duller", "dullest", "dullmost"),
    "bright": ("bright", "brighter", "brightest", "brightmost"),
    "pale": ("pale", "paler", "palest", "palemost"),
    "deep": ("deep", "deeper", "deepest", "deepmost"),
    "weak": ("weak", "weaker", "weakest", "weakmost"),
}

EXPECTED = {
    "light": [(0.15, 0), (0.30, 0), (0.45, 0), (0.60, 0)],
    "dark": [(-0.15, 0), (-0.30, 0), (-0.45, 0), (-0.60, 0)],
    "rich": [(0, 0.10), (0, 0.25), (0, 0.45), (0, 0.70)],
    "dull": [(0, -0.10), (0, -0.25), (0, -0.45), (0, -0.70)],
    "bright": [(0.15, 0.10), (0.30, 0.20), (0.45, 0.40), (0.60, 0.65)],
    "pale": [(0.15, -0.10), (0.30, -0.25), (0.45, -0.45), (0.60, -0.70)],
    "deep": [(-0.15, 0.10), (-0.30, 0.25), (-0.45, 0.45), (-0.60, 0.70)],
    "weak": [(-0.15, -0.10), (-0.30, -0.25), (-0.45, -0.45), (-0.60, -0.70)],
}

CASES = [
    (word, family, tier)
    for family, words in WORDS.items()
    for tier, word in enumerate(words, start=1)
]


# ────────────────────────────────────────────────────────────────────────────
# classify_adjective
# ────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("word,family,tier", CASES)
def test_every_tier_word_is_recognized_exactly(word, family, tier):
    effect = r.classify_adjective(word)
    assert effect is not None
    assert (effect.family, effect.tier) == (family, tier)
    assert (effect.lightness, effect.saturation) == EXPECTED[family][tier - 1]


@pytest.mark.parametrize(
    "token",
    [
        "red",
        "blue",
        "lights",     # light-shaped, unrecognized length
        "brights",
        "pal",
        "Light",      # case-sensitive
        "DARK",
        "lg",
        "dim",
        "",
    ],
)
def test_non_adjectives(token):
    assert r.classify_adjective(token) is None
    assert r.is_adjective(token) is False


def test_first_matching_pattern_decides():
    # 'darkish' passes the dark check; its length picks tier 3
    assert r.classify_adjective("darkish").tier == 3
    # 'darks' passes the dark check but has no tier; deep/dull are not tried
    assert r.classify_adjective("darks") is None
    # only the fixed letter and the length are checked
    assert r.classify_adjective("palish") == r.classify_adjective("palest")


def test_axes():
    assert r.classify_adjective("lighter").axes == ("lightness",)
    assert r.classify_adjective("dullest").axes == ("saturation",)
    assert r.classify_adjective("deep").axes == ("lightness", "saturation")


# ────────────────────────────────────────────────────────────────────────────
# Tier tables
# ────────────────────────────────────────────────────────────────────────────

def test_tier_deltas_match_table():
    for family, rows in EXPECTED.items():
        assert list(r.tier_deltas(family)) == rows
    assert set(ADJECTIVE_TIER_DELTAS) == set(EXPECTED)
    with pytest.raises(KeyError):
        r.tier_deltas("vivid")


@pytest.mark.parametrize("family", ["light", "dark", "bright", "pale", "deep", "weak"])
def test_lightness_stacks_linearly(family):
    deltas = r.tier_deltas(family)
    for k, (dl, _) in enumerate(deltas, start=1):
        assert dl == pytest.approx(k * deltas[0][0])


@pytest.mark.parametrize("family", ["rich", "dull", "pale", "deep", "weak"])
def test_saturation_follows_the_ramp(family):
    # k(k+3)/40: 0.10, 0.25, 0.45, 0.70
    sats = [abs(s) for _, s in r.tier_deltas(family)]
    assert sats == pytest.approx([0.10, 0.25, 0.45, 0.70])


@pytest.mark.parametrize("family", ["bright", "pale", "deep", "weak"])
def test_correlated_families_saturation_is_not_linear(family):
    sats = [abs(s) for _, s in r.tier_deltas(family)]
    assert sats[3] != pytest.approx(4 * sats[0])
    assert sats == sorted(sats)
