#
# rgbfusion - Copyright (C) 2026 The rgbfusion Authors
#
# This program is free software: you can redistribute it and/or modify it
# under the terms of the GNU Lesser General Public License as published
# by the Free Software Foundation, version 3.
#
# This program is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY
# or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Lesser General Public
# License for more details.
#
"""Tests for the effect argument parsers."""

from __future__ import annotations

import pytest

from rgbfusion.client.effect_parsers import (
    MOTHERBOARD_PARSERS,
    PERIPHERAL_PARSERS,
    EffectArgumentError,
    FlashParser,
    StaticColorParser,
    UsageError,
    resolve_effect,
)
from rgbfusion.effects import DIGITAL_PATTERNS, ColorCycle, DigitalPattern, Flash, Off, Pulse, StaticColor
from rgbfusion.peripheral_effects import GvColorCycle, GvOff, GvStaticColor

# Minimal valid arguments for each keyword
SAMPLES = {
    "static": ["static", "red"],
    "colorcycle": ["colorcycle"],
    "pulse": ["pulse", "blue"],
    "flash": ["flash", "green"],
    "off": ["off"],
    **{"digital-%s" % p.lower(): ["digital-%s" % p.lower()] for p in DIGITAL_PATTERNS},
}


def parse(*tokens):
    result = resolve_effect(MOTHERBOARD_PARSERS, list(tokens))
    assert result is not None
    return result.effect


# ─────────────────────────────────────────────────────────────────────────────
# Grammars
# ─────────────────────────────────────────────────────────────────────────────


class TestMotherboardGrammars:
    """Tests for each motherboard effect grammar."""

    def test_static(self):
        assert parse("static", "red") == StaticColor((255, 0, 0))

    def test_static_brightness(self):
        assert parse("static", "#0000ff", "-b", "40") == StaticColor((0, 0, 255), brightness=40)

    def test_keyword_is_case_insensitive(self):
        assert parse("STATIC", "Red") == StaticColor("red")

    def test_colorcycle(self):
        assert parse("colorcycle", "2.5", "--brightness", "60") == ColorCycle(seconds=2.5, brightness=60)

    def test_colorcycle_defaults(self):
        assert parse("colorcycle") == ColorCycle()

    def test_pulse(self):
        effect = parse("pulse", "blue", "2", "-b", "50", "--min-brightness", "10")
        assert effect == Pulse((0, 0, 255), speed=2.0, brightness=50, min_brightness=10)

    def test_flash(self):
        assert parse("flash", "red", "-n", "3", "-i", "1.5") == Flash("red", count=3, interval=1.5)

    def test_digital(self):
        assert parse("digital-c", "00ff00", "-s", "0.5") == DigitalPattern("C", color=(0, 255, 0), speed=0.5)

    def test_digital_without_color(self):
        assert parse("digital-i") == DigitalPattern("I")

    def test_off(self):
        assert parse("off") == Off()


class TestPeripheralGrammars:
    """Tests for the peripheral effect grammars."""

    def test_static(self):
        result = resolve_effect(PERIPHERAL_PARSERS, ["static", "red", "-b", "30"])
        assert result.effect == GvStaticColor("red", brightness=30)

    def test_colorcycle_speed(self):
        result = resolve_effect(PERIPHERAL_PARSERS, ["colorcycle", "7"])
        assert result.effect == GvColorCycle(speed=7)

    def test_colorcycle_speed_out_of_range(self):
        with pytest.raises(EffectArgumentError, match="speed"):
            resolve_effect(PERIPHERAL_PARSERS, ["colorcycle", "12"])

    def test_off(self):
        assert resolve_effect(PERIPHERAL_PARSERS, ["off"]).effect == GvOff()

    def test_motherboard_only_keyword(self):
        assert resolve_effect(PERIPHERAL_PARSERS, ["pulse", "red"]) is None


# ─────────────────────────────────────────────────────────────────────────────
# Matching and errors
# ─────────────────────────────────────────────────────────────────────────────


class TestTryParse:
    """Tests for keyword matching and token consumption."""

    def test_no_keyword(self):
        """A missing keyword is not an error."""
        assert StaticColorParser().try_parse(["pulse", "red"]) is None
        assert resolve_effect(MOTHERBOARD_PARSERS, ["sparkle"]) is None

    def test_empty_tokens(self):
        assert resolve_effect(MOTHERBOARD_PARSERS, []) is None

    def test_remaining_tokens(self):
        """Tokens the grammar does not use are handed back."""
        result = StaticColorParser().try_parse(["extra", "static", "red", "more"])
        assert result.effect == StaticColor("red")
        assert result.remaining == ["extra", "more"]

    def test_stops_at_next_keyword(self):
        """Values after another keyword belong to that keyword."""
        keywords = {parser.keyword for parser in MOTHERBOARD_PARSERS}
        result = FlashParser().try_parse(["flash", "red", "pulse", "blue"], keywords)
        assert result.effect == Flash("red")
        assert result.remaining == ["pulse", "blue"]

    def test_unconsumed_tokens_are_logged(self, caplog):
        resolve_effect(MOTHERBOARD_PARSERS, ["off", "whatever"])
        assert "whatever" in caplog.text


class TestErrors:
    """Malformed values are user errors, distinct from no match."""

    @pytest.mark.parametrize(
        "tokens",
        [
            ["static"],
            ["static", "notacolor"],
            ["static", "red", "-b", "150"],
            ["static", "red", "-b", "bright"],
            ["pulse", "red", "-b", "50", "--min-brightness", "80"],
            ["flash", "red", "-n", "11"],
            ["colorcycle", "0"],
            ["digital-a", "-s", "100"],
        ],
        ids=lambda tokens: " ".join(tokens),
    )
    def test_malformed(self, tokens):
        with pytest.raises(EffectArgumentError):
            resolve_effect(MOTHERBOARD_PARSERS, tokens)

    def test_is_usage_error(self):
        with pytest.raises(UsageError, match="static"):
            resolve_effect(MOTHERBOARD_PARSERS, ["static", "notacolor"])


# ─────────────────────────────────────────────────────────────────────────────
# Priority
# ─────────────────────────────────────────────────────────────────────────────


class TestPriority:
    """The earlier parser in the priority list wins."""

    def test_motherboard_order(self):
        assert [p.keyword for p in MOTHERBOARD_PARSERS] == [
            "static",
            "colorcycle",
            "pulse",
            "flash",
            *["digital-%s" % p for p in "abcdefghi"],
            "off",
        ]

    def test_peripheral_order(self):
        assert [p.keyword for p in PERIPHERAL_PARSERS] == ["off", "static", "colorcycle"]

    @pytest.mark.parametrize(
        "first, second",
        list(zip(MOTHERBOARD_PARSERS, MOTHERBOARD_PARSERS[1:])),
        ids=lambda parser: parser.keyword,
    )
    def test_adjacent_pairs(self, first, second):
        """Argument order does not matter, list order does."""
        expected = resolve_effect([first], SAMPLES[first.keyword]).effect
        tokens = SAMPLES[second.keyword] + SAMPLES[first.keyword]

        result = resolve_effect(MOTHERBOARD_PARSERS, tokens)

        assert result.effect == expected
        assert result.remaining == SAMPLES[second.keyword]

    def test_peripheral_off_wins(self):
        result = resolve_effect(PERIPHERAL_PARSERS, ["static", "red", "off"])
        assert result.effect == GvOff()
