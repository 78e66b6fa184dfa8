from __future__ import annotations
import math

import pytest

from patproc.colors import DEFAULT_PALETTE, TOKENS, is_literal, make_palette, resolve
from patproc.utils import as_count, clamp, finite, fmt, fmt2, round_half_up


def test_tokens_resolve_to_theme_vars():
    assert resolve("primary", "currentColor") == "hsl(var(--primary))"
    assert resolve("background", "currentColor") == "hsl(var(--background))"
    assert resolve("currentColor", "x") == "currentColor"
    assert set(TOKENS) == set(DEFAULT_PALETTE)


@pytest.mark.parametrize("lit", ["#fff", "#ff0000", "#ff000080", "rgb(1, 2, 3)", "hsl(200 50% 50%)",
                                 "oklch(0.7 0.1 200)", "none", "transparent"])
def test_literals_pass_through(lit):
    assert is_literal(lit)
    assert resolve(lit, "fallback") == lit


@pytest.mark.parametrize("bad", ["not-a-color", "url(javascript:alert(1))", "#12", 'red" onload="x'])
def test_unknown_falls_back(bad):
    assert resolve(bad, "currentColor") == "currentColor"


def test_missing_token_uses_fallback():
    assert resolve(None, "fb") == "fb"
    assert resolve("", "fb") == "fb"


def test_palette_override_is_isolated():
    pal = make_palette({"primary": "#000000"})
    assert resolve("primary", "x", pal) == "#000000"
    assert resolve("accent", "x", pal) == "hsl(var(--accent))"
    assert DEFAULT_PALETTE["primary"] == "hsl(var(--primary))"
    with pytest.raises(TypeError):
        pal["primary"] = "#fff"


def test_fmt():
    assert fmt(12.0) == "12"
    assert fmt(12.5) == "12.5"
    assert fmt(3.14159) == "3.1"
    assert fmt(-0.04) == "0"
    assert fmt(-2.0) == "-2"
    assert fmt2(0.3) == "0.30"
    assert fmt2(-0.001) == "0.00"


def test_numeric_guards():
    assert round_half_up(2.5) == 3
    assert round_half_up(-0.5) == 0
    assert finite(None, 1) == 1.0
    assert finite(math.nan, 2) == 2.0
    assert finite(math.inf, 2) == 2.0
    assert finite("abc", 3) == 3.0
    assert finite(True, 4) == 4.0
    assert finite("5", 0) == 5.0
    assert clamp(7, 0, 5) == 5 and clamp(-1, 0, 5) == 0
    assert as_count(1e9, 0, 100) == 100
    assert as_count(-3, 0, 100) == 0
    assert as_count(math.inf, 7, 100) == 7


def test_non_string_tokens_use_fallback():
    assert resolve(5, "fb") == "fb"
    assert resolve(["primary"], "fb") == "fb"


def test_round_half_up_non_finite():
    assert round_half_up(math.inf) == 0
    assert round_half_up(math.nan) == 0
