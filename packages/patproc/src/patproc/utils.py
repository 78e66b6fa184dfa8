from __future__ import annotations
import math


def fmt(v: float) -> str:
    """Coordinate to string, rounded to 1 decimal ("12", "12.5"; never "-0")."""
    s = f"{float(v):.1f}"
    if s == "-0.0":
        return "0"
    return s[:-2] if s.endswith(".0") else s


def fmt2(v: float) -> str:
    s = f"{float(v):.2f}"
    return "0.00" if s == "-0.00" else s


def round_half_up(x: float) -> int:
    if not math.isfinite(x):
        return 0
    return int(math.floor(x + 0.5))


def finite(v, default: float) -> float:
    """`v` as float, or `default` when missing, non-numeric or non-finite."""
    if v is None or isinstance(v, bool):
        return float(default)
    try:
        x = float(v)
    except (TypeError, ValueError):
        return float(default)
    return x if math.isfinite(x) else float(default)


def clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else hi if x > hi else x


def as_count(v, default: int, hi: int) -> int:
    """Non-negative integer count, clamped to `hi`."""
    x = finite(v, default)
    return int(clamp(round_half_up(x), 0, hi))


STROKE_MAX = 100.0


def stroke_width(v, default: float) -> float:
    return clamp(finite(v, default), 0.0, STROKE_MAX)


def unit(v, default: float) -> float:
    """Opacity-like knob in [0, 1]."""
    return clamp(finite(v, default), 0.0, 1.0)
