from __future__ import annotations
import math
from dataclasses import dataclass
from xml.sax.saxutils import escape, quoteattr

import numpy as np

from .utils import fmt

SHAPES = ("circle", "square", "diamond", "triangle", "hexagon", "star", "glyph")

# Noms hérités de l'UI
_SHAPE_ALIASES = {
    "polygon": "triangle",
    "emoji": "glyph",
    "symbol": "glyph",
    "text": "glyph",
}

DEFAULT_SYMBOL = "●"


@dataclass(frozen=True)
class Primitive:
    """One serialisable SVG element."""
    tag: str
    attrs: tuple[tuple[str, str], ...]
    text: str | None = None

    def attr(self, name: str) -> str | None:
        for k, v in self.attrs:
            if k == name:
                return v
        return None

    def to_svg(self) -> str:
        a = "".join(f" {k}={quoteattr(v)}" for k, v in self.attrs)
        if self.text is None:
            return f"<{self.tag}{a}/>"
        return f"<{self.tag}{a}>{escape(self.text)}</{self.tag}>"


def normalize_shape(kind: str | None) -> str:
    k = kind.strip().lower() if isinstance(kind, str) else "circle"
    k = _SHAPE_ALIASES.get(k, k)
    return k if k in SHAPES else "circle"


def paint_attrs(fill: str, stroke: str, stroke_width: float, filled: bool) -> list[tuple[str, str]]:
    if filled:
        return [("fill", fill), ("stroke", "none")]
    return [("fill", "none"), ("stroke", stroke), ("stroke-width", fmt(stroke_width))]


def regular_points(cx: float, cy: float, radii: np.ndarray, step: float, offset: float) -> str:
    """Polygon `points` for len(radii) vertices at angles i*step + offset."""
    ang = np.arange(len(radii), dtype=np.float64) * step + offset
    xs = cx + radii * np.cos(ang)
    ys = cy + radii * np.sin(ang)
    return " ".join(f"{fmt(x)},{fmt(y)}" for x, y in zip(xs.tolist(), ys.tolist()))


def _rotate(deg: float, cx: float, cy: float) -> tuple[str, str]:
    return ("transform", f"rotate({fmt(deg)} {fmt(cx)} {fmt(cy)})")


def emit(
    kind: str,
    cx: float,
    cy: float,
    size: float,
    rotation: float,
    fill: str,
    stroke: str,
    stroke_width: float,
    filled: bool,
    symbol: str = DEFAULT_SYMBOL,
) -> Primitive:
    """Render one shape centred on (cx, cy). `rotation` is in degrees."""
    kind = normalize_shape(kind)
    r = size / 2.0
    paint = paint_attrs(fill, stroke, stroke_width, filled)
    rot = [_rotate(rotation, cx, cy)] if fmt(rotation) != "0" else []

    if kind == "circle":
        attrs = [("cx", fmt(cx)), ("cy", fmt(cy)), ("r", fmt(r))]
        return Primitive("circle", tuple(attrs + paint + rot))

    if kind == "square":
        attrs = [("x", fmt(cx - r)), ("y", fmt(cy - r)), ("width", fmt(size)), ("height", fmt(size))]
        return Primitive("rect", tuple(attrs + paint + rot))

    if kind == "diamond":
        h = 0.7 * r
        attrs = [("x", fmt(cx - h)), ("y", fmt(cy - h)), ("width", fmt(2 * h)), ("height", fmt(2 * h))]
        return Primitive("rect", tuple(attrs + paint + [_rotate(45.0 + rotation, cx, cy)]))

    if kind == "triangle":
        pts = regular_points(cx, cy, np.full(3, r), 2 * math.pi / 3, -math.pi / 2)
        return Primitive("polygon", tuple([("points", pts)] + paint + rot))

    if kind == "hexagon":
        pts = regular_points(cx, cy, np.full(6, r), math.pi / 3, 0.0)
        return Primitive("polygon", tuple([("points", pts)] + paint + rot))

    if kind == "star":
        radii = np.where(np.arange(10) % 2 == 0, r, 0.4 * r)
        pts = regular_points(cx, cy, radii, math.pi / 5, -math.pi / 2)
        return Primitive("polygon", tuple([("points", pts)] + paint + rot))

    # glyph
    attrs = [
        ("x", fmt(cx)), ("y", fmt(cy)), ("font-size", fmt(size)),
        ("text-anchor", "middle"), ("dominant-baseline", "central"),
    ]
    text = symbol if isinstance(symbol, str) and symbol else DEFAULT_SYMBOL
    return Primitive("text", tuple(attrs + paint + rot), text=text)
