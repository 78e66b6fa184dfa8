from __future__ import annotations
from typing import Iterable

from .shapes import Primitive
from .utils import fmt

SVG_NS = "http://www.w3.org/2000/svg"


def wrap(
    primitives: Iterable[Primitive],
    tile_width: float,
    tile_height: float,
    *,
    pattern_id: str = "p",
    canvas: int = 100,
) -> str:
    """Self-contained SVG: one <pattern> repeat unit filling a fixed canvas.

    Tile dims are floored at 1 unit; a zero-size pattern renders nothing at all.
    """
    w = max(float(tile_width), 1.0)
    h = max(float(tile_height), 1.0)
    inner = "\n      ".join(p.to_svg() for p in primitives)
    c = fmt(canvas)
    return (
        f'<svg xmlns="{SVG_NS}" width="{c}" height="{c}" viewBox="0 0 {c} {c}">\n'
        f"  <defs>\n"
        f'    <pattern id="{pattern_id}" width="{fmt(w)}" height="{fmt(h)}" patternUnits="userSpaceOnUse">\n'
        f"      {inner}\n"
        f"    </pattern>\n"
        f"  </defs>\n"
        f'  <rect width="100%" height="100%" fill="url(#{pattern_id})"/>\n'
        f"</svg>"
    )
