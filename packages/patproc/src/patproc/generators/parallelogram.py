from __future__ import annotations
import math

from ..api import Generator, GeneratorInfo, GeneratorKind, GenResult, ParamSpec
from ..colors import resolve
from ..params import COMMON_SPECS, ParallelogramParams, coerce_params
from ..shapes import Primitive, paint_attrs
from ..tile import wrap
from ..utils import clamp, finite, fmt, stroke_width
from patcore.config import DEFAULT_CONFIG
from patcore.rng import resolve_seed

SKEW_MAX = 75.0
SIDE_MAX = 500.0


def sheared_quad(width: float, height: float, skew_deg: float, gap: float):
    """Vertices of the sheared rectangle plus the (w, h) of the tile containing it."""
    shear = height * math.tan(math.radians(skew_deg))
    tile_w = width + abs(shear) + 2 * gap
    tile_h = height + 2 * gap
    cx, cy = tile_w / 2, tile_h / 2
    # bord haut décalé de +shear/2, bord bas de -shear/2
    top, bottom = cy - height / 2, cy + height / 2
    pts = [
        (cx - width / 2 + shear / 2, top),
        (cx + width / 2 + shear / 2, top),
        (cx + width / 2 - shear / 2, bottom),
        (cx - width / 2 - shear / 2, bottom),
    ]
    return pts, tile_w, tile_h


class Parallelogram(Generator):
    @property
    def info(self) -> GeneratorInfo:
        return GeneratorInfo(
            name=GeneratorKind.PARALLELOGRAM,
            param_specs=COMMON_SPECS + (
                ParamSpec("width", "float", (1.0, 100.0), "px"),
                ParamSpec("height", "float", (1.0, 100.0), "px"),
                ParamSpec("skew", "float", (-SKEW_MAX, SKEW_MAX), "deg"),
                ParamSpec("gap", "float", (0.0, 100.0), "px"),
                ParamSpec("stroke_width", "float", (0.0, 10.0), "px"),
                ParamSpec("filled", "bool"),
            ),
            uses_rng=False,
        )

    def render(self, params, *, palette=None, entropy=None, config=None) -> GenResult:
        p: ParallelogramParams = coerce_params(GeneratorKind.PARALLELOGRAM, params)
        cfg = config or DEFAULT_CONFIG
        seed = resolve_seed(p.seed, entropy)

        width = clamp(finite(p.width, 20.0), 0.0, SIDE_MAX)
        height = clamp(finite(p.height, 10.0), 0.0, SIDE_MAX)
        skew = clamp(finite(p.skew, 20.0), -SKEW_MAX, SKEW_MAX)
        gap = clamp(finite(p.gap, 5.0), 0.0, SIDE_MAX)
        paint = paint_attrs(
            resolve(p.fill, "currentColor", palette),
            resolve(p.stroke, "currentColor", palette),
            stroke_width(p.stroke_width, 1.0),
            bool(p.filled),
        )

        pts, tile_w, tile_h = sheared_quad(width, height, skew, gap)
        quad = Primitive("polygon", (("points", " ".join(f"{fmt(x)},{fmt(y)}" for x, y in pts)),) + tuple(paint))
        doc = wrap([quad], tile_w, tile_h, pattern_id=cfg.pattern_id, canvas=cfg.canvas_size)
        return GenResult(document=doc, seed=seed)


GEN = Parallelogram()
