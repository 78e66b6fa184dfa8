from __future__ import annotations
import math

from ..api import Generator, GeneratorInfo, GeneratorKind, GenResult, ParamSpec
from ..colors import resolve
from ..params import COMMON_SPECS, LineParams, coerce_params
from ..shapes import Primitive
from ..tile import wrap
from ..utils import clamp, finite, fmt, fmt2, stroke_width, unit
from patcore.config import DEFAULT_CONFIG
from patcore.rng import rng_for

AXIS_EPS = 0.01
TILE_MIN, TILE_MAX = 20.0, 100.0
SPACING_MAX = 500.0


def tile_size(angle_deg: float, spacing: float) -> tuple[float, str]:
    """(tile size, orientation) with orientation in {"h", "v", "d"}.

    Axis-aligned tiles are a whole number of spacings (>= 2, >= TILE_MIN).
    Diagonal tiles use the horizontal period |spacing / sin|, clamped.
    """
    rad = math.radians(angle_deg)
    if abs(math.sin(rad)) < AXIS_EPS:
        orient = "h"
    elif abs(math.cos(rad)) < AXIS_EPS:
        orient = "v"
    else:
        return clamp(abs(spacing / math.sin(rad)), TILE_MIN, TILE_MAX), "d"
    k = max(2, math.ceil(TILE_MIN / spacing))
    return spacing * k, orient


class Lines(Generator):
    @property
    def info(self) -> GeneratorInfo:
        return GeneratorInfo(
            name=GeneratorKind.LINES,
            param_specs=COMMON_SPECS + (
                ParamSpec("angle_deg", "float", (0.0, 360.0), "deg"),
                ParamSpec("spacing", "float", (1.0, 100.0), "px"),
                ParamSpec("stroke_width", "float", (0.1, 20.0), "px"),
                ParamSpec("jitter", "float", (0.0, 1.0)),
                ParamSpec("dash", "str"),
                ParamSpec("opacity", "float", (0.0, 1.0)),
            ),
        )

    def render(self, params, *, palette=None, entropy=None, config=None) -> GenResult:
        p: LineParams = coerce_params(GeneratorKind.LINES, params)
        cfg = config or DEFAULT_CONFIG
        seed, rng = rng_for(p.seed, entropy)

        angle = finite(p.angle_deg, 45.0)
        spacing = clamp(finite(p.spacing, 10.0), 1.0, SPACING_MAX)
        jitter = clamp(finite(p.jitter, 0.0), 0.0, 1.0)
        stroke = resolve(p.stroke, "currentColor", palette)
        style = [
            ("stroke", stroke),
            ("stroke-width", fmt(stroke_width(p.stroke_width, 1.0))),
            ("opacity", fmt2(unit(p.opacity, 1.0))),
        ]
        if p.dash:
            style.append(("stroke-dasharray", str(p.dash)))

        tile, orient = tile_size(angle, spacing)
        rad = math.radians(angle)
        n = math.ceil(tile / spacing) + 2

        prims = []
        for i in range(-1, n):
            off = i * spacing
            if jitter > 0:
                off += (rng.next() - 0.5) * spacing * jitter
            if orient == "h":
                xy = (0.0, off, tile, off)
            elif orient == "v":
                xy = (off, 0.0, off, tile)
            else:
                x1 = -tile + off * math.cos(rad + math.pi / 2)
                y1 = off * math.sin(rad + math.pi / 2)
                xy = (x1, y1, x1 + math.cos(rad) * tile * 2, y1 + math.sin(rad) * tile * 2)
            coords = tuple(zip(("x1", "y1", "x2", "y2"), (fmt(v) for v in xy)))
            prims.append(Primitive("line", coords + tuple(style)))

        doc = wrap(prims, tile, tile, pattern_id=cfg.pattern_id, canvas=cfg.canvas_size)
        return GenResult(document=doc, seed=seed)


GEN = Lines()
