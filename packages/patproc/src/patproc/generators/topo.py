from __future__ import annotations
import math

import numpy as np

from ..api import Generator, GeneratorInfo, GeneratorKind, GenResult, ParamSpec
from ..colors import resolve
from ..params import COMMON_SPECS, TopoParams, coerce_params
from ..shapes import Primitive
from ..tile import wrap
from ..utils import as_count, fmt, fmt2, stroke_width, unit
from patcore.config import DEFAULT_CONFIG
from patcore.rng import rng_for

TILE = 80.0
SEGMENTS = 12
CENTER_JITTER = 20.0
RADIUS_JITTER = 0.4  # ±20 % du rayon de base


class Topo(Generator):
    """Concentric, jittered closed contours around one centre (topo-map look)."""

    @property
    def info(self) -> GeneratorInfo:
        return GeneratorInfo(
            name=GeneratorKind.TOPO,
            param_specs=COMMON_SPECS + (
                ParamSpec("levels", "int", (1, 20)),
                ParamSpec("stroke_width", "float", (0.1, 20.0), "px"),
                ParamSpec("opacity", "float", (0.0, 1.0)),
            ),
        )

    def render(self, params, *, palette=None, entropy=None, config=None) -> GenResult:
        p: TopoParams = coerce_params(GeneratorKind.TOPO, params)
        cfg = config or DEFAULT_CONFIG
        seed, rng = rng_for(p.seed, entropy)

        levels = as_count(p.levels, 5, cfg.max_levels)
        style = (
            ("fill", "none"),
            ("stroke", resolve(p.stroke, "currentColor", palette)),
            ("stroke-width", fmt(stroke_width(p.stroke_width, 0.8))),
            ("opacity", fmt2(unit(p.opacity, 0.6))),
        )

        cx = TILE / 2 + (rng.next() - 0.5) * CENTER_JITTER
        cy = TILE / 2 + (rng.next() - 0.5) * CENTER_JITTER
        ang = np.arange(SEGMENTS, dtype=np.float64) * (2 * math.pi / SEGMENTS)
        cos_a, sin_a = np.cos(ang), np.sin(ang)

        prims = []
        for level in range(levels):
            base = 5 + level * (TILE / levels / 2)
            radii = np.array([base + (rng.next() - 0.5) * base * RADIUS_JITTER for _ in range(SEGMENTS)])
            xs = (cx + cos_a * radii).tolist()
            ys = (cy + sin_a * radii).tolist()
            d = " ".join(f"{'M' if i == 0 else 'L'}{fmt(x)} {fmt(y)}" for i, (x, y) in enumerate(zip(xs, ys)))
            prims.append(Primitive("path", (("d", d + " Z"),) + style))

        doc = wrap(prims, TILE, TILE, pattern_id=cfg.pattern_id, canvas=cfg.canvas_size)
        return GenResult(document=doc, seed=seed)


GEN = Topo()
