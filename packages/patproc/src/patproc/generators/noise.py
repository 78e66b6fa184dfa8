from __future__ import annotations

from ..api import Generator, GeneratorInfo, GeneratorKind, GenResult, ParamSpec
from ..colors import resolve
from ..params import COMMON_SPECS, NoiseParams, coerce_params
from ..shapes import Primitive
from ..tile import wrap
from ..utils import clamp, finite, fmt, fmt2, round_half_up, unit
from patcore.config import DEFAULT_CONFIG
from patcore.rng import rng_for

TILE = 50.0
MAX_DOTS = 500


class Noise(Generator):
    """Grain: low-opacity dots at uniform positions. Not a continuous noise field."""

    @property
    def info(self) -> GeneratorInfo:
        return GeneratorInfo(
            name=GeneratorKind.NOISE,
            param_specs=COMMON_SPECS + (
                ParamSpec("intensity", "float", (0.0, 1.0)),
                ParamSpec("granularity", "float", (0.1, 10.0), "px"),
                ParamSpec("opacity", "float", (0.0, 1.0)),
            ),
        )

    def render(self, params, *, palette=None, entropy=None, config=None) -> GenResult:
        p: NoiseParams = coerce_params(GeneratorKind.NOISE, params)
        cfg = config or DEFAULT_CONFIG
        seed, rng = rng_for(p.seed, entropy)

        intensity = clamp(finite(p.intensity, 0.5), 0.0, 1.0)
        granularity = clamp(finite(p.granularity, 1.0), 0.0, TILE)
        opacity = unit(p.opacity, 0.3)
        fill = resolve(p.fill, "currentColor", palette)

        prims = []
        for _ in range(round_half_up(intensity * MAX_DOTS)):
            x = rng.next() * TILE
            y = rng.next() * TILE
            r = 0.5 + rng.next() * granularity
            a = 0.3 + rng.next() * 0.7
            prims.append(Primitive("circle", (
                ("cx", fmt(x)), ("cy", fmt(y)), ("r", fmt2(r)),
                ("fill", fill), ("opacity", fmt2(a * opacity)),
            )))

        doc = wrap(prims, TILE, TILE, pattern_id=cfg.pattern_id, canvas=cfg.canvas_size)
        return GenResult(document=doc, seed=seed)


GEN = Noise()
