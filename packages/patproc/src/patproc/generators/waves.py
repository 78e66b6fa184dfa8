from __future__ import annotations
import math

import numpy as np

from ..api import Generator, GeneratorInfo, GeneratorKind, GenResult, ParamSpec
from ..colors import resolve
from ..params import COMMON_SPECS, WaveParams, coerce_params
from ..shapes import Primitive
from ..tile import wrap
from ..utils import clamp, finite, fmt, fmt2, round_half_up, stroke_width, unit
from patcore.config import DEFAULT_CONFIG
from patcore.rng import resolve_seed

TILE_W = 100.0
STEP = 2.0
AMP_MAX = 250.0


def wave_path(amplitude: float, cycles: int, height: float) -> str:
    xs = np.arange(0.0, TILE_W + STEP / 2, STEP)
    ys = height / 2 + np.sin(xs / TILE_W * 2 * math.pi * cycles) * amplitude
    return " ".join(
        f"{'M' if i == 0 else 'L'}{fmt(x)} {fmt(y)}"
        for i, (x, y) in enumerate(zip(xs.tolist(), ys.tolist()))
    )


class Waves(Generator):
    @property
    def info(self) -> GeneratorInfo:
        return GeneratorInfo(
            name=GeneratorKind.WAVES,
            param_specs=COMMON_SPECS + (
                ParamSpec("amplitude", "float", (0.0, 50.0), "px"),
                ParamSpec("frequency", "float", (0.0, 10.0), "cycles/tile"),
                ParamSpec("stroke_width", "float", (0.1, 20.0), "px"),
                ParamSpec("opacity", "float", (0.0, 1.0)),
            ),
            uses_rng=False,
        )

    def render(self, params, *, palette=None, entropy=None, config=None) -> GenResult:
        p: WaveParams = coerce_params(GeneratorKind.WAVES, params)
        cfg = config or DEFAULT_CONFIG
        seed = resolve_seed(p.seed, entropy)

        amplitude = clamp(finite(p.amplitude, 8.0), 0.0, AMP_MAX)
        # nombre entier de cycles sinon raccord visible au bord de la tuile
        cycles = max(1, round_half_up(clamp(finite(p.frequency, 1.0), 0.0, 50.0)))
        height = max(amplitude * 4, 1.0)

        path = Primitive("path", (
            ("d", wave_path(amplitude, cycles, height)),
            ("fill", "none"),
            ("stroke", resolve(p.stroke, "currentColor", palette)),
            ("stroke-width", fmt(stroke_width(p.stroke_width, 1.5))),
            ("opacity", fmt2(unit(p.opacity, 1.0))),
        ))
        doc = wrap([path], TILE_W, height, pattern_id=cfg.pattern_id, canvas=cfg.canvas_size)
        return GenResult(document=doc, seed=seed)


GEN = Waves()
