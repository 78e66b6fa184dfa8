from __future__ import annotations

from ..api import Generator, GeneratorInfo, GeneratorKind, GenResult, ParamSpec
from ..colors import resolve
from ..params import COMMON_SPECS, ScatterParams, coerce_params
from ..shapes import SHAPES, emit, normalize_shape
from ..tile import wrap
from ..utils import as_count, clamp, finite, stroke_width
from patcore.config import DEFAULT_CONFIG
from patcore.rng import rng_for

TILE = 80.0
EDGE = 15.0
SIZE_MAX = 500.0


class Scatter(Generator):
    """Random shapes in a square tile, with a single-axis edge wrap.

    Shapes whose recorded x (resp. y) falls in the first EDGE units get one
    copy shifted by +TILE on that axis only. Corners are not copied
    diagonally; changing this would alter every existing seed's output.
    """

    @property
    def info(self) -> GeneratorInfo:
        return GeneratorInfo(
            name=GeneratorKind.SCATTER,
            param_specs=COMMON_SPECS + (
                ParamSpec("shape", "enum", enum=SHAPES + ("polygon", "emoji", "symbol", "text")),
                ParamSpec("symbol", "str"),
                ParamSpec("count", "int", (0, 200)),
                ParamSpec("density", "float", (0.0, 1.0)),
                ParamSpec("size_min", "float", (1.0, 50.0), "px"),
                ParamSpec("size_max", "float", (1.0, 100.0), "px"),
                ParamSpec("rotation_range", "float", (0.0, 360.0), "deg"),
                ParamSpec("stroke_width", "float", (0.0, 10.0), "px"),
                ParamSpec("filled", "bool"),
            ),
        )

    def render(self, params, *, palette=None, entropy=None, config=None) -> GenResult:
        p: ScatterParams = coerce_params(GeneratorKind.SCATTER, params)
        cfg = config or DEFAULT_CONFIG
        seed, rng = rng_for(p.seed, entropy)

        shape = normalize_shape(p.shape)
        if p.count is not None:
            count = as_count(p.count, 0, cfg.max_count)
        else:
            count = as_count(clamp(finite(p.density, 0.3), 0.0, 1.0e6) * 50, 0, cfg.max_count)
        size_min = clamp(finite(p.size_min, 3.0), 0.0, SIZE_MAX)
        size_max = clamp(finite(p.size_max, 8.0), 0.0, SIZE_MAX)
        rot_range = clamp(finite(p.rotation_range, 0.0), -360.0, 360.0)
        sw = stroke_width(p.stroke_width, 1.0)
        fill = resolve(p.fill, "currentColor", palette)
        stroke = resolve(p.stroke, "currentColor", palette)
        filled = bool(p.filled)

        def _shape(x, y, size, rot):
            return emit(shape, x, y, size, rot, fill, stroke, sw, filled, p.symbol)

        placed = []
        for _ in range(count):
            size = size_min + rng.next() * (size_max - size_min)
            x = rng.next() * TILE
            y = rng.next() * TILE
            rot = rng.next() * rot_range if rot_range else 0.0
            placed.append((round(x, 1), round(y, 1), size, rot))

        prims = [_shape(x, y, size, rot) for x, y, size, rot in placed]
        for x, y, size, rot in placed:
            if x < EDGE:
                prims.append(_shape(x + TILE, y, size, rot))
            if y < EDGE:
                prims.append(_shape(x, y + TILE, size, rot))

        doc = wrap(prims, TILE, TILE, pattern_id=cfg.pattern_id, canvas=cfg.canvas_size)
        return GenResult(document=doc, seed=seed)


GEN = Scatter()
