from __future__ import annotations

from ..api import Generator, GeneratorInfo, GeneratorKind, GenResult, ParamSpec
from ..colors import resolve
from ..params import COMMON_SPECS, GridParams, coerce_params
from ..shapes import SHAPES, emit, normalize_shape
from ..tile import wrap
from ..utils import as_count, clamp, finite, stroke_width
from patcore.config import DEFAULT_CONFIG
from patcore.rng import resolve_seed

SIDE_MAX = 500.0


class Grid(Generator):
    @property
    def info(self) -> GeneratorInfo:
        return GeneratorInfo(
            name=GeneratorKind.GRID,
            param_specs=COMMON_SPECS + (
                ParamSpec("cols", "int", (1, 64)),
                ParamSpec("rows", "int", (1, 64)),
                ParamSpec("gap", "float", (1.0, 200.0), "px"),
                ParamSpec("dot_size", "float", (0.5, 50.0), "px"),
                ParamSpec("shape", "enum", enum=SHAPES + ("polygon", "emoji", "symbol", "text")),
                ParamSpec("symbol", "str"),
                ParamSpec("stroke_width", "float", (0.0, 10.0), "px"),
                ParamSpec("filled", "bool"),
            ),
            uses_rng=False,
        )

    def render(self, params, *, palette=None, entropy=None, config=None) -> GenResult:
        p: GridParams = coerce_params(GeneratorKind.GRID, params)
        cfg = config or DEFAULT_CONFIG
        seed = resolve_seed(p.seed, entropy)

        cols = as_count(p.cols, 5, cfg.max_cells)
        rows = as_count(p.rows, 5, cfg.max_cells)
        gap = clamp(finite(p.gap, 10.0), 1.0, SIDE_MAX)
        # dot_size est un rayon
        size = 2.0 * clamp(finite(p.dot_size, 2.0), 0.0, SIDE_MAX)
        shape = normalize_shape(p.shape)
        sw = stroke_width(p.stroke_width, 1.0)
        fill = resolve(p.fill, "currentColor", palette)
        stroke = resolve(p.stroke, "currentColor", palette)

        prims = [
            emit(shape, c * gap + gap / 2, r * gap + gap / 2, size, 0.0,
                 fill, stroke, sw, bool(p.filled), p.symbol)
            for r in range(rows)
            for c in range(cols)
        ]
        # cols == 0 ou rows == 0 : tuile vide d'une cellule
        tile_w = max(cols, 1) * gap
        tile_h = max(rows, 1) * gap
        doc = wrap(prims, tile_w, tile_h, pattern_id=cfg.pattern_id, canvas=cfg.canvas_size)
        return GenResult(document=doc, seed=seed)


GEN = Grid()
