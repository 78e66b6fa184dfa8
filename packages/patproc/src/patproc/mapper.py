from __future__ import annotations

from dataclasses import dataclass

from .api import ColorConfig, GeneratorKind
from .params import (
    BaseParams, GridParams, LineParams, NoiseParams, ParallelogramParams,
    ScatterParams, TopoParams, WaveParams,
)
from .utils import clamp, finite, round_half_up


@dataclass(frozen=True)
class UnifiedParams:
    """Shared slider set of the editor; each generator reads it differently.

    Ranges follow the UI: density/jitter/opacity are 0–100, rotation 0–360.
    """
    size_min: float = 5.0
    size_max: float = 20.0
    spacing: float = 20.0
    density: float = 50.0
    rotation: float = 0.0
    jitter: float = 0.0
    stroke_width: float = 1.0
    opacity: float = 100.0
    shape: str = "circle"
    custom_symbol: str = "●"
    text_input: str = ""
    filled: bool = True
    dash: str = ""


def _fold_skew(rotation: float) -> float:
    """Rotation (deg) folded into [-90, 90)."""
    return (rotation + 90.0) % 180.0 - 90.0


def map_params(
    kind: GeneratorKind | str,
    unified: UnifiedParams,
    colors: ColorConfig | None = None,
    seed: str | None = None,
) -> BaseParams:
    """Translate the unified knobs into the record of `kind`. Pure."""
    kind = GeneratorKind.parse(kind)
    u = unified
    c = colors or ColorConfig()
    base = dict(seed=seed, fill=c.fill, stroke=c.stroke)
    density = clamp(finite(u.density, 50.0), 0.0, 100.0)
    size_min = finite(u.size_min, 5.0)
    size_max = finite(u.size_max, 20.0)

    if kind is GeneratorKind.SCATTER:
        return ScatterParams(
            **base,
            shape="glyph" if u.shape == "text" else u.shape,
            symbol=u.custom_symbol or u.text_input,
            count=round_half_up(density * 2),
            size_min=size_min,
            size_max=size_max,
            rotation_range=u.rotation,
            stroke_width=u.stroke_width,
            filled=u.filled,
        )
    if kind is GeneratorKind.GRID:
        cells = round_half_up(density / 10) or 5
        return GridParams(
            **base,
            cols=cells,
            rows=cells,
            gap=u.spacing,
            dot_size=(size_min + size_max) / 4,
            shape="glyph" if u.shape == "text" else u.shape,
            symbol=u.custom_symbol or u.text_input,
            stroke_width=u.stroke_width,
            filled=u.filled,
        )
    if kind is GeneratorKind.LINES:
        return LineParams(
            **base,
            angle_deg=u.rotation,
            spacing=u.spacing,
            stroke_width=u.stroke_width,
            jitter=finite(u.jitter, 0.0) / 100,
            dash=u.dash,
            opacity=finite(u.opacity, 100.0) / 100,
        )
    if kind is GeneratorKind.WAVES:
        return WaveParams(
            **base,
            amplitude=size_max / 2,
            frequency=density / 50,
            stroke_width=u.stroke_width,
            opacity=finite(u.opacity, 100.0) / 100,
        )
    if kind is GeneratorKind.NOISE:
        return NoiseParams(
            **base,
            intensity=density / 100,
            granularity=(size_min + size_max) / 20,
            opacity=finite(u.opacity, 100.0) / 100,
        )
    if kind is GeneratorKind.TOPO:
        return TopoParams(
            **base,
            levels=round_half_up(density / 20) or 5,
            stroke_width=u.stroke_width,
            opacity=finite(u.opacity, 100.0) / 100,
        )
    if kind is GeneratorKind.PARALLELOGRAM:
        return ParallelogramParams(
            **base,
            width=size_max,
            height=size_min,
            skew=_fold_skew(finite(u.rotation, 0.0)),
            gap=finite(u.spacing, 20.0) / 2,
            stroke_width=u.stroke_width,
            filled=u.filled,
        )
    raise AssertionError(f"unhandled generator kind {kind!r}")
