from __future__ import annotations

from dataclasses import dataclass, fields, replace
from types import MappingProxyType
from typing import Any, Mapping

from .api import GeneratorInfo, GeneratorKind, ParamSpec
from patcore.errors import InvalidParamsError


# -------------------------
# Records par générateur
# -------------------------

@dataclass(frozen=True)
class BaseParams:
    seed: str | None = None
    fill: str | None = "currentColor"
    stroke: str | None = "currentColor"


@dataclass(frozen=True)
class ScatterParams(BaseParams):
    shape: str = "circle"
    symbol: str = "●"
    count: int | None = None
    density: float = 0.3
    size_min: float = 3.0
    size_max: float = 8.0
    rotation_range: float = 0.0
    stroke_width: float = 1.0
    filled: bool = True


@dataclass(frozen=True)
class GridParams(BaseParams):
    cols: int = 5
    rows: int = 5
    gap: float = 10.0
    dot_size: float = 2.0
    shape: str = "circle"
    symbol: str = "●"
    stroke_width: float = 1.0
    filled: bool = True


@dataclass(frozen=True)
class LineParams(BaseParams):
    angle_deg: float = 45.0
    spacing: float = 10.0
    stroke_width: float = 1.0
    jitter: float = 0.0
    dash: str = ""
    opacity: float = 1.0


@dataclass(frozen=True)
class WaveParams(BaseParams):
    amplitude: float = 8.0
    frequency: float = 1.0
    stroke_width: float = 1.5
    opacity: float = 1.0


@dataclass(frozen=True)
class NoiseParams(BaseParams):
    intensity: float = 0.5
    granularity: float = 1.0
    opacity: float = 0.3


@dataclass(frozen=True)
class TopoParams(BaseParams):
    levels: int = 5
    stroke_width: float = 0.8
    opacity: float = 0.6


@dataclass(frozen=True)
class ParallelogramParams(BaseParams):
    width: float = 20.0
    height: float = 10.0
    skew: float = 20.0
    gap: float = 5.0
    stroke_width: float = 1.0
    filled: bool = True


PARAM_TYPES: Mapping[GeneratorKind, type] = MappingProxyType({
    GeneratorKind.SCATTER: ScatterParams,
    GeneratorKind.GRID: GridParams,
    GeneratorKind.LINES: LineParams,
    GeneratorKind.WAVES: WaveParams,
    GeneratorKind.NOISE: NoiseParams,
    GeneratorKind.TOPO: TopoParams,
    GeneratorKind.PARALLELOGRAM: ParallelogramParams,
})

COMMON_SPECS: tuple[ParamSpec, ...] = (
    ParamSpec("seed", "str"),
    ParamSpec("fill", "str"),
    ParamSpec("stroke", "str"),
)


def coerce_params(kind: GeneratorKind | str, params: Any = None) -> BaseParams:
    """Record for `kind` from None (defaults), a record, or a plain mapping."""
    kind = GeneratorKind.parse(kind)
    cls = PARAM_TYPES[kind]
    if params is None:
        return cls()
    if isinstance(params, cls):
        return params
    if isinstance(params, BaseParams):
        raise InvalidParamsError(f"{type(params).__name__} given for generator '{kind.value}'")
    if not isinstance(params, Mapping):
        raise InvalidParamsError(f"params must be a mapping or {cls.__name__}, got {type(params).__name__}")
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(params) - known)
    if unknown:
        raise InvalidParamsError(f"Unknown param(s) {unknown} for {kind.value}")
    return cls(**dict(params))


def with_colors(params: BaseParams, fill: str | None, stroke: str | None) -> BaseParams:
    return replace(params, fill=fill, stroke=stroke)


@dataclass
class ParamCodec:
    """Caller-side validation against a generator's ParamSpecs.

    Generation never calls this: out-of-range values are clamped there.
    """
    info: GeneratorInfo

    def _specs(self) -> dict[str, ParamSpec]:
        return {p.name: p for p in self.info.param_specs}

    def validate(self, params: Mapping[str, Any]) -> None:
        specs = self._specs()
        for k, v in params.items():
            if k not in specs:
                raise InvalidParamsError(f"Unknown param '{k}' for {self.info.name.value}")
            p = specs[k]
            if v is None:
                continue
            if p.type in ("float", "int"):
                if isinstance(v, bool) or not isinstance(v, (int, float)):
                    raise InvalidParamsError(f"{k}={v!r} is not a number")
                if p.range is not None:
                    lo, hi = p.range
                    x = float(v)
                    if not (float(lo) <= x <= float(hi)):
                        raise InvalidParamsError(f"{k}={x} ∉ [{lo}, {hi}]")
            elif p.type == "enum":
                if p.enum is None:
                    raise InvalidParamsError(f"{k} is enum but has no choices")
                if v not in p.enum:
                    raise InvalidParamsError(f"{k}={v!r} not in {p.enum}")
            elif p.type == "bool":
                if not isinstance(v, bool):
                    raise InvalidParamsError(f"{k}={v!r} is not a bool")
            elif p.type == "str":
                if not isinstance(v, str):
                    raise InvalidParamsError(f"{k}={v!r} is not a string")
            else:
                raise InvalidParamsError(f"Unsupported param type '{p.type}' for {k}")

    def grid(self) -> list[dict[str, Any]]:
        """Mid-range point plus a low-edge variant, for smoke sweeps."""
        mid: dict[str, Any] = {}
        for p in self.info.param_specs:
            if p.type in ("float", "int") and p.range is not None:
                lo, hi = p.range
                x = (float(lo) + float(hi)) / 2.0
                mid[p.name] = int(round(x)) if p.type == "int" else x
            elif p.type == "enum" and p.enum is not None:
                mid[p.name] = p.enum[0]
            elif p.type == "bool":
                mid[p.name] = True
        edge = dict(mid)
        for p in self.info.param_specs:
            if p.type in ("float", "int") and p.range is not None:
                edge[p.name] = p.range[0]
        return [mid, edge]
