from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Protocol

from patcore.config import EngineConfig
from patcore.errors import UnknownGeneratorError
from patcore.rng import EntropySource


class GeneratorKind(str, Enum):
    """Closed set of procedural generators."""

    SCATTER = "scatter"
    GRID = "grid"
    LINES = "lines"
    WAVES = "waves"
    NOISE = "noise"
    TOPO = "topo"
    PARALLELOGRAM = "parallelogram"

    @classmethod
    def parse(cls, name: "GeneratorKind | str") -> "GeneratorKind":
        """Kind from its value or one of the legacy UI aliases."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError as exc:
            raise UnknownGeneratorError(f"Unknown generator: {name!r}") from exc


# Anciens noms de l'UI -> algorithme effectivement utilisé
_ALIASES = {
    "stripes": "lines",
    "chevron": "lines",
    "crosshatch": "lines",
    "dots": "scatter",
    "hexagon": "grid",
    "topographic": "topo",
    "contours": "topo",
}


@dataclass(frozen=True)
class ParamSpec:
    name: str
    type: str
    range: tuple[float, float] | None = None
    enum: tuple[Any, ...] | None = None
    units: str | None = None


@dataclass(frozen=True)
class GeneratorInfo:
    name: GeneratorKind
    param_specs: tuple[ParamSpec, ...]
    uses_rng: bool = True
    deterministic: bool = True


@dataclass(frozen=True)
class ColorConfig:
    """Fill/stroke paint, each a palette token or a literal CSS color."""
    fill: str | None = "currentColor"
    stroke: str | None = "currentColor"


@dataclass(frozen=True)
class GenResult:
    document: str
    seed: str


@dataclass(frozen=True)
class PatternRequest:
    kind: GeneratorKind | str
    params: Any = None
    colors: ColorConfig | None = None
    seed: str | None = None


class Generator(Protocol):
    @property
    def info(self) -> GeneratorInfo: ...
    def render(
        self,
        params: Any,
        *,
        palette: Mapping[str, str] | None = None,
        entropy: EntropySource | None = None,
        config: EngineConfig | None = None,
    ) -> GenResult: ...
