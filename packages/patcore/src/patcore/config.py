# packages/patcore/src/patcore/config.py
from __future__ import annotations
import os
from dataclasses import dataclass

__all__ = ["EngineConfig", "DEFAULT_CONFIG"]


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """
    Public, stable configuration of the pattern engine.

    Fields
    ------
    canvas_size : int, default=100
        Size of the outer canvas the tile repeats in (viewBox is square).
    pattern_id : str, default="p"
        Identifier of the repeat unit inside each document. Fixed per
        document; documents are consumed independently.
    max_count : int, default=200
        Upper clamp for shape counts (Scatter `count`).
    max_cells : int, default=64
        Upper clamp for Grid `cols` and `rows`.
    max_levels : int, default=64
        Upper clamp for Topographic `levels`.

    Notes
    -----
    - Immutable so one instance can be shared across threads.
    - Bad values raise `ValueError`; no silent correction here (only
      generator *parameters* are clamped).
    """

    canvas_size: int = 100
    pattern_id: str = "p"
    max_count: int = 200
    max_cells: int = 64
    max_levels: int = 64

    def __post_init__(self) -> None:
        if self.canvas_size <= 0:
            raise ValueError("EngineConfig.canvas_size must be > 0")
        if not isinstance(self.pattern_id, str) or not self.pattern_id.isidentifier():
            raise ValueError("EngineConfig.pattern_id must be a non-empty identifier")
        if self.max_count < 0:
            raise ValueError("EngineConfig.max_count must be >= 0")
        if self.max_cells < 1:
            raise ValueError("EngineConfig.max_cells must be >= 1")
        if self.max_levels < 0:
            raise ValueError("EngineConfig.max_levels must be >= 0")

    @staticmethod
    def from_env(**overrides) -> "EngineConfig":
        """Defaults, then PATGEN_* environment variables, then explicit overrides."""
        def _envv(name, cast, default):
            v = os.getenv(name)
            return cast(v) if v is not None else default

        base = dict(
            canvas_size=_envv("PATGEN_CANVAS_SIZE", int, 100),
            pattern_id=_envv("PATGEN_PATTERN_ID", str, "p"),
            max_count=_envv("PATGEN_MAX_COUNT", int, 200),
            max_cells=_envv("PATGEN_MAX_CELLS", int, 64),
            max_levels=_envv("PATGEN_MAX_LEVELS", int, 64),
        )
        base.update(overrides)
        return EngineConfig(**base)


DEFAULT_CONFIG = EngineConfig()
