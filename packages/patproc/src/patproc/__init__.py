"""patproc - procedural pattern generators (public surface)."""
from __future__ import annotations

from .api import ColorConfig, GenResult, GeneratorInfo, GeneratorKind, ParamSpec, PatternRequest
from .colors import DEFAULT_PALETTE, make_palette, resolve
from .engine import generate, generate_from_unified
from .mapper import UnifiedParams, map_params
from .params import (
    GridParams, LineParams, NoiseParams, ParallelogramParams, ParamCodec,
    ScatterParams, TopoParams, WaveParams, coerce_params,
)
from .registry import REGISTRY, dispatch, get, list_generators
from .validation import extract_pattern_meta, is_valid_pattern, validate_pattern_svg

__all__ = [
    "ColorConfig", "GenResult", "GeneratorInfo", "GeneratorKind", "ParamSpec", "PatternRequest",
    "DEFAULT_PALETTE", "make_palette", "resolve",
    "generate", "generate_from_unified",
    "UnifiedParams", "map_params",
    "GridParams", "LineParams", "NoiseParams", "ParallelogramParams", "ParamCodec",
    "ScatterParams", "TopoParams", "WaveParams", "coerce_params",
    "REGISTRY", "dispatch", "get", "list_generators",
    "extract_pattern_meta", "is_valid_pattern", "validate_pattern_svg",
]
