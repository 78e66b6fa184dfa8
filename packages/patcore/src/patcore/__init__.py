from __future__ import annotations

from .config import EngineConfig, DEFAULT_CONFIG
from .errors import PatgenError, UnknownGeneratorError, InvalidParamsError
from .rng import SeededRandom, SystemEntropy, EntropySource, mint_seed, resolve_seed

__all__ = [
    "EngineConfig", "DEFAULT_CONFIG",
    "PatgenError", "UnknownGeneratorError", "InvalidParamsError",
    "SeededRandom", "SystemEntropy", "EntropySource", "mint_seed", "resolve_seed",
]
