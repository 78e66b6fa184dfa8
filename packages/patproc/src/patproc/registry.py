from __future__ import annotations
import importlib
import pkgutil
from types import MappingProxyType
from typing import Any, Mapping

from .api import Generator, GeneratorInfo, GeneratorKind, GenResult
from patcore.config import EngineConfig
from patcore.rng import EntropySource


def _discover(pkg_name: str = "patproc.generators", expect_var: str = "GEN") -> dict[GeneratorKind, Generator]:
    """Import every module of `pkg_name` and collect its `GEN` object by kind."""
    pkg = importlib.import_module(pkg_name)
    found: dict[GeneratorKind, Generator] = {}
    for mod in pkgutil.iter_modules(pkg.__path__):
        if mod.ispkg or mod.name.startswith("_"):
            continue
        module = importlib.import_module(f"{pkg_name}.{mod.name}")
        gen = getattr(module, expect_var, None)
        if gen is None or not hasattr(gen, "render"):
            continue
        kind = gen.info.name
        if kind in found:
            raise RuntimeError(f"Duplicate generator for {kind.value}: {module.__name__}")
        found[kind] = gen
    return found


def _build() -> Mapping[GeneratorKind, Generator]:
    found = _discover()
    missing = [k.value for k in GeneratorKind if k not in found]
    if missing:
        raise RuntimeError(f"No generator registered for: {missing}")
    return MappingProxyType({k: found[k] for k in GeneratorKind})


# Construit une seule fois, immuable ensuite
REGISTRY: Mapping[GeneratorKind, Generator] = _build()


def get(kind: GeneratorKind | str) -> Generator:
    return REGISTRY[GeneratorKind.parse(kind)]


def list_generators() -> list[GeneratorInfo]:
    return [g.info for g in REGISTRY.values()]


def dispatch(
    kind: GeneratorKind | str,
    params: Any = None,
    *,
    palette: Mapping[str, str] | None = None,
    entropy: EntropySource | None = None,
    config: EngineConfig | None = None,
) -> GenResult:
    """Run the generator for `kind` on its (mapped or direct) params."""
    return get(kind).render(params, palette=palette, entropy=entropy, config=config)
