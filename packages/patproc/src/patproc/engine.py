from __future__ import annotations
import logging
from dataclasses import replace
from typing import Mapping

from .api import ColorConfig, GeneratorKind, GenResult, PatternRequest
from .mapper import UnifiedParams, map_params
from .params import coerce_params, with_colors
from .registry import dispatch
from patcore.config import EngineConfig
from patcore.rng import EntropySource, resolve_seed

log = logging.getLogger("patgen.proc")


def generate(
    request: PatternRequest,
    *,
    palette: Mapping[str, str] | None = None,
    entropy: EntropySource | None = None,
    config: EngineConfig | None = None,
) -> GenResult:
    """Run one PatternRequest. `request.seed` and `request.colors` win over the params'.

    The returned seed is the one actually used; replaying it reproduces the
    document byte for byte.
    """
    kind = GeneratorKind.parse(request.kind)
    params = coerce_params(kind, request.params)
    if request.colors is not None:
        params = with_colors(params, request.colors.fill, request.colors.stroke)
    seed = resolve_seed(request.seed or params.seed, entropy)
    params = replace(params, seed=seed)

    res = dispatch(kind, params, palette=palette, config=config)
    log.debug("generate kind=%s seed=%s bytes=%d", kind.value, res.seed, len(res.document))
    return res


def generate_from_unified(
    kind: GeneratorKind | str,
    unified: UnifiedParams | None = None,
    colors: ColorConfig | None = None,
    seed: str | None = None,
    *,
    palette: Mapping[str, str] | None = None,
    entropy: EntropySource | None = None,
    config: EngineConfig | None = None,
) -> GenResult:
    """Mapper + registry in one call (what the editor does on every slider move)."""
    kind = GeneratorKind.parse(kind)
    params = map_params(kind, unified or UnifiedParams(), colors, seed)
    return generate(PatternRequest(kind=kind, params=params), palette=palette, entropy=entropy, config=config)
