"""patgen — unified API
Install once, import one namespace:

    pip install -e .

Usage:

    import patgen as pg
    res = pg.generate(pg.PatternRequest(kind="grid", params={"cols": 4, "rows": 4}))
    res.document, res.seed

Or detailed modules:

    from patgen import core, proc, wf
"""

__version__ = "0.3.0"

import patcore as core
import patproc as proc
import patwf as wf

from patcore import EngineConfig, PatgenError, UnknownGeneratorError, InvalidParamsError, SystemEntropy
from patproc import (
    ColorConfig, GenResult, GeneratorKind, PatternRequest, UnifiedParams,
    generate, generate_from_unified, map_params, dispatch, list_generators,
    validate_pattern_svg, extract_pattern_meta,
)

__all__ = [
    # sub-namespaces
    "core", "proc", "wf",
    # convenience
    "EngineConfig", "PatgenError", "UnknownGeneratorError", "InvalidParamsError", "SystemEntropy",
    "ColorConfig", "GenResult", "GeneratorKind", "PatternRequest", "UnifiedParams",
    "generate", "generate_from_unified", "map_params", "dispatch", "list_generators",
    "validate_pattern_svg", "extract_pattern_meta",
    "__version__",
]
