# packages/patwf/src/patwf/__init__.py
from __future__ import annotations

from .api import atomic_write, pattern_name

__all__ = [
    "atomic_write",
    "pattern_name",
    # on n'importe PAS le sous-module cli ici
]

__version__ = "0.3.0"
