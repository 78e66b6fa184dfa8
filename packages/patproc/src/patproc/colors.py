from __future__ import annotations
import re
from types import MappingProxyType
from typing import Mapping

# Rôles sémantiques -> variables CSS du thème
DEFAULT_PALETTE: Mapping[str, str] = MappingProxyType({
    "primary": "hsl(var(--primary))",
    "secondary": "hsl(var(--secondary))",
    "accent": "hsl(var(--accent))",
    "muted": "hsl(var(--muted))",
    "foreground": "hsl(var(--foreground))",
    "background": "hsl(var(--background))",
    "currentColor": "currentColor",
})

TOKENS: tuple[str, ...] = tuple(DEFAULT_PALETTE)

_HEX = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_FUNC = re.compile(r"^(?:rgba?|hsla?|hwb|lab|lch|oklab|oklch|color)\([^()<>\"']*\)$", re.IGNORECASE)
_KEYWORDS = frozenset({"none", "transparent", "currentcolor"})


def is_literal(value: str) -> bool:
    """True for paint values that pass through untouched (hex, functional, keywords)."""
    v = value.strip()
    return bool(_HEX.match(v) or _FUNC.match(v) or v.lower() in _KEYWORDS)


def resolve(token: str | None, fallback: str, palette: Mapping[str, str] | None = None) -> str:
    """Paint value for `token`: palette entry, literal pass-through, else `fallback`."""
    if not token or not isinstance(token, str):
        return fallback
    pal = DEFAULT_PALETTE if palette is None else palette
    if token in pal:
        return pal[token]
    if is_literal(token):
        return token.strip()
    return fallback


def make_palette(overrides: Mapping[str, str] | None = None) -> Mapping[str, str]:
    """Immutable palette: defaults updated with caller-owned `overrides`."""
    merged = dict(DEFAULT_PALETTE)
    if overrides:
        merged.update(overrides)
    return MappingProxyType(merged)
