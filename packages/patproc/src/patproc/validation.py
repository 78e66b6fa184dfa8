"""Structural and safety checks for SVG pattern documents.

Used by callers that accept documents from untrusted sources (and by the
audit tool as a sanity check). Generation never calls into this module.
"""
from __future__ import annotations
import re
from dataclasses import dataclass, field

UNSAFE_ELEMENTS = ("script", "foreignObject", "iframe", "embed", "object", "use", "image", "a")
UNSAFE_ATTRS = ("onclick", "onload", "onerror", "onmouseover", "onfocus", "onblur", "xlink:href", "href")

MAX_SVG_BYTES = 50_000
MAX_NODE_COUNT = 500

_NODE = re.compile(r"<[a-z]", re.IGNORECASE)
_PATTERN_TAG = re.compile(r"<pattern\s+([^>]*)>", re.IGNORECASE)


@dataclass
class ValidationResult:
    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@dataclass
class PatternMeta:
    has_pattern: bool
    node_count: int
    byte_size: int
    tile_width: float | None = None
    tile_height: float | None = None
    pattern_id: str | None = None


def _has_element(svg: str, name: str) -> bool:
    return re.search(rf"<{re.escape(name)}[\s>/]", svg, re.IGNORECASE) is not None


def _has_attr(svg: str, name: str) -> bool:
    return re.search(rf"(?<![\w:-]){re.escape(name)}\s*=", svg, re.IGNORECASE) is not None


def validate_pattern_svg(svg: str) -> ValidationResult:
    errors: list[str] = []
    warnings: list[str] = []

    if "<svg" not in svg:
        return ValidationResult(False, ["Missing <svg> root element"], warnings)
    if "</svg>" not in svg:
        return ValidationResult(False, ["Unclosed <svg> element"], warnings)

    if "<pattern" not in svg:
        errors.append("Missing <pattern> element - SVG must define a tileable pattern")
    elif "</pattern>" not in svg:
        errors.append("Unclosed <pattern> element")
    elif 'patternUnits="userSpaceOnUse"' not in svg:
        warnings.append('Pattern should use patternUnits="userSpaceOnUse" for predictable tiling')

    for elem in UNSAFE_ELEMENTS:
        if _has_element(svg, elem):
            errors.append(f"Unsafe element <{elem}> detected")
    for attr in UNSAFE_ATTRS:
        if _has_attr(svg, attr):
            errors.append(f'Unsafe attribute "{attr}" detected')

    if re.search(r"url\s*\(\s*[\"']?https?:", svg, re.IGNORECASE):
        errors.append("External URL references not allowed")
    if re.search(r"data:", svg, re.IGNORECASE):
        warnings.append("Data URLs detected - may increase size significantly")

    size = len(svg.encode("utf-8"))
    if size > MAX_SVG_BYTES:
        errors.append(f"SVG exceeds {MAX_SVG_BYTES} byte limit ({size} bytes)")
    nodes = len(_NODE.findall(svg))
    if nodes > MAX_NODE_COUNT:
        warnings.append(f"High node count ({nodes}) may impact performance")
    if re.search(r"<filter", svg, re.IGNORECASE):
        warnings.append("SVG filters may impact rendering performance")
    if re.search(r"<(mask|clipPath)", svg, re.IGNORECASE):
        warnings.append("Masks/clips may impact rendering performance")

    return ValidationResult(not errors, errors, warnings)


def extract_pattern_meta(svg: str) -> PatternMeta:
    meta = PatternMeta(
        has_pattern=False,
        node_count=len(_NODE.findall(svg)),
        byte_size=len(svg.encode("utf-8")),
    )
    m = _PATTERN_TAG.search(svg)
    if not m:
        return meta
    meta.has_pattern = True
    attrs = m.group(1)
    if (idm := re.search(r"\bid\s*=\s*[\"']([^\"']+)[\"']", attrs)):
        meta.pattern_id = idm.group(1)
    if (wm := re.search(r"\bwidth\s*=\s*[\"']?([\d.]+)", attrs)):
        meta.tile_width = float(wm.group(1))
    if (hm := re.search(r"\bheight\s*=\s*[\"']?([\d.]+)", attrs)):
        meta.tile_height = float(hm.group(1))
    return meta


def is_valid_pattern(svg: str) -> bool:
    """Fast rejection check: root, pattern element, no unsafe elements."""
    return (
        "<svg" in svg
        and "</svg>" in svg
        and "<pattern" in svg
        and not any(_has_element(svg, e) for e in UNSAFE_ELEMENTS)
    )
