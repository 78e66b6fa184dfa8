from __future__ import annotations

import pytest

from patcore.config import EngineConfig
from patproc import GeneratorKind, dispatch, extract_pattern_meta, is_valid_pattern, validate_pattern_svg

HEAD = '<svg xmlns="http://www.w3.org/2000/svg"><defs><pattern id="x" width="10" height="10" patternUnits="userSpaceOnUse">'
TAIL = "</pattern></defs></svg>"


@pytest.mark.parametrize("kind", list(GeneratorKind))
def test_generated_documents_are_valid(kind):
    doc = dispatch(kind, {"seed": "v"}).document
    res = validate_pattern_svg(doc)
    assert res.valid, res.errors
    assert res.errors == []
    assert is_valid_pattern(doc)


def test_meta_from_generated_grid():
    doc = dispatch("grid", {"cols": 4, "rows": 4, "gap": 24, "seed": "m"}).document
    meta = extract_pattern_meta(doc)
    assert meta.has_pattern
    assert (meta.tile_width, meta.tile_height, meta.pattern_id) == (96.0, 96.0, "p")
    assert meta.node_count == 20
    assert meta.byte_size == len(doc.encode("utf-8"))
    other = dispatch("grid", {"seed": "m"}, config=EngineConfig(pattern_id="tile1")).document
    assert extract_pattern_meta(other).pattern_id == "tile1"


@pytest.mark.parametrize("svg,needle", [
    (HEAD + "<script>alert(1)</script>" + TAIL, "<script>"),
    (HEAD + '<rect onload="x()"/>' + TAIL, "onload"),
    (HEAD + '<rect fill="url(https://evil.example/x.svg#p)"/>' + TAIL, "External URL"),
    (HEAD + '<use href="#x"/>' + TAIL, "<use>"),
    ('<svg xmlns="http://www.w3.org/2000/svg"><rect/></svg>', "Missing <pattern>"),
    ("<div></div>", "Missing <svg>"),
    ("<svg>", "Unclosed <svg>"),
])
def test_rejections(svg, needle):
    res = validate_pattern_svg(svg)
    assert not res.valid
    assert any(needle in e for e in res.errors), res.errors


def test_size_limit_and_warnings():
    big = HEAD + "<g/>" * 15_000 + TAIL
    res = validate_pattern_svg(big)
    assert not res.valid
    assert any("byte limit" in e for e in res.errors)
    assert any("node count" in w for w in res.warnings)
    loose = HEAD.replace(' patternUnits="userSpaceOnUse"', "") + TAIL
    res2 = validate_pattern_svg(loose)
    assert res2.valid and any("userSpaceOnUse" in w for w in res2.warnings)


def test_is_valid_pattern_fast_path():
    assert not is_valid_pattern("<svg></svg>")
    assert not is_valid_pattern(HEAD + "<script/>" + TAIL)
    assert is_valid_pattern(HEAD + TAIL)
    assert not extract_pattern_meta("<svg></svg>").has_pattern


def test_scatter_at_count_cap_stays_within_limits():
    cap = EngineConfig().max_count
    for seed in ("big", "cap-1", "cap-2"):
        doc = dispatch("scatter", {"count": cap, "seed": seed}).document
        res = validate_pattern_svg(doc)
        assert res.valid, res.errors
    # au-delà du plafond, même document
    over = dispatch("scatter", {"count": cap * 50, "seed": "big"}).document
    assert over == dispatch("scatter", {"count": cap, "seed": "big"}).document
