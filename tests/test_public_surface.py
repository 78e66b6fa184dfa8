from __future__ import annotations


def test_umbrella_namespace():
    import patgen as pg

    res = pg.generate(pg.PatternRequest(kind="grid", params={"cols": 4, "rows": 4}, seed="k"))
    assert res.seed == "k"
    assert pg.validate_pattern_svg(res.document).valid
    assert pg.extract_pattern_meta(res.document).tile_width == 40.0
    assert len(pg.list_generators()) == len(pg.GeneratorKind)
    assert pg.core.DEFAULT_CONFIG.canvas_size == 100
    assert pg.__version__ == pg.wf.__version__


def test_pattern_name_and_atomic_write(tmp_path):
    from patwf import atomic_write, pattern_name

    assert pattern_name("scatter", "a b/c") == "pattern_scatter__sa_b_c.svg"
    assert pattern_name("grid", "") == "pattern_grid__snoseed.svg"
    target = tmp_path / "x" / "doc.svg"
    atomic_write(target, b"<svg/>")
    assert target.read_bytes() == b"<svg/>"
    assert not (tmp_path / "x" / "doc.svg.tmp").exists()


def test_package_readme_is_shipped():
    from pathlib import Path

    root = Path(__file__).resolve().parents[1]
    assert 'readme = "README.md"' in (root / "pyproject.toml").read_text(encoding="utf-8")
    assert "import patgen as pg" in (root / "README.md").read_text(encoding="utf-8")
