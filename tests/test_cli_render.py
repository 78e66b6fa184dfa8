from __future__ import annotations
import json
import re
import xml.etree.ElementTree as ET

from patwf.cli.render import main as render_main

NS = "{http://www.w3.org/2000/svg}"


def test_render_to_directory_uses_replayable_name(tmp_path):
    rc = render_main(["--kind", "grid", "--seed", "abc", "--out", str(tmp_path)])
    assert rc == 0
    out = tmp_path / "pattern_grid__sabc.svg"
    assert out.exists()
    assert out.read_text(encoding="utf-8").startswith("<svg")
    assert not list(tmp_path.glob("*.tmp"))


def test_render_to_file_with_params_file(tmp_path):
    pfile = tmp_path / "p.json"
    pfile.write_text(json.dumps({"angle_deg": 0, "spacing": 16}), encoding="utf-8")
    out = tmp_path / "sub" / "lines.svg"
    rc = render_main(["--kind", "stripes", "--seed", "s", "--params", f"@{pfile}", "--out", str(out)])
    assert rc == 0
    pat = ET.fromstring(out.read_text(encoding="utf-8")).find(f"{NS}defs/{NS}pattern")
    assert pat.get("width") == "32"


def test_render_stdout_unified(capsys):
    rc = render_main(["--kind", "grid", "--seed", "u", "--unified", '{"density": 100}', "--fill", "primary"])
    assert rc == 0
    doc = capsys.readouterr().out
    pat = ET.fromstring(doc).find(f"{NS}defs/{NS}pattern")
    assert len(list(pat)) == 100
    assert "hsl(var(--primary))" in doc


def test_render_print_seed(capsys):
    rc = render_main(["--kind", "noise", "--print-seed"])
    assert rc == 0
    captured = capsys.readouterr()
    seeds = [ln for ln in captured.err.splitlines() if re.fullmatch(r"[0-9a-z]{8}", ln)]
    assert len(seeds) == 1
    assert captured.out.startswith("<svg")

    # replay
    rc = render_main(["--kind", "noise", "--seed", seeds[0]])
    assert rc == 0
    assert capsys.readouterr().out == captured.out


def test_render_errors_return_2(tmp_path):
    assert render_main(["--kind", "plaid", "--out", str(tmp_path)]) == 2
    assert render_main(["--kind", "grid", "--unified", '{"nope": 1}', "--out", str(tmp_path)]) == 2
    assert render_main(["--kind", "grid", "--params", '{"angle_deg": 1}', "--out", str(tmp_path)]) == 2
    assert render_main(["--kind", "grid", "--params", "[1, 2]", "--out", str(tmp_path)]) == 2
    assert not list(tmp_path.iterdir())
