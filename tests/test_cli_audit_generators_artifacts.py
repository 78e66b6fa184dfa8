import csv
import json

from patwf.cli.audit_generators import main as audit_main, numbers_in, run_audit


def test_cli_audit_generators_produces_artifacts(tmp_path):
    out_dir = tmp_path / "artifacts"
    rc = audit_main(["--out", str(out_dir), "--seeds", "1"])
    assert rc == 0
    assert (out_dir / "audit_generators.csv").exists()
    report = json.loads((out_dir / "audit_generators.json").read_text(encoding="utf-8"))
    assert report["problems"] == []
    kinds = {r["name"] for r in report["rows"]}
    assert kinds == {"scatter", "grid", "lines", "waves", "noise", "topo", "parallelogram"}
    with open(out_dir / "audit_generators.csv", newline="", encoding="utf-8") as f:
        assert len(list(csv.DictReader(f))) == len(report["rows"])


def test_run_audit_rows_are_checked():
    rows, problems = run_audit(n_seeds=2)
    assert not problems
    assert all(r["ok_det"] and r["ok_finite"] and r["ok_valid"] and r["ok_tile"] for r in rows)


def test_numbers_in():
    doc = '<circle cx="1.5" cy="-2" r="3"/><path d="M0 1 L2.5 3e2"/>'
    assert numbers_in(doc).tolist() == [1.5, -2.0, 3.0, 0.0, 1.0, 2.5, 300.0]
