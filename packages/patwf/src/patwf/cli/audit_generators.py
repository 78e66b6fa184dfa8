from __future__ import annotations
import argparse, csv, json, logging, re, sys, time
from pathlib import Path
from typing import Any

import numpy as np

from .common import setup_logging, ensure_dir
from patcore.config import EngineConfig
from patproc import ParamCodec, dispatch, extract_pattern_meta, is_valid_pattern, list_generators
from patproc.api import GeneratorKind

log = logging.getLogger("patgen.audit")

_NUM = re.compile(r"-?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_ATTR_VALUES = re.compile(r'(?:cx|cy|r|x|y|x1|y1|x2|y2|width|height|points|d|font-size|transform)="([^"]*)"')
_NONFINITE = re.compile(r"\b(?:nan|inf)")

ANGLES = (0.0, 90.0, 180.0, 270.0, 45.0, 33.7)
COUNTS = (0, 1, 10_000)

# Cas dégénérés par générateur (en plus des points ParamCodec.grid())
_DEGENERATE: dict[GeneratorKind, list[dict[str, Any]]] = {
    GeneratorKind.SCATTER: [{"count": n} for n in COUNTS] + [{"count": 5, "rotation_range": 0.0, "size_min": 0.0, "size_max": 0.0}],
    GeneratorKind.GRID: [{"cols": n, "rows": n} for n in COUNTS] + [{"gap": 0.0}],
    GeneratorKind.LINES: [{"angle_deg": a, "jitter": 0.5} for a in ANGLES] + [{"spacing": 0.0}],
    GeneratorKind.WAVES: [{"amplitude": 0.0}, {"frequency": 0.0}, {"amplitude": 1e9}],
    GeneratorKind.NOISE: [{"intensity": 0.0}, {"intensity": 1.0}, {"intensity": 1e9}],
    GeneratorKind.TOPO: [{"levels": n} for n in COUNTS],
    GeneratorKind.PARALLELOGRAM: [{"skew": a} for a in ANGLES] + [{"skew": 90.0}, {"width": 0.0, "height": 0.0}],
}


def numbers_in(document: str) -> np.ndarray:
    """Every numeric token of the geometry attributes, as float64."""
    vals: list[float] = []
    for raw in _ATTR_VALUES.findall(document):
        vals.extend(float(t) for t in _NUM.findall(raw))
    return np.asarray(vals, dtype=np.float64)


def audit_case(kind: GeneratorKind, params: dict[str, Any], seed: str, cfg: EngineConfig) -> dict[str, Any]:
    p = dict(params, seed=seed)
    t0 = time.perf_counter()
    r1 = dispatch(kind, p, config=cfg)
    t1 = time.perf_counter()
    r2 = dispatch(kind, p, config=cfg)

    nums = numbers_in(r1.document)
    lowered = r1.document.lower()
    meta = extract_pattern_meta(r1.document)
    return {
        "name": kind.value,
        "params": json.dumps(params, sort_keys=True),
        "seed": seed,
        "time_ms": round((t1 - t0) * 1000.0, 3),
        "bytes": len(r1.document),
        "nodes": meta.node_count,
        "ok_det": r1.document == r2.document and r1.seed == r2.seed == seed,
        "ok_finite": bool(np.isfinite(nums).all()) and _NONFINITE.search(lowered) is None,
        "ok_valid": is_valid_pattern(r1.document),
        "ok_tile": bool(meta.tile_width and meta.tile_height and meta.tile_width > 0 and meta.tile_height > 0),
    }


def run_audit(n_seeds: int = 3, cfg: EngineConfig | None = None) -> tuple[list[dict], list[dict]]:
    cfg = cfg or EngineConfig.from_env()
    rows: list[dict] = []
    problems: list[dict] = []
    for info in sorted(list_generators(), key=lambda i: i.name.value):
        cases = [{}] + ParamCodec(info).grid() + _DEGENERATE.get(info.name, [])
        for params in cases:
            for s in range(max(1, n_seeds)):
                seed = f"audit-{s}"
                try:
                    row = audit_case(info.name, params, seed, cfg)
                except Exception as e:
                    log.exception("Audit failure on %s %s", info.name.value, params)
                    row = {"name": info.name.value, "params": json.dumps(params, sort_keys=True), "seed": seed, "error": repr(e)}
                    rows.append(row)
                    problems.append(row)
                    continue
                rows.append(row)
                if not (row["ok_det"] and row["ok_finite"] and row["ok_valid"] and row["ok_tile"]):
                    problems.append(row)
        log.info("[%-14s] %d cas x %d graines", info.name.value, len(cases), max(1, n_seeds))
    return rows, problems


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="patgen — Audit des générateurs procéduraux")
    p.add_argument("--out", required=True, help="Dossier de sortie (csv/json)")
    p.add_argument("--seeds", type=int, default=3, help="Nombre de graines par cas")
    p.add_argument("--log-file", default=None)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(Path(args.log_file) if args.log_file else None, verbose=args.verbose)

    out_dir = Path(args.out)
    ensure_dir(out_dir)
    rows, problems = run_audit(args.seeds)

    (out_dir / "audit_generators.json").write_text(
        json.dumps({"rows": rows, "problems": problems}, ensure_ascii=False, indent=2), encoding="utf-8"
    )
    with open(out_dir / "audit_generators.csv", "w", newline="", encoding="utf-8") as f:
        fieldnames = sorted({k for r in rows for k in r})
        w = csv.DictWriter(f, fieldnames=fieldnames)
        w.writeheader()
        for r in rows:
            w.writerow(r)

    logging.info("Cas audités: %d, problèmes: %d", len(rows), len(problems))
    return 1 if problems else 0


if __name__ == "__main__":
    sys.exit(main())
