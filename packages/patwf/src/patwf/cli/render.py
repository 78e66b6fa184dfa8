from __future__ import annotations
import argparse, logging, sys
from dataclasses import fields
from pathlib import Path

from .common import setup_logging, load_json_arg
from ..api import atomic_write, pattern_name
from patcore.config import EngineConfig
from patcore.errors import PatgenError
from patproc import ColorConfig, GeneratorKind, PatternRequest, UnifiedParams, generate, generate_from_unified


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="patgen — Rendu d'un motif SVG tuilable")
    p.add_argument("--kind", required=True, help="scatter|grid|lines|waves|noise|topo|parallelogram (ou alias)")
    p.add_argument("--seed", default=None, help="Graine; omise => tirée puis affichée")
    src = p.add_mutually_exclusive_group()
    src.add_argument("--params", default=None, help="Params spécifiques (JSON inline, @fichier ou chemin)")
    src.add_argument("--unified", default=None, help="Params unifiés de l'éditeur (JSON inline, @fichier ou chemin)")
    p.add_argument("--fill", default="currentColor", help="Token ou couleur littérale")
    p.add_argument("--stroke", default="currentColor", help="Token ou couleur littérale")
    p.add_argument("--out", default=None, help="Fichier .svg ou dossier de sortie (défaut: stdout)")
    p.add_argument("--print-seed", action="store_true", help="Écrit la graine utilisée sur stderr")
    p.add_argument("--log-file", default=None)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)


def _unified_from(obj: dict) -> UnifiedParams:
    known = {f.name for f in fields(UnifiedParams)}
    unknown = sorted(set(obj) - known)
    if unknown:
        raise PatgenError(f"Unknown unified param(s): {unknown}")
    return UnifiedParams(**obj)


def main(argv=None) -> int:
    args = parse_args(argv)
    # stdout peut porter le document SVG
    setup_logging(Path(args.log_file) if args.log_file else None, verbose=args.verbose, stream=sys.stderr)

    try:
        kind = GeneratorKind.parse(args.kind)
        colors = ColorConfig(fill=args.fill, stroke=args.stroke)
        cfg = EngineConfig.from_env()
        if args.unified is not None:
            res = generate_from_unified(kind, _unified_from(load_json_arg(args.unified)), colors, args.seed, config=cfg)
        else:
            req = PatternRequest(kind=kind, params=load_json_arg(args.params), colors=colors, seed=args.seed)
            res = generate(req, config=cfg)
    except (PatgenError, ValueError, OSError) as e:
        logging.exception("Rendu impossible (%s): %s", args.kind, e)
        return 2

    logging.info("kind=%s seed=%s bytes=%d", kind.value, res.seed, len(res.document))
    if args.print_seed:
        print(res.seed, file=sys.stderr)

    if args.out is None:
        sys.stdout.write(res.document + "\n")
        return 0
    out = Path(args.out)
    if out.is_dir() or not out.suffix:
        out = out / pattern_name(kind.value, res.seed)
    atomic_write(out, res.document.encode("utf-8"))
    logging.info("SVG -> %s", out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
