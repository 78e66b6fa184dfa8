from __future__ import annotations
import os
import re
from pathlib import Path


def atomic_write(path: Path | str, data: bytes) -> None:
    path = Path(path)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.parent.mkdir(parents=True, exist_ok=True)
    with open(tmp, "wb") as f:
        f.write(data)
        f.flush()
        os.fsync(f.fileno())
    os.replace(tmp, path)


def pattern_name(kind: str, seed: str, ext: str = "svg") -> str:
    """Export filename carrying what is needed to replay the pattern."""
    safe = re.sub(r"[^A-Za-z0-9_-]", "_", seed) or "noseed"
    return f"pattern_{kind}__s{safe}.{ext}"
