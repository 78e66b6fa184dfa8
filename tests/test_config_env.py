from __future__ import annotations
import dataclasses
import xml.etree.ElementTree as ET

import pytest

from patcore.config import DEFAULT_CONFIG, EngineConfig
from patproc import dispatch


def test_defaults():
    cfg = EngineConfig()
    assert cfg == DEFAULT_CONFIG
    assert (cfg.canvas_size, cfg.pattern_id, cfg.max_count, cfg.max_cells, cfg.max_levels) == (100, "p", 200, 64, 64)


@pytest.mark.parametrize("kw", [
    {"canvas_size": 0},
    {"pattern_id": ""},
    {"pattern_id": "1x"},
    {"max_count": -1},
    {"max_cells": 0},
    {"max_levels": -1},
])
def test_invalid_config_raises(kw):
    with pytest.raises(ValueError):
        EngineConfig(**kw)


def test_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.canvas_size = 5


def test_from_env_and_overrides(monkeypatch):
    monkeypatch.setenv("PATGEN_CANVAS_SIZE", "256")
    monkeypatch.setenv("PATGEN_PATTERN_ID", "bg")
    monkeypatch.setenv("PATGEN_MAX_CELLS", "8")
    cfg = EngineConfig.from_env()
    assert (cfg.canvas_size, cfg.pattern_id, cfg.max_cells) == (256, "bg", 8)
    assert cfg.max_count == 200
    cfg2 = EngineConfig.from_env(canvas_size=64)
    assert cfg2.canvas_size == 64 and cfg2.pattern_id == "bg"


def test_config_flows_into_document():
    cfg = EngineConfig(canvas_size=300, pattern_id="tile1", max_cells=3)
    doc = dispatch("grid", {"cols": 50, "rows": 50, "seed": "c"}, config=cfg).document
    root = ET.fromstring(doc)
    assert root.get("width") == "300"
    assert 'fill="url(#tile1)"' in doc
    pat = root.find("{http://www.w3.org/2000/svg}defs/{http://www.w3.org/2000/svg}pattern")
    assert pat.get("id") == "tile1"
    assert len(list(pat)) == 9
