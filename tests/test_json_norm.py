"""Tests for the canonical JSON normalization layer."""

import json
from pathlib import Path

from framework_preview.classifier import classify
from framework_preview.model import FrameworkKind
from framework_preview.utils.json_norm import stable_json_dump, stable_json_dumps


def test_stable_json_dumps_sorts_keys_and_adds_newline():
    s = stable_json_dumps({"b": 1, "a": 2})
    assert s.endswith("\n")
    # Keys should be sorted in the serialized output
    assert s.index('"a"') < s.index('"b"')


def test_stable_json_dumps_normalizes_paths_and_enums():
    obj = json.loads(stable_json_dumps({"p": Path("a") / "b", "k": FrameworkKind.VUE}))
    assert obj == {"p": "a/b", "k": "vue"}


def test_stable_json_dumps_uses_to_dict():
    obj = json.loads(stable_json_dumps(classify("")))
    assert obj == {"cdn_script_urls": [], "kind": "vanilla", "needs_browser_compilation": False}


def test_stable_json_dumps_tuples_become_lists():
    assert json.loads(stable_json_dumps({"t": ("x", "y")})) == {"t": ["x", "y"]}


def test_stable_json_dump_writes_to_file_like(tmp_path):
    out = tmp_path / "x.json"
    with out.open("w", encoding="utf-8") as f:
        stable_json_dump({"b": 1, "a": 2}, f)
    txt = out.read_text(encoding="utf-8")
    assert txt.endswith("\n")
    assert '"a"' in txt and '"b"' in txt
