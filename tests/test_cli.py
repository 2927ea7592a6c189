"""Tests for the framework-preview CLI (``main(argv)`` in-process)."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from framework_preview.__main__ import main
from framework_preview.utils.exit_codes import ExitCode


@pytest.fixture
def react_file(tmp_path: Path) -> Path:
    path = tmp_path / "App.jsx"
    path.write_text("function App() { return <h1>Hi</h1>; }\n", encoding="utf-8")
    return path


# ── classify ────────────────────────────────────────────────────────


class TestClassify:
    """classify prints the kind and display name."""

    def test_text_output(self, react_file: Path, capsys) -> None:
        rc = main(["classify", str(react_file)])
        assert rc == ExitCode.SUCCESS
        assert capsys.readouterr().out == "react\tReact\n"

    def test_json_output(self, react_file: Path, capsys) -> None:
        rc = main(["classify", str(react_file), "--json"])
        assert rc == ExitCode.SUCCESS
        data = json.loads(capsys.readouterr().out)
        assert data["kind"] == "react"
        assert data["needs_browser_compilation"] is True

    def test_stdin(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO('<div x-data="{}"></div>'))
        rc = main(["classify", "-"])
        assert rc == ExitCode.SUCCESS
        assert capsys.readouterr().out.startswith("alpine\t")

    def test_missing_file(self, tmp_path: Path, capsys) -> None:
        rc = main(["classify", str(tmp_path / "nope.js")])
        assert rc == ExitCode.ERROR
        assert "does not exist" in capsys.readouterr().err


# ── render / template ───────────────────────────────────────────────


class TestRender:
    """render writes a standalone document."""

    def test_render_to_stdout(self, react_file: Path, capsys) -> None:
        rc = main(["render", str(react_file)])
        assert rc == ExitCode.SUCCESS
        assert capsys.readouterr().out.startswith("<!DOCTYPE html>")

    def test_render_to_file_with_forced_kind(self, react_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "out" / "index.html"
        rc = main(["render", str(react_file), "--kind", "vanilla", "--output", str(out)])
        assert rc == ExitCode.SUCCESS
        assert "<title>JavaScript App</title>" in out.read_text(encoding="utf-8")

    def test_template(self, capsys) -> None:
        rc = main(["template", "vue"])
        assert rc == ExitCode.SUCCESS
        assert capsys.readouterr().out.startswith("<template>")


# ── selfcheck / publish ─────────────────────────────────────────────


class TestSelfCheckAndPublish:
    """selfcheck exit code and local publishing."""

    def test_selfcheck_passes(self, capsys) -> None:
        rc = main(["selfcheck"])
        assert rc == ExitCode.SUCCESS
        assert "FAIL" not in capsys.readouterr().out

    def test_selfcheck_json(self, capsys) -> None:
        main(["selfcheck", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert all(entry["success"] for entry in data)

    def test_publish(self, react_file: Path, tmp_path: Path, capsys) -> None:
        storage = tmp_path / "storage"
        rc = main([
            "publish", str(react_file),
            "--project-id", "demo",
            "--storage-dir", str(storage),
            "--base-url", "https://sites.example.com",
        ])
        assert rc == ExitCode.SUCCESS
        assert capsys.readouterr().out.strip() == "https://sites.example.com/public/demo.html"
        assert (storage / "public" / "demo.html").is_file()

    def test_publish_bad_id(self, react_file: Path, tmp_path: Path, capsys) -> None:
        rc = main([
            "publish", str(react_file),
            "--project-id", "../escape",
            "--storage-dir", str(tmp_path),
        ])
        assert rc == ExitCode.ERROR
        assert "invalid project id" in capsys.readouterr().err


def test_no_subcommand_is_error(capsys) -> None:
    assert main([]) == ExitCode.ERROR
    assert "subcommand" in capsys.readouterr().err
