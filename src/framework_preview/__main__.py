"""CLI entry-point for framework_preview.

Usage:
    python -m framework_preview classify <file|-> [--json]
    python -m framework_preview render <file|-> [--kind KIND] [--output FILE]
    python -m framework_preview template <kind> [--output FILE]
    python -m framework_preview selfcheck [--json]
    python -m framework_preview publish <file> --project-id ID [--storage-dir DIR] [--base-url URL]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from framework_preview import __version__
from framework_preview.api import classify, render, render_as
from framework_preview.errors import StorageError
from framework_preview.model import FrameworkKind
from framework_preview.model.verdict import get_framework_name
from framework_preview.utils.exit_codes import ExitCode
from framework_preview.utils.json_norm import stable_json_dump

_KIND_CHOICES = [k.value for k in FrameworkKind]


# ── helpers ─────────────────────────────────────────────────────────


def _read_source(arg: str) -> str | None:
    """Read source text from a path, or stdin when *arg* is ``-``."""
    if arg == "-":
        return sys.stdin.read()
    path = Path(arg)
    if not path.is_file():
        print(f"error: file does not exist: {path}", file=sys.stderr)
        return None
    return path.read_text(encoding="utf-8", errors="replace")


def _write_output(text: str, output: Path | None) -> None:
    if output is None:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    print(f"Written to {output}", file=sys.stderr)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="framework-preview",
        description="Turn pasted React/Vue/Angular/Alpine/HTML/JS into a standalone preview document.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging on stderr.",
    )
    sub = p.add_subparsers(dest="command")

    cls_p = sub.add_parser("classify", help="Detect which framework a snippet uses.")
    cls_p.add_argument("source", help="Path to the snippet, or - for stdin.")
    cls_p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the full verdict as JSON.",
    )

    ren_p = sub.add_parser("render", help="Render a snippet into a standalone HTML document.")
    ren_p.add_argument("source", help="Path to the snippet, or - for stdin.")
    ren_p.add_argument(
        "--kind",
        choices=_KIND_CHOICES,
        default=None,
        help="Force a framework instead of detecting it.",
    )
    ren_p.add_argument("--output", type=Path, default=None, help="Write the document here.")

    tpl_p = sub.add_parser("template", help="Print the starter snippet for a framework.")
    tpl_p.add_argument("kind", choices=_KIND_CHOICES)
    tpl_p.add_argument("--output", type=Path, default=None)

    chk_p = sub.add_parser("selfcheck", help="Classify and render the built-in sample snippets.")
    chk_p.add_argument("--json", dest="json_out", action="store_true", default=False)

    pub_p = sub.add_parser("publish", help="Render a snippet and store it for hosting.")
    pub_p.add_argument("source", help="Path to the snippet, or - for stdin.")
    pub_p.add_argument("--project-id", dest="project_id", required=True)
    pub_p.add_argument(
        "--storage-dir",
        dest="storage_dir",
        type=Path,
        default=Path("storage"),
        help="Root directory of the local object store (default: ./storage).",
    )
    pub_p.add_argument("--base-url", dest="base_url", default="/")
    return p


# ── handlers ────────────────────────────────────────────────────────


def _handle_classify(args: argparse.Namespace) -> int:
    source = _read_source(args.source)
    if source is None:
        return ExitCode.ERROR
    verdict = classify(source)
    if args.json_out:
        stable_json_dump(verdict.to_dict(), sys.stdout)
    else:
        print(f"{verdict.kind.value}\t{get_framework_name(verdict.kind)}")
    return ExitCode.SUCCESS


def _handle_render(args: argparse.Namespace) -> int:
    source = _read_source(args.source)
    if source is None:
        return ExitCode.ERROR
    if args.kind:
        document = render_as(source, args.kind)
    else:
        document = render(source, classify(source))
    _write_output(document, args.output)
    return ExitCode.SUCCESS


def _handle_template(args: argparse.Namespace) -> int:
    from framework_preview.templates import get_framework_template

    _write_output(get_framework_template(args.kind), args.output)
    return ExitCode.SUCCESS


def _handle_selfcheck(args: argparse.Namespace) -> int:
    from framework_preview.selfcheck import run_self_check

    results = run_self_check()
    if args.json_out:
        stable_json_dump([r.to_dict() for r in results], sys.stdout)
    else:
        for r in results:
            mark = "PASS" if r.success else "FAIL"
            print(f"{mark}  {r.name:<20} detected={r.detected.value} cdn={r.cdn_included}")
    failed = [r for r in results if not r.success]
    return ExitCode.VIOLATION if failed else ExitCode.SUCCESS


def _handle_publish(args: argparse.Namespace) -> int:
    from framework_preview.storage import LocalObjectStore, publish

    source = _read_source(args.source)
    if source is None:
        return ExitCode.ERROR
    store = LocalObjectStore(args.storage_dir, base_url=args.base_url)
    try:
        site = publish(args.project_id, source, store)
    except StorageError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR
    print(site.url)
    return ExitCode.SUCCESS


_HANDLERS = {
    "classify": _handle_classify,
    "render": _handle_render,
    "template": _handle_template,
    "selfcheck": _handle_selfcheck,
    "publish": _handle_publish,
}


def main(argv: list[str] | None = None) -> int:
    """Entry-point; returns an exit code (see ``ExitCode``)."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )

    handler = _HANDLERS.get(args.command)
    if handler is None:
        parser.print_usage(sys.stderr)
        print("error: please provide a subcommand.", file=sys.stderr)
        return ExitCode.ERROR
    return handler(args)


if __name__ == "__main__":
    raise SystemExit(main())
