"""Rewriter: turns a classified snippet into a standalone HTML document.

``render`` dispatches on ``verdict.kind`` to one generator per framework.
It never raises: a generator failure is logged and the snippet is served
through the vanilla wrapping instead.
"""

from __future__ import annotations

import logging
from typing import Callable

from framework_preview.classifier import classify
from framework_preview.model import FrameworkKind
from framework_preview.model.verdict import FrameworkVerdict
from framework_preview.rewrite.alpine import render_alpine
from framework_preview.rewrite.angular import render_angular
from framework_preview.rewrite.react import render_react
from framework_preview.rewrite.shell import ensure_doctype
from framework_preview.rewrite.vanilla import render_vanilla
from framework_preview.rewrite.vue import render_vue

logger = logging.getLogger(__name__)

Generator = Callable[[str], str]


def _render_html(source: str) -> str:
    return source


_GENERATORS: dict[FrameworkKind, Generator] = {
    FrameworkKind.HTML: _render_html,
    FrameworkKind.REACT: render_react,
    FrameworkKind.VUE: render_vue,
    FrameworkKind.ANGULAR: render_angular,
    FrameworkKind.ALPINE: render_alpine,
    FrameworkKind.VANILLA: render_vanilla,
    # No Svelte compiler runs in the browser; serve it like plain JS.
    FrameworkKind.SVELTE: render_vanilla,
}


def render(source: str, verdict: FrameworkVerdict) -> str:
    """Build the RenderedDocument for *source* under *verdict*."""
    if not isinstance(source, str):
        source = ""
    generator = _GENERATORS.get(verdict.kind, render_vanilla)
    try:
        document = generator(source)
    except Exception:
        logger.exception(f"{verdict.kind.value} generator failed; falling back to vanilla wrapping")
        document = render_vanilla(source)
    return ensure_doctype(document)


def preview(source: str) -> tuple[FrameworkVerdict, str]:
    """Classify and render in one call."""
    verdict = classify(source)
    return verdict, render(source, verdict)


__all__ = ["render", "preview"]
