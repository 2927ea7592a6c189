"""Framework classifier: decides which UI idiom a pasted snippet uses.

Rules are evaluated in a fixed order and the first match wins.  The order
encodes priority when signals overlap:

- JSX-looking syntax (capitalised tags) lands on React before Vue.
- ``@click`` lands on Vue before Alpine, so Alpine snippets that use the
  shorthand are classified as Vue.
- A complete HTML document is only ``html`` when no framework marker
  matched first.
"""

from __future__ import annotations

import re
from typing import Callable

from framework_preview.model import FrameworkKind
from framework_preview.model.verdict import FrameworkVerdict, verdict_for

Predicate = Callable[[str], bool]

_REACT_MARKERS = (
    "import React",
    "from 'react'",
    'from "react"',
    "React.createElement",
    "ReactDOM.render",
    "ReactDOM.createRoot",
)
_JSX_COMPONENT_TAG = re.compile(r"<[A-Z]\w+")
_ARROW_COMPONENT = re.compile(r"const.*=.*\(.*\).*=>.*<")
_FUNCTION_COMPONENT = re.compile(r"function\s+\w+\s*\(.*\).*{[\s\S]*return[\s\S]*<")

_VUE_MARKERS = (
    "new Vue",
    "Vue.createApp",
    "createApp",
    "v-model",
    "v-if",
    "v-for",
    "@click",
    "<template>",
)
_VUE_OPTIONS_EXPORT = re.compile(r"export default {[\s\S]*data\s*\(\)")

_ANGULAR_MARKERS = (
    "@Component",
    "@NgModule",
    "angular.module",
    "ng-app",
    "ng-controller",
    "*ngFor",
    "*ngIf",
    "[(ngModel)]",
)

_SVELTE_MARKERS = ("export let", "$:")
_SVELTE_SCRIPT_THEN_STYLE = re.compile(r"<script>[\s\S]*</script>[\s\S]*<style>")

_ALPINE_MARKERS = ("x-data", "x-show", "x-if", "@click", "Alpine.")

_HTML_DOCUMENT = re.compile(r"<!DOCTYPE|<html", re.IGNORECASE)


def _contains_any(code: str, markers: tuple[str, ...]) -> bool:
    return any(m in code for m in markers)


def _is_react(code: str) -> bool:
    return (
        _contains_any(code, _REACT_MARKERS)
        or bool(_JSX_COMPONENT_TAG.search(code))
        or bool(_ARROW_COMPONENT.search(code))
        or bool(_FUNCTION_COMPONENT.search(code))
    )


def _is_vue(code: str) -> bool:
    return _contains_any(code, _VUE_MARKERS) or bool(_VUE_OPTIONS_EXPORT.search(code))


def _is_angular(code: str) -> bool:
    return _contains_any(code, _ANGULAR_MARKERS)


def _is_svelte(code: str) -> bool:
    return _contains_any(code, _SVELTE_MARKERS) or bool(_SVELTE_SCRIPT_THEN_STYLE.search(code))


def _is_alpine(code: str) -> bool:
    return _contains_any(code, _ALPINE_MARKERS)


def _is_html_document(code: str) -> bool:
    return bool(_HTML_DOCUMENT.search(code))


# Order matters: changing it changes observable classification.
_RULES: tuple[tuple[FrameworkKind, Predicate], ...] = (
    (FrameworkKind.REACT, _is_react),
    (FrameworkKind.VUE, _is_vue),
    (FrameworkKind.ANGULAR, _is_angular),
    (FrameworkKind.SVELTE, _is_svelte),
    (FrameworkKind.ALPINE, _is_alpine),
    (FrameworkKind.HTML, _is_html_document),
)


def framework_rules() -> tuple[FrameworkKind, ...]:
    """Return the kinds in the order the classifier tries them."""
    return tuple(kind for kind, _ in _RULES) + (FrameworkKind.VANILLA,)


def classify(source: str) -> FrameworkVerdict:
    """Classify *source* into exactly one framework verdict.

    Total and deterministic: the empty string (or a non-string) is
    ``vanilla``.
    """
    code = source.strip() if isinstance(source, str) else ""
    for kind, predicate in _RULES:
        if predicate(code):
            return verdict_for(kind)
    return verdict_for(FrameworkKind.VANILLA)


def needs_browser_compilation(source: str) -> bool:
    """Shortcut: does *source* need an in-browser compilation step?"""
    return classify(source).needs_browser_compilation
