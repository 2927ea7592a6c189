"""Vanilla generator: plain markup or plain JavaScript, no runtime needed."""

from __future__ import annotations

import re

from framework_preview.rewrite.shell import build_document

_ALREADY_HTML = re.compile(r"<!DOCTYPE|<html|<body", re.IGNORECASE)
_HTML_ELEMENT = re.compile(r"<\w+[^>]*>")

_EXTRA_CSS = "        body { padding: 20px; }"


def has_html_elements(code: str) -> bool:
    return bool(_HTML_ELEMENT.search(code))


def render_vanilla(source: str) -> str:
    if _ALREADY_HTML.search(source):
        return source
    code = source.strip()
    if not code:
        body = ""
    elif has_html_elements(code):
        body = f"    {code}"
    else:
        body = f'    <div id="app"></div>\n    <script>\n{code}\n    </script>'
    return build_document("JavaScript App", body, extra_css=_EXTRA_CSS)
