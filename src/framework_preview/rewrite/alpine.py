"""Alpine generator: Alpine runs straight from markup, it only needs the CDN tag."""

from __future__ import annotations

import re

from framework_preview import cdn
from framework_preview.rewrite.shell import build_document, has_doctype, script_tag

_ALPINE_SCRIPT_TAG = re.compile(
    r"<script\b[^>]*\bsrc\s*=\s*[\"'][^\"']*alpine[^\"']*[\"'][^>]*>\s*</script>\s*",
    re.IGNORECASE,
)

_EXTRA_CSS = "        body { padding: 20px; }"


def strip_alpine_script_tags(snippet: str) -> str:
    return _ALPINE_SCRIPT_TAG.sub("", snippet)


def render_alpine(source: str) -> str:
    if has_doctype(source):
        return source
    body = strip_alpine_script_tags(source).strip()
    return build_document(
        "Alpine.js App",
        f"    {body}",
        head_scripts=[script_tag(cdn.ALPINE, defer=True)],
        extra_css=_EXTRA_CSS,
    )
