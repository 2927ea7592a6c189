"""Shared HTML shell for every generated preview document."""

from __future__ import annotations

import re
from typing import Iterable

BASE_CSS = """        *, *::before, *::after { box-sizing: border-box; }
        body {
            margin: 0;
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', 'Roboto', 'Oxygen',
                'Ubuntu', 'Cantarell', 'Fira Sans', 'Droid Sans', 'Helvetica Neue',
                sans-serif;
            -webkit-font-smoothing: antialiased;
            -moz-osx-font-smoothing: grayscale;
        }"""

DOCTYPE = "<!DOCTYPE html>"

_DOCTYPE_RE = re.compile(r"<!DOCTYPE", re.IGNORECASE)
_COMPLETE_RE = re.compile(r"<!DOCTYPE|<html", re.IGNORECASE)
_HEAD_CLOSE_RE = re.compile(r"</head\s*>", re.IGNORECASE)
_IDENT_RE = re.compile(r"^[A-Za-z_$][\w$]*$")


def has_doctype(code: str) -> bool:
    return bool(_DOCTYPE_RE.search(code))


def is_complete_document(code: str) -> bool:
    """True when *code* already declares a doctype or an ``<html>`` root."""
    return bool(_COMPLETE_RE.search(code))


def ensure_doctype(document: str) -> str:
    if has_doctype(document):
        return document
    return f"{DOCTYPE}\n{document}"


def script_tag(src: str, *, defer: bool = False, crossorigin: bool = False) -> str:
    attrs = []
    if defer:
        attrs.append("defer")
    if crossorigin:
        attrs.append("crossorigin")
    attrs.append(f'src="{src}"')
    return f"<script {' '.join(attrs)}></script>"


def inject_head_script(document: str, tag: str, *, marker: str) -> str:
    """Insert *tag* right before ``</head>`` unless *marker* is present.

    Documents without a ``</head>`` are returned untouched.
    """
    if marker in document:
        return document
    m = _HEAD_CLOSE_RE.search(document)
    if m is None:
        return document
    return f"{document[:m.start()]}    {tag}\n{document[m.start():]}"


def _declares(code: str, name: str) -> bool:
    """Does *code* already declare *name* at any level we can see cheaply?"""
    escaped = re.escape(name)
    if re.search(rf"\b(?:const|let|var|function|class)\s+{escaped}\b", code):
        return True
    return bool(re.search(rf"(?:const|let|var)\s*\{{[^}}]*\b{escaped}\b[^}}]*\}}\s*=", code))


def global_destructure(global_name: str, names: Iterable[str], code: str) -> str:
    """``const { a, b } = Global;`` for the *names* that *code* does not declare.

    Entries may be ``"original: alias"``; the alias is what gets checked.
    Returns an empty string when nothing is left to declare.
    """
    wanted: list[str] = []
    for entry in names:
        local = entry.split(":", 1)[-1].strip()
        if not _IDENT_RE.match(local) or _declares(code, local):
            continue
        if entry not in wanted:
            wanted.append(entry)
    if not wanted:
        return ""
    return f"const {{ {', '.join(wanted)} }} = {global_name};"


def build_document(
    title: str,
    body: str,
    *,
    head_scripts: Iterable[str] = (),
    extra_css: str = "",
    html_attrs: str = 'lang="en"',
    body_attrs: str = "",
) -> str:
    """Render the standard preview shell around *body*."""
    scripts = "".join(f"    {tag}\n" for tag in head_scripts)
    css = BASE_CSS + (f"\n{extra_css}" if extra_css else "")
    body_open = f"<body {body_attrs}>" if body_attrs else "<body>"
    return f"""{DOCTYPE}
<html {html_attrs}>
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
{scripts}    <style>
{css}
    </style>
</head>
{body_open}
{body}
</body>
</html>"""
