"""Regex extraction helpers used by the framework generators.

Every ``extract_*`` helper returns an :class:`Extraction`.  When the
fragment is not found, ``fragment`` holds a fixed default so callers can
always build a renderable document.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

DEFAULT_VUE_TEMPLATE = "<div>{{ message }}</div>"
DEFAULT_VUE_SCRIPT = 'export default { data() { return { message: "Hello Vue!" } } }'
DEFAULT_ANGULAR_TEMPLATE = "<h1>{{ title }}</h1>"
DEFAULT_CLASS_NAME = "App"

_TEMPLATE_BLOCK = re.compile(r"<template(?:\s[^>]*)?>([\s\S]*)</template>")
_SCRIPT_BLOCK = re.compile(r"<script(?:\s[^>]*)?>([\s\S]*?)</script>")
_STYLE_BLOCK = re.compile(r"<style[^>]*>([\s\S]*?)</style>")
_DECORATOR_TEMPLATE = re.compile(
    r"template\s*:\s*(?:`([\s\S]*?)`|'((?:[^'\\\n]|\\.)*)'|\"((?:[^\"\\\n]|\\.)*)\")"
)
_EXPORTED_CLASS = re.compile(r"export\s+class\s+(\w+)[^{]*\{")
_PROPERTY = re.compile(
    r"^(?:(?:public|private|protected|readonly|static)\s+)*"
    r"(\w+)\s*[!?]?\s*(?::\s*[^=;]+?)?\s*=(?![=>])\s*"
)
_METHOD = re.compile(
    r"^(?:(?:public|private|protected|async)\s+)*(\w+)\s*\(\s*\)\s*(?::\s*[\w<>\[\]| ]+)?\s*\{"
)
_SKIPPED_METHODS = frozenset({"constructor", "if", "for", "while", "switch", "catch"})
_OPENERS = "{[("
_CLOSERS = "}])"


@dataclass(frozen=True, slots=True)
class Extraction:
    """Extracted fragment plus whether it was actually present."""

    fragment: str
    found: bool


def extract_template(source: str) -> Extraction:
    """Body of the outermost ``<template>`` block (nested templates kept)."""
    m = _TEMPLATE_BLOCK.search(source)
    if m is None:
        return Extraction(DEFAULT_VUE_TEMPLATE, False)
    return Extraction(m.group(1).strip(), True)


def extract_script_body(source: str) -> Extraction:
    """Body of the first ``<script>`` block."""
    m = _SCRIPT_BLOCK.search(source)
    if m is None:
        return Extraction(DEFAULT_VUE_SCRIPT, False)
    return Extraction(m.group(1).strip(), True)


def extract_script_bodies(source: str) -> list[str]:
    """Bodies of every inline ``<script>`` block, in document order."""
    return [m.group(1).strip() for m in _SCRIPT_BLOCK.finditer(source) if m.group(1).strip()]


def strip_script_blocks(source: str) -> str:
    return _SCRIPT_BLOCK.sub("", source).strip()


def extract_style_body(source: str) -> Extraction:
    """Body of the first ``<style>`` block; empty string when absent."""
    m = _STYLE_BLOCK.search(source)
    if m is None:
        return Extraction("", False)
    return Extraction(m.group(1).strip(), True)


def extract_decorator_template(source: str) -> Extraction:
    """``template:`` string literal of an Angular ``@Component`` decorator."""
    m = _DECORATOR_TEMPLATE.search(source)
    if m is None:
        return Extraction(DEFAULT_ANGULAR_TEMPLATE, False)
    literal = next(g for g in m.groups() if g is not None)
    return Extraction(literal.strip(), True)


def _code_chars(text: str, start: int = 0):
    """Yield ``(index, char)`` for characters outside strings and ``//`` comments."""
    quote = ""
    i = start
    while i < len(text):
        ch = text[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote or (ch == "\n" and quote != "`"):
                quote = ""
        elif text.startswith("//", i):
            newline = text.find("\n", i)
            if newline < 0:
                return
            i = newline
            continue
        elif ch in "'\"`":
            quote = ch
        else:
            yield i, ch
        i += 1


def _matching_brace(text: str, open_index: int) -> int:
    """Index of the bracket closing the one at *open_index*, or -1.

    ``{}``, ``[]`` and ``()`` all count towards the depth.
    """
    depth = 0
    for i, ch in _code_chars(text, open_index):
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth -= 1
            if depth == 0:
                return i
    return -1


def extract_class_name(source: str) -> str:
    m = _EXPORTED_CLASS.search(source)
    return m.group(1) if m else DEFAULT_CLASS_NAME


def extract_class_body(source: str) -> Extraction:
    """Body of the first ``export class``; unbalanced bodies run to EOF."""
    m = _EXPORTED_CLASS.search(source)
    if m is None:
        return Extraction("", False)
    open_index = m.end() - 1
    close_index = _matching_brace(source, open_index)
    if close_index < 0:
        return Extraction(source[open_index + 1:].strip(), True)
    return Extraction(source[open_index + 1:close_index].strip("\n"), True)


def _top_level_lines(class_body: str):
    """Yield ``(offset, stripped_line)`` for lines starting at bracket depth 0.

    *offset* points at the first non-blank character of the line.  Lines
    that begin inside a string or an open bracket are not yielded.
    """
    depth = 0
    top_level = {0}
    for i, ch in _code_chars(class_body):
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth = max(depth - 1, 0)
        elif ch == "\n" and depth == 0:
            top_level.add(i + 1)

    offset = 0
    for line in class_body.splitlines(keepends=True):
        if offset in top_level:
            indent = len(line) - len(line.lstrip())
            yield offset + indent, line.strip()
        offset += len(line)


def _value_end(text: str, start: int) -> int:
    """End of the expression at *start*: first ``;`` or line break at depth 0."""
    depth = 0
    for i, ch in _code_chars(text, start):
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth -= 1
            if depth < 0:
                return i
        elif depth == 0 and ch in ";\n":
            return i
    return len(text)


def parse_property_assignments(class_body: str) -> list[tuple[str, str]]:
    """``name = value;`` statements at the top level of a class body.

    Access modifiers and type annotations are dropped; the value text is
    kept verbatim and may span several lines when it opens a bracket.
    """
    props: list[tuple[str, str]] = []
    for offset, line in _top_level_lines(class_body):
        if not line or line.startswith(("//", "@")):
            continue
        m = _PROPERTY.match(line)
        if m is None:
            continue
        start = offset + m.end()
        while start < len(class_body) and class_body[start].isspace():
            start += 1
        value = class_body[start:_value_end(class_body, start)].strip()
        if value:
            props.append((m.group(1), value))
    return props


def parse_zero_arg_methods(class_body: str) -> list[tuple[str, str]]:
    """``name() { ... }`` methods at the top level of a class body.

    Returns ``(name, body)`` pairs with the body between the braces.
    Methods taking arguments and the constructor are skipped.
    """
    methods: list[tuple[str, str]] = []
    for offset, line in _top_level_lines(class_body):
        m = _METHOD.match(line)
        if m is None or m.group(1) in _SKIPPED_METHODS:
            continue
        open_index = offset + m.end() - 1
        close_index = _matching_brace(class_body, open_index)
        if close_index < 0:
            continue
        methods.append((m.group(1), class_body[open_index + 1:close_index].strip()))
    return methods


def _import_pattern(module: str) -> re.Pattern[str]:
    return re.compile(
        r"^[ \t]*import\s+([^;'\"]*?)\s*from\s*['\"]" + re.escape(module) + r"['\"];?[ \t]*\n?",
        re.MULTILINE,
    )


def named_imports(code: str, module: str) -> list[str]:
    """Names pulled in with ``import { a, b as c } from '<module>'``.

    Aliased imports yield ``"b: c"`` so they can go straight into an
    object destructure.
    """
    names: list[str] = []
    for m in _import_pattern(module).finditer(code):
        brace = re.search(r"\{([^}]*)\}", m.group(1))
        if brace is None:
            continue
        for part in brace.group(1).split(","):
            part = part.strip()
            if not part or part.startswith("type "):
                continue
            if " as " in part:
                original, alias = (p.strip() for p in part.split(" as ", 1))
                part = f"{original}: {alias}"
            if part not in names:
                names.append(part)
    return names


def strip_module_imports(code: str, module: str) -> str:
    """Remove every ``import ... from '<module>'`` statement."""
    return _import_pattern(module).sub("", code)


_EXPORT_DEFAULT = re.compile(r"\bexport\s+default\b\s*")
_EXPORT_KEYWORD = re.compile(
    r"^([ \t]*)export\s+(?=(?:async\s+)?(?:function|const|let|var|class)\b)", re.MULTILINE
)
_EXPORT_LIST = re.compile(r"^[ \t]*export\s*\{[^}]*\};?[ \t]*\n?", re.MULTILINE)
_SIDE_EFFECT_IMPORT = re.compile(r"^[ \t]*import\s+['\"][^'\"]+['\"];?[ \t]*\n?", re.MULTILINE)
_ANY_IMPORT = re.compile(
    r"^[ \t]*import\s+[^;'\"]*?\s*from\s*['\"][^'\"]+['\"];?[ \t]*\n?", re.MULTILINE
)


def strip_remaining_imports(code: str) -> tuple[str, int]:
    """Drop every import statement left after the known globals were folded.

    Returns the cleaned code and how many statements were removed.
    """
    code, n_from = _ANY_IMPORT.subn("", code)
    code, n_bare = _SIDE_EFFECT_IMPORT.subn("", code)
    return code, n_from + n_bare


def has_export_default(code: str) -> bool:
    return bool(_EXPORT_DEFAULT.search(code))


def replace_export_default(code: str, replacement: str = "") -> str:
    """Rewrite the first ``export default`` (e.g. into ``const AppComponent = ``)."""
    return _EXPORT_DEFAULT.sub(replacement, code, count=1)


def strip_exports(code: str) -> str:
    """Remove ``export`` keywords and ``export { ... }`` lists."""
    code = _EXPORT_DEFAULT.sub("", code)
    code = _EXPORT_LIST.sub("", code)
    return _EXPORT_KEYWORD.sub(r"\1", code)
