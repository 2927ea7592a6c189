"""Vue generator: Vue 3 global build, SFC or loose composition code."""

from __future__ import annotations

import logging
import re

from framework_preview import cdn
from framework_preview.rewrite.extract import (
    extract_script_bodies,
    extract_script_body,
    extract_style_body,
    extract_template,
    has_export_default,
    named_imports,
    replace_export_default,
    strip_exports,
    strip_module_imports,
    strip_remaining_imports,
    strip_script_blocks,
)
from framework_preview.rewrite.shell import (
    build_document,
    global_destructure,
    inject_head_script,
    is_complete_document,
    script_tag,
)

logger = logging.getLogger(__name__)

COMPOSITION_GLOBALS = ("createApp", "ref", "reactive", "computed", "watch", "onMounted")

_VUE_CDN_MARKERS = ("vue.global.js", "vue.global.prod.js", "vue.min.js")
_SFC_START = re.compile(r"^\s*(?:<!--[\s\S]*?-->\s*)*<(?:template|script|style)[\s>]")
_SFC_TEMPLATE = re.compile(r"<template[\s>]")
_SFC_SCRIPT = re.compile(r"<script[\s>]")
_SETUP_SCRIPT = re.compile(r"<script[^>]*\bsetup\b[^>]*>")
_TOP_LEVEL_BINDING = re.compile(r"^(?:const|let|var|function|async\s+function)\s+(\w+)", re.MULTILINE)
_LEADING_MARKUP = re.compile(r"^\s*<[A-Za-z!]")
_APP_MOUNT_POINT = re.compile(r"""id\s*=\s*["']app["']""")

_DEFAULT_TEMPLATE = """    <div id="app">
        <h1>{{ title || 'Vue App' }}</h1>
        <div v-if="message">{{ message }}</div>
    </div>"""

_DEFAULT_MOUNT = """
        Vue.createApp({
            setup() {
                const title = Vue.ref('Vue App');
                const message = Vue.ref('Welcome to Vue 3!');
                return { title, message };
            }
        }).mount('#app');"""

_EXTRA_CSS = "        #app { padding: 20px; }"


def is_sfc(source: str) -> bool:
    """Single-File-Component shape: top-level template and script blocks.

    The snippet must open with one of the SFC blocks, so in-DOM markup that
    nests a ``<template v-if>`` is not mistaken for a component file.
    """
    if not _SFC_START.match(source):
        return False
    return bool(_SFC_TEMPLATE.search(source)) and bool(_SFC_SCRIPT.search(source))


def _fold_vue_imports(code: str) -> tuple[str, list[str]]:
    names = named_imports(code, "vue")
    code = strip_module_imports(code, "vue")
    code, dropped = strip_remaining_imports(code)
    if dropped:
        logger.debug(f"Dropping {dropped} non-vue import statement(s)")
    return code, names


def _setup_component(body: str) -> str:
    """Turn a ``<script setup>`` body into an options object with ``setup()``."""
    bindings = list(dict.fromkeys(_TOP_LEVEL_BINDING.findall(body)))
    returned = ", ".join(bindings)
    return (
        "const AppComponent = {\n"
        "            setup() {\n"
        f"{body}\n"
        f"                return {{ {returned} }};\n"
        "            }\n"
        "        };"
    )


def _render_sfc(source: str) -> str:
    template = extract_template(source)
    script = extract_script_body(source)
    style = extract_style_body(source)
    if not template.found:
        logger.debug("SFC without <template>; using default template")
    if not script.found:
        logger.debug("SFC without <script>; using default component")

    code, vue_names = _fold_vue_imports(script.fragment)
    if _SETUP_SCRIPT.search(source) and not has_export_default(code):
        component_js = _setup_component(strip_exports(code).strip())
    elif has_export_default(code):
        component_js = replace_export_default(code, "const AppComponent = ")
    else:
        component_js = f"{code}\n        const AppComponent = typeof App !== 'undefined' ? App : {{}};"

    prelude = global_destructure("Vue", vue_names, component_js)
    mount = "" if "createApp" in component_js else "Vue.createApp(AppComponent).mount('#app');"
    body = f"""    <div id="app">{template.fragment}</div>
    <script>
        {prelude}
        {component_js}
        {mount}
    </script>"""
    return build_document(
        "Vue App",
        body,
        head_scripts=[script_tag(cdn.VUE_GLOBAL)],
        extra_css=style.fragment,
    )


def _render_loose(source: str) -> str:
    markup = ""
    code = source
    if _LEADING_MARKUP.match(source):
        markup = strip_script_blocks(source)
        code = "\n".join(extract_script_bodies(source))

    code, vue_names = _fold_vue_imports(code)
    if has_export_default(code):
        code = replace_export_default(code, "const AppComponent = ")
        default_mount = "\n        Vue.createApp(AppComponent).mount('#app');"
    else:
        default_mount = _DEFAULT_MOUNT
    code = strip_exports(code).strip()

    if not markup:
        template = _DEFAULT_TEMPLATE
    elif _APP_MOUNT_POINT.search(markup):
        template = f"    {markup}"
    else:
        template = f'    <div id="app">\n{markup}\n    </div>'

    prelude = global_destructure("Vue", list(COMPOSITION_GLOBALS) + vue_names, code)
    mount = "" if "createApp" in code else default_mount
    body = f"""{template}
    <script>
        {prelude}

{code}
{mount}
    </script>"""
    return build_document(
        "Vue App",
        body,
        head_scripts=[script_tag(cdn.VUE_GLOBAL)],
        extra_css=_EXTRA_CSS,
    )


def render_vue(source: str) -> str:
    if is_complete_document(source):
        if any(marker in source for marker in _VUE_CDN_MARKERS):
            return source
        return inject_head_script(source, script_tag(cdn.VUE_GLOBAL), marker=cdn.VUE_GLOBAL)
    if is_sfc(source):
        return _render_sfc(source)
    return _render_loose(source)

