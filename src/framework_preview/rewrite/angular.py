"""Angular generator: everything is served as AngularJS 1.x.

Decorator-style components (``@Component`` / ``@NgModule``) are rewritten
into a ``$scope`` controller; the component's template is translated to
AngularJS directives on a best-effort basis.
"""

from __future__ import annotations

import logging
import re
from typing import Callable

from framework_preview import cdn
from framework_preview.rewrite.extract import (
    extract_class_body,
    extract_decorator_template,
    parse_property_assignments,
    parse_zero_arg_methods,
)
from framework_preview.rewrite.shell import (
    build_document,
    inject_head_script,
    is_complete_document,
    script_tag,
)

logger = logging.getLogger(__name__)

MODULE_NAME = "myApp"
CONTROLLER_NAME = "MainCtrl"

_ANGULARJS_CDN_MARKERS = ("angular.min.js", "angular.js")
_ANGULARJS_MARKERS = ("ng-app", "ng-controller", "angular.module")
_DECORATOR_MARKERS = ("@Component", "@NgModule")
_LEADING_MARKUP = re.compile(r"^\s*<[A-Za-z!]")
_THIS = re.compile(r"\bthis\.")

_NG_FOR = re.compile(r"""\*ngFor\s*=\s*"\s*let\s+(\w+)\s+of\s+([^";]+?)\s*(;[^"]*)?\"""")
_INDEX_ALIAS = re.compile(r"\blet\s+(\w+)\s*=\s*index\b|\bindex\s+as\s+(\w+)")


def _ng_repeat(m: re.Match[str]) -> str:
    attrs = f'ng-repeat="{m.group(1)} in {m.group(2)}"'
    alias = _INDEX_ALIAS.search(m.group(3) or "")
    if alias:
        attrs += f' ng-init="{alias.group(1) or alias.group(2)} = $index"'
    return attrs


# (pattern, replacement) applied in order to decorator templates.
_TEMPLATE_REWRITES: tuple[tuple[re.Pattern[str], Callable[[re.Match[str]], str] | str], ...] = (
    (_NG_FOR, _ng_repeat),
    (re.compile(r"""\*ngIf\s*=\s*"([^";]*?)\s*(?:;[^"]*)?\""""), r'ng-if="\1"'),
    (re.compile(r"\[\(ngModel\)\]\s*="), "ng-model="),
    (re.compile(r"\[(disabled|checked|selected|readonly)\]\s*="), r"ng-\1="),
    (re.compile(r"\((\w+)\)\s*="), r"ng-\1="),
)

_SEED_STATEMENTS = (
    "$scope.title = 'Angular App';",
    "$scope.count = 0;",
    "$scope.increment = function() { $scope.count++; };",
    "$scope.decrement = function() { $scope.count--; };",
)

_DEFAULT_BODY = """    <h1>{{ title }}</h1>
    <p>{{ message }}</p>
    <p>Count: {{ count }}</p>
    <button ng-click="increment()">Increment</button>
    <button ng-click="decrement()">Decrement</button>"""

_EXTRA_CSS = "        body { padding: 20px; }\n        button { margin: 5px; }"


def translate_template(template: str) -> str:
    """Rewrite Angular binding syntax into the AngularJS equivalents."""
    for pattern, replacement in _TEMPLATE_REWRITES:
        template = pattern.sub(replacement, template)
    return template


def _scoped(js: str) -> str:
    return _THIS.sub("$scope.", js)


def scope_statements(class_body: str) -> list[str]:
    """``$scope`` assignments for the properties and methods of a class body."""
    statements = list(_SEED_STATEMENTS)
    for name, value in parse_property_assignments(class_body):
        statements.append(f"$scope.{name} = {_scoped(value)};")
    method_names = []
    for name, body in parse_zero_arg_methods(class_body):
        method_names.append(name)
        statements.append(f"$scope.{name} = function() {{\n{_scoped(body)}\n}};")
    if "ngOnInit" in method_names:
        statements.append("$scope.ngOnInit();")
    return statements


def _controller_script(statements: list[str]) -> str:
    lines = "\n".join(f"                {s}" for s in statements)
    return f"""    <script>
        angular.module('{MODULE_NAME}', [])
            .controller('{CONTROLLER_NAME}', ['$scope', function($scope) {{
{lines}
            }}]);
    </script>"""


def _app_document(body: str) -> str:
    return build_document(
        "Angular App",
        body,
        head_scripts=[script_tag(cdn.ANGULARJS)],
        extra_css=_EXTRA_CSS,
        html_attrs=f'lang="en" ng-app="{MODULE_NAME}"',
        body_attrs=f'ng-controller="{CONTROLLER_NAME}"',
    )


def _render_decorated(source: str) -> str:
    template = extract_decorator_template(source)
    class_body = extract_class_body(source)
    if not template.found:
        logger.debug("No decorator template found; using default template")
    if not class_body.found:
        logger.debug("No exported class found; using seed scope only")

    statements = scope_statements(class_body.fragment)
    body = f"    {translate_template(template.fragment)}\n{_controller_script(statements)}"
    return _app_document(body)


def _wrap_angularjs(source: str) -> str:
    if _LEADING_MARKUP.match(source):
        body = source
    else:
        body = f"    <script>\n{source}\n    </script>"
    return build_document(
        "Angular App",
        body,
        head_scripts=[script_tag(cdn.ANGULARJS)],
        extra_css=_EXTRA_CSS,
    )


def default_scaffold() -> str:
    """Counter app used when no recognisable Angular shape was found."""
    statements = list(_SEED_STATEMENTS) + ["$scope.message = 'Welcome to AngularJS!';"]
    return _app_document(f"{_DEFAULT_BODY}\n{_controller_script(statements)}")


def render_angular(source: str) -> str:
    if is_complete_document(source):
        if "@angular/" in source or any(m in source for m in _ANGULARJS_CDN_MARKERS):
            return source
        return inject_head_script(source, script_tag(cdn.ANGULARJS), marker=cdn.ANGULARJS)
    if any(m in source for m in _DECORATOR_MARKERS):
        return _render_decorated(source)
    if any(m in source for m in _ANGULARJS_MARKERS):
        return _wrap_angularjs(source)
    logger.debug("No Angular shape recognised; emitting default scaffold")
    return default_scaffold()
