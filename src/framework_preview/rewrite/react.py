"""React generator: UMD React plus in-browser Babel when the code has JSX."""

from __future__ import annotations

import logging
import re

from framework_preview import cdn
from framework_preview.rewrite.extract import (
    named_imports,
    strip_exports,
    strip_module_imports,
    strip_remaining_imports,
)
from framework_preview.rewrite.shell import (
    build_document,
    global_destructure,
    is_complete_document,
    script_tag,
)

logger = logging.getLogger(__name__)

COMMON_HOOKS = ("useState", "useEffect", "useRef", "useCallback", "useMemo")

_REACT_MODULES = ("react",)
_REACT_DOM_MODULES = ("react-dom", "react-dom/client")

_JSX_TAG = re.compile(r"<(?:/?[A-Za-z][\w.]*(?:\s[^<>]*)?/?|/?)>")
_MANUAL_MOUNT = re.compile(r"ReactDOM\.render\s*\(|ReactDOM\.createRoot\s*\(|\bcreateRoot\s*\(")

_MOUNT_SCRIPT = """
        (function () {
            var rootElement = document.getElementById('root');
            function FallbackCounter() {
                var state = React.useState(0);
                return React.createElement('div', { style: { padding: '20px' } },
                    React.createElement('h1', null, 'React Counter App'),
                    React.createElement('p', null, 'Count: ' + state[0]),
                    React.createElement('button', { onClick: function () { state[1](state[0] + 1); } }, 'Increment'),
                    React.createElement('button', { onClick: function () { state[1](state[0] - 1); } }, 'Decrement'));
            }
            function findEntryComponent() {
                if (typeof App === 'function' || (typeof App === 'object' && App !== null)) {
                    return App;
                }
                var names = Object.keys(window).filter(function (key) {
                    try {
                        return key !== 'React' && key !== 'ReactDOM' &&
                            /^[A-Z]/.test(key) && typeof window[key] === 'function';
                    } catch (e) {
                        return false;
                    }
                });
                return names.length > 0 ? window[names[0]] : FallbackCounter;
            }
            try {
                ReactDOM.createRoot(rootElement).render(React.createElement(findEntryComponent()));
            } catch (e) {
                console.error(e);
                ReactDOM.createRoot(rootElement).render(React.createElement(FallbackCounter));
            }
        })();"""


def has_jsx(code: str) -> bool:
    return bool(_JSX_TAG.search(code))


def rewrite_modules(code: str) -> tuple[str, list[str], list[str]]:
    """Strip ES module syntax so *code* runs as a classic script.

    Returns ``(code, react_names, react_dom_names)`` where the name lists
    are the named imports that must be pulled off the globals instead.
    """
    react_names: list[str] = []
    dom_names: list[str] = []
    for module in _REACT_MODULES:
        react_names.extend(named_imports(code, module))
        code = strip_module_imports(code, module)
    for module in _REACT_DOM_MODULES:
        dom_names.extend(named_imports(code, module))
        code = strip_module_imports(code, module)

    code, dropped = strip_remaining_imports(code)
    if dropped:
        logger.debug(f"Dropping {dropped} unsupported import statement(s)")
    return strip_exports(code).strip(), react_names, dom_names


def render_react(source: str) -> str:
    if is_complete_document(source):
        return source

    code, react_names, dom_names = rewrite_modules(source)
    jsx = has_jsx(code)

    prelude = [
        global_destructure("React", list(COMMON_HOOKS) + react_names, code),
        global_destructure("ReactDOM", dom_names, code),
    ]
    prelude_js = "\n        ".join(p for p in prelude if p)

    if _MANUAL_MOUNT.search(code):
        mount = ""
    else:
        mount = _MOUNT_SCRIPT

    head_scripts = [
        script_tag(cdn.REACT_UMD, crossorigin=True),
        script_tag(cdn.REACT_DOM_UMD, crossorigin=True),
    ]
    if jsx:
        head_scripts.append(script_tag(cdn.BABEL_STANDALONE))
    script_open = '<script type="text/babel">' if jsx else "<script>"

    body = f"""    <div id="root"></div>
    {script_open}
        {prelude_js}

{code}
{mount}
    </script>"""
    return build_document("React App", body, head_scripts=head_scripts)
