"""framework_preview: live preview engine for pasted front-end code."""

__all__ = [
    "__version__",
    "classify",
    "render",
    "render_as",
    "preview",
    "publish",
    "validate_instance",
    "FrameworkKind",
    "FrameworkVerdict",
    "get_framework_name",
    "get_framework_template",
]
__version__ = "0.1.0"

# Programmatic engine entrypoints (backend use).
from framework_preview.api import (  # noqa: E402, F401
    classify,
    preview,
    publish,
    render,
    render_as,
    validate_instance,
)
from framework_preview.model import FrameworkKind  # noqa: E402, F401
from framework_preview.model.verdict import (  # noqa: E402, F401
    FrameworkVerdict,
    get_framework_name,
)
from framework_preview.templates import get_framework_template  # noqa: E402, F401
