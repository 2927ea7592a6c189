"""
framework_preview.api
=====================

Programmatic entrypoints for using framework_preview as a backend engine.

Goals:
  - No argparse / HTTP dependencies
  - Pure, synchronous, safe to call concurrently
  - JSON-friendly outputs (``FrameworkVerdict.to_dict()``)

Non-goals:
  - Debouncing editor input; callers coalesce keystrokes
  - Owning persistence; callers pass an ``ObjectStore``

Usage::

    from framework_preview.api import classify, render, preview

    verdict = classify(code)
    document = render(code, verdict)
    verdict, document = preview(code)
"""

from __future__ import annotations

from typing import Any

from framework_preview.classifier import classify, needs_browser_compilation
from framework_preview.collaborators import ObjectStore
from framework_preview.model import FrameworkKind
from framework_preview.model.verdict import FrameworkVerdict, verdict_for
from framework_preview.rewrite import preview, render
from framework_preview.storage import PublishedSite
from framework_preview.storage import publish as _publish


def render_as(source: str, kind: FrameworkKind | str) -> str:
    """Render *source* as *kind*, skipping classification.

    Raises ``ValueError`` for an unknown kind.
    """
    return render(source, verdict_for(kind))


def publish(project_id: str, source: str, *, store: ObjectStore) -> PublishedSite:
    """Render and store *source* as the public document of *project_id*."""
    return _publish(project_id, source, store)


def validate_instance(instance: dict[str, Any], schema_name: str) -> None:
    """Validate a Python dict against a named bundled schema.

    Raises
    ------
    jsonschema.ValidationError
        If validation fails.
    FileNotFoundError
        If the schema is unknown.
    """
    from framework_preview.contracts.load import validate_instance as _validate

    _validate(instance, schema_name)


__all__ = [
    "FrameworkVerdict",
    "classify",
    "needs_browser_compilation",
    "preview",
    "publish",
    "render",
    "render_as",
    "validate_instance",
]
