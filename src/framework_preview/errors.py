"""Exceptions raised by the collaborator-facing layer.

``classify`` and ``render`` never raise; these only surface from storage
and code generation.
"""

from __future__ import annotations


class PreviewError(Exception):
    """Base class for framework_preview errors."""


class StorageError(PreviewError):
    """An object store rejected a path or failed to read/write."""


class GenerationError(PreviewError):
    """The remote code generation call failed."""
