"""Shared utilities for framework_preview."""

from framework_preview.utils.exit_codes import ExitCode
from framework_preview.utils.json_norm import stable_json_dump, stable_json_dumps

__all__ = [
    "ExitCode",
    "stable_json_dump",
    "stable_json_dumps",
]
