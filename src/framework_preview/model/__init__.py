"""Enums shared across the classifier and rewriter layers."""

from __future__ import annotations

from enum import Enum


class FrameworkKind(str, Enum):
    """Canonical framework identifiers produced by the classifier."""

    HTML = "html"
    REACT = "react"
    VUE = "vue"
    ANGULAR = "angular"
    SVELTE = "svelte"
    ALPINE = "alpine"
    VANILLA = "vanilla"
