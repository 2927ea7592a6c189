"""FrameworkVerdict: the classifier's output for a single source text."""

from __future__ import annotations

from dataclasses import dataclass

from framework_preview import cdn

from . import FrameworkKind

_DISPLAY_NAMES = {
    FrameworkKind.HTML: "HTML",
    FrameworkKind.REACT: "React",
    FrameworkKind.VUE: "Vue",
    FrameworkKind.ANGULAR: "Angular",
    FrameworkKind.SVELTE: "Svelte",
    FrameworkKind.ALPINE: "Alpine.js",
    FrameworkKind.VANILLA: "JavaScript",
}

# kind -> (needs_browser_compilation, cdn_script_urls)
_KIND_TABLE: dict[FrameworkKind, tuple[bool, tuple[str, ...]]] = {
    FrameworkKind.REACT: (True, (cdn.REACT_UMD, cdn.REACT_DOM_UMD, cdn.BABEL_STANDALONE)),
    FrameworkKind.VUE: (True, (cdn.VUE_GLOBAL,)),
    FrameworkKind.ANGULAR: (True, (cdn.ANGULARJS,)),
    FrameworkKind.SVELTE: (True, ()),
    FrameworkKind.ALPINE: (False, (cdn.ALPINE,)),
    FrameworkKind.HTML: (False, ()),
    FrameworkKind.VANILLA: (False, ()),
}


@dataclass(frozen=True, slots=True)
class FrameworkVerdict:
    """Immutable classification result.

    Recomputed on every call; never persisted.
    """

    kind: FrameworkKind
    needs_browser_compilation: bool
    cdn_script_urls: tuple[str, ...] = ()

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self.kind]

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "needs_browser_compilation": self.needs_browser_compilation,
            "cdn_script_urls": list(self.cdn_script_urls),
        }


def verdict_for(kind: FrameworkKind | str) -> FrameworkVerdict:
    """Build the canonical verdict for *kind*.

    Raises ``ValueError`` for an unknown kind string.
    """
    kind = FrameworkKind(kind)
    needs_compilation, urls = _KIND_TABLE[kind]
    return FrameworkVerdict(
        kind=kind,
        needs_browser_compilation=needs_compilation,
        cdn_script_urls=urls,
    )


def get_framework_name(kind: FrameworkKind | str) -> str:
    """Human-readable framework label, ``Unknown`` for anything unrecognised."""
    try:
        return _DISPLAY_NAMES[FrameworkKind(kind)]
    except ValueError:
        return "Unknown"
