"""Interfaces of the remote services the preview core talks to.

Only the shapes live here; concrete clients belong to the surrounding
application.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Sequence

from framework_preview.classifier import classify
from framework_preview.errors import GenerationError
from framework_preview.model.verdict import FrameworkVerdict
from framework_preview.rewrite import render


@dataclass(frozen=True, slots=True)
class ChatTurn:
    role: str  # user | assistant
    content: str


@dataclass(frozen=True, slots=True)
class GenerationResult:
    generated_code: str
    explanation: str = ""
    metadata: dict = field(default_factory=dict)


class CodeGenerator(Protocol):
    """Remote AI code generation call.

    Implementations raise :class:`GenerationError` on failure.
    """

    def generate(
        self,
        prompt: str,
        *,
        model: str,
        language: str,
        existing_code: str = "",
        history: Sequence[ChatTurn] = (),
    ) -> GenerationResult:
        ...


class ObjectStore(Protocol):
    """Object storage used to host published documents."""

    def put_object(self, path: str, html: str) -> None:
        """Store *html* under *path*; raise ``StorageError`` on failure."""
        ...

    def get_object(self, path: str) -> str | None:
        """Return the stored document, or ``None`` when absent."""
        ...

    def get_public_url(self, path: str) -> str:
        ...


def preview_generated(
    generator: CodeGenerator,
    prompt: str,
    *,
    model: str,
    language: str = "html",
    existing_code: str = "",
    history: Sequence[ChatTurn] = (),
) -> tuple[GenerationResult, FrameworkVerdict, str]:
    """Ask *generator* for code and render whatever comes back.

    Raises
    ------
    GenerationError
        If the generator fails or returns no code.
    """
    result = generator.generate(
        prompt,
        model=model,
        language=language,
        existing_code=existing_code,
        history=history,
    )
    if not result.generated_code.strip():
        raise GenerationError("code generation returned an empty result")
    verdict = classify(result.generated_code)
    return result, verdict, render(result.generated_code, verdict)
