"""
Pydantic Schemas
===============
Request and response models for the API.
"""
from .preview import (
    PreviewRequest,
    PreviewResponse,
    PublishRequest,
    PublishResponse,
    TemplateResponse,
    VerdictResponse,
)

__all__ = [
    "PreviewRequest",
    "PreviewResponse",
    "PublishRequest",
    "PublishResponse",
    "TemplateResponse",
    "VerdictResponse",
]
