"""
Preview Schemas
===============
Request and response models for preview and site endpoints.
"""
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime, timezone


class PreviewRequest(BaseModel):
    """Snippet to classify or render"""

    source: str = Field(..., description="Pasted component or page source")
    kind: Optional[str] = Field(
        default=None,
        description="Force a framework (react, vue, angular, svelte, alpine, html, vanilla)",
    )

    class Config:
        json_schema_extra = {
            "example": {
                "source": "function App() { return <h1>Hello</h1>; }",
                "kind": None,
            }
        }


class VerdictResponse(BaseModel):
    """Classification of a snippet"""

    kind: str = Field(..., description="Detected framework kind")
    name: str = Field(..., description="Human-readable framework name")
    needs_browser_compilation: bool = Field(default=False)
    cdn_script_urls: List[str] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "kind": "react",
                "name": "React",
                "needs_browser_compilation": True,
                "cdn_script_urls": [
                    "https://unpkg.com/react@18/umd/react.production.min.js",
                    "https://unpkg.com/react-dom@18/umd/react-dom.production.min.js",
                    "https://unpkg.com/@babel/standalone/babel.min.js",
                ],
            }
        }


class PreviewResponse(BaseModel):
    """Verdict plus rendered document"""

    verdict: VerdictResponse
    document: str = Field(..., description="Standalone HTML document")


class TemplateResponse(BaseModel):
    """Starter snippet for a framework"""

    kind: str
    name: str
    template: str


class PublishRequest(BaseModel):
    """Snippet to render and host"""

    project_id: str = Field(..., description="Project identifier, used as the object name")
    source: str = Field(..., description="Pasted component or page source")

    class Config:
        json_schema_extra = {
            "example": {
                "project_id": "my-project",
                "source": "<div x-data=\"{ open: false }\"></div>",
            }
        }


class PublishResponse(BaseModel):
    """Where a published document lives"""

    project_id: str
    path: str = Field(..., description="Object path inside the store")
    url: str = Field(..., description="Public URL of the hosted document")
    kind: str = Field(..., description="Framework the snippet was rendered as")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Config:
        json_schema_extra = {
            "example": {
                "project_id": "my-project",
                "path": "public/my-project.html",
                "url": "/sites/public/my-project.html",
                "kind": "alpine",
            }
        }
