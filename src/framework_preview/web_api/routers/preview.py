"""
Preview Router
==============
Endpoints for classifying snippets and rendering preview documents.
"""
from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse

from framework_preview import api as core_api
from framework_preview.model.verdict import FrameworkVerdict, get_framework_name
from framework_preview.templates import get_framework_template
from framework_preview.web_api.config import settings
from framework_preview.web_api.schemas.preview import (
    PreviewRequest,
    PreviewResponse,
    TemplateResponse,
    VerdictResponse,
)

router = APIRouter()


def check_source_size(source: str) -> None:
    """Reject snippets longer than ``settings.MAX_SOURCE_CHARS`` with a 413."""
    if len(source) > settings.MAX_SOURCE_CHARS:
        raise HTTPException(
            status_code=413,
            detail=f"Source exceeds {settings.MAX_SOURCE_CHARS} characters",
        )


def _verdict_response(verdict: FrameworkVerdict) -> VerdictResponse:
    return VerdictResponse(
        kind=verdict.kind.value,
        name=verdict.display_name,
        needs_browser_compilation=verdict.needs_browser_compilation,
        cdn_script_urls=list(verdict.cdn_script_urls),
    )


@router.post("/classify", response_model=VerdictResponse)
async def classify_snippet(request: PreviewRequest):
    """
    Detect which framework a snippet is written in.

    - **source**: The pasted code
    """
    check_source_size(request.source)
    return _verdict_response(core_api.classify(request.source))


@router.post("/render", response_class=HTMLResponse)
async def render_snippet(request: PreviewRequest):
    """
    Render a snippet into a standalone HTML document.

    - **source**: The pasted code
    - **kind**: Optional framework override; detected when omitted
    """
    check_source_size(request.source)
    if request.kind:
        try:
            document = core_api.render_as(request.source, request.kind)
        except ValueError:
            raise HTTPException(status_code=400, detail=f"Unknown framework kind: {request.kind}")
    else:
        document = core_api.render(request.source, core_api.classify(request.source))
    return HTMLResponse(content=document)


@router.post("/", response_model=PreviewResponse)
async def preview_snippet(request: PreviewRequest):
    """
    Classify and render in one call.
    """
    check_source_size(request.source)
    verdict, document = core_api.preview(request.source)
    return PreviewResponse(verdict=_verdict_response(verdict), document=document)


@router.get("/templates/{kind}", response_model=TemplateResponse)
async def framework_template(kind: str):
    """
    Starter snippet for a framework.
    """
    name = get_framework_name(kind)
    if name == "Unknown":
        raise HTTPException(status_code=404, detail=f"Unknown framework kind: {kind}")
    return TemplateResponse(kind=kind, name=name, template=get_framework_template(kind))
