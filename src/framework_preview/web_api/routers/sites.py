"""
Sites Router
============
Publish rendered previews and serve them back as hosted pages.
"""
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from framework_preview import api as core_api
from framework_preview.errors import StorageError
from framework_preview.storage import LocalObjectStore, load_published
from framework_preview.web_api.config import settings
from framework_preview.web_api.routers.preview import check_source_size
from framework_preview.web_api.schemas.preview import PublishRequest, PublishResponse

router = APIRouter()

NOT_FOUND_PAGE = """<!DOCTYPE html>
<html>
<head>
    <title>Site Not Found</title>
    <style>
        body { font-family: Arial, sans-serif; text-align: center; padding: 50px; }
        h1 { color: #666; }
    </style>
</head>
<body>
    <h1>Site Not Found</h1>
    <p>The requested site could not be found.</p>
</body>
</html>"""


def get_store() -> LocalObjectStore:
    """Object store the router reads and writes; overridable in tests."""
    return LocalObjectStore(settings.STORAGE_DIR, base_url=settings.PUBLIC_BASE_URL)


@router.post("/", response_model=PublishResponse)
async def publish_site(request: PublishRequest, store: LocalObjectStore = Depends(get_store)):
    """
    Render a snippet and store it as the project's hosted page.

    - **project_id**: Letters, digits, dot, dash and underscore
    - **source**: The pasted code
    """
    check_source_size(request.source)
    try:
        site = core_api.publish(request.project_id, request.source, store=store)
    except StorageError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return PublishResponse(**site.to_dict())


def _serve(project_id: str, store: LocalObjectStore) -> HTMLResponse:
    try:
        document = load_published(project_id, store)
    except StorageError:
        document = None
    if document is None:
        return HTMLResponse(content=NOT_FOUND_PAGE, status_code=404)
    return HTMLResponse(
        content=document,
        headers={"Cache-Control": f"public, max-age={settings.SITE_CACHE_SECONDS}"},
    )


@router.get("/public/{filename}", response_class=HTMLResponse)
async def serve_site_object(filename: str, store: LocalObjectStore = Depends(get_store)):
    """
    Serve a published page by its object name (``<project_id>.html``).
    """
    project_id = filename[: -len(".html")] if filename.endswith(".html") else filename
    return _serve(project_id, store)


@router.get("/{project_id}", response_class=HTMLResponse)
async def serve_site(project_id: str, store: LocalObjectStore = Depends(get_store)):
    """
    Serve a published page, or a 404 page when nothing was published.
    """
    return _serve(project_id, store)
