"""
FastAPI Application
==================
Main entry point for the Framework Preview API.

Run with:
    uvicorn framework_preview.web_api.main:app --reload
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from framework_preview import __version__
from framework_preview.web_api.config import settings
from framework_preview.web_api.routers import health, preview, sites

# Create application
app = FastAPI(
    title="Framework Preview API",
    description="Detect the framework of pasted front-end code and render a standalone preview",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(preview.router, prefix="/preview", tags=["Preview"])
app.include_router(sites.router, prefix="/sites", tags=["Sites"])


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "name": "Framework Preview API",
        "version": __version__,
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


# For running directly: python -m framework_preview.web_api.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
