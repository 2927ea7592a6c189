"""
Health Check Router
==================
Endpoints for health checks and readiness probes.
"""
from fastapi import APIRouter

from framework_preview import __version__
from framework_preview.selfcheck import run_self_check

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.
    Returns OK if the service is running.
    """
    return {"status": "ok", "version": __version__}


@router.get("/ready")
async def readiness_check():
    """
    Readiness check endpoint.
    Ready once every built-in sample snippet classifies and renders.
    """
    results = run_self_check()
    failed = sorted(r.name for r in results if not r.success)
    return {"status": "ready" if not failed else "degraded", "failed": failed}
