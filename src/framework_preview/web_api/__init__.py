"""
Framework Preview Web API
=========================
FastAPI-based REST API for classifying, rendering and hosting previews.

Quick Start:
    uvicorn framework_preview.web_api.main:app --reload
"""
from .main import app

__all__ = ["app"]
