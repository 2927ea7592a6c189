"""
API Routers
===========
Each router handles a specific domain of the API.
"""
from . import health, preview, sites

__all__ = ["health", "preview", "sites"]
