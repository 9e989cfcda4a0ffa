"""
Catalog API package.

Provides the FastAPI application for the user and product catalog service.
"""

from .app import create_app

__all__ = ["create_app"]
