"""FastAPI REST API for fence planning.

This module provides a REST API for computing fence layouts, validating
configurations, and exporting bills of materials.

Usage:
    uvicorn fences.web:app --reload
"""

from fences.web.app import app, create_app

__all__ = ["app", "create_app"]
