"""FastAPI REST API for wardrobe suggestions.

Usage:
    uvicorn wardrobes.web:app --reload
"""

from wardrobes.web.app import app, create_app

__all__ = ["app", "create_app"]
