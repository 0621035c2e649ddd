"""Catalogue domain API package."""

from catalogue.api.routes import image_router, lesson_router, search_router

__all__ = ["lesson_router", "search_router", "image_router"]
