"""Storefront configuration read from the environment."""

import os

DEFAULT_API_URL = "http://localhost:8000"


def api_url() -> str:
    """Base URL of the lesson shop API (``LESSONSHOP_API_URL``)."""
    return os.getenv("LESSONSHOP_API_URL", DEFAULT_API_URL).rstrip("/")
