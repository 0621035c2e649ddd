"""Lesson image lookup on the local filesystem."""

import os
from pathlib import Path, PurePosixPath, PureWindowsPath

DEFAULT_IMAGES_DIR = "images"


def images_dir() -> Path:
    """Directory lesson images are served from (``LESSONSHOP_IMAGES_DIR``)."""
    return Path(os.getenv("LESSONSHOP_IMAGES_DIR", DEFAULT_IMAGES_DIR))


def safe_filename(requested: str) -> str:
    """Reduce a requested path to its final component.

    Both separators are stripped, so ``../../etc/passwd`` and
    ``..\\secrets.txt`` resolve inside the images directory.
    """
    return PureWindowsPath(PurePosixPath(requested).name).name


def resolve_image(requested: str, directory: Path | None = None) -> Path | None:
    """Return the image file for ``requested``, or None when it does not exist."""
    filename = safe_filename(requested)
    if filename in ("", ".", ".."):
        return None

    path = (directory or images_dir()) / filename
    if not path.is_file():
        return None
    return path
