"""Exceptions raised by the og_image plugin."""
from __future__ import annotations


class OgImageError(Exception):
    """Base class for social card generation failures."""


class OgImageConfigError(OgImageError):
    """An ``OG_IMAGE_*`` setting has an unusable value."""


class MissingTitleError(OgImageError):
    """A built page has no ``<title>`` to put on its card."""

    def __init__(self, route) -> None:
        self.route = route
        super().__init__(f"No <title> found in {route.dist_path} (route {route.pathname})")
