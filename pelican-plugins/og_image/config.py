"""Plugin settings read from pelicanconf.py.

All settings are optional::

    OG_IMAGE_PATH = 'assets/twitter-cards'        # destination under OUTPUT_PATH
    OG_IMAGE_TEMPLATE = 'og-image/og-image.html'  # card template
    OG_IMAGE_PLACEHOLDER = '@title'               # replaced once by the page title
    OG_IMAGE_CONTENT_EXTENSION = '.md'            # long-form posts get a card
    OG_IMAGE_VIEWPORT = (1200, 669)
    OG_IMAGE_MISSING_TITLE = 'abort'              # or 'skip' / 'default'
    OG_IMAGE_DEFAULT_TITLE = SITENAME
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from .errors import OgImageConfigError

DEFAULT_PATH = 'assets/twitter-cards'
DEFAULT_TEMPLATE = 'og-image/og-image.html'
DEFAULT_PLACEHOLDER = '@title'
DEFAULT_EXTENSION = '.md'
DEFAULT_VIEWPORT = (1200, 669)

MISSING_TITLE_POLICIES = ('abort', 'skip', 'default')


@dataclass(frozen=True)
class CardSettings:
    path: str = DEFAULT_PATH
    template: Path = Path(DEFAULT_TEMPLATE)
    placeholder: str = DEFAULT_PLACEHOLDER
    content_extension: str = DEFAULT_EXTENSION
    viewport: Tuple[int, int] = DEFAULT_VIEWPORT
    missing_title: str = 'abort'
    default_title: str = ''

    @classmethod
    def from_settings(cls, settings) -> CardSettings:
        policy = settings.get('OG_IMAGE_MISSING_TITLE', 'abort')
        if policy not in MISSING_TITLE_POLICIES:
            raise OgImageConfigError(
                f"OG_IMAGE_MISSING_TITLE must be one of {', '.join(MISSING_TITLE_POLICIES)}, got {policy!r}"
            )

        viewport = settings.get('OG_IMAGE_VIEWPORT', DEFAULT_VIEWPORT)
        try:
            width, height = (int(v) for v in viewport)
        except (TypeError, ValueError):
            raise OgImageConfigError(f"OG_IMAGE_VIEWPORT must be a (width, height) pair, got {viewport!r}")
        if width <= 0 or height <= 0:
            raise OgImageConfigError(f"OG_IMAGE_VIEWPORT must be positive, got {viewport!r}")

        placeholder = settings.get('OG_IMAGE_PLACEHOLDER', DEFAULT_PLACEHOLDER)
        if not placeholder:
            raise OgImageConfigError("OG_IMAGE_PLACEHOLDER must not be empty")

        return cls(
            path=settings.get('OG_IMAGE_PATH', DEFAULT_PATH).strip('/'),
            template=Path(settings.get('OG_IMAGE_TEMPLATE', DEFAULT_TEMPLATE)),
            placeholder=placeholder,
            content_extension=settings.get('OG_IMAGE_CONTENT_EXTENSION', DEFAULT_EXTENSION),
            viewport=(width, height),
            missing_title=policy,
            default_title=settings.get('OG_IMAGE_DEFAULT_TITLE', settings.get('SITENAME', '')),
        )
