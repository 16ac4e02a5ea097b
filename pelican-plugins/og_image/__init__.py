"""
Social Card Plugin for Pelican

After the site is written, this plugin renders a preview image for every
long-form post so link previews (Twitter/X, Mastodon, Slack...) show a card
with the post title instead of a bare URL.

For each article or page whose source ends with OG_IMAGE_CONTENT_EXTENSION
(``.md`` by default) it:

  1. reads the built HTML and takes the text of its first <title>,
  2. puts that title into og-image/og-image.html in place of ``@title``,
  3. screenshots the result in headless Chromium at 1200x669,
  4. saves output/assets/twitter-cards/<url path>.png

  blog/hello-world.html -> assets/twitter-cards/blog/hello-world.png

The card URL is also exposed to themes as ``article.og_image``::

  <meta property="og:image" content="{{ SITEURL }}/{{ article.og_image }}">

Chromium must be installed once with ``playwright install chromium``.
See config.py for the available settings.
"""
from __future__ import annotations

from typing import List

from pelican import signals
from pelican.contents import Article, Page

from .cards import TitleResult, build_cards, extract_title, generate_cards, render_template
from .config import CardSettings
from .errors import MissingTitleError, OgImageConfigError, OgImageError
from .routes import Route, collect_routes, public_pathname

__all__ = [
    'CardSettings',
    'MissingTitleError',
    'OgImageConfigError',
    'OgImageError',
    'Route',
    'TitleResult',
    'build_cards',
    'extract_title',
    'generate_cards',
    'register',
    'render_template',
]

# Routes from the most recent build, replaced on every (re)build.
_routes: List[Route] = []


def record_routes(generators):
    _routes[:] = collect_routes(generators)


def write_cards(pelican):
    settings = CardSettings.from_settings(pelican.settings)
    build_cards(pelican.output_path, list(_routes), settings)


def attach_card_url(instance):
    """Set ``instance.og_image`` for content that will get a card."""
    if not isinstance(instance, (Article, Page)):
        return
    if getattr(instance, 'status', None) == 'draft':
        return

    settings = CardSettings.from_settings(instance.settings)
    if not str(getattr(instance, 'source_path', '') or '').endswith(settings.content_extension):
        return
    instance.og_image = f"{settings.path}{public_pathname(instance.url)}.png"


def register():
    """Register the plugin with Pelican."""
    signals.content_object_init.connect(attach_card_url)
    signals.all_generators_finalized.connect(record_routes)
    signals.finalized.connect(write_cards)
