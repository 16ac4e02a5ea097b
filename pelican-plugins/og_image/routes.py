"""Describe every page Pelican writes as a :class:`Route`.

Routes are gathered once the generators have built their context, so the
list follows generator order: articles (with hidden articles, translations
and drafts), listings, then pages.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List

logger = logging.getLogger(__name__)

PAGE = 'page'
DRAFT = 'draft'
LISTING = 'listing'


@dataclass(frozen=True)
class Route:
    kind: str
    component: str
    dist_path: Path
    pathname: str


def public_pathname(url: str) -> str:
    """Turn a site-relative URL into ``/blog/post`` form.

    ``blog/post.html``, ``blog/post/`` and ``blog/post/index.html`` all map to
    ``/blog/post``; the site root maps to ``/index``.
    """
    path = url.split('#', 1)[0].split('?', 1)[0].strip('/')
    if path.endswith('.html'):
        path = path[:-len('.html')]
    if path.endswith('/index'):
        path = path[:-len('/index')]
    return '/' + (path or 'index')


def is_qualifying(route: Route, extension: str) -> bool:
    return route.kind == PAGE and route.component.endswith(extension)


def qualifying_routes(routes: Iterable[Route], extension: str) -> List[Route]:
    return [route for route in routes if is_qualifying(route, extension)]


def _content_route(kind: str, content, output_path: Path) -> Route | None:
    save_as = getattr(content, 'save_as', '')
    if not save_as:
        return None
    return Route(
        kind=kind,
        component=str(getattr(content, 'source_path', '') or ''),
        dist_path=output_path / save_as,
        pathname=public_pathname(getattr(content, 'url', '') or save_as),
    )


def _wrappers(listing) -> Iterator:
    # tags are a dict, categories and authors a list of (wrapper, articles)
    if isinstance(listing, dict):
        yield from listing
        return
    for entry in listing:
        yield entry[0] if isinstance(entry, tuple) else entry


def _listing_route(template: str, wrapper, output_path: Path) -> Route | None:
    save_as = getattr(wrapper, 'save_as', '')
    if not save_as:
        return None
    return Route(
        kind=LISTING,
        component=template,
        dist_path=output_path / save_as,
        pathname=public_pathname(getattr(wrapper, 'url', '') or save_as),
    )


def routes_for_generator(generator) -> List[Route]:
    output_path = Path(generator.output_path)
    routes: List[Route] = []

    for attr, kind in (
        ('articles', PAGE),
        ('translations', PAGE),
        ('hidden_articles', PAGE),
        ('hidden_translations', PAGE),
        ('drafts', DRAFT),
        ('drafts_translations', DRAFT),
        ('pages', PAGE),
        ('hidden_pages', PAGE),
        ('draft_pages', DRAFT),
    ):
        for content in getattr(generator, attr, []):
            route = _content_route(kind, content, output_path)
            if route:
                routes.append(route)

    for attr, template in (('tags', 'tag'), ('categories', 'category'), ('authors', 'author')):
        for wrapper in _wrappers(getattr(generator, attr, [])):
            route = _listing_route(template, wrapper, output_path)
            if route:
                routes.append(route)

    if hasattr(generator, 'articles'):
        index_save_as = generator.settings.get('INDEX_SAVE_AS', 'index.html')
        if index_save_as:
            routes.append(Route(LISTING, 'index', output_path / index_save_as, public_pathname(index_save_as)))

    return routes


def collect_routes(generators: Iterable) -> List[Route]:
    routes: List[Route] = []
    for generator in generators:
        routes.extend(routes_for_generator(generator))
    logger.debug("og_image: collected %d routes", len(routes))
    return routes
