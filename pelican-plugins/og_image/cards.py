"""Render one social card PNG per long-form post.

For every qualifying route the built page's ``<title>`` is dropped into the
card template, the result is loaded into a headless Chromium page and a
screenshot is written to ``<OUTPUT_PATH>/<OG_IMAGE_PATH>/<pathname>.png``.
Routes are handled one at a time in a single browser session.
"""
from __future__ import annotations

import asyncio
import logging
import re
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import AsyncIterator, Iterable, List, Optional, Tuple

from playwright.async_api import Browser, async_playwright

from .config import CardSettings
from .errors import MissingTitleError
from .routes import Route, qualifying_routes

logger = logging.getLogger(__name__)

TITLE_PATTERN = re.compile(r"<title[^>]*>([^<]+)</title>")


@dataclass(frozen=True)
class TitleResult:
    title: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.title is not None


def extract_title(html: str) -> TitleResult:
    """Return the text of the first ``<title>`` element, if any."""
    match = TITLE_PATTERN.search(html)
    # a whitespace-only title counts as missing
    if not match or not match.group(1).strip():
        return TitleResult()
    return TitleResult(match.group(1).strip())


def render_template(template: Path, placeholder: str, title: str) -> str:
    """Read *template* and replace the first *placeholder* with *title*."""
    return template.read_text(encoding='utf-8').replace(placeholder, title, 1)


def card_path(directory: Path, route: Route) -> Path:
    return directory / f"{route.pathname.lstrip('/')}.png"


def prepare_directory(output_path: Path, subdir: str) -> Path:
    """Create the card directory under *output_path* unless it exists.

    Only the last component is created; its parent must already exist.
    """
    directory = Path(output_path) / subdir
    if not directory.exists():
        directory.mkdir()
    return directory


def resolve_title(route: Route, result: TitleResult, settings: CardSettings) -> Optional[str]:
    if result.found:
        return result.title
    if settings.missing_title == 'skip':
        logger.warning("og_image: no <title> in %s, skipping %s", route.dist_path, route.pathname)
        return None
    if settings.missing_title == 'default':
        logger.warning("og_image: no <title> in %s, using default title", route.dist_path)
        return settings.default_title
    raise MissingTitleError(route)


@asynccontextmanager
async def launch_browser() -> AsyncIterator[Browser]:
    """Headless Chromium, closed on every exit path."""
    async with async_playwright() as playwright:
        browser = await playwright.chromium.launch()
        try:
            yield browser
        finally:
            await browser.close()


async def capture_card(browser: Browser, html: str, viewport: Tuple[int, int]) -> bytes:
    width, height = viewport
    page = await browser.new_page()
    try:
        await page.set_content(html)
        await page.wait_for_load_state('networkidle')
        await page.set_viewport_size({'width': width, 'height': height})
        return await page.screenshot(type='png')
    finally:
        await page.close()


async def render_route(browser: Browser, route: Route, directory: Path, settings: CardSettings) -> Optional[Path]:
    html = Path(route.dist_path).read_text(encoding='utf-8')
    title = resolve_title(route, extract_title(html), settings)
    if title is None:
        return None

    card_html = render_template(settings.template, settings.placeholder, title)
    image = await capture_card(browser, card_html, settings.viewport)

    target = card_path(directory, route)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(image)
    logger.info("og_image: %s -> %s", route.pathname, target)
    return target


async def generate_cards(output_path, routes: Iterable[Route], settings: CardSettings,
                         launcher=launch_browser) -> List[Path]:
    logger.info("og_image: writing cards to %s", settings.path)
    selected = qualifying_routes(routes, settings.content_extension)
    logger.info("og_image: %d page(s) need a card", len(selected))

    directory = prepare_directory(Path(output_path), settings.path)
    written: List[Path] = []
    async with launcher() as browser:
        for route in selected:
            target = await render_route(browser, route, directory, settings)
            if target is not None:
                written.append(target)

    logger.info("og_image: done, %d card(s) written", len(written))
    return written


def build_cards(output_path, routes: Iterable[Route], settings: CardSettings,
                launcher=launch_browser) -> List[Path]:
    """Synchronous entry point used from Pelican signal handlers."""
    return asyncio.run(generate_cards(output_path, routes, settings, launcher=launcher))
