"""Shared fixtures: a fake built site and an in-process stand-in for Chromium."""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path

import pytest

from og_image import CardSettings, Route

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class FakePage:
    def __init__(self, browser: "FakeBrowser"):
        self.browser = browser
        self.content = None
        self.load_states = []
        self.viewport = None
        self.closed = False

    async def set_content(self, html: str) -> None:
        self.content = html

    async def wait_for_load_state(self, state: str) -> None:
        self.load_states.append(state)

    async def set_viewport_size(self, size: dict) -> None:
        self.viewport = size

    async def screenshot(self, type: str = "png") -> bytes:
        if self.browser.fail_on and self.browser.fail_on in self.content:
            raise RuntimeError("screenshot failed")
        return PNG_SIGNATURE + self.content.encode("utf-8")

    async def close(self) -> None:
        self.closed = True


class FakeBrowser:
    def __init__(self):
        self.pages = []
        self.launches = 0
        self.closed = False
        self.fail_on = None

    async def new_page(self) -> FakePage:
        page = FakePage(self)
        self.pages.append(page)
        return page


@pytest.fixture
def browser() -> FakeBrowser:
    return FakeBrowser()


@pytest.fixture
def launcher(browser: FakeBrowser):
    @asynccontextmanager
    async def _launch():
        browser.launches += 1
        browser.closed = False
        try:
            yield browser
        finally:
            browser.closed = True

    return _launch


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Pelican output with the static assets/ folder already copied."""
    output = tmp_path / "output"
    (output / "assets").mkdir(parents=True)
    return output


@pytest.fixture
def template(tmp_path: Path) -> Path:
    path = tmp_path / "og-image.html"
    path.write_text("<html><body><h1>@title</h1><p>@title</p></body></html>", encoding="utf-8")
    return path


@pytest.fixture
def settings(template: Path) -> CardSettings:
    return CardSettings(template=template, default_title="Rares Portan")


@pytest.fixture
def write_page(output_dir: Path):
    """Write a built HTML page and return its route."""

    def _write(slug: str, title: str | None = "A post", kind: str = "page",
               component: str | None = None) -> Route:
        dist_path = output_dir / "blog" / f"{slug}.html"
        dist_path.parent.mkdir(parents=True, exist_ok=True)
        head = f'<title class="t">{title}</title>' if title is not None else ""
        dist_path.write_text(f"<html><head>{head}</head><body></body></html>", encoding="utf-8")
        return Route(
            kind=kind,
            component=component if component is not None else f"content/articles/{slug}.md",
            dist_path=dist_path,
            pathname=f"/blog/{slug}",
        )

    return _write
