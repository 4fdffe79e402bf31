"""Shared test fixtures."""

from __future__ import annotations

import pytest

from placehold.config import Settings
from placehold.engine.config import RenderConfig
from placehold.engine.options import resolve_config

SVG_NS = "{http://www.w3.org/2000/svg}"

DEFAULT_FONT_ATTR = (
    'font-family="system-ui, -apple-system, BlinkMacSystemFont, '
    '&quot;Segoe UI&quot;, sans-serif"'
)

LONG_CAPTION = (
    "The quick brown fox jumps over the lazy dog while the placeholder "
    "service keeps wrapping words into a tidy block of centered lines"
)


def make_config(
    dims: str = "600x300",
    bg: str | None = None,
    fg: str | None = None,
    **params: str,
) -> RenderConfig:
    return resolve_config(dims, bg, fg, params, Settings())


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def plain_config() -> RenderConfig:
    return make_config()


@pytest.fixture
def caption_config() -> RenderConfig:
    return make_config("600x300", "red", "yellow", says="Hello World")
