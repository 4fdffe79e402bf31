"""Rendering pipeline. Request tokens in, SVG markup and fingerprint out."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass

from placehold.config import Settings
from placehold.engine.fingerprint import fingerprint
from placehold.engine.options import resolve_config
from placehold.engine.renderer import build_svg

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderResult:
    markup: str
    fingerprint: str

    @property
    def etag(self) -> str:
        return f'"{self.fingerprint}"'


async def render_placeholder(
    dims_token: str,
    background_token: str | None = None,
    foreground_token: str | None = None,
    params: Mapping[str, str] | None = None,
    settings: Settings | None = None,
) -> RenderResult:
    """Validate, render and fingerprint one placeholder.

    Raises PlaceholderError on any malformed token; nothing is rendered then.
    """
    start = time.perf_counter()

    config = resolve_config(dims_token, background_token, foreground_token, params, settings)
    markup = build_svg(config)
    token = await fingerprint(config)

    elapsed = (time.perf_counter() - start) * 1000
    logger.debug("Rendered %s (%d bytes) in %.1fms", config.dimensions, len(markup), elapsed)
    return RenderResult(markup=markup, fingerprint=token)
