"""Dimension and query-option validation.

Two policies live side by side here:
  rejection  malformed dimension tokens and colors raise PlaceholderError
  clamping   out-of-range numbers are silently pulled into range
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from placehold.config import Settings, settings as default_settings
from placehold.engine.colors import auto_contrast, parse_color
from placehold.engine.config import MAX_DIMENSION, MIN_DIMENSION, Align, Dimensions, RenderConfig
from placehold.engine.errors import InvalidDimensions
from placehold.engine.text_wrap import truncate_with_ellipsis
from placehold.utils.math_helpers import clamp, parse_float, parse_int

logger = logging.getLogger(__name__)

_DIMENSIONS_RE = re.compile(r"^([0-9]{1,4})x([0-9]{1,4})$")

_TRUTHY = frozenset({"true", "1", "yes"})

MIN_FONT_SIZE = 12.0
MAX_FONT_SIZE = 128.0

QUERY_KEYS = (
    "says", "font", "weight", "size", "pad", "radius",
    "stroke", "sw", "shadow", "align", "wrap", "scale",
)


def parse_dimensions(token: str) -> Dimensions:
    """Parse "WxH" (lowercase x, 1-4 digits each side), clamped to [1, 8000]."""
    m = _DIMENSIONS_RE.match(token.strip())
    if not m:
        logger.debug("Rejected dimensions token %r", token)
        raise InvalidDimensions()
    width = int(clamp(int(m.group(1)), MIN_DIMENSION, MAX_DIMENSION))
    height = int(clamp(int(m.group(2)), MIN_DIMENSION, MAX_DIMENSION))
    return Dimensions(width=width, height=height)


def parse_scale(raw: str | None) -> int:
    """Closed set: 2 means 2, everything else means 1."""
    return 2 if parse_int(raw) == 2 else 1


def parse_bool(raw: str | None) -> bool:
    if not raw:
        return False
    return raw.lower() in _TRUTHY


def parse_align(raw: str | None) -> Align:
    try:
        return Align((raw or "").lower())
    except ValueError:
        return Align.CENTER


def clamp_text(value: str | None, limit: int = 120) -> str:
    if not value:
        return ""
    return truncate_with_ellipsis(value.strip(), limit)


def _optional_text(raw: str | None) -> str | None:
    if raw is None:
        return None
    return raw.strip() or None


def _clamped_option(raw: str | None, default: float, lo: float, hi: float) -> float:
    value = parse_float(raw)
    return clamp(default if value is None else value, lo, hi)


def resolve_config(
    dims_token: str,
    background_token: str | None = None,
    foreground_token: str | None = None,
    params: Mapping[str, str] | None = None,
    settings: Settings | None = None,
) -> RenderConfig:
    """Validate raw request tokens into a fully clamped RenderConfig."""
    settings = settings or default_settings
    params = params or {}

    dims = parse_dimensions(dims_token)
    background = parse_color(background_token) if background_token else settings.default_background
    foreground = parse_color(foreground_token) if foreground_token else auto_contrast(background)

    scale = parse_scale(params.get("scale"))
    shortest = dims.shortest_side

    font_size = _clamped_option(params.get("size"), shortest / 6, MIN_FONT_SIZE, MAX_FONT_SIZE)
    pad = _clamped_option(params.get("pad"), 0.0, 0.0, shortest / 2)
    radius = _clamped_option(params.get("radius"), 0.0, 0.0, shortest / 2)
    stroke_width = _clamped_option(params.get("sw"), 0.0, 0.0, shortest / 5)

    stroke_raw = params.get("stroke")
    stroke = parse_color(stroke_raw) if stroke_raw else None

    text = clamp_text(params.get("says"), settings.max_text_length)

    config = RenderConfig(
        dimensions=dims,
        background=background,
        foreground=foreground,
        font_size=font_size,
        text=text or None,
        font_family=_optional_text(params.get("font")),
        font_weight=_optional_text(params.get("weight")),
        pad=pad,
        align=parse_align(params.get("align")),
        wrap=parse_bool(params.get("wrap")),
        scale=scale,
        radius=radius * scale,
        stroke=stroke,
        stroke_width=stroke_width * scale if stroke_width else None,
        shadow=parse_bool(params.get("shadow")),
        max_lines=settings.max_lines,
    )
    logger.debug("Resolved config %s bg=%s fg=%s scale=%d", dims, background, foreground, scale)
    return config
