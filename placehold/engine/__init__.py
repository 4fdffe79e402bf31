"""placehold rendering engine."""

from placehold.engine.colors import auto_contrast, parse_color, relative_luminance
from placehold.engine.config import Align, Dimensions, RenderConfig
from placehold.engine.errors import InvalidColor, InvalidDimensions, InvalidHexColor, PlaceholderError
from placehold.engine.options import parse_dimensions, resolve_config
from placehold.engine.pipeline import RenderResult, render_placeholder
from placehold.engine.renderer import build_svg, render_svg
from placehold.engine.text_wrap import wrap_text

__all__ = [
    "Align",
    "Dimensions",
    "RenderConfig",
    "RenderResult",
    "PlaceholderError",
    "InvalidColor",
    "InvalidDimensions",
    "InvalidHexColor",
    "auto_contrast",
    "build_svg",
    "parse_color",
    "parse_dimensions",
    "relative_luminance",
    "render_placeholder",
    "render_svg",
    "resolve_config",
    "wrap_text",
]
