"""Compose a RenderConfig and wrapped lines into an SVG document.

Pure functions only. The document keeps the requested size as its display
size while the viewBox is the scaled canvas, so scale=2 supersamples without
changing layout.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from placehold.engine.colors import ColorKind, color_kind
from placehold.engine.config import DEFAULT_FONT, Align, RenderConfig
from placehold.engine.text_wrap import wrap_text
from placehold.svg.serializer import serialize_svg
from placehold.utils.math_helpers import clamp, format_number

MIN_SCALE = 1
MAX_SCALE = 4
LINE_HEIGHT_EM = 1.2

SHADOW_FILTER_ID = "dropShadow"


@dataclass(frozen=True)
class Canvas:
    """Scaled drawing surface derived from a config."""

    width: int
    height: int
    scale: float
    pad: float

    @classmethod
    def from_config(cls, config: RenderConfig) -> Canvas:
        scale = clamp(config.scale, MIN_SCALE, MAX_SCALE)
        return cls(
            width=max(1, math.floor(config.width * scale + 0.5)),
            height=max(1, math.floor(config.height * scale + 0.5)),
            scale=scale,
            pad=max(0.0, config.pad * scale),
        )

    @property
    def text_width(self) -> float:
        """Width left for text once padding is taken off both sides."""
        return max(0.0, self.width - self.pad * 2)


def _background_rect(config: RenderConfig, canvas: Canvas) -> dict[str, Any]:
    transparent = color_kind(config.background) is ColorKind.TRANSPARENT
    rect: dict[str, Any] = {
        "tag": "rect",
        "width": canvas.width,
        "height": canvas.height,
        "fill": "none" if transparent else config.background,
    }
    if config.radius:
        rect["rx"] = format_number(config.radius)
        rect["ry"] = format_number(config.radius)
    if config.stroke and config.stroke_width:
        rect["stroke"] = config.stroke
        rect["stroke-width"] = format_number(config.stroke_width)
    if config.shadow:
        rect["filter"] = f"url(#{SHADOW_FILTER_ID})"
    return rect


def _shadow_defs() -> dict[str, Any]:
    return {
        "tag": "defs",
        "children": [{
            "tag": "filter",
            "id": SHADOW_FILTER_ID,
            "x": "-20%",
            "y": "-20%",
            "width": "140%",
            "height": "140%",
            "children": [{
                "tag": "feDropShadow",
                "dx": "0",
                "dy": "2",
                "stdDeviation": "3",
                "flood-opacity": "0.25",
            }],
        }],
    }


def _text_x(align: Align, canvas: Canvas) -> float:
    if align is Align.LEFT:
        return canvas.pad
    if align is Align.RIGHT:
        return canvas.width - canvas.pad
    return canvas.width / 2


def _text_block(lines: list[str], config: RenderConfig, canvas: Canvas) -> dict[str, Any]:
    font_size = config.font_size * canvas.scale
    line_height = font_size * LINE_HEIGHT_EM
    x = format_number(_text_x(config.align, canvas))
    # Shift up by half the block so the block, not the first line, is centered.
    base_y = canvas.height / 2 - line_height * (len(lines) - 1) * 0.5

    tspans = [
        {"tag": "tspan", "x": x, "y": format_number(base_y + i * line_height), "text": line}
        for i, line in enumerate(lines)
    ]
    return {
        "tag": "text",
        "x": x,
        "fill": config.foreground,
        "text-anchor": config.align.anchor,
        "font-family": config.font_family or DEFAULT_FONT,
        "font-size": format_number(font_size),
        "dominant-baseline": "middle",
        "font-weight": config.font_weight or None,
        "children": tspans,
    }


def layout_lines(config: RenderConfig) -> list[str]:
    """Wrap the caption for the scaled canvas."""
    if not config.text:
        return []
    canvas = Canvas.from_config(config)
    return wrap_text(
        config.text,
        max_width=canvas.text_width,
        font_size=config.font_size * canvas.scale,
        wrap=config.wrap,
        max_lines=config.max_lines,
    )


def render_svg(config: RenderConfig, lines: list[str]) -> str:
    """Build the SVG document from a config and already-wrapped lines."""
    canvas = Canvas.from_config(config)

    elements: list[dict[str, Any]] = []
    if config.shadow:
        elements.append(_shadow_defs())
    elements.append(_background_rect(config, canvas))
    if lines:
        elements.append(_text_block(lines, config, canvas))

    return serialize_svg(
        elements,
        width=config.width,
        height=config.height,
        view_box=(0, 0, canvas.width, canvas.height),
        label=config.text or str(config.dimensions),
    )


def build_svg(config: RenderConfig) -> str:
    """Wrap the caption and render in one step."""
    return render_svg(config, layout_lines(config))
