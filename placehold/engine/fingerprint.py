"""Content fingerprint of a RenderConfig, used as the response ETag."""

from __future__ import annotations

import asyncio
import hashlib
import json

from placehold.engine.config import RenderConfig

FINGERPRINT_LENGTH = 32


def fingerprint_payload(config: RenderConfig) -> str:
    """Canonical JSON of every field that changes the rendered output."""
    fields = {
        "width": config.width,
        "height": config.height,
        "background": config.background,
        "foreground": config.foreground,
        "text": config.text or "",
        "font_family": config.font_family,
        "font_size": config.font_size,
        "font_weight": config.font_weight,
        "pad": config.pad,
        "align": config.align.value,
        "wrap": config.wrap,
        "scale": config.scale,
        "radius": config.radius,
        "stroke": config.stroke,
        "stroke_width": config.stroke_width,
        "shadow": config.shadow,
        "max_lines": config.max_lines,
    }
    return json.dumps(fields, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def compute_fingerprint(config: RenderConfig) -> str:
    digest = hashlib.sha256(fingerprint_payload(config).encode("utf-8")).hexdigest()
    return digest[:FINGERPRINT_LENGTH]


async def fingerprint(config: RenderConfig) -> str:
    """compute_fingerprint off the event loop."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, compute_fingerprint, config)
