"""Color resolution: token parsing, relative luminance, auto-contrast.

Resolved colors are plain strings in one of three shapes:
  "transparent"          the no-fill sentinel
  "#rrggbb"              lowercase, always 6 digits
  "rgb(...)"/"hsl(...)"  functional notation, passed through normalized

Functional notations are only converted to RGB when a luminance is needed.
"""

from __future__ import annotations

import enum
import logging
import math
import re

from placehold.engine.css_colors import CSS_COLORS
from placehold.engine.errors import InvalidColor, InvalidHexColor
from placehold.utils.math_helpers import clamp, parse_float, parse_int

logger = logging.getLogger(__name__)

TRANSPARENT = "transparent"

_HEX_RE = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{6})$")
_HEX_ANY_CASE_RE = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)
_RGB_RE = re.compile(r"^rgba?\(\s*([^)]+)\s*\)$")
_HSL_RE = re.compile(r"^hsla?\(\s*([^)]+)\s*\)$")

# sRGB transfer function knee (IEC 61966-2-1, as quoted by WCAG 2.x).
_SRGB_KNEE = 0.03928
# ITU-R BT.709 luma weights.
_LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)

# Above this luminance the background counts as light and gets dark text.
_CONTRAST_THRESHOLD = 0.55
DARK_FOREGROUND = "#111111"
LIGHT_FOREGROUND = "#ffffff"


class ColorKind(enum.Enum):
    TRANSPARENT = "transparent"
    HEX = "hex"
    FUNCTIONAL = "functional"


def _expand_hex(digits: str) -> str:
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits.lower()}"


def _normalize_components(body: str) -> str:
    return ", ".join(part.strip() for part in body.split(","))


def parse_color(token: str) -> str:
    """Resolve a user color token to its canonical string.

    Precedence: transparent -> named -> hex -> rgb() -> hsl() -> reject.
    """
    normalized = token.strip().lower()
    if not normalized:
        raise InvalidColor()

    if normalized in ("t", TRANSPARENT):
        return TRANSPARENT

    named = CSS_COLORS.get(normalized)
    if named is not None:
        return named

    m = _HEX_RE.match(normalized)
    if m:
        return _expand_hex(m.group(1))

    m = _RGB_RE.match(normalized)
    if m:
        prefix = "rgba" if normalized.startswith("rgba") else "rgb"
        return f"{prefix}({_normalize_components(m.group(1))})"

    m = _HSL_RE.match(normalized)
    if m:
        prefix = "hsla" if normalized.startswith("hsla") else "hsl"
        return f"{prefix}({_normalize_components(m.group(1))})"

    logger.debug("Rejected color token %r", token)
    raise InvalidColor()


def color_kind(color: str) -> ColorKind:
    """Classify an already-resolved color string."""
    if color == TRANSPARENT:
        return ColorKind.TRANSPARENT
    if color.startswith("#"):
        return ColorKind.HEX
    return ColorKind.FUNCTIONAL


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Parse #rgb or #rrggbb (any case) into an (r, g, b) triplet."""
    m = _HEX_ANY_CASE_RE.match(value)
    if not m:
        raise InvalidHexColor()
    digits = _expand_hex(m.group(1))[1:]
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def _parse_rgb_channel(part: str) -> int | None:
    if part.endswith("%"):
        percent = parse_float(part[:-1])
        if percent is None:
            return None
        return int(clamp(_round_half_up(percent / 100 * 255), 0, 255))
    numeric = parse_int(part)
    if numeric is None:
        return None
    return int(clamp(numeric, 0, 255))


def _parse_percentage(part: str) -> float | None:
    if not part.endswith("%"):
        return None
    numeric = parse_float(part[:-1])
    if numeric is None:
        return None
    return clamp(numeric / 100, 0.0, 1.0)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hue_degrees: float, s: float, lightness: float) -> tuple[int, int, int]:
    """HSL (degrees, 0-1, 0-1) -> 8-bit RGB."""
    h = (hue_degrees % 360) / 360

    if s == 0:
        gray = _round_half_up(lightness * 255)
        return (gray, gray, gray)

    q = lightness * (1 + s) if lightness < 0.5 else lightness + s - lightness * s
    p = 2 * lightness - q

    r = _hue_to_rgb(p, q, h + 1 / 3)
    g = _hue_to_rgb(p, q, h)
    b = _hue_to_rgb(p, q, h - 1 / 3)
    return (_round_half_up(r * 255), _round_half_up(g * 255), _round_half_up(b * 255))


def color_to_rgb(color: str) -> tuple[int, int, int] | None:
    """Convert a color string to RGB. None for transparent or unparseable."""
    trimmed = color.strip().lower()
    if trimmed == TRANSPARENT:
        return None

    if _HEX_RE.match(trimmed):
        return hex_to_rgb(trimmed)

    m = _RGB_RE.match(trimmed)
    if m:
        parts = [part.strip() for part in m.group(1).split(",")]
        if len(parts) < 3:
            return None
        channels = [_parse_rgb_channel(part) for part in parts[:3]]
        if any(c is None for c in channels):
            return None
        return (channels[0], channels[1], channels[2])

    m = _HSL_RE.match(trimmed)
    if m:
        parts = [part.strip() for part in m.group(1).split(",")]
        if len(parts) < 3:
            return None
        hue = parse_float(parts[0])
        sat = _parse_percentage(parts[1])
        light = _parse_percentage(parts[2])
        if hue is None or sat is None or light is None:
            return None
        return hsl_to_rgb(hue, sat, light)

    named = CSS_COLORS.get(trimmed)
    if named is not None:
        return hex_to_rgb(named)

    return None


def _linearize(channel: int) -> float:
    scaled = channel / 255
    if scaled <= _SRGB_KNEE:
        return scaled / 12.92
    return ((scaled + 0.055) / 1.055) ** 2.4


def rgb_to_luminance(rgb: tuple[int, int, int]) -> float:
    return sum(w * _linearize(c) for w, c in zip(_LUMA_WEIGHTS, rgb))


def relative_luminance(color: str) -> float:
    """Relative luminance in [0, 1] of a hex, named or functional color.

    Transparent has no RGB value; callers decide what it means.
    """
    if color.lstrip().startswith("#"):
        rgb = hex_to_rgb(color.strip())
    else:
        rgb = color_to_rgb(color)
    if rgb is None:
        raise InvalidColor(f"No RGB value for color {color!r}")
    return rgb_to_luminance(rgb)


def auto_contrast(background: str) -> str:
    """Pick a dark or light foreground for the given background."""
    if background == TRANSPARENT:
        return DARK_FOREGROUND

    rgb = color_to_rgb(background)
    if rgb is None:
        return DARK_FOREGROUND

    luminance = rgb_to_luminance(rgb)
    return DARK_FOREGROUND if luminance > _CONTRAST_THRESHOLD else LIGHT_FOREGROUND
