"""Math helpers — clamping and lenient number parsing. No engine imports."""

from __future__ import annotations

import math
import re

# Leading float, like a lenient prefix read: "12px" -> 12.0, "1e2" -> 100.0.
_FLOAT_PREFIX_RE = re.compile(r"^\s*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INT_PREFIX_RE = re.compile(r"^\s*[+-]?[0-9]+")


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value into [lo, hi]. NaN collapses to lo."""
    if math.isnan(value):
        return lo
    return min(max(value, lo), hi)


def parse_float(raw: str | None) -> float | None:
    """Parse the leading float of raw. None when absent or not finite."""
    if not raw:
        return None
    m = _FLOAT_PREFIX_RE.match(raw)
    if not m:
        return None
    value = float(m.group(0))
    if not math.isfinite(value):
        return None
    return value


def parse_int(raw: str | None) -> int | None:
    """Parse the leading integer of raw, or None."""
    if not raw:
        return None
    m = _INT_PREFIX_RE.match(raw)
    if not m:
        return None
    return int(m.group(0))


def format_number(value: float) -> str:
    """Compact number for SVG attributes: 300.0 -> "300", 12.5 -> "12.5"."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
