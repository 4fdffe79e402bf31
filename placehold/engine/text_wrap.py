"""Caption wrapping with a fixed average-glyph-width heuristic.

There are no font metrics: every character is assumed to be 0.6em wide.
"""

from __future__ import annotations

import math

from placehold.engine.config import DEFAULT_MAX_LINES

# Average glyph advance as a fraction of font size for sans-serif faces.
CHAR_WIDTH_EM = 0.6

ELLIPSIS = "..."


def chars_per_line(max_width: float, font_size: float) -> int:
    """How many characters fit in max_width pixels. Never less than 1."""
    return max(1, math.floor(max_width / (font_size * CHAR_WIDTH_EM)))


def truncate_with_ellipsis(value: str, limit: int) -> str:
    """Cut value to at most limit chars, marking the cut with "..."."""
    if len(value) <= limit:
        return value
    if limit <= len(ELLIPSIS):
        return "." * limit
    return value[: limit - len(ELLIPSIS)] + ELLIPSIS


def chunk_word(word: str, size: int) -> list[str]:
    """Hard-split a word into size-char slices (no hyphenation)."""
    return [word[i:i + size] for i in range(0, len(word), size)]


def wrap_text(
    text: str,
    max_width: float,
    font_size: float,
    wrap: bool,
    max_lines: int = DEFAULT_MAX_LINES,
) -> list[str]:
    """Lay text out into at most max_lines lines.

    Words are packed greedily. When the result overflows, everything from
    line max_lines-1 onward is merged into the last line and cut with an
    ellipsis.
    """
    trimmed = text.strip()
    if not trimmed:
        return []
    if not wrap:
        return [trimmed]

    budget = chars_per_line(max_width, font_size)
    if len(trimmed) <= budget:
        return [trimmed]

    lines: list[str] = []
    current = ""

    for word in trimmed.split():
        if len(word) > budget:
            if current:
                lines.append(current)
                current = ""
            lines.extend(chunk_word(word, budget))
            continue

        candidate = f"{current} {word}" if current else word
        if len(candidate) <= budget:
            current = candidate
        else:
            if current:
                lines.append(current)
            current = word

    if current:
        lines.append(current)

    max_lines = max(1, max_lines)
    if len(lines) <= max_lines:
        return lines

    kept = lines[: max_lines - 1]
    overflow = " ".join(lines[max_lines - 1:]).strip()
    kept.append(truncate_with_ellipsis(overflow, budget))
    return kept
