"""Validation errors raised by the rendering pipeline."""

from __future__ import annotations


class PlaceholderError(ValueError):
    """Base class for request validation failures. Always maps to a 400."""

    default_message = "Invalid request"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidDimensions(PlaceholderError):
    default_message = "Invalid dimensions"


class InvalidColor(PlaceholderError):
    default_message = "Invalid color"


class InvalidHexColor(PlaceholderError):
    # Only reachable if a malformed hex slips past parse_color.
    default_message = "Invalid hex color"
