"""GET|HEAD /{width}x{height}[/{bg}[/{fg}]] — the placeholder image endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response

from placehold.config import Settings
from placehold.dependencies import get_settings
from placehold.engine.errors import PlaceholderError
from placehold.engine.options import QUERY_KEYS
from placehold.engine.pipeline import render_placeholder

logger = logging.getLogger(__name__)

router = APIRouter()

SVG_MEDIA_TYPE = "image/svg+xml; charset=utf-8"
USAGE_LINES = (
    "Usage: /:widthxheight/:bg?/:fg?",
    "Example: /600x300/red/white?says=Hello+World",
)


def cors_headers(settings: Settings) -> dict[str, str]:
    return {"Access-Control-Allow-Origin": settings.cors_allow_origin}


def usage_response(settings: Settings, message: str | None = None) -> PlainTextResponse:
    lines = list(USAGE_LINES)
    if message:
        lines.append(f"Error: {message}")
    return PlainTextResponse(
        "\n".join(lines),
        status_code=400,
        headers=cors_headers(settings),
    )


async def placeholder_error_handler(request: Request, exc: PlaceholderError) -> PlainTextResponse:
    logger.debug("Rejected %s: %s", request.url.path, exc)
    return usage_response(get_settings(), str(exc))


def _first_values(request: Request) -> dict[str, str]:
    """First value of each recognized query key; unknown keys are dropped."""
    params: dict[str, str] = {}
    for key in QUERY_KEYS:
        values = request.query_params.getlist(key)
        if values:
            params[key] = values[0]
    return params


@router.options("/{path:path}", include_in_schema=False)
async def preflight(settings: Settings = Depends(get_settings)) -> Response:
    return Response(status_code=204, headers=cors_headers(settings))


@router.api_route("/{path:path}", methods=["GET", "HEAD"])
async def placeholder(
    path: str,
    request: Request,
    settings: Settings = Depends(get_settings),
) -> Response:
    segments = [s for s in path.strip("/").split("/") if s]
    if not segments:
        return usage_response(settings)

    background = segments[1] if len(segments) > 1 else None
    foreground = segments[2] if len(segments) > 2 else None

    result = await render_placeholder(
        segments[0],
        background,
        foreground,
        _first_values(request),
        settings,
    )

    headers = {
        **cors_headers(settings),
        "Cache-Control": f"public, max-age={settings.cache_max_age}, immutable",
        "ETag": result.etag,
    }

    if request.headers.get("if-none-match") == result.etag:
        return Response(status_code=304, headers=headers, media_type=SVG_MEDIA_TYPE)

    if request.method == "HEAD":
        return Response(status_code=200, headers=headers, media_type=SVG_MEDIA_TYPE)

    return Response(content=result.markup, headers=headers, media_type=SVG_MEDIA_TYPE)
