"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI

from placehold.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.placehold_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="placehold",
        description="SVG placeholder images: /WIDTHxHEIGHT/bg/fg?says=caption",
        version="0.1.0",
    )

    from placehold.api.placeholder import placeholder_error_handler, router as placeholder_router
    from placehold.api.router import api_router
    from placehold.engine.errors import PlaceholderError

    app.add_exception_handler(PlaceholderError, placeholder_error_handler)

    # /api first: the placeholder route catches every other path.
    app.include_router(api_router)
    app.include_router(placeholder_router)

    return app


app = create_app()
