"""FastAPI app factory for the preset validation boundary."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from kittenstudio import __version__
from kittenstudio.config import Settings, settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.kittenstudio_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

SECURITY_HEADERS = {
    "x-content-type-options": "nosniff",
    "referrer-policy": "no-referrer",
    "x-frame-options": "DENY",
    "cache-control": "no-store",
}


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings

    app = FastAPI(
        title="Kitten Studio",
        description="Strict kitten preset validation, share tokens and SVG rendering",
        version=__version__,
    )

    # Origins outside the allow-list get no CORS headers at all
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.allowed_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["content-type"],
        max_age=600,
    )

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    from kittenstudio.api.errors import install_error_handlers
    from kittenstudio.api.router import api_router
    from kittenstudio.dependencies import get_settings

    install_error_handlers(app)
    if app_settings is not settings:
        app.dependency_overrides[get_settings] = lambda: app_settings
    app.include_router(api_router)

    return app


app = create_app()
