# chat_server/main.py

import logging
import time
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from chat_server.api import auth, public, private
from chat_server.api.errors import register_error_handlers
from chat_server.config import AuthType, Settings, get_settings
from chat_server.core.log import setup_logging
from chat_server.services import build_services


logger = logging.getLogger(__name__)


async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        # unhandled errors are answered by the outermost 500 handler, after this middleware
        latency_ms = (time.perf_counter() - start) * 1000
        logger.error("%s %s -> 500 (%.1f ms)", request.method, request.url, latency_ms)
        raise
    latency_ms = (time.perf_counter() - start) * 1000

    if response.status_code >= 500:
        level = logging.ERROR
    elif response.status_code >= 400:
        level = logging.WARNING
    else:
        level = logging.INFO
    logger.log(level, "%s %s -> %d (%.1f ms)", request.method, request.url, response.status_code, latency_ms)
    return response


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="Chat API", version="1.0", description="API Server for Messenger")
    app.state.settings = settings
    app.state.services = build_services(settings)
    app.state.auth_scheme = "Bearer" if settings.auth_type is AuthType.BEARER else "Basic"

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)
    register_error_handlers(app)

    app.include_router(auth.router, prefix=settings.base_path)
    app.include_router(public.router, prefix=settings.base_path)
    app.include_router(private.router, prefix=settings.base_path)

    return app
