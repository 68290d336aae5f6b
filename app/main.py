from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import time

import uvicorn

from app.api import shortener
from app.core.config import Settings, settings
from app.core.logging_config import configure_logging
from app.services.shortener import URLService

logger = configure_logging(settings.LOG_LEVEL)

CORS_ORIGIN_HEADERS = {"access-control-allow-origin": "*"}
CORS_JSON_HEADERS = {
    "access-control-allow-methods": "GET, POST, OPTIONS",
    "access-control-allow-headers": "Content-Type",
}


def error_response(status_code: int, message: str, headers: dict = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error_message": message},
        headers={**(headers or {}), **CORS_ORIGIN_HEADERS, **CORS_JSON_HEADERS},
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"{app.title} running on http://{app.state.settings.HOST}:{app.state.settings.PORT}")
    logger.info("API endpoints:")
    logger.info("  POST /shorten - Create short URL")
    logger.info("  GET /:code - Redirect to original URL")
    logger.info("  GET /stats/:code - Get URL statistics")
    logger.info("  GET /list - List all URLs")
    yield
    logger.info("Shutting down gracefully...")


def create_app(app_settings: Settings = settings) -> FastAPI:
    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        description="In-memory URL Shortener Service",
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.url_service = URLService(app_settings.base_url, counter_start=app_settings.COUNTER_START)

    app.include_router(shortener.router)

    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        # preflight requests never reach the router
        if request.method == "OPTIONS":
            return PlainTextResponse("", headers=CORS_ORIGIN_HEADERS)

        response = await call_next(request)
        response.headers.update(CORS_ORIGIN_HEADERS)
        if response.headers.get("content-type", "").startswith("application/json"):
            response.headers.update(CORS_JSON_HEADERS)
        return response

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        start_time = time.time()
        logger.info(f"Request: {request.method} {request.url.path}")

        response = await call_next(request)

        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            f"Response: {request.method} {request.url.path} - "
            f"Status: {response.status_code} - Duration: {duration_ms:.2f}ms"
        )
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return error_response(status.HTTP_404_NOT_FOUND, shortener.NOT_FOUND)
        return error_response(exc.status_code, str(exc.detail), exc.headers)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    logger.info(f"Application '{app_settings.PROJECT_NAME}' configured, short URLs under {app_settings.base_url}")
    return app


app = create_app()


def run():
    # log_config=None keeps the handlers installed by configure_logging
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
