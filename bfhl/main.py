import uuid
from contextlib import asynccontextmanager

import httpx
import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Settings, get_settings
from .exceptions import BFHLError, ClientInputError, INTERNAL_ERROR_MESSAGE
from .logging_utils import configure_logging
from .operations import router as operations_router
from .operations.schemas import EnvelopeResponse

logger = structlog.get_logger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Global HTTP client for connection pooling; per-request timeouts are
    # set by the AI adapter
    app.state.http_client = httpx.AsyncClient(timeout=None)
    logger.info("app_started", app=app.title)

    yield

    await app.state.http_client.aclose()


def _envelope_error(request: Request, status_code: int, message: str) -> JSONResponse:
    settings: Settings = request.app.state.settings
    envelope = EnvelopeResponse.failure(official_email=settings.OFFICIAL_EMAIL, error=message)
    # Responses from ServerErrorMiddleware bypass request_context, so set it here
    request_id = getattr(request.state, "request_id", None)
    headers = {"X-Request-ID": request_id} if request_id else None
    return JSONResponse(status_code=status_code, content=envelope.to_content(), headers=headers)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.
    
    Args:
        settings: Immutable configuration; loaded from the environment when
            omitted.
        
    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = get_settings()

    configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    app = FastAPI(
        title=settings.APP_NAME,
        lifespan=lifespan,
        debug=settings.DEBUG
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    # Global exception handlers
    @app.exception_handler(ClientInputError)
    async def client_input_exception_handler(request: Request, exc: ClientInputError):
        return _envelope_error(request, 400, exc.message)

    @app.exception_handler(BFHLError)
    async def bfhl_exception_handler(request: Request, exc: BFHLError):
        logger.error("request_failed", error_code=exc.code)
        return _envelope_error(request, 500, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error("unhandled_exception", error=str(exc), exc_info=exc)
        return _envelope_error(request, 500, INTERNAL_ERROR_MESSAGE)

    @app.get("/health")
    async def health_check():
        envelope = EnvelopeResponse.health(official_email=settings.OFFICIAL_EMAIL)
        return envelope.to_content()

    app.include_router(operations_router)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    import uvicorn

    settings = app.state.settings
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
