"""FastAPI application factory"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from src.adapter.database import Database
from src.api.error import register_error_handlers
from src.api.routes import bills

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(config) -> FastAPI:
    """
    Build the application

    The database client is opened in the lifespan handler. If the store
    cannot be reached, the error propagates and startup aborts.

    Args:
        config: ApplicationConfig (or any object with the same attributes)
    """
    setup_logging(config.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database(config.DB_URI, echo=config.DB_ECHO)
        try:
            await database.connect()
        except Exception as e:
            logger.critical(f"Database connection error: {e}")
            raise
        app.state.database = database
        logger.info("Bill service started")
        try:
            yield
        finally:
            await database.disconnect()

    app = FastAPI(
        title="Milk Billing Service",
        version="1.0.0",
        description="Milk delivery bill records: create, list, search and delete.",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
            )
            return response

    register_error_handlers(app)

    app.include_router(bills.router, prefix=config.API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    return app
