"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wordbook.config import configure_logging, get_settings
from wordbook.core import container
from wordbook.infrastructure.common.exception_handlers import register_exception_handlers
from wordbook.infrastructure.quiz.routers import router as quiz_router
from wordbook.infrastructure.vocabulary.routers import router as words_router

logger = structlog.get_logger(__name__)


# --- Lifecycle ---
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # The word list is loaded once per process
    await container.word_repository().load()
    logger.info("application_started")
    yield


# --- App Factory ---
def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(words_router, prefix=settings.API_V1_PREFIX)
    app.include_router(quiz_router, prefix=settings.API_V1_PREFIX)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
