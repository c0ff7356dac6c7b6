"""Translate domain and application errors into HTTP responses."""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from wordbook.domain.common.exceptions import DomainError, EntityNotFoundError, ValidationError
from wordbook.domain.quiz.exceptions import EmptySourceError, QuizStateError
from wordbook.domain.vocabulary.exceptions import DuplicateError
from wordbook.exceptions import WordbookError

logger = structlog.get_logger(__name__)

DOMAIN_ERROR_STATUS: dict[type[DomainError], int] = {
    ValidationError: 422,
    DuplicateError: status.HTTP_409_CONFLICT,
    EntityNotFoundError: status.HTTP_404_NOT_FOUND,
    EmptySourceError: status.HTTP_400_BAD_REQUEST,
    QuizStateError: status.HTTP_409_CONFLICT,
}


def status_for(exc: DomainError) -> int:
    """HTTP status for a domain error, by the closest mapped base class."""
    for cls in type(exc).__mro__:
        if cls in DOMAIN_ERROR_STATUS:
            return DOMAIN_ERROR_STATUS[cls]
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, DomainError)
    status_code = status_for(exc)
    logger.info(
        "domain_error",
        path=request.url.path,
        error=type(exc).__name__,
        status_code=status_code,
    )
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


async def wordbook_error_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, WordbookError)
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("request_failed", path=request.url.path, error=exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(WordbookError, wordbook_error_handler)
