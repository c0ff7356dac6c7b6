"""API routes for quiz sessions."""

from fastapi import APIRouter, Depends, status

from wordbook.application.quiz.use_cases.quiz_use_case import QuizUseCase
from wordbook.core import container
from wordbook.infrastructure.common.di import inject_use_case
from wordbook.infrastructure.quiz.mappers.quiz_mapper import QuizMapper
from wordbook.infrastructure.quiz.schemas import (
    QuizAnswerRequest,
    QuizDiscardResponse,
    QuizDraftRequest,
    QuizRestartRequest,
    QuizReviewResponse,
    QuizSessionView,
    QuizStartRequest,
)

router = APIRouter(prefix="/quiz/sessions", tags=["quiz"])

mapper = QuizMapper()

QuizUseCaseDep = Depends(inject_use_case(container.quiz_use_case))


def _draft(request: QuizDraftRequest | None) -> str | None:
    return request.text if request else None


@router.post("", response_model=QuizSessionView, status_code=status.HTTP_201_CREATED)
async def start_quiz(
    request: QuizStartRequest,
    use_case: QuizUseCase = QuizUseCaseDep,
) -> QuizSessionView:
    """
    Start a quiz over the current words.

    Args:
        request: Quiz mode and scope
        use_case: QuizUseCase injected via dependency container

    Returns:
        The new session, positioned on its first item

    Raises:
        HTTPException: 400 if there are no words
    """
    session = use_case.start(mode=request.mode, scope=request.scope)
    return mapper.to_view(session)


@router.get("/{session_id}", response_model=QuizSessionView, status_code=status.HTTP_200_OK)
async def get_quiz(session_id: str, use_case: QuizUseCase = QuizUseCaseDep) -> QuizSessionView:
    """Current state of a quiz session."""
    return mapper.to_view(use_case.get(session_id))


@router.post("/{session_id}/answer", response_model=QuizSessionView)
async def record_answer(
    session_id: str,
    request: QuizAnswerRequest,
    use_case: QuizUseCase = QuizUseCaseDep,
) -> QuizSessionView:
    """Record the answer for the current item."""
    return mapper.to_view(use_case.record_answer(session_id, request.text))


@router.post("/{session_id}/next", response_model=QuizSessionView)
async def next_item(
    session_id: str,
    request: QuizDraftRequest | None = None,
    use_case: QuizUseCase = QuizUseCaseDep,
) -> QuizSessionView:
    """Record what is typed and move to the next item (stays put on the last one)."""
    return mapper.to_view(use_case.next(session_id, _draft(request)))


@router.post("/{session_id}/prev", response_model=QuizSessionView)
async def prev_item(
    session_id: str,
    request: QuizDraftRequest | None = None,
    use_case: QuizUseCase = QuizUseCaseDep,
) -> QuizSessionView:
    """Record what is typed and move to the previous item (stays put on the first one)."""
    return mapper.to_view(use_case.prev(session_id, _draft(request)))


@router.post("/{session_id}/reveal", response_model=QuizSessionView)
async def reveal_current(
    session_id: str,
    request: QuizDraftRequest | None = None,
    use_case: QuizUseCase = QuizUseCaseDep,
) -> QuizSessionView:
    """Record what is typed and show the current item's correct answer."""
    return mapper.to_view(use_case.reveal_current(session_id, _draft(request)))


@router.post("/{session_id}/reveal-all", response_model=QuizReviewResponse)
async def reveal_all(
    session_id: str,
    request: QuizDraftRequest | None = None,
    use_case: QuizUseCase = QuizUseCaseDep,
) -> QuizReviewResponse:
    """Record what is typed and switch to reviewing every answer."""
    use_case.reveal_all(session_id, _draft(request))
    return mapper.to_review(session_id, use_case.review(session_id))


@router.get("/{session_id}/review", response_model=QuizReviewResponse)
async def review(session_id: str, use_case: QuizUseCase = QuizUseCaseDep) -> QuizReviewResponse:
    """Every prompt with the recorded and correct answers (reviewing sessions only)."""
    return mapper.to_review(session_id, use_case.review(session_id))


@router.post("/{session_id}/resume", response_model=QuizSessionView)
async def resume(session_id: str, use_case: QuizUseCase = QuizUseCaseDep) -> QuizSessionView:
    """Leave the review and continue where the user left off."""
    return mapper.to_view(use_case.resume(session_id))


@router.post(
    "/{session_id}/restart", response_model=QuizSessionView, status_code=status.HTTP_201_CREATED
)
async def restart(
    session_id: str,
    request: QuizRestartRequest | None = None,
    use_case: QuizUseCase = QuizUseCaseDep,
) -> QuizSessionView:
    """
    Replace the session with a fresh one over the current words.

    The returned session has a new id; the old one is discarded.
    """
    mode = request.mode if request else None
    scope = request.scope if request else None
    return mapper.to_view(use_case.restart(session_id, mode=mode, scope=scope))


@router.delete("/{session_id}", response_model=QuizDiscardResponse)
async def discard(session_id: str, use_case: QuizUseCase = QuizUseCaseDep) -> QuizDiscardResponse:
    """Throw a quiz session away."""
    use_case.discard(session_id)
    return QuizDiscardResponse(success=True, message="Quiz session discarded")
