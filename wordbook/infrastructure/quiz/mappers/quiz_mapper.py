"""Mapper for QuizSession domain ↔ API schema conversion."""

from wordbook.domain.quiz.entities.quiz_session import QuizSession, ReviewItem
from wordbook.infrastructure.quiz.schemas.quiz_schemas import (
    QuizReviewResponse,
    QuizSessionView,
    ReviewItemSchema,
)


class QuizMapper:
    """Mapper for QuizSession domain ↔ API schema conversion."""

    def to_view(self, session: QuizSession) -> QuizSessionView:
        show_answer = session.revealed or session.is_reviewing
        return QuizSessionView(
            id=session.id.to_primitive(),
            mode=session.settings.mode,
            scope=session.settings.scope,
            phase=session.phase,
            cursor=session.cursor,
            total=session.total,
            position=session.position,
            is_first=session.is_first,
            is_last=session.is_last,
            prompt=session.current_prompt,
            draft=session.draft,
            revealed=session.revealed,
            correct_answer=session.current_answer if show_answer else None,
            answers=list(session.answers),
        )

    def to_review(self, session_id: str, items: list[ReviewItem]) -> QuizReviewResponse:
        return QuizReviewResponse(
            session_id=session_id,
            items=[
                ReviewItemSchema(
                    index=item.index,
                    prompt=item.prompt,
                    user_answer=item.user_answer,
                    correct_answer=item.correct_answer,
                    is_current=item.is_current,
                )
                for item in items
            ],
            answered=sum(1 for item in items if item.is_answered),
            total=len(items),
        )
