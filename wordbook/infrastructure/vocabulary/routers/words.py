"""API routes for word list management."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from wordbook.application.vocabulary.use_cases.word_export_use_case import WordExportUseCase
from wordbook.application.vocabulary.use_cases.word_import_use_case import WordImportUseCase
from wordbook.application.vocabulary.use_cases.word_management_use_case import (
    WordManagementUseCase,
)
from wordbook.application.vocabulary.use_cases.word_search_use_case import WordSearchUseCase
from wordbook.core import container
from wordbook.domain.common.exceptions import DomainError
from wordbook.exceptions import WordbookError
from wordbook.infrastructure.common.di import inject_use_case
from wordbook.infrastructure.vocabulary.mappers.word_mapper import WordMapper
from wordbook.infrastructure.vocabulary.schemas import (
    Word,
    WordCreateRequest,
    WordCreateResponse,
    WordDeleteResponse,
    WordImportRequest,
    WordImportResponse,
    WordListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/words", tags=["words"])

mapper = WordMapper()


@router.get("", response_model=WordListResponse, status_code=status.HTTP_200_OK)
async def list_words(
    q: str | None = None,
    use_case: WordSearchUseCase = Depends(inject_use_case(container.word_search_use_case)),
) -> WordListResponse:
    """
    List words in the order they were added.

    Args:
        q: Optional search term matched against english and chinese, ignoring case
        use_case: WordSearchUseCase injected via dependency container

    Returns:
        Matching words plus the total number stored
    """
    words = use_case.search(q)
    return WordListResponse(
        words=[mapper.to_schema(word) for word in words],
        total=use_case.count(),
        matched=len(words),
    )


@router.post("", response_model=WordCreateResponse, status_code=status.HTTP_201_CREATED)
async def add_word(
    request: WordCreateRequest,
    use_case: WordManagementUseCase = Depends(
        inject_use_case(container.word_management_use_case)
    ),
) -> WordCreateResponse:
    """
    Add a single word.

    Args:
        request: English word and chinese meaning
        use_case: WordManagementUseCase injected via dependency container

    Returns:
        Created word

    Raises:
        HTTPException: 409 if the word exists, 422 if a field is blank,
            503 if it could not be saved
    """
    try:
        word = await use_case.add_word(request.english, request.chinese)
        return WordCreateResponse(
            success=True,
            message="Word added successfully",
            word=mapper.to_schema(word),
        )
    except (WordbookError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to add word {request.english!r}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("/import", response_model=WordImportResponse, status_code=status.HTTP_200_OK)
async def import_words(
    request: WordImportRequest,
    use_case: WordImportUseCase = Depends(inject_use_case(container.word_import_use_case)),
) -> WordImportResponse:
    """
    Bulk import `english,chinese` lines.

    Malformed lines and duplicates are skipped; only the number of words
    actually added is reported.

    Args:
        request: Raw import text
        use_case: WordImportUseCase injected via dependency container

    Returns:
        Number of imported words
    """
    try:
        imported = await use_case.import_text(request.text)
        return WordImportResponse(
            success=True,
            message=f"Imported {imported} words",
            imported=imported,
        )
    except (WordbookError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to import words: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/export", response_class=PlainTextResponse, status_code=status.HTTP_200_OK)
async def export_words(
    use_case: WordExportUseCase = Depends(inject_use_case(container.word_export_use_case)),
) -> PlainTextResponse:
    """
    Export every word as an `english,chinese` text file.

    The file can be imported again as-is.
    """
    return PlainTextResponse(
        use_case.export_text(),
        media_type="text/plain; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{use_case.export_filename}"'},
    )


@router.get("/{word_id}", response_model=Word, status_code=status.HTTP_200_OK)
async def get_word(
    word_id: str,
    use_case: WordManagementUseCase = Depends(
        inject_use_case(container.word_management_use_case)
    ),
) -> Word:
    """Get a single word by id."""
    return mapper.to_schema(use_case.get_word(word_id))


@router.delete("/{word_id}", response_model=WordDeleteResponse, status_code=status.HTTP_200_OK)
async def delete_word(
    word_id: str,
    use_case: WordManagementUseCase = Depends(
        inject_use_case(container.word_management_use_case)
    ),
) -> WordDeleteResponse:
    """
    Delete a word.

    Deleting a word that does not exist succeeds and changes nothing.
    """
    try:
        await use_case.delete_word(word_id)
        return WordDeleteResponse(success=True, message="Word deleted successfully")
    except (WordbookError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete word {word_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("", response_model=WordDeleteResponse, status_code=status.HTTP_200_OK)
async def clear_words(
    use_case: WordManagementUseCase = Depends(
        inject_use_case(container.word_management_use_case)
    ),
) -> WordDeleteResponse:
    """Delete every word."""
    try:
        removed = await use_case.clear_words()
        return WordDeleteResponse(success=True, message=f"Deleted {removed} words")
    except (WordbookError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to clear words: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
