"""Word list API routes.

Endpoints:
- GET /words: List stored words in insertion order
- POST /words/lookup: Look a word up in the dictionary and store it
- POST /words: Store a word with a caller-supplied definition
- DELETE /words/{word_id}: Delete a stored word
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_word_service
from api.models import LookupRequest, ManualWordRequest, WordResponse
from domain.model.errors import (
    DomainError,
    DuplicateError,
    NotFoundError,
    RemoteError,
    SerializationError,
    StorageError,
    ValidationError,
)
from services.word_service import WordService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/words", tags=["words"])

# NotFoundError covers both remote misses and missing rows
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, 422),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (DuplicateError, status.HTTP_409_CONFLICT),
    (RemoteError, status.HTTP_502_BAD_GATEWAY),
    (SerializationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (StorageError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def _to_http_error(error: DomainError) -> HTTPException:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(status_code=500, detail=str(error))


@router.get("", response_model=list[WordResponse])
async def list_words(service: WordService = Depends(get_word_service)):
    """Get all stored words ordered by id."""
    try:
        words = service.list_words()
    except DomainError as e:
        raise _to_http_error(e) from e
    return [WordResponse.from_domain(w) for w in words]


@router.post("/lookup", response_model=WordResponse, status_code=status.HTTP_201_CREATED)
async def add_word_from_lookup(
    request: LookupRequest,
    service: WordService = Depends(get_word_service),
):
    """Fetch the word's meanings from the dictionary and store them."""
    try:
        stored = await service.acquire_word(request.word)
    except DomainError as e:
        logger.info(
            "Word lookup add failed",
            extra={"word": request.word, "error_type": type(e).__name__},
        )
        raise _to_http_error(e) from e
    return WordResponse.from_domain(stored)


@router.post("", response_model=WordResponse, status_code=status.HTTP_201_CREATED)
async def add_word(
    request: ManualWordRequest,
    service: WordService = Depends(get_word_service),
):
    """Store a word with the given plain-text definition."""
    try:
        stored = service.manual_add(request.word, request.definition)
    except DomainError as e:
        raise _to_http_error(e) from e
    return WordResponse.from_domain(stored)


@router.delete("/{word_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_word(
    word_id: int,
    service: WordService = Depends(get_word_service),
):
    """Delete a stored word by id."""
    try:
        service.delete_word(word_id)
    except DomainError as e:
        raise _to_http_error(e) from e
