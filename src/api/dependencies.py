from fastapi import Depends, HTTPException, Request

from adapter.external.free_dictionary import FreeDictionaryAdapter
from port.dictionary import DictionaryPort
from port.word_repository import WordRepository
from services.word_service import WordService


def get_optional_word_repo(request: Request) -> WordRepository | None:
    """Word repository opened by the app lifespan, None if it isn't open."""
    return getattr(request.app.state, "word_repository", None)


def get_word_repo(
    repo: WordRepository | None = Depends(get_optional_word_repo),
) -> WordRepository:
    """Word repository for routes that need it, 503 if it isn't open."""
    if repo is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return repo


def get_dictionary_port() -> DictionaryPort:
    return FreeDictionaryAdapter()


def get_word_service(
    repo: WordRepository = Depends(get_word_repo),
    dictionary: DictionaryPort = Depends(get_dictionary_port),
) -> WordService:
    return WordService(dictionary=dictionary, repository=repo)
