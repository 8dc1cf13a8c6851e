"""Word service — acquisition and persistence of the user's word list.

Composes a DictionaryPort with a WordRepository:

    fetch → validate non-empty → serialize → persist

Failures surface as domain errors (see domain.model.errors); nothing is
retried. The network call and the insert are not one transaction: if the
process dies between them, no row exists and nothing needs undoing.
"""

import logging

from domain.model.errors import RemoteError, ValidationError, WordNotFoundError
from domain.model.lookup import LookupFailed, NotFound
from domain.model.word import StoredWord, encode_meanings
from port.dictionary import DictionaryPort
from port.word_repository import WordRepository

logger = logging.getLogger(__name__)


class WordService:
    """Word list operations exposed to the command surface."""

    def __init__(self, dictionary: DictionaryPort, repository: WordRepository):
        self.dictionary = dictionary
        self.repository = repository

    def list_words(self) -> list[StoredWord]:
        return self.repository.list_all()

    async def acquire_word(self, word: str) -> StoredWord:
        """Look a word up remotely and store its meanings in Rich form.

        Raises:
            ValidationError: word is blank.
            WordNotFoundError: the dictionary has nothing for the word.
            RemoteError: the dictionary could not be queried.
            SerializationError: meanings could not be encoded.
            DuplicateError: the word is already stored.
            StorageError: any other persistence failure.
        """
        _require_text(word, "Word")
        logger.info("Attempting to add word using dictionary lookup", extra={"word": word})

        outcome = await self.dictionary.fetch(word)
        if isinstance(outcome, NotFound):
            raise WordNotFoundError(f"Definition not found via API for word: {word}")
        if isinstance(outcome, LookupFailed):
            logger.error(
                "Dictionary lookup failed",
                extra={"word": word, "detail": outcome.detail},
            )
            raise RemoteError(f"API error while fetching definition for '{word}': {outcome.detail}")

        # Found with nothing in it is still a miss
        if not outcome.meanings:
            raise WordNotFoundError(f"No definition found via API for word: {word}")

        definition = encode_meanings(outcome.meanings)
        stored = self.repository.insert(word, definition)
        logger.info(
            "Word stored with rich definition",
            extra={"word": word, "word_id": stored.id, "meaning_count": len(outcome.meanings)},
        )
        return stored

    def manual_add(self, word: str, definition: str) -> StoredWord:
        """Store caller-supplied text as a Flat definition, skipping the lookup."""
        _require_text(word, "Word")
        _require_text(definition, "Definition")
        logger.info("Attempting to add word manually", extra={"word": word})
        return self.repository.insert(word, definition)

    def delete_word(self, word_id: int) -> None:
        logger.info("Attempting to delete word", extra={"word_id": word_id})
        self.repository.delete(word_id)


def _require_text(value: str, label: str) -> None:
    if not value or not value.strip():
        raise ValidationError(f"{label} must not be empty")
