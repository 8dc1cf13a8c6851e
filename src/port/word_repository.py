"""Port for stored word data access."""

from typing import Protocol

from domain.model.word import StoredWord


class WordRepository(Protocol):
    """Protocol for word list persistence (list, insert, delete)."""

    def ensure_schema(self) -> None:
        """Create the words table if it does not exist. Idempotent."""
        ...

    def list_all(self) -> list[StoredWord]:
        """All stored words, ordered by ascending id.

        Raises StorageError if the store is unreachable.
        """
        ...

    def insert(self, word: str, definition: str) -> StoredWord:
        """Insert a new word and return the stored row.

        Raises DuplicateError if the word is already stored (detected by the
        uniqueness constraint, not a pre-check), StorageError otherwise.
        """
        ...

    def delete(self, word_id: int) -> None:
        """Delete a word by id.

        Raises RowNotFoundError if no row was affected, StorageError otherwise.
        """
        ...

    def ping(self) -> bool: ...

    def close(self) -> None: ...
