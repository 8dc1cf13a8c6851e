"""In-memory implementation of WordRepository for testing."""

from datetime import datetime, timezone

from domain.model.errors import DuplicateError, RowNotFoundError, StorageError
from domain.model.word import StoredWord


class FakeWordRepository:
    def __init__(self):
        self.store: dict[int, StoredWord] = {}
        self._next_id = 1
        self.healthy = True
        self.closed = False

    def ensure_schema(self) -> None:
        pass

    def _check(self) -> None:
        if not self.healthy:
            raise StorageError("Word store unavailable")

    def list_all(self) -> list[StoredWord]:
        self._check()
        return [self.store[k] for k in sorted(self.store)]

    def insert(self, word: str, definition: str) -> StoredWord:
        self._check()
        if any(w.word == word for w in self.store.values()):
            raise DuplicateError(word)
        stored = StoredWord(
            id=self._next_id,
            word=word,
            definition=definition,
            created_at=datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M:%S.%f')[:-3],
        )
        # ids only move forward, like AUTOINCREMENT
        self._next_id += 1
        self.store[stored.id] = stored
        return stored

    def delete(self, word_id: int) -> None:
        self._check()
        if word_id not in self.store:
            raise RowNotFoundError(word_id)
        del self.store[word_id]

    def ping(self) -> bool:
        return self.healthy

    def close(self) -> None:
        self.closed = True
