"""SQLite implementation of WordRepository."""

from logging import getLogger

from sqlalchemy import delete, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from adapter.sqlite.schema import Base, WordRow
from domain.model.errors import DuplicateError, RowNotFoundError, StorageError
from domain.model.word import StoredWord

logger = getLogger(__name__)


class SqlWordRepository:
    def __init__(self, engine: Engine):
        self.engine = engine
        self._session = sessionmaker(bind=engine, autoflush=False)

    # ── schema ────────────────────────────────────────────────

    def ensure_schema(self) -> None:
        """Create the words table if missing. Safe to call on every startup."""
        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            logger.error("Failed to create words table", extra={"error": str(e)})
            raise StorageError(f"Failed to create words table: {e}") from e
        logger.info("'words' table check/creation successful")

    # ── mapping ───────────────────────────────────────────────

    def _to_domain(self, row: WordRow) -> StoredWord:
        return StoredWord(
            id=row.id,
            word=row.word,
            definition=row.definition,
            created_at=row.created_at,
        )

    # ── CRUD ──────────────────────────────────────────────────

    def list_all(self) -> list[StoredWord]:
        try:
            with self._session() as session:
                rows = session.scalars(select(WordRow).order_by(WordRow.id.asc())).all()
                words = [self._to_domain(row) for row in rows]
        except SQLAlchemyError as e:
            logger.error("Failed to fetch words", extra={"error": str(e)})
            raise StorageError(f"Failed to fetch words: {e}") from e

        logger.info("Fetched words", extra={"count": len(words)})
        return words

    def insert(self, word: str, definition: str) -> StoredWord:
        """Insert a word; the UNIQUE constraint on word decides conflicts."""
        try:
            with self._session() as session:
                row = WordRow(word=word, definition=definition)
                session.add(row)
                session.commit()
                session.refresh(row)  # load engine-assigned id and created_at
                stored = self._to_domain(row)
        except IntegrityError as e:
            if _is_unique_violation(e):
                logger.info("Word already exists", extra={"word": word})
                raise DuplicateError(word) from e
            logger.error("Failed to save word", extra={"word": word, "error": str(e)})
            raise StorageError(f"Failed to save word '{word}' to database: {e.orig}") from e
        except SQLAlchemyError as e:
            logger.error("Failed to save word", extra={"word": word, "error": str(e)})
            raise StorageError(f"Failed to save word '{word}' to database: {e}") from e

        logger.info("Word saved", extra={"word_id": stored.id, "word": word})
        return stored

    def delete(self, word_id: int) -> None:
        try:
            with self._session() as session:
                result = session.execute(delete(WordRow).where(WordRow.id == word_id))
                session.commit()
        except SQLAlchemyError as e:
            logger.error("Failed to delete word", extra={"word_id": word_id, "error": str(e)})
            raise StorageError(f"Failed to delete word with ID {word_id}: {e}") from e

        if result.rowcount == 0:
            logger.info("Word not found for deletion", extra={"word_id": word_id})
            raise RowNotFoundError(word_id)
        logger.info("Word deleted", extra={"word_id": word_id})

    # ── lifecycle ─────────────────────────────────────────────

    def ping(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning("Word store ping failed", extra={"error": str(e)})
            return False

    def close(self) -> None:
        """Dispose the connection pool. Called once at shutdown."""
        self.engine.dispose()
        logger.info("Word store closed")


def _is_unique_violation(error: IntegrityError) -> bool:
    return "UNIQUE constraint failed" in str(error.orig)
