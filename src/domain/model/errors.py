"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Route handlers catch them and map to appropriate HTTP status codes.
Every message is meant for direct display to the user.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainError):
    """Input violates a business validation rule."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class WordNotFoundError(NotFoundError):
    """The dictionary service has no usable definition for the word."""


class RowNotFoundError(NotFoundError):
    """No stored word matches the given id."""

    def __init__(self, word_id: int):
        self.word_id = word_id
        super().__init__(f"Word with ID {word_id} not found for deletion.")


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"Word '{word}' already exists in the database.")


class RemoteError(DomainError):
    """The dictionary service could not be reached or answered with an error."""


class SerializationError(DomainError):
    """Meanings could not be encoded for storage."""


class StorageError(DomainError):
    """Any persistence failure other than a uniqueness conflict."""
