"""Dictionary port — outbound interface for dictionary data sources."""

from typing import Protocol

from domain.model.lookup import LookupOutcome


class DictionaryPort(Protocol):
    """Port for looking up a word's meanings.

    fetch() never raises for remote problems; they come back as
    LookupFailed so the service layer can branch on the outcome type.
    """

    async def fetch(self, word: str) -> LookupOutcome: ...
