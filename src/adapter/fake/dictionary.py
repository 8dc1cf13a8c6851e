"""In-memory implementation of DictionaryPort for testing."""

from domain.model.lookup import LookupOutcome, NotFound


class FakeDictionaryAdapter:
    """Fake dictionary adapter that returns a preconfigured outcome."""

    def __init__(self, outcome: LookupOutcome | None = None):
        self.outcome = outcome if outcome is not None else NotFound()
        self.calls: list[str] = []

    @property
    def last_word(self) -> str | None:
        return self.calls[-1] if self.calls else None

    async def fetch(self, word: str) -> LookupOutcome:
        self.calls.append(word)
        return self.outcome
