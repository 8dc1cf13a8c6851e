"""Outcomes of a dictionary lookup.

DictionaryPort.fetch() returns exactly one of these. They carry plain
domain data only; no HTTP response or connection outlives the call.
"""

from dataclasses import dataclass

from domain.model.word import Meaning


@dataclass(frozen=True)
class Found:
    """The service returned at least one meaning group."""
    meanings: list[Meaning]


@dataclass(frozen=True)
class NotFound:
    """The service has no entry for the word, or the entry is empty."""


@dataclass(frozen=True)
class LookupFailed:
    """Network failure, unexpected status, or an unreadable response body."""
    detail: str


LookupOutcome = Found | NotFound | LookupFailed
