"""Free Dictionary API adapter.

Implements DictionaryPort by fetching English entries from the Free
Dictionary API and reducing them to domain Meaning groups.

API Documentation: https://dictionaryapi.dev
"""

import logging
import os
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter

from domain.model.lookup import Found, LookupFailed, LookupOutcome, NotFound
from domain.model.word import Definition, Meaning

logger = logging.getLogger(__name__)

FREE_DICTIONARY_API_BASE_URL = "https://api.dictionaryapi.dev/api/v2/entries/en"


def _read_timeout() -> float | None:
    raw = os.getenv("DICTIONARY_API_TIMEOUT_SECONDS")
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        timeout = 0.0
    if not timeout > 0:
        logger.warning(
            "Invalid DICTIONARY_API_TIMEOUT_SECONDS, lookups run without a timeout",
            extra={"value": raw},
        )
        return None
    return timeout


# None disables httpx timeouts; a stalled lookup only blocks its own request.
API_TIMEOUT_SECONDS = _read_timeout()


# ── Response models ──────────────────────────────────────────


class ApiDefinition(BaseModel):
    definition: str
    example: str | None = None


class ApiMeaning(BaseModel):
    partOfSpeech: str
    definitions: list[ApiDefinition]


class ApiWordEntry(BaseModel):
    """One entry of the API's top-level JSON array."""
    word: str | None = None
    meanings: list[ApiMeaning]


_ENTRIES = TypeAdapter(list[ApiWordEntry])


# ── Adapter ──────────────────────────────────────────────────


class FreeDictionaryAdapter:
    """Adapter that fetches dictionary entries from the Free Dictionary API."""

    def __init__(self, timeout: float | None = API_TIMEOUT_SECONDS):
        self.timeout = timeout

    async def fetch(self, word: str) -> LookupOutcome:
        """Look up a word.

        Args:
            word: The English word to look up.

        Returns:
            Found with the first entry's meanings, NotFound on 404 or an
            empty entry, LookupFailed on any transport/status/body problem.
        """
        url = build_lookup_url(word)
        logger.info("Calling Dictionary API", extra={"word": word, "url": url})

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url)
        except httpx.RequestError as e:
            logger.warning(
                "Dictionary API request error",
                extra={"word": word, "error_type": type(e).__name__},
            )
            return LookupFailed(f"Could not reach dictionary service: {type(e).__name__}")

        if response.status_code == 404:
            logger.info("Dictionary API returned 404", extra={"word": word})
            return NotFound()

        if not 200 <= response.status_code < 300:
            logger.warning(
                "Dictionary API HTTP error",
                extra={"word": word, "status_code": response.status_code},
            )
            return LookupFailed(f"Dictionary service returned HTTP {response.status_code}")

        try:
            entries = _ENTRIES.validate_python(response.json())
        except ValueError as e:
            # pydantic ValidationError and JSONDecodeError both subclass ValueError
            logger.warning(
                "Dictionary API returned an unreadable body",
                extra={"word": word, "error_type": type(e).__name__},
            )
            return LookupFailed("Dictionary service returned a malformed response")

        meanings = extract_meanings(entries)
        if not meanings:
            logger.info("No meanings found in API response", extra={"word": word})
            return NotFound()

        logger.info(
            "Dictionary API lookup successful",
            extra={"word": word, "meaning_count": len(meanings)},
        )
        return Found(meanings=meanings)


# ── Helpers ──────────────────────────────────────────────────


def build_lookup_url(word: str) -> str:
    """Build the entry URL, percent-encoding the word as one path segment."""
    return f"{FREE_DICTIONARY_API_BASE_URL}/{quote(word, safe='')}"


def extract_meanings(entries: list[ApiWordEntry]) -> list[Meaning]:
    """Copy the first entry's meanings into domain objects.

    Meaning groups without definitions are dropped; an empty result means
    the lookup produced nothing usable.
    """
    if not entries:
        return []

    meanings: list[Meaning] = []
    for api_meaning in entries[0].meanings:
        if not api_meaning.definitions:
            continue
        meanings.append(Meaning(
            part_of_speech=api_meaning.partOfSpeech,
            definitions=[
                Definition(text=d.definition, example=d.example)
                for d in api_meaning.definitions
            ],
        ))
    return meanings
