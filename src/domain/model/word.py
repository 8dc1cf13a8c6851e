"""Word domain models.

A stored definition is plain text in one of two shapes:

- Flat: a single definition string, written by manual adds.
- Rich: a JSON list of meaning groups, written by dictionary lookups::

    [{"partOfSpeech": "noun",
      "definitions": [{"definition": "...", "example": "..." | null}]}]

Both shapes share the same column. Readers call decode_definition() to get
a tagged FlatDefinition / RichDefinition; anything that is not a well-formed
Rich payload is read back as Flat.
"""

import json
from dataclasses import dataclass, field
from typing import Any

from domain.model.errors import SerializationError


@dataclass(frozen=True)
class Definition:
    """One definition line with an optional usage example."""
    text: str
    example: str | None = None


@dataclass(frozen=True)
class Meaning:
    """A part-of-speech-tagged group of definitions."""
    part_of_speech: str
    definitions: list[Definition] = field(default_factory=list)


@dataclass(frozen=True)
class FlatDefinition:
    text: str


@dataclass(frozen=True)
class RichDefinition:
    meanings: list[Meaning]


StoredDefinition = FlatDefinition | RichDefinition


@dataclass(frozen=True)
class StoredWord:
    """A word row as persisted by the word repository."""
    id: int
    word: str
    definition: str
    created_at: str | None = None

    @property
    def content(self) -> StoredDefinition:
        """Decode the stored definition text into its Flat or Rich shape."""
        return decode_definition(self.definition)

    @property
    def summary(self) -> str:
        """One-line definition, whichever shape is stored."""
        content = self.content
        if isinstance(content, RichDefinition):
            return first_definition(content.meanings) or ""
        return content.text


# ── Rich encoding ────────────────────────────────────────────


def encode_meanings(meanings: list[Meaning]) -> str:
    """Serialize meaning groups to the Rich text representation.

    Raises:
        SerializationError: If the payload cannot be encoded as JSON.
    """
    payload = [
        {
            "partOfSpeech": meaning.part_of_speech,
            "definitions": [
                {"definition": d.text, "example": d.example}
                for d in meaning.definitions
            ],
        }
        for meaning in meanings
    ]
    try:
        return json.dumps(payload, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to serialize rich definition: {e}") from e


def decode_definition(text: str) -> StoredDefinition:
    """Read stored definition text, falling back to Flat on any mismatch."""
    try:
        data = json.loads(text)
    except (TypeError, ValueError, RecursionError):
        # RecursionError: deeply nested brackets in Flat text
        return FlatDefinition(text=text)

    meanings = _parse_meanings(data)
    if meanings is None:
        return FlatDefinition(text=text)
    return RichDefinition(meanings=meanings)


def first_definition(meanings: list[Meaning]) -> str | None:
    """Return the first definition text found across meaning groups."""
    for meaning in meanings:
        for definition in meaning.definitions:
            if definition.text:
                return definition.text
    return None


def _parse_meanings(data: Any) -> list[Meaning] | None:
    """Validate decoded JSON against the Rich shape. None if it doesn't match."""
    if not isinstance(data, list) or not data:
        return None

    meanings: list[Meaning] = []
    for group in data:
        if not isinstance(group, dict):
            return None
        pos = group.get("partOfSpeech")
        raw_definitions = group.get("definitions")
        if not isinstance(pos, str) or not isinstance(raw_definitions, list):
            return None

        definitions: list[Definition] = []
        for raw in raw_definitions:
            if not isinstance(raw, dict) or not isinstance(raw.get("definition"), str):
                return None
            example = raw.get("example")
            if example is not None and not isinstance(example, str):
                return None
            definitions.append(Definition(text=raw["definition"], example=example))
        meanings.append(Meaning(part_of_speech=pos, definitions=definitions))
    return meanings
