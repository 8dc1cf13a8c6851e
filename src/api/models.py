"""Pydantic models for API request/response."""

from typing import Optional, Literal
from pydantic import BaseModel, Field

from domain.model.word import RichDefinition, StoredWord


class LookupRequest(BaseModel):
    """Request model for adding a word via dictionary lookup."""
    word: str = Field(..., min_length=1, max_length=100, description="Word to look up")


class ManualWordRequest(BaseModel):
    """Request model for adding a word with a caller-supplied definition."""
    word: str = Field(..., min_length=1, max_length=100, description="Word to store")
    definition: str = Field(..., min_length=1, description="Plain-text definition")


class DefinitionResponse(BaseModel):
    definition: str
    example: Optional[str] = None


class MeaningResponse(BaseModel):
    part_of_speech: str
    definitions: list[DefinitionResponse]


class WordResponse(BaseModel):
    """Response model for a stored word."""
    id: int = Field(..., description="Word ID")
    word: str
    definition: str = Field(..., description="Stored definition text, as written")
    created_at: Optional[str] = None
    format: Literal["flat", "rich"] = Field(..., description="Shape of the stored definition")
    summary: str = Field(..., description="First definition, whichever shape is stored")
    meanings: Optional[list[MeaningResponse]] = Field(None, description="Decoded meanings when format is rich")

    @classmethod
    def from_domain(cls, stored: StoredWord) -> "WordResponse":
        content = stored.content
        meanings = None
        if isinstance(content, RichDefinition):
            meanings = [
                MeaningResponse(
                    part_of_speech=m.part_of_speech,
                    definitions=[
                        DefinitionResponse(definition=d.text, example=d.example)
                        for d in m.definitions
                    ],
                )
                for m in content.meanings
            ]
        return cls(
            id=stored.id,
            word=stored.word,
            definition=stored.definition,
            created_at=stored.created_at,
            format="rich" if meanings is not None else "flat",
            summary=stored.summary,
            meanings=meanings,
        )
