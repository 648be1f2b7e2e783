"""Pydantic schemas for vocab store request/response validation."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class VocabSchema(BaseModel):
    """Schema for a vocab item as returned by the store."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., gt=0)
    term: str = Field(..., min_length=1)
    translation: str = Field(..., min_length=1)
    knowledge_level: int = Field(0, ge=0, alias="knowledgeLevel")
    practice_at: datetime = Field(..., alias="practiceAt")


class VocabListResponse(BaseModel):
    """Schema for GET /api/vocab."""

    items: list[VocabSchema] = Field(default_factory=list)
    count: int = Field(..., ge=0)

    @field_validator("items", mode="before")
    @classmethod
    def null_items_as_empty(cls, value: object) -> object:
        return [] if value is None else value


class VocabCreateRequest(BaseModel):
    """Schema for POST /api/vocab."""

    term: str = Field(..., min_length=1, description="Term, trimmed")
    translation: str = Field(..., min_length=1, description="Translation, trimmed")


class VocabCreateResponse(BaseModel):
    """
    Schema for the POST /api/vocab response.

    Stores answer with at least the new id; the remaining fields are
    optional and default to what the store assigns to new vocab.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., gt=0)
    term: str | None = None
    translation: str | None = None
    knowledge_level: int | None = Field(None, ge=0, alias="knowledgeLevel")
    practice_at: datetime | None = Field(None, alias="practiceAt")


class PracticeResultSchema(BaseModel):
    """Schema for one entry of POST /api/practice."""

    id: int = Field(..., gt=0)
    passed: bool


class PracticeCountResponse(BaseModel):
    """Schema for GET /api/practice/count."""

    count: int = Field(..., ge=0)


PracticeBatch = TypeAdapter(list[VocabSchema] | None)
PracticeResults = TypeAdapter(list[PracticeResultSchema])
