from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

TEXT_MAX_LENGTH = 50_000


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class CreateTextRequest(BaseModel):
    text: Annotated[
        str,
        StringConstraints(strip_whitespace=True, min_length=1, max_length=TEXT_MAX_LENGTH),
    ]


class TextOut(CamelModel):
    id: int
    text: str
    done: bool
    number_of_words: int
    number_of_characters: int
    number_of_sentences: int
    number_of_paragraphs: int
    longest_words_in_paragraphs: list[str]
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PaginationMetaOut(CamelModel):
    current_page: int
    total_pages: int
    total_count: int
    limit: int
    has_next_page: bool
    has_prev_page: bool
    next_page: int | None
    prev_page: int | None


class TextEnvelope(BaseModel):
    success: bool = True
    data: TextOut
    message: str | None = None


class TextListEnvelope(BaseModel):
    success: bool = True
    data: list[TextOut]
    message: str | None = None
    meta: PaginationMetaOut


class HealthData(BaseModel):
    timestamp: datetime
    environment: str


class HealthEnvelope(BaseModel):
    success: bool = True
    message: str
    data: HealthData


class FieldError(BaseModel):
    field: str
    message: str


class ErrorEnvelope(BaseModel):
    success: bool = False
    message: str
    errors: list[FieldError] | None = None
