from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class TextRecord:
    """Represents a row from the texts table.

    A record is pending until the analysis worker fills in the metric
    fields and flips ``done`` to True.
    """

    id: int
    text: str
    done: bool = False
    number_of_words: int = 0
    number_of_characters: int = 0
    number_of_sentences: int = 0
    number_of_paragraphs: int = 0
    longest_words_in_paragraphs: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
