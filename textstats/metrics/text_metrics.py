"""Deterministic text statistics.

Every function here is total over ``str`` (the empty string included) and
free of side effects. Segmentation is deliberately naive: abbreviations such
as "Mr." and decimals such as "12.99" are sentence boundaries.
"""

import re
from dataclasses import asdict, dataclass, field
from typing import Any

_NON_WORD = re.compile(r"[^\w\s]")
_SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
_SENTENCE_TERMINATORS = (".", "!", "?")
# A blank line: any whitespace run that holds at least two newlines.
_PARAGRAPH_BOUNDARY = re.compile(r"\s*\n\s*\n\s*")


@dataclass(frozen=True)
class TextMetrics:
    """All statistics for one text, computed together."""

    number_of_words: int = 0
    number_of_characters: int = 0
    number_of_sentences: int = 0
    number_of_paragraphs: int = 0
    longest_words_in_paragraphs: list[str] = field(default_factory=list)

    def as_fields(self) -> dict[str, Any]:
        return asdict(self)


def _tokenize(text: str) -> list[str]:
    return _NON_WORD.sub("", text).lower().split()


def _split_paragraphs(text: str) -> list[str]:
    return [p for p in _PARAGRAPH_BOUNDARY.split(text) if p.strip()]


def count_words(text: str) -> int:
    """Count whitespace-separated tokens once punctuation is removed."""
    return len(_tokenize(text))


def count_characters(text: str) -> int:
    return len(text)


def count_sentences(text: str) -> int:
    """Count fragments between runs of ``.``, ``!`` and ``?``.

    A trailing fragment without a terminator is an incomplete sentence and
    is not counted.
    """
    trimmed = text.strip()
    if not trimmed:
        return 0
    fragments = [f for f in _SENTENCE_BOUNDARY.split(trimmed) if f.strip()]
    count = len(fragments)
    if not trimmed.endswith(_SENTENCE_TERMINATORS):
        count -= 1
    return max(count, 0)


def count_paragraphs(text: str) -> int:
    return len(_split_paragraphs(text))


def get_longest_words_in_paragraphs(text: str) -> list[str]:
    """Return the longest token of each paragraph, in paragraph order.

    Ties go to the first token. A paragraph made only of punctuation yields
    an empty string so the result stays aligned with ``count_paragraphs``.
    """
    longest: list[str] = []
    for paragraph in _split_paragraphs(text):
        tokens = _tokenize(paragraph)
        longest.append(max(tokens, key=len) if tokens else "")
    return longest


def analyze_text(text: str) -> TextMetrics:
    return TextMetrics(
        number_of_words=count_words(text),
        number_of_characters=count_characters(text),
        number_of_sentences=count_sentences(text),
        number_of_paragraphs=count_paragraphs(text),
        longest_words_in_paragraphs=get_longest_words_in_paragraphs(text),
    )
