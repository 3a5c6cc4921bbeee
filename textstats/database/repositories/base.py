from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Literal

from textstats.database.models import TextRecord

SortDirection = Literal["asc", "desc"]

SORTABLE_FIELDS = frozenset({"id", "created_at", "updated_at"})

UPDATABLE_FIELDS = frozenset(
    {
        "done",
        "number_of_words",
        "number_of_characters",
        "number_of_sentences",
        "number_of_paragraphs",
        "longest_words_in_paragraphs",
    }
)


class BaseTextRepository(ABC):
    """Contract for all text store backends."""

    @abstractmethod
    def insert(self, text: str) -> TextRecord:
        """Persist a new pending record and return it with its assigned id.

        Raises:
            DuplicateTextError: if the store rejects the record as a duplicate.
        """

    @abstractmethod
    def find_by_id(self, text_id: int) -> TextRecord | None:
        """Return the record with this id, or None."""

    @abstractmethod
    def count(self, done: bool | None = None) -> int:
        """Count records, optionally only those with the given ``done`` flag."""

    @abstractmethod
    def find(
        self,
        done: bool | None,
        sort_field: str,
        direction: SortDirection,
        offset: int,
        limit: int,
    ) -> list[TextRecord]:
        """Return one page of records ordered by a single field.

        Raises:
            ValueError: if ``sort_field`` is not in SORTABLE_FIELDS.
        """

    @abstractmethod
    def update_by_id(
        self, text_id: int, fields: Mapping[str, Any]
    ) -> TextRecord | None:
        """Apply all ``fields`` in one atomic update and bump ``updated_at``.

        Returns the updated record, or None if no record has this id.

        Raises:
            ValueError: if any key is not in UPDATABLE_FIELDS.
        """


def check_sort_field(sort_field: str) -> None:
    if sort_field not in SORTABLE_FIELDS:
        raise ValueError(
            f"Unknown sort field '{sort_field}'. Choose from: {sorted(SORTABLE_FIELDS)}"
        )


def check_update_fields(fields: Mapping[str, Any]) -> None:
    unknown = set(fields) - UPDATABLE_FIELDS
    if unknown:
        raise ValueError(f"Fields cannot be updated: {sorted(unknown)}")
    if not fields:
        raise ValueError("At least one field is required for an update")
