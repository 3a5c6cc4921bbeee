"""In-process text store.

No database required. Useful for local development and tests; records are
lost when the process exits.
"""

import threading
from collections.abc import Mapping
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

from textstats.database.models import TextRecord
from textstats.database.repositories.base import (
    BaseTextRepository,
    SortDirection,
    check_sort_field,
    check_update_fields,
)


def _copy(record: TextRecord) -> TextRecord:
    return replace(
        record, longest_words_in_paragraphs=list(record.longest_words_in_paragraphs)
    )


class InMemoryTextRepository(BaseTextRepository):
    """Dict-backed store; every operation holds one lock."""

    def __init__(self) -> None:
        self._records: dict[int, TextRecord] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def insert(self, text: str) -> TextRecord:
        now = datetime.now(timezone.utc)
        with self._lock:
            record = TextRecord(
                id=self._next_id, text=text, created_at=now, updated_at=now
            )
            self._records[record.id] = record
            self._next_id += 1
            return _copy(record)

    def find_by_id(self, text_id: int) -> TextRecord | None:
        with self._lock:
            record = self._records.get(text_id)
            return _copy(record) if record is not None else None

    def count(self, done: bool | None = None) -> int:
        with self._lock:
            return sum(1 for r in self._records.values() if done in (None, r.done))

    def find(
        self,
        done: bool | None,
        sort_field: str,
        direction: SortDirection,
        offset: int,
        limit: int,
    ) -> list[TextRecord]:
        check_sort_field(sort_field)
        with self._lock:
            matching = [r for r in self._records.values() if done in (None, r.done)]
            matching.sort(
                key=lambda r: getattr(r, sort_field), reverse=direction == "desc"
            )
            return [_copy(r) for r in matching[offset : offset + limit]]

    def update_by_id(
        self, text_id: int, fields: Mapping[str, Any]
    ) -> TextRecord | None:
        check_update_fields(fields)
        with self._lock:
            record = self._records.get(text_id)
            if record is None:
                return None
            updated = replace(
                record, **dict(fields), updated_at=datetime.now(timezone.utc)
            )
            self._records[text_id] = updated
            return _copy(updated)
