from collections.abc import Mapping
from typing import Any

from psycopg import errors, sql
from psycopg.rows import dict_row

from textstats.database.connection import get_connection
from textstats.database.exceptions import DuplicateTextError
from textstats.database.models import TextRecord
from textstats.database.repositories.base import (
    BaseTextRepository,
    SortDirection,
    check_sort_field,
    check_update_fields,
)

_COLUMNS = sql.SQL(
    "id, text, done, number_of_words, number_of_characters, "
    "number_of_sentences, number_of_paragraphs, longest_words_in_paragraphs, "
    "created_at, updated_at"
)


def _row_to_record(row: dict[str, Any]) -> TextRecord:
    return TextRecord(
        id=row["id"],
        text=row["text"],
        done=row["done"],
        number_of_words=row["number_of_words"],
        number_of_characters=row["number_of_characters"],
        number_of_sentences=row["number_of_sentences"],
        number_of_paragraphs=row["number_of_paragraphs"],
        longest_words_in_paragraphs=list(row["longest_words_in_paragraphs"] or []),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def _done_filter(done: bool | None) -> tuple[sql.Composable, tuple[Any, ...]]:
    if done is None:
        return sql.SQL(""), ()
    return sql.SQL(" WHERE done = %s"), (done,)


class PostgresTextRepository(BaseTextRepository):
    """Database operations for the texts table."""

    def insert(self, text: str) -> TextRecord:
        query = sql.SQL("INSERT INTO texts (text) VALUES (%s) RETURNING {}").format(
            _COLUMNS
        )
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(query, (text,))
                    row = cur.fetchone()
                conn.commit()
        except errors.UniqueViolation as exc:
            field = exc.diag.column_name or exc.diag.constraint_name or "text"
            raise DuplicateTextError(field) from exc

        if row is None:
            raise RuntimeError("INSERT ... RETURNING produced no row")
        return _row_to_record(row)

    def find_by_id(self, text_id: int) -> TextRecord | None:
        query = sql.SQL("SELECT {} FROM texts WHERE id = %s").format(_COLUMNS)
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(query, (text_id,))
                row = cur.fetchone()

        if row is None:
            return None
        return _row_to_record(row)

    def count(self, done: bool | None = None) -> int:
        where, params = _done_filter(done)
        query = sql.SQL("SELECT COUNT(*) FROM texts{}").format(where)
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(query, params)
                row = cur.fetchone()
        return int(row[0]) if row is not None else 0

    def find(
        self,
        done: bool | None,
        sort_field: str,
        direction: SortDirection,
        offset: int,
        limit: int,
    ) -> list[TextRecord]:
        check_sort_field(sort_field)
        where, params = _done_filter(done)
        query = sql.SQL(
            "SELECT {columns} FROM texts{where} "
            "ORDER BY {sort_field} {direction} "
            "LIMIT %s OFFSET %s"
        ).format(
            columns=_COLUMNS,
            where=where,
            sort_field=sql.Identifier(sort_field),
            direction=sql.SQL("DESC" if direction == "desc" else "ASC"),
        )
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(query, (*params, limit, offset))
                rows = cur.fetchall()
        return [_row_to_record(row) for row in rows]

    def update_by_id(
        self, text_id: int, fields: Mapping[str, Any]
    ) -> TextRecord | None:
        check_update_fields(fields)
        names = list(fields)
        assignments = sql.SQL(", ").join(
            sql.SQL("{} = %s").format(sql.Identifier(name)) for name in names
        )
        query = sql.SQL(
            "UPDATE texts SET {assignments}, updated_at = NOW() "
            "WHERE id = %s RETURNING {columns}"
        ).format(assignments=assignments, columns=_COLUMNS)
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(query, (*(fields[name] for name in names), text_id))
                row = cur.fetchone()
            conn.commit()

        if row is None:
            return None
        return _row_to_record(row)
