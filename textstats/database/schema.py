"""DDL for the texts table, applied at startup when enabled in settings."""

from textstats.database.connection import get_connection
from textstats.logging.logger import Log

CREATE_TEXTS_TABLE = """
CREATE TABLE IF NOT EXISTS texts (
    id BIGSERIAL PRIMARY KEY,
    text TEXT NOT NULL CHECK (char_length(text) BETWEEN 1 AND 50000),
    done BOOLEAN NOT NULL DEFAULT FALSE,
    number_of_words INTEGER NOT NULL DEFAULT 0 CHECK (number_of_words >= 0),
    number_of_characters INTEGER NOT NULL DEFAULT 0 CHECK (number_of_characters >= 0),
    number_of_sentences INTEGER NOT NULL DEFAULT 0 CHECK (number_of_sentences >= 0),
    number_of_paragraphs INTEGER NOT NULL DEFAULT 0 CHECK (number_of_paragraphs >= 0),
    longest_words_in_paragraphs TEXT[] NOT NULL DEFAULT '{}',
    created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
    updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
)
"""

CREATE_INDEXES = (
    "CREATE INDEX IF NOT EXISTS texts_created_at_idx ON texts (created_at DESC)",
    "CREATE INDEX IF NOT EXISTS texts_done_idx ON texts (done)",
)


def ensure_schema() -> None:
    """Create the texts table and its indexes if they are missing."""
    with get_connection() as conn:
        conn.execute(CREATE_TEXTS_TABLE)
        for statement in CREATE_INDEXES:
            conn.execute(statement)
        conn.commit()
    Log.info("Database schema is up to date")
