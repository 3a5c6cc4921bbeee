import pytest

from textstats.database.repositories.text_repository import PostgresTextRepository


@pytest.mark.integration
class TestPostgresTextRepositoryInsert:
    def test_insert_returns_pending_record(self, integration_cleanup: list[int]) -> None:
        repo = PostgresTextRepository()
        record = repo.insert("Hello world.")
        integration_cleanup.append(record.id)

        assert record.id > 0
        assert record.text == "Hello world."
        assert record.done is False
        assert record.longest_words_in_paragraphs == []
        assert record.created_at is not None

    def test_find_by_id_round_trip(self, integration_cleanup: list[int]) -> None:
        repo = PostgresTextRepository()
        record = repo.insert("Round trip.")
        integration_cleanup.append(record.id)

        found = repo.find_by_id(record.id)

        assert found == record

    def test_find_by_id_returns_none_when_missing(self, integration_pool: None) -> None:
        assert PostgresTextRepository().find_by_id(-1) is None


@pytest.mark.integration
class TestPostgresTextRepositoryUpdate:
    def test_update_sets_metrics_and_done(self, integration_cleanup: list[int]) -> None:
        repo = PostgresTextRepository()
        record = repo.insert("First.\n\nSecond paragraph here.")
        integration_cleanup.append(record.id)

        updated = repo.update_by_id(
            record.id,
            {
                "number_of_words": 4,
                "number_of_paragraphs": 2,
                "longest_words_in_paragraphs": ["first", "paragraph"],
                "done": True,
            },
        )

        assert updated is not None
        assert updated.done is True
        assert updated.longest_words_in_paragraphs == ["first", "paragraph"]
        assert updated.text == record.text
        assert updated.updated_at is not None
        assert record.updated_at is not None
        assert updated.updated_at >= record.updated_at

    def test_update_returns_none_when_missing(self, integration_pool: None) -> None:
        assert PostgresTextRepository().update_by_id(-1, {"done": True}) is None


@pytest.mark.integration
class TestPostgresTextRepositoryListing:
    def test_count_and_find_respect_done_filter(
        self, integration_cleanup: list[int]
    ) -> None:
        repo = PostgresTextRepository()
        pending = repo.insert("pending text")
        complete = repo.insert("complete text")
        integration_cleanup.extend([pending.id, complete.id])
        repo.update_by_id(complete.id, {"done": True})
        before_done = repo.count(done=True)

        page = repo.find(True, "id", "desc", offset=0, limit=before_done)

        assert complete.id in [r.id for r in page]
        assert pending.id not in [r.id for r in page]
        assert repo.count() >= 2

    def test_find_orders_newest_first(self, integration_cleanup: list[int]) -> None:
        repo = PostgresTextRepository()
        first = repo.insert("older")
        second = repo.insert("newer")
        integration_cleanup.extend([first.id, second.id])

        page = repo.find(None, "id", "desc", offset=0, limit=2)

        assert [r.id for r in page] == [second.id, first.id]
