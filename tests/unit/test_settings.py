import pytest
from pydantic import ValidationError

from textstats.config.settings import Settings


def _settings() -> Settings:
    return Settings(_env_file=None)


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        assert _settings().app_env == "dev"

    def test_default_http_port(self) -> None:
        assert _settings().http_port == 8000

    def test_default_api_prefix_is_root(self) -> None:
        assert _settings().api_prefix == ""

    def test_default_storage_backend(self) -> None:
        assert _settings().storage_backend == "postgres"

    def test_default_db_port(self) -> None:
        assert _settings().db_port == 5432

    def test_default_worker_concurrency(self) -> None:
        assert _settings().analysis_worker_concurrency == 1

    def test_default_pagination_limits(self) -> None:
        s = _settings()
        assert s.pagination_default_limit == 10
        assert s.pagination_max_limit == 100


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert _settings().log_level == "DEBUG"

    def test_loads_storage_backend(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STORAGE_BACKEND", "memory")
        assert _settings().storage_backend == "memory"

    def test_loads_db_host(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_HOST", "db.example.com")
        assert _settings().db_host == "db.example.com"

    def test_loads_auto_create_schema(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_AUTO_CREATE_SCHEMA", "false")
        assert _settings().db_auto_create_schema is False

    def test_loads_worker_concurrency(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYSIS_WORKER_CONCURRENCY", "4")
        assert _settings().analysis_worker_concurrency == 4


class TestSettingsValidation:
    def test_invalid_db_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_PORT", "not_a_number")
        with pytest.raises(ValidationError):
            _settings()

    def test_invalid_page_limit_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAGINATION_MAX_LIMIT", "lots")
        with pytest.raises(ValidationError):
            _settings()
