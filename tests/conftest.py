from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from textstats.analysis.worker import AnalysisWorker
from textstats.api.app import create_app
from textstats.config.settings import Settings
from textstats.database.repositories.memory_repository import InMemoryTextRepository


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None, storage_backend="memory", app_env="test")


@pytest.fixture()
def repository() -> InMemoryTextRepository:
    return InMemoryTextRepository()


@pytest.fixture()
def worker(repository: InMemoryTextRepository) -> Generator[AnalysisWorker, None, None]:
    """A fresh worker per test. Consumers are not started until a test asks."""
    analysis_worker = AnalysisWorker(repository, concurrency=2)
    yield analysis_worker
    analysis_worker.shutdown(timeout=1.0)


@pytest.fixture()
def app(
    settings: Settings, repository: InMemoryTextRepository, worker: AnalysisWorker
) -> FastAPI:
    return create_app(settings, repository, worker)


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    """Client without lifespan: the worker stays idle until started explicitly."""
    return TestClient(app, raise_server_exceptions=False)
