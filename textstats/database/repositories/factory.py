from textstats.config.settings import Settings
from textstats.database.repositories.base import BaseTextRepository
from textstats.database.repositories.memory_repository import InMemoryTextRepository
from textstats.database.repositories.text_repository import PostgresTextRepository


class TextRepositoryFactory:
    """Creates the text store backend selected in settings."""

    BACKENDS: dict[str, type[BaseTextRepository]] = {
        "postgres": PostgresTextRepository,
        "memory": InMemoryTextRepository,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseTextRepository:
        backend = settings.storage_backend.lower()
        backend_cls = cls.BACKENDS.get(backend)
        if backend_cls is None:
            raise ValueError(
                f"Unknown storage backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
            )
        return backend_cls()
