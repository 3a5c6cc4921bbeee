import uvicorn

from textstats.analysis.worker import AnalysisWorker
from textstats.api.app import create_app
from textstats.config.settings import Settings
from textstats.database.connection import close_pool, init_pool
from textstats.database.repositories.factory import TextRepositoryFactory
from textstats.database.schema import ensure_schema
from textstats.logging.logger import Log


def main() -> None:
    """Entry point: settings -> store -> worker -> HTTP server."""
    settings = Settings()
    Log.configure(settings.log_level)

    uses_postgres = settings.storage_backend.lower() == "postgres"
    if uses_postgres:
        init_pool(settings)

    try:
        if uses_postgres and settings.db_auto_create_schema:
            ensure_schema()
        repository = TextRepositoryFactory.create(settings)
        worker = AnalysisWorker(repository, settings.analysis_worker_concurrency)
        app = create_app(settings, repository, worker)
        Log.info(f"Server starting on {settings.http_host}:{settings.http_port} ({settings.app_env})")
        uvicorn.run(
            app,
            host=settings.http_host,
            port=settings.http_port,
            log_level=settings.log_level.lower(),
            log_config=None,
        )
    finally:
        close_pool()


if __name__ == "__main__":
    main()
