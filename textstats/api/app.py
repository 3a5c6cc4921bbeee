from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from textstats.analysis.worker import AnalysisWorker
from textstats.api.errors import register_error_handlers
from textstats.api.routes import health, texts
from textstats.config.settings import Settings
from textstats.database.repositories.base import BaseTextRepository
from textstats.pagination.resolver import PaginationOptions


def build_list_pagination_options(settings: Settings) -> PaginationOptions:
    return PaginationOptions(
        allowed_sort_fields=frozenset(texts.SORT_FIELDS),
        default_page_size=settings.pagination_default_limit,
        max_page_size=settings.pagination_max_limit,
        default_direction="desc",
        default_sort_fields=("createdAt",),
    )


def create_app(
    settings: Settings,
    repository: BaseTextRepository,
    worker: AnalysisWorker,
) -> FastAPI:
    """Build the HTTP app around an already constructed store and worker."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        worker.start()
        try:
            yield
        finally:
            worker.shutdown(timeout=settings.analysis_shutdown_timeout_seconds)

    app = FastAPI(title="Text Stats API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.repository = repository
    app.state.worker = worker
    app.state.list_pagination_options = build_list_pagination_options(settings)

    register_error_handlers(app)
    app.include_router(health.router)
    app.include_router(texts.router, prefix=settings.api_prefix)
    return app
