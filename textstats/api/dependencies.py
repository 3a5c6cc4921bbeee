from fastapi import Request

from textstats.analysis.worker import AnalysisWorker
from textstats.config.settings import Settings
from textstats.database.repositories.base import BaseTextRepository
from textstats.pagination.resolver import PaginationOptions


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_repository(request: Request) -> BaseTextRepository:
    return request.app.state.repository


def get_worker(request: Request) -> AnalysisWorker:
    return request.app.state.worker


def get_list_pagination_options(request: Request) -> PaginationOptions:
    return request.app.state.list_pagination_options
