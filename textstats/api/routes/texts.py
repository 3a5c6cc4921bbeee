from typing import Annotated

from fastapi import APIRouter, Depends, Request, status

from textstats.analysis.worker import AnalysisWorker
from textstats.api.dependencies import (
    get_list_pagination_options,
    get_repository,
    get_worker,
)
from textstats.api.exceptions import InvalidTextIdError, TextNotFoundError
from textstats.api.schemas import (
    CreateTextRequest,
    PaginationMetaOut,
    TextEnvelope,
    TextListEnvelope,
    TextOut,
)
from textstats.database.repositories.base import BaseTextRepository
from textstats.pagination.resolver import (
    PaginationOptions,
    build_pagination_meta,
    resolve_pagination,
)

router = APIRouter(prefix="/texts", tags=["Texts"])

# Public orderBy names -> TextRecord attributes.
SORT_FIELDS = {"createdAt": "created_at", "updatedAt": "updated_at"}

# Largest value a BIGSERIAL id can hold.
_MAX_TEXT_ID = 2**63 - 1

Repository = Annotated[BaseTextRepository, Depends(get_repository)]


def _parse_text_id(raw: str) -> int:
    if not raw.isascii() or not raw.isdigit() or int(raw) > _MAX_TEXT_ID:
        raise InvalidTextIdError(raw)
    return int(raw)


def _parse_done(raw: str | None) -> bool | None:
    if raw == "true":
        return True
    if raw == "false":
        return False
    return None


@router.post("", response_model=TextEnvelope, status_code=status.HTTP_201_CREATED)
def create_text(
    payload: CreateTextRequest,
    repository: Repository,
    worker: Annotated[AnalysisWorker, Depends(get_worker)],
):
    """Store a text and queue it for analysis."""
    record = repository.insert(payload.text)
    worker.notify_created(record.id, record.text)
    return TextEnvelope(
        data=TextOut.model_validate(record), message="Text created successfully"
    )


@router.get("/{text_id}", response_model=TextEnvelope)
def get_text(text_id: str, repository: Repository):
    """Return an analyzed text. Pending texts are reported as not found."""
    record = repository.find_by_id(_parse_text_id(text_id))
    if record is None or not record.done:
        raise TextNotFoundError(text_id)
    return TextEnvelope(
        data=TextOut.model_validate(record), message="Text retrieved successfully"
    )


@router.get("", response_model=TextListEnvelope)
def list_texts(
    request: Request,
    repository: Repository,
    options: Annotated[PaginationOptions, Depends(get_list_pagination_options)],
    done: str | None = None,
):
    """List texts a page at a time, optionally filtered by ``done``."""
    params = request.query_params
    raw_query = {
        key: values[0] if len(values) == 1 else values
        for key in params
        if (values := params.getlist(key))
    }
    spec = resolve_pagination(raw_query, options)
    done_filter = _parse_done(done)

    total_count = repository.count(done_filter)
    records = repository.find(
        done_filter,
        SORT_FIELDS[spec.sort_field],
        spec.direction,
        spec.offset,
        spec.page_size,
    )
    meta = build_pagination_meta(spec.page, spec.page_size, total_count)
    return TextListEnvelope(
        data=[TextOut.model_validate(record) for record in records],
        message="Texts retrieved successfully",
        meta=PaginationMetaOut.model_validate(meta),
    )
