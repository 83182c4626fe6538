"""Interview record list, detail and delete endpoints."""

from fastapi import APIRouter
from structlog import get_logger

from interview_mate.api.deps import Auth, Store
from interview_mate.core.errors import NotFoundError
from interview_mate.models.api import RecordDeleteResponse, RecordListResponse, RecordSummary
from interview_mate.models.interview import InterviewRecord
from interview_mate.services.search import filter_records

logger = get_logger()
router = APIRouter(prefix="/records", tags=["records"])


@router.get("", response_model=RecordListResponse)
async def list_records(auth: Auth, store: Store, q: str = "") -> RecordListResponse:
    """
    List records visible to the caller, newest first.

    Args:
        q: Whitespace-separated keywords; every keyword must match. A single
            Hangul initial consonant or Latin letter matches the name initial.
    """
    records = await store.list(auth)
    matched = filter_records(records, q)

    logger.info("records_filtered", total=len(records), matched=len(matched), query=q)
    return RecordListResponse(
        query=q,
        total=len(records),
        records=[RecordSummary.from_record(record) for record in matched],
    )


@router.get("/{record_id}", response_model=InterviewRecord)
async def get_record(record_id: str, auth: Auth, store: Store) -> InterviewRecord:
    record = await store.get(auth, record_id)
    if record is None:
        raise NotFoundError(f"Record {record_id} not found", context={"record_id": record_id})
    return record


@router.delete("/{record_id}", response_model=RecordDeleteResponse)
async def delete_record(record_id: str, auth: Auth, store: Store) -> RecordDeleteResponse:
    """
    Delete a record.

    Raises:
        NotFoundError: If the record does not exist or is not visible to the caller
    """
    deleted = await store.delete(auth, record_id)
    if not deleted:
        raise NotFoundError(f"Record {record_id} not found", context={"record_id": record_id})

    logger.info("record_deleted", record_id=record_id, user_id=auth.user_id)
    return RecordDeleteResponse(status="deleted", record_id=record_id)
