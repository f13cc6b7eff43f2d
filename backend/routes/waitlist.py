from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from db.session import get_db
from repositories.waitlist import SqlAlchemyWaitlistRepository
from schemas.waitlist import WaitlistCreateRequest, WaitlistEntryResponse, WaitlistUpdateRequest
from services.waitlist import WaitlistService

router = APIRouter(prefix="/waitlist", tags=["waitlist"])


def get_waitlist_service(db: Session = Depends(get_db)) -> WaitlistService:
    return WaitlistService(SqlAlchemyWaitlistRepository(db))


@router.get("", response_model=list[WaitlistEntryResponse])
def list_waitlist_entries(service: WaitlistService = Depends(get_waitlist_service)) -> list[WaitlistEntryResponse]:
    return service.list_entries()


@router.post("", response_model=WaitlistEntryResponse)
def create_waitlist_entry(
    payload: WaitlistCreateRequest,
    service: WaitlistService = Depends(get_waitlist_service),
) -> WaitlistEntryResponse:
    return service.create_entry(payload)


@router.get("/{entry_id}", response_model=WaitlistEntryResponse)
def get_waitlist_entry(entry_id: UUID, service: WaitlistService = Depends(get_waitlist_service)) -> WaitlistEntryResponse:
    return service.get_entry(entry_id)


@router.put("/{entry_id}", response_model=WaitlistEntryResponse)
def update_waitlist_entry(
    entry_id: UUID,
    payload: WaitlistUpdateRequest,
    service: WaitlistService = Depends(get_waitlist_service),
) -> WaitlistEntryResponse:
    return service.update_entry(entry_id, payload)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_waitlist_entry(entry_id: UUID, service: WaitlistService = Depends(get_waitlist_service)) -> Response:
    service.delete_entry(entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
