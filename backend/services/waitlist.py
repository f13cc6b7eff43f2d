from __future__ import annotations

import logging
import re
import uuid

from core.errors import ConflictError, NotFoundError, ValidationError
from models import WaitlistEntry
from repositories.waitlist import DUPLICATE_EMAIL_DETAIL, WaitlistRepository
from schemas.waitlist import WaitlistCreateRequest, WaitlistEntryResponse, WaitlistUpdateRequest

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
INVALID_EMAIL_DETAIL = "Invalid email format"
NOT_FOUND_DETAIL = "Waitlist entry not found"


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


class WaitlistService:
    """Business rules for waitlist entries.

    Email shape and uniqueness are checked here before any write. The
    uniqueness lookup and the write are separate round trips, so the unique
    index behind the repository is what settles concurrent signups.
    """

    def __init__(self, repository: WaitlistRepository) -> None:
        self.repository = repository

    def create_entry(self, payload: WaitlistCreateRequest) -> WaitlistEntryResponse:
        self._check_email(payload.email)
        entry = WaitlistEntry(
            name=payload.name,
            email=payload.email,
            is_joined=payload.is_joined,
        )
        entry = self.repository.insert(entry)
        logger.info("Created waitlist entry %s", entry.id)
        return WaitlistEntryResponse.model_validate(entry)

    def get_entry(self, entry_id: uuid.UUID) -> WaitlistEntryResponse:
        return WaitlistEntryResponse.model_validate(self._require(entry_id))

    def list_entries(self) -> list[WaitlistEntryResponse]:
        return [WaitlistEntryResponse.model_validate(entry) for entry in self.repository.list_ordered_by_created_at()]

    def update_entry(self, entry_id: uuid.UUID, payload: WaitlistUpdateRequest) -> WaitlistEntryResponse:
        entry = self._require(entry_id)
        changes = payload.changes()

        # validate everything before touching the row so a rejected update leaves it clean
        if "email" in changes:
            self._check_email(changes["email"], exclude_id=entry.id)

        for field, value in changes.items():
            setattr(entry, field, value)

        entry = self.repository.save(entry)
        logger.info("Updated waitlist entry %s (fields: %s)", entry.id, ", ".join(sorted(changes)) or "none")
        return WaitlistEntryResponse.model_validate(entry)

    def delete_entry(self, entry_id: uuid.UUID) -> None:
        entry = self._require(entry_id)
        self.repository.delete(entry.id)
        logger.info("Deleted waitlist entry %s", entry_id)

    def _require(self, entry_id: uuid.UUID) -> WaitlistEntry:
        entry = self.repository.find_by_id(entry_id)
        if entry is None:
            logger.info("Waitlist entry %s not found", entry_id)
            raise NotFoundError(NOT_FOUND_DETAIL)
        return entry

    def _check_email(self, email: str, exclude_id: uuid.UUID | None = None) -> None:
        if not is_valid_email(email):
            raise ValidationError(INVALID_EMAIL_DETAIL)
        if self.repository.find_by_email(email, exclude_id=exclude_id) is not None:
            logger.info("Rejected duplicate waitlist email %s", email)
            raise ConflictError(DUPLICATE_EMAIL_DETAIL)

