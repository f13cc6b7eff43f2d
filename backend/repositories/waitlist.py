from __future__ import annotations

import logging
import uuid
from collections.abc import Sequence
from typing import Protocol

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.errors import ConflictError
from models import WaitlistEntry

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_DETAIL = "Email already exists in waitlist"


class WaitlistRepository(Protocol):
    def find_by_email(self, email: str, exclude_id: uuid.UUID | None = None) -> WaitlistEntry | None: ...

    def find_by_id(self, entry_id: uuid.UUID) -> WaitlistEntry | None: ...

    def insert(self, entry: WaitlistEntry) -> WaitlistEntry: ...

    def list_ordered_by_created_at(self) -> Sequence[WaitlistEntry]: ...

    def save(self, entry: WaitlistEntry) -> WaitlistEntry: ...

    def delete(self, entry_id: uuid.UUID) -> None: ...


class SqlAlchemyWaitlistRepository:
    """Waitlist persistence on a SQLAlchemy session. Every write commits on its own."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_email(self, email: str, exclude_id: uuid.UUID | None = None) -> WaitlistEntry | None:
        query = select(WaitlistEntry).where(WaitlistEntry.email == email)
        if exclude_id is not None:
            query = query.where(WaitlistEntry.id != exclude_id)
        return self.db.scalars(query.limit(1)).first()

    def find_by_id(self, entry_id: uuid.UUID) -> WaitlistEntry | None:
        return self.db.get(WaitlistEntry, entry_id)

    def insert(self, entry: WaitlistEntry) -> WaitlistEntry:
        self.db.add(entry)
        return self._commit(entry)

    def list_ordered_by_created_at(self) -> Sequence[WaitlistEntry]:
        return self.db.scalars(select(WaitlistEntry).order_by(WaitlistEntry.created_at.asc())).all()

    def save(self, entry: WaitlistEntry) -> WaitlistEntry:
        return self._commit(entry)

    def delete(self, entry_id: uuid.UUID) -> None:
        self.db.execute(delete(WaitlistEntry).where(WaitlistEntry.id == entry_id))
        self.db.commit()

    def _commit(self, entry: WaitlistEntry) -> WaitlistEntry:
        email = entry.email
        try:
            self.db.commit()
        except IntegrityError:
            # unique index on email lost a race with a concurrent writer
            self.db.rollback()
            logger.warning("Unique email constraint rejected write for %s", email)
            raise ConflictError(DUPLICATE_EMAIL_DETAIL) from None
        self.db.refresh(entry)
        return entry
