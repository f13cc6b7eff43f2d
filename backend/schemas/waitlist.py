from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def _strip_text(value: Any) -> Any:
    # non-strings fall through so the field type reports them as a 400
    if isinstance(value, str):
        return value.strip()
    return value


class WaitlistSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WaitlistCreateRequest(WaitlistSchema):
    name: str = Field(min_length=1)
    email: str
    is_joined: bool = False

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value: Any) -> Any:
        return _strip_text(value)


class WaitlistUpdateRequest(WaitlistSchema):
    """Partial update. Fields left out of the body are absent from ``model_fields_set``."""

    name: str | None = Field(default=None, min_length=1)
    email: str | None = None
    is_joined: bool | None = None

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value: Any) -> Any:
        return _strip_text(value)

    @field_validator("name", "email", "is_joined")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("Field may be omitted but not null")
        return value

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class WaitlistEntryResponse(WaitlistSchema):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: UUID
    name: str
    email: str
    is_joined: bool
    created_at: datetime | None = None
