from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils import ensure_aware


class Task(BaseModel):
    """A task as served by the API.

    ``is_past_due`` is derived by the ordering policy on every pass and is
    never serialized back to the API.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    id: str = Field(frozen=True)
    description: str = ""
    is_complete: bool = Field(default=False, alias="isComplete")
    due_date: datetime | None = Field(default=None, alias="dueDate")
    is_past_due: bool = Field(default=False, alias="isPastDue", exclude=True)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        return str(v) if isinstance(v, int) else v

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, v: datetime | None) -> datetime | None:
        # date-only and naive values are read as UTC
        return ensure_aware(v) if v is not None else None
