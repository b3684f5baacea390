"""Core task models for the task list."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator


class TaskModel(BaseModel):
    """A single to-do item.

    ``id`` is opaque and assigned by the store at creation; it never changes.
    ``tags`` keeps insertion order, which is also display order.
    """

    id: str
    title: str
    details: str | None = None
    completed: bool = False
    due_date: datetime | None = None
    tags: list[str] = Field(default_factory=list)

    @field_validator("due_date")
    @classmethod
    def ensure_utc(cls, v: datetime | None) -> datetime | None:
        if v is None:
            return None
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class EditDraft(BaseModel):
    """Working copy of one task's editable fields.

    ``due_date`` holds a date-only ``YYYY-MM-DD`` string (or ``""``) and
    ``pending_tag`` is tag text typed but not yet added.
    """

    task_id: str
    title: str = ""
    details: str = ""
    due_date: str = ""
    tags: list[str] = Field(default_factory=list)
    pending_tag: str = ""
