"""Single-slot edit session staging changes to one task."""

from __future__ import annotations

import logging

from tasklist_mcp.enums import DraftField
from tasklist_mcp.models.task import EditDraft, TaskModel
from tasklist_mcp.store import TaskStore
from tasklist_mcp.utils.dates import format_date_only, is_date_only, parse_date_only

logger = logging.getLogger(__name__)


class EditSession:
    """
    Holds a draft copy of one task until it is committed or cancelled.

    The session is either closed (no draft) or open (one draft). Edits go to
    the draft only; the store sees nothing until ``commit``. Operations on a
    closed session, unknown field names and blank tags are silently ignored.

    ``commit`` does not check the title. Surfaces exposing commit should gate
    it on ``can_commit``.
    """

    def __init__(self, store: TaskStore) -> None:
        self._store = store
        self._source: TaskModel | None = None
        self._draft: EditDraft | None = None

    @property
    def is_open(self) -> bool:
        return self._draft is not None

    @property
    def task_id(self) -> str | None:
        return self._draft.task_id if self._draft is not None else None

    @property
    def draft(self) -> EditDraft | None:
        """Copy of the current draft, or None when closed."""
        if self._draft is None:
            return None
        return self._draft.model_copy(deep=True)

    @property
    def can_commit(self) -> bool:
        return self._draft is not None and bool(self._draft.title.strip())

    def open(self, task: TaskModel) -> EditDraft:
        """Start editing ``task``, discarding any draft already open."""
        if self._draft is not None:
            logger.debug("Discarding open draft for task %s", self._draft.task_id)

        self._source = task.model_copy(deep=True)
        self._draft = EditDraft(
            task_id=task.id,
            title=task.title,
            details=task.details or "",
            due_date=format_date_only(task.due_date),
            tags=list(task.tags),
            pending_tag="",
        )
        return self._draft.model_copy(deep=True)

    def set_field(self, name: DraftField | str, value: str | None) -> bool:
        """
        Update one draft field.

        ``due_date`` only accepts "" or a ``YYYY-MM-DD`` date; anything else
        is ignored.

        Returns:
            True if the draft changed
        """
        if self._draft is None:
            return False
        try:
            field = DraftField(name)
        except ValueError:
            logger.debug("set_field ignored: unknown field %r", name)
            return False

        text = value if value is not None else ""
        if field == DraftField.DUE_DATE:
            text = text.strip()
            if text and not is_date_only(text):
                logger.debug("set_field ignored: bad due date %r", value)
                return False

        setattr(self._draft, field.value, text)
        return True

    def add_tag(self, value: str | None = None) -> bool:
        """
        Append a tag to the draft and clear the pending tag buffer.

        When ``value`` is omitted the draft's ``pending_tag`` is used.
        Duplicates are kept.
        """
        if self._draft is None:
            return False
        raw = self._draft.pending_tag if value is None else value
        tag = raw.strip()
        if not tag:
            logger.debug("add_tag ignored: blank tag")
            return False
        self._draft.tags.append(tag)
        self._draft.pending_tag = ""
        return True

    def remove_tag(self, value: str) -> bool:
        """Remove every occurrence of ``value`` from the draft's tags."""
        if self._draft is None:
            return False
        before = len(self._draft.tags)
        self._draft.tags = [t for t in self._draft.tags if t != value]
        return len(self._draft.tags) != before

    def commit(self) -> TaskModel | None:
        """
        Write the draft back into the store and close the session.

        ``id`` and ``completed`` come from the task as it was when opened.
        A due date left on the day shown at open keeps its original
        timestamp; a changed one becomes midnight UTC of the new day.

        Returns:
            The revised task, or None if the session was closed or the
            task is no longer in the store
        """
        if self._draft is None or self._source is None:
            return None

        draft, source = self._draft, self._source
        if draft.due_date == format_date_only(source.due_date):
            due_date = source.due_date
        else:
            due_date = parse_date_only(draft.due_date)

        revised = source.model_copy(
            update={
                "title": draft.title,
                "details": draft.details or None,
                "due_date": due_date,
                "tags": list(draft.tags),
            }
        )
        stored = self._store.update(revised)
        if not stored:
            logger.info("Committed draft for missing task %s; store unchanged", draft.task_id)

        self._close()
        return revised if stored else None

    def cancel(self) -> None:
        """Discard the draft. The store is left untouched."""
        self._close()

    def _close(self) -> None:
        self._source = None
        self._draft = None
