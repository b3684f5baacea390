"""In-memory task store."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable

from tasklist_mcp.models.task import TaskModel

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Ordered collection of tasks keyed by id.

    Tasks are kept in creation order. Only ``create`` appends; every other
    operation leaves the relative order of the remaining tasks untouched.

    Invalid input (blank title) and unknown ids are absorbed as no-ops.
    Mutators return a falsy value in that case so callers can report it,
    but nothing here raises.

    The store copies tasks on the way in and on the way out, so callers never
    hold a reference to stored state.
    """

    def __init__(self, tasks: Iterable[TaskModel] | None = None) -> None:
        self._tasks: list[TaskModel] = []
        if tasks is not None:
            self.load(tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return self._index_of(task_id) is not None

    # ---- helpers ----

    def _index_of(self, task_id: object) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def _new_id(self) -> str:
        # uuid4 hex is never reused in practice; the loop guards loaded snapshots.
        while True:
            task_id = uuid.uuid4().hex
            if task_id not in self:
                return task_id

    # ---- reads ----

    @property
    def tasks(self) -> list[TaskModel]:
        """Current ordered sequence of tasks."""
        return [t.model_copy(deep=True) for t in self._tasks]

    def list_tasks(self) -> list[TaskModel]:
        return self.tasks

    def get(self, task_id: str) -> TaskModel | None:
        idx = self._index_of(task_id)
        if idx is None:
            return None
        return self._tasks[idx].model_copy(deep=True)

    def load(self, tasks: Iterable[TaskModel]) -> None:
        """Replace the whole sequence with a resolved snapshot.

        Tasks with a blank title are dropped; for duplicate ids the first wins.
        """
        loaded: list[TaskModel] = []
        seen: set[str] = set()
        for task in tasks:
            if task.id in seen:
                logger.warning("Duplicate task id in snapshot, keeping first: %s", task.id)
                continue
            if not task.title.strip():
                logger.warning("Skipping task with blank title in snapshot: %s", task.id)
                continue
            seen.add(task.id)
            loaded.append(task.model_copy(deep=True))
        self._tasks = loaded
        logger.debug("TaskStore loaded %d task(s)", len(loaded))

    # ---- mutators ----

    def create(self, title: str, details: str | None = None) -> TaskModel | None:
        """
        Append a new task.

        Args:
            title: Display title; rejected when blank after trimming
            details: Optional free text

        Returns:
            The created task, or None if the title was rejected
        """
        if not title or not title.strip():
            logger.debug("create rejected: blank title")
            return None

        task = TaskModel(
            id=self._new_id(),
            title=title,
            details=details or None,
            completed=False,
            due_date=None,
            tags=[],
        )
        self._tasks.append(task)
        logger.debug("Created task %s", task.id)
        return task.model_copy(deep=True)

    def toggle(self, task_id: str) -> bool:
        """Flip ``completed`` on the task with this id. Unknown ids are ignored."""
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("toggle ignored: task %s not found", task_id)
            return False
        current = self._tasks[idx]
        self._tasks[idx] = current.model_copy(update={"completed": not current.completed})
        return True

    def update(self, task: TaskModel) -> bool:
        """
        Replace the stored task with the same id, wholesale.

        The title is not re-validated here; callers validate before updating.
        """
        idx = self._index_of(task.id)
        if idx is None:
            logger.debug("update ignored: task %s not found", task.id)
            return False
        self._tasks[idx] = task.model_copy(deep=True)
        return True

    def delete(self, task_id: str) -> bool:
        """Remove the task with this id. Unknown ids are ignored."""
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("delete ignored: task %s not found", task_id)
            return False
        del self._tasks[idx]
        return True
