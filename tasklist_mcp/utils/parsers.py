"""Parser helpers for stored task data."""

import logging
from typing import Any

from pydantic import ValidationError

from tasklist_mcp.models.task import TaskModel

logger = logging.getLogger(__name__)


def _parse_task(task_dict: dict[str, Any]) -> TaskModel:
    """
    Parse a task dictionary into a TaskModel.

    Args:
        task_dict: Dictionary from a JSON snapshot

    Returns:
        TaskModel instance with validated data
    """
    return TaskModel.model_validate(task_dict)


def _parse_tasks(tasks: list[dict[str, Any]]) -> list[TaskModel]:
    """
    Parse a list of task dictionaries.

    Entries that fail validation or have a blank title are skipped.

    Args:
        tasks: List of dictionaries from a JSON snapshot

    Returns:
        List of TaskModel instances, in input order
    """
    parsed: list[TaskModel] = []
    for raw in tasks:
        try:
            task = _parse_task(raw)
        except ValidationError as e:
            logger.warning("Skipping invalid task entry: %s", e.errors()[0].get("msg", e))
            continue
        if not task.title.strip():
            logger.warning("Skipping task entry with blank title: %s", task.id)
            continue
        parsed.append(task)
    return parsed
