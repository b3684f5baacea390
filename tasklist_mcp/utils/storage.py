"""JSON snapshot file for persisting the task store."""

import json
import logging
from pathlib import Path
from typing import Any

from tasklist_mcp.models.task import TaskModel

logger = logging.getLogger(__name__)


def _read_tasks_file(path: Path) -> tuple[bool, list[dict[str, Any]] | str]:
    """
    Read raw task dictionaries from a snapshot file.

    A missing file is an empty snapshot, not an error.

    Args:
        path: Snapshot file location

    Returns:
        Tuple of (success: bool, tasks: List[dict] | error: str)
    """
    if not path.exists():
        return True, []

    try:
        data = json.loads(path.read_text(encoding="utf-8") or "{}")
    except json.JSONDecodeError as e:
        return False, f"Error: Failed to parse task file {path} - {str(e)}"
    except UnicodeDecodeError as e:
        return False, f"Error: Task file {path} is not valid UTF-8 - {str(e)}"
    except OSError as e:
        return False, f"Error: Could not read task file {path} - {str(e)}"

    if isinstance(data, list):
        raw_tasks = data
    elif isinstance(data, dict):
        raw_tasks = data.get("tasks") or []
    else:
        raw_tasks = []

    if not isinstance(raw_tasks, list):
        return False, f"Error: Task file {path} has no task list under \"tasks\""

    return True, [t for t in raw_tasks if isinstance(t, dict)]


def _write_tasks_file(path: Path, tasks: list[TaskModel]) -> tuple[bool, str]:
    """
    Write the ordered task sequence to a snapshot file.

    The file is replaced atomically through a temporary sibling.

    Returns:
        Tuple of (success: bool, message: str)
    """
    payload = {"tasks": [t.model_dump(mode="json") for t in tasks]}
    tmp = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        tmp.replace(path)
    except OSError as e:
        logger.exception("Failed to write task file %s", path)
        return False, f"Error: Could not write task file {path} - {str(e)}"

    return True, f"Saved {len(tasks)} task(s) to {path}"
