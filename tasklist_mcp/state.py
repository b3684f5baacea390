"""Process-wide task store and edit session used by the MCP tools."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from tasklist_mcp.config import Settings, load_settings
from tasklist_mcp.session import EditSession
from tasklist_mcp.store import TaskStore
from tasklist_mcp.utils.parsers import _parse_tasks
from tasklist_mcp.utils.storage import _read_tasks_file, _write_tasks_file

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AppState:
    settings: Settings
    store: TaskStore
    session: EditSession

    def save(self) -> None:
        """Persist the store snapshot if a data file is configured."""
        if self.settings.data_file is None:
            return
        success, message = _write_tasks_file(self.settings.data_file, self.store.tasks)
        if success:
            logger.debug(message)
        else:
            logger.warning(message)


_state: AppState | None = None


def build_state(settings: Settings | None = None) -> AppState:
    """Create a store (seeded from the data file, if any) and an empty session slot."""
    settings = settings or load_settings()
    store = TaskStore()

    if settings.data_file is not None:
        success, result = _read_tasks_file(settings.data_file)
        if success and isinstance(result, list):
            store.load(_parse_tasks(result))
        else:
            logger.warning("%s; starting with an empty task list", result)

    logger.info("Task store ready data_file=%s total=%d", settings.data_file, len(store))
    return AppState(settings=settings, store=store, session=EditSession(store))


def get_state() -> AppState:
    global _state
    if _state is None:
        _state = build_state()
    return _state


def reset_state(state: AppState | None = None) -> AppState:
    """Replace the process-wide state. Tests use this to start clean."""
    global _state
    _state = state if state is not None else build_state()
    return _state
