"""Utility functions for the task list MCP server."""

from tasklist_mcp.utils.dates import days_until, format_date_only, is_date_only, parse_date_only
from tasklist_mcp.utils.formatters import (
    _format_draft_markdown,
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
)
from tasklist_mcp.utils.parsers import _parse_task, _parse_tasks
from tasklist_mcp.utils.storage import _read_tasks_file, _write_tasks_file

__all__ = [
    "format_date_only",
    "parse_date_only",
    "is_date_only",
    "days_until",
    "_parse_task",
    "_parse_tasks",
    "_read_tasks_file",
    "_write_tasks_file",
    "_format_task_concise",
    "_format_tasks_concise",
    "_format_task_markdown",
    "_format_tasks_markdown",
    "_format_draft_markdown",
]
