"""Enums for the task list MCP server."""

from enum import Enum


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    CONCISE = "concise"  # One line per task
    MARKDOWN = "markdown"  # Human-readable (default)
    JSON = "json"  # Machine-readable with all fields


class TaskStatus(str, Enum):
    """Task status filter options."""

    PENDING = "pending"
    COMPLETED = "completed"
    ALL = "all"


class DraftField(str, Enum):
    """Editable fields of an edit draft."""

    TITLE = "title"
    DETAILS = "details"
    DUE_DATE = "due_date"
    PENDING_TAG = "pending_tag"
