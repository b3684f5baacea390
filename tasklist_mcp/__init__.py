"""
MCP Server for a personal task list.

Tasks carry a title, optional details, a completion flag, an optional due
date and free-form tags. The server exposes tools to list, create, toggle,
update and delete tasks, and an edit session that stages changes to one task
until they are saved or discarded.
"""

# Re-export enums
from tasklist_mcp.enums import DraftField, ResponseFormat, TaskStatus

# Re-export models
from tasklist_mcp.models import (
    AddTagInput,
    AddTaskInput,
    CancelEditInput,
    CommitEditInput,
    DeleteTaskInput,
    EditDraft,
    GetTaskInput,
    ListTagsInput,
    ListTasksInput,
    OpenEditInput,
    RemoveTagInput,
    SetFieldInput,
    ShowEditInput,
    SummaryInput,
    TaskModel,
    ToggleTaskInput,
    UpdateTaskInput,
)

# Re-export core
from tasklist_mcp.session import EditSession
from tasklist_mcp.store import TaskStore

# Re-export MCP server instance
from tasklist_mcp.server import mcp

# Re-export tools
from tasklist_mcp.tools import (
    tasklist_add,
    tasklist_delete,
    tasklist_edit_add_tag,
    tasklist_edit_cancel,
    tasklist_edit_commit,
    tasklist_edit_open,
    tasklist_edit_remove_tag,
    tasklist_edit_set_field,
    tasklist_edit_show,
    tasklist_get,
    tasklist_list,
    tasklist_summary,
    tasklist_tags,
    tasklist_toggle,
    tasklist_update,
)

# Re-export utilities (including private functions used by tests)
from tasklist_mcp.utils import (
    _format_draft_markdown,
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
    _parse_task,
    _parse_tasks,
    _read_tasks_file,
    _write_tasks_file,
    days_until,
    format_date_only,
    is_date_only,
    parse_date_only,
)

__all__ = [
    # Enums
    "ResponseFormat",
    "TaskStatus",
    "DraftField",
    # Models
    "TaskModel",
    "EditDraft",
    # Core
    "TaskStore",
    "EditSession",
    # Task input models
    "ListTasksInput",
    "GetTaskInput",
    "AddTaskInput",
    "ToggleTaskInput",
    "UpdateTaskInput",
    "DeleteTaskInput",
    "ListTagsInput",
    "SummaryInput",
    # Edit session input models
    "OpenEditInput",
    "ShowEditInput",
    "SetFieldInput",
    "AddTagInput",
    "RemoveTagInput",
    "CommitEditInput",
    "CancelEditInput",
    # Utility functions
    "format_date_only",
    "parse_date_only",
    "is_date_only",
    "days_until",
    "_parse_task",
    "_parse_tasks",
    "_read_tasks_file",
    "_write_tasks_file",
    "_format_task_concise",
    "_format_task_markdown",
    "_format_tasks_concise",
    "_format_tasks_markdown",
    "_format_draft_markdown",
    # Core tools
    "tasklist_list",
    "tasklist_get",
    "tasklist_add",
    "tasklist_toggle",
    "tasklist_update",
    "tasklist_delete",
    "tasklist_tags",
    "tasklist_summary",
    # Edit session tools
    "tasklist_edit_open",
    "tasklist_edit_show",
    "tasklist_edit_set_field",
    "tasklist_edit_add_tag",
    "tasklist_edit_remove_tag",
    "tasklist_edit_commit",
    "tasklist_edit_cancel",
    # MCP server instance
    "mcp",
]
