"""MCP tool definitions for the task list."""

# Import all tools to register them with the MCP server
from tasklist_mcp.tools.core import (
    tasklist_add,
    tasklist_delete,
    tasklist_get,
    tasklist_list,
    tasklist_summary,
    tasklist_tags,
    tasklist_toggle,
    tasklist_update,
)
from tasklist_mcp.tools.editing import (
    tasklist_edit_add_tag,
    tasklist_edit_cancel,
    tasklist_edit_commit,
    tasklist_edit_open,
    tasklist_edit_remove_tag,
    tasklist_edit_set_field,
    tasklist_edit_show,
)

__all__ = [
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
]
