"""Pydantic models for the task list."""

from tasklist_mcp.models.task import EditDraft, TaskModel
from tasklist_mcp.models.inputs import (
    AddTagInput,
    AddTaskInput,
    CancelEditInput,
    CommitEditInput,
    DeleteTaskInput,
    GetTaskInput,
    ListTagsInput,
    ListTasksInput,
    OpenEditInput,
    RemoveTagInput,
    SetFieldInput,
    ShowEditInput,
    SummaryInput,
    ToggleTaskInput,
    UpdateTaskInput,
)

__all__ = [
    # Task models
    "TaskModel",
    "EditDraft",
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
]
