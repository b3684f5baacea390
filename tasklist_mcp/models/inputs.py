"""Input models for task list MCP tools."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tasklist_mcp.enums import DraftField, ResponseFormat, TaskStatus
from tasklist_mcp.utils.dates import is_date_only

# ============================================================================
# Task Tool Input Models
# ============================================================================


class ListTasksInput(BaseModel):
    """Input model for listing tasks."""

    model_config = ConfigDict(str_strip_whitespace=True)

    status: TaskStatus = Field(
        default=TaskStatus.ALL,
        description="Filter by completion: pending, completed, or all",
    )
    tag: str | None = Field(default=None, description="Only tasks carrying this tag")
    limit: int | None = Field(default=None, description="Maximum number of tasks to return", ge=1, le=500)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class GetTaskInput(BaseModel):
    """Input model for getting a single task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task ID to retrieve", min_length=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class AddTaskInput(BaseModel):
    """Input model for adding a new task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., description="Task title (required)", min_length=1, max_length=500)
    details: str | None = Field(default=None, description="Optional details", max_length=5000)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title cannot be empty")
        return v.strip()


class ToggleTaskInput(BaseModel):
    """Input model for toggling a task's completion."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task ID to toggle", min_length=1)


class UpdateTaskInput(BaseModel):
    """Input model for replacing a task's fields.

    Every field is written; omitted optional fields are cleared.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task ID to update", min_length=1)
    title: str = Field(..., description="New title (required)", min_length=1, max_length=500)
    details: str | None = Field(default=None, description="New details, or null to clear", max_length=5000)
    completed: bool = Field(default=False, description="Completion flag")
    due_date: str | None = Field(default=None, description="Due date as YYYY-MM-DD, or null/empty to clear")
    tags: list[str] = Field(default_factory=list, description="Full tag list, in display order", max_length=50)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title cannot be empty")
        return v.strip()

    @field_validator("due_date")
    @classmethod
    def validate_due_date(cls, v: str | None) -> str | None:
        if v and not is_date_only(v):
            raise ValueError("Due date must be YYYY-MM-DD")
        return v or None

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str]) -> list[str]:
        return [tag.strip() for tag in v if tag.strip()]


class DeleteTaskInput(BaseModel):
    """Input model for deleting a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task ID to delete", min_length=1)


class ListTagsInput(BaseModel):
    """Input model for listing tags."""

    model_config = ConfigDict(str_strip_whitespace=True)

    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class SummaryInput(BaseModel):
    """Input model for the task list summary."""

    model_config = ConfigDict(str_strip_whitespace=True)

    due_soon_days: int = Field(default=7, description="Window in days for 'due soon'", ge=1, le=365)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN, description="Output format: 'markdown' or 'json'"
    )


# ============================================================================
# Edit Session Input Models
# ============================================================================


class OpenEditInput(BaseModel):
    """Input model for opening an edit session on a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task ID to edit", min_length=1)


class ShowEditInput(BaseModel):
    """Input model for showing the open draft."""

    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN, description="Output format: 'markdown' or 'json'"
    )


class SetFieldInput(BaseModel):
    """Input model for changing one draft field.

    Values are kept as typed; trimming happens where the draft needs it.
    """

    field: DraftField = Field(..., description="Draft field: title, details, due_date, or pending_tag")
    value: str | None = Field(default=None, description="New value; null or empty clears the field")


class AddTagInput(BaseModel):
    """Input model for adding a tag to the draft."""

    tag: str | None = Field(
        default=None,
        description="Tag text; omit to add the draft's pending tag",
        max_length=100,
    )


class RemoveTagInput(BaseModel):
    """Input model for removing a tag from the draft."""

    tag: str = Field(..., description="Tag to remove (all occurrences)")


class CommitEditInput(BaseModel):
    """Input model for saving the draft."""

    # No parameters needed - commits the single open draft


class CancelEditInput(BaseModel):
    """Input model for discarding the draft."""

    # No parameters needed - discards the single open draft
