"""Core MCP tool definitions for the task list."""

import json

from mcp.types import ToolAnnotations

from tasklist_mcp.enums import ResponseFormat, TaskStatus
from tasklist_mcp.models.inputs import (
    AddTaskInput,
    DeleteTaskInput,
    GetTaskInput,
    ListTagsInput,
    ListTasksInput,
    SummaryInput,
    ToggleTaskInput,
    UpdateTaskInput,
)
from tasklist_mcp.models.task import TaskModel
from tasklist_mcp.server import mcp
from tasklist_mcp.state import get_state
from tasklist_mcp.utils.dates import days_until, parse_date_only
from tasklist_mcp.utils.formatters import (
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
)


def _not_found(task_id: str) -> str:
    return f"Error: Task '{task_id}' not found.\nTip: Use tasklist_list to find valid task IDs."


@mcp.tool(
    name="tasklist_list",
    annotations=ToolAnnotations(
        title="List Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasklist_list(params: ListTasksInput) -> str:
    """
    List tasks in creation order.

    USE THIS WHEN:
    - Showing the task list
    - Finding the ID of a task before toggling, editing or deleting it
    - Narrowing to open or finished tasks, or to one tag

    DO NOT USE WHEN:
    - You already have the task ID → use tasklist_get instead

    Args:
        params: ListTasksInput containing status, tag, limit, and response_format

    Returns:
        Formatted list of tasks (markdown, concise or JSON based on response_format)

    Examples:
        - Everything: params with default values
        - Open tasks: params with status="pending"
        - Errands: params with tag="errand"
    """
    state = get_state()
    tasks = state.store.tasks

    if params.status == TaskStatus.PENDING:
        tasks = [t for t in tasks if not t.completed]
    elif params.status == TaskStatus.COMPLETED:
        tasks = [t for t in tasks if t.completed]

    if params.tag:
        tasks = [t for t in tasks if params.tag in t.tags]

    total_count = len(tasks)
    limit = params.limit or state.settings.list_limit
    if len(tasks) > limit:
        tasks = tasks[:limit]

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {"total": total_count, "count": len(tasks), "tasks": [t.model_dump(mode="json") for t in tasks]},
            indent=2,
        )

    title = "Tasks"
    if params.tag:
        title = f"Tasks tagged '{params.tag}'"
    if params.status != TaskStatus.ALL:
        title += f" ({params.status.value})"

    if params.response_format == ResponseFormat.CONCISE:
        return _format_tasks_concise(tasks, title)

    return _format_tasks_markdown(tasks, title)


@mcp.tool(
    name="tasklist_get",
    annotations=ToolAnnotations(
        title="Get Task Details",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasklist_get(params: GetTaskInput) -> str:
    """
    Retrieve full details for a single task by ID.

    Args:
        params: GetTaskInput containing task_id and response_format

    Returns:
        Detailed task information (markdown, concise or JSON)
    """
    task = get_state().store.get(params.task_id)
    if task is None:
        return _not_found(params.task_id)

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(task.model_dump(mode="json"), indent=2)

    if params.response_format == ResponseFormat.CONCISE:
        return _format_task_concise(task)

    return _format_task_markdown(task)


@mcp.tool(
    name="tasklist_add",
    annotations=ToolAnnotations(
        title="Add Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def tasklist_add(params: AddTaskInput) -> str:
    """
    Create a new task at the end of the list.

    New tasks start open, with no due date and no tags. Use the edit tools
    (tasklist_edit_open ...) to set a due date or tags afterwards.

    Args:
        params: AddTaskInput containing title and optional details

    Returns:
        Confirmation message with the created task ID

    Examples:
        - Simple task: params with title="Buy milk"
        - With details: params with title="Call plumber", details="Kitchen sink leaks"
    """
    state = get_state()
    task = state.store.create(params.title, params.details)
    if task is None:
        return "Error: Task title cannot be empty."

    state.save()
    return f"Task created successfully.\nID: {task.id}\n{_format_task_concise(task)}"


@mcp.tool(
    name="tasklist_toggle",
    annotations=ToolAnnotations(
        title="Toggle Task Completion",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def tasklist_toggle(params: ToggleTaskInput) -> str:
    """
    Flip a task between open and completed.

    Calling it twice restores the original state.

    Args:
        params: ToggleTaskInput containing the task_id

    Returns:
        Confirmation message with the new state
    """
    state = get_state()
    if not state.store.toggle(params.task_id):
        return _not_found(params.task_id)

    state.save()
    task = state.store.get(params.task_id)
    status = "completed" if task is not None and task.completed else "open"
    return f"Task {params.task_id} marked as {status}."


@mcp.tool(
    name="tasklist_update",
    annotations=ToolAnnotations(
        title="Update Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasklist_update(params: UpdateTaskInput) -> str:
    """
    Replace every field of an existing task in one call.

    This is a full replace, not a merge: omitted details, due_date and tags
    are cleared. To change a few fields interactively use the edit session
    tools instead.

    Args:
        params: UpdateTaskInput containing task_id and the complete new field values

    Returns:
        Confirmation message with the stored task
    """
    state = get_state()
    task = TaskModel(
        id=params.task_id,
        title=params.title,
        details=params.details or None,
        completed=params.completed,
        due_date=parse_date_only(params.due_date),
        tags=params.tags,
    )
    if not state.store.update(task):
        return _not_found(params.task_id)

    state.save()
    return f"Task {params.task_id} updated successfully.\n{_format_task_concise(task)}"


@mcp.tool(
    name="tasklist_delete",
    annotations=ToolAnnotations(
        title="Delete Task",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasklist_delete(params: DeleteTaskInput) -> str:
    """
    Delete a task permanently.

    Deleting a task that is already gone is not an error.

    Args:
        params: DeleteTaskInput containing the task_id to delete

    Returns:
        Confirmation message
    """
    state = get_state()
    if not state.store.delete(params.task_id):
        return f"Task {params.task_id} was already gone."

    state.save()
    return f"Task {params.task_id} deleted."


@mcp.tool(
    name="tasklist_tags",
    annotations=ToolAnnotations(
        title="List Tags",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasklist_tags(params: ListTagsInput) -> str:
    """
    List all tags and how many tasks carry each one.

    A task carrying the same tag twice is counted once.

    Args:
        params: ListTagsInput with response_format

    Returns:
        List of tags with usage counts
    """
    tag_counts: dict[str, int] = {}
    for task in get_state().store.tasks:
        for tag in dict.fromkeys(task.tags):
            tag_counts[tag] = tag_counts.get(tag, 0) + 1

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {"tags": [{"name": name, "task_count": count} for name, count in sorted(tag_counts.items())]},
            indent=2,
        )

    lines = ["# Tags", ""]
    if not tag_counts:
        lines.append("No tags found.")
    else:
        for name, count in sorted(tag_counts.items()):
            lines.append(f"- **{name}**: {count} task(s)")

    return "\n".join(lines)


@mcp.tool(
    name="tasklist_summary",
    annotations=ToolAnnotations(
        title="Task Summary",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasklist_summary(params: SummaryInput) -> str:
    """
    Get a high-level overview of the task list.

    Reports open and completed counts, open tasks that are overdue or due
    soon, and the most used tags.

    Args:
        params: SummaryInput with the due-soon window and response_format

    Returns:
        Summary statistics of tasks
    """
    tasks = get_state().store.tasks
    if not tasks:
        if params.response_format == ResponseFormat.JSON:
            return json.dumps({"total": 0})
        return "# Task Summary\n\nNo tasks."

    pending = [t for t in tasks if not t.completed]
    overdue = 0
    due_soon = 0
    for task in pending:
        if task.due_date is None:
            continue
        days = days_until(task.due_date)
        if days < 0:
            overdue += 1
        elif days <= params.due_soon_days:
            due_soon += 1

    tag_counts: dict[str, int] = {}
    for task in tasks:
        for tag in dict.fromkeys(task.tags):
            tag_counts[tag] = tag_counts.get(tag, 0) + 1
    top_tags = sorted(tag_counts.items(), key=lambda x: (-x[1], x[0]))[:5]

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {
                "total": len(tasks),
                "pending": len(pending),
                "completed": len(tasks) - len(pending),
                "overdue": overdue,
                "due_soon": due_soon,
                "top_tags": [{"name": name, "task_count": count} for name, count in top_tags],
            },
            indent=2,
        )

    lines = [
        "# Task Summary",
        "",
        f"**Total Tasks**: {len(tasks)}",
        f"**Open**: {len(pending)}",
        f"**Completed**: {len(tasks) - len(pending)}",
        "",
        "## Due Dates",
        f"- ⚠️ Overdue: {overdue}",
        f"- 📆 Due within {params.due_soon_days} day(s): {due_soon}",
        "",
        "## Top Tags",
    ]
    if top_tags:
        for name, count in top_tags:
            lines.append(f"- {name}: {count}")
    else:
        lines.append("- (none)")

    return "\n".join(lines)
