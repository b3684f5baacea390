"""Formatting utilities for task output."""

from tasklist_mcp.models.task import EditDraft, TaskModel
from tasklist_mcp.utils.dates import format_date_only


def _format_task_concise(task: TaskModel) -> str:
    """
    Format a single task on one line.

    Output: "[x] 3f2a9c1b: Buy milk (due:2025-03-01, +errand)"
    """
    check = "x" if task.completed else " "
    title = task.title[:50] if task.title else "Untitled"

    meta = []
    if task.due_date:
        meta.append(f"due:{format_date_only(task.due_date)}")
    meta.extend(f"+{tag}" for tag in task.tags)

    line = f"[{check}] {task.id[:8]}: {title}"
    if meta:
        return f"{line} ({', '.join(meta)})"
    return line


def _format_tasks_concise(tasks: list[TaskModel], title: str | None = None) -> str:
    """
    Format a list of tasks one per line under a count header.

    Output:
    2 task(s) | errand
    [ ] 3f2a9c1b: Buy milk (+errand)
    [x] 77d0e412: Post letter (+errand)
    """
    if not tasks:
        return "0 tasks"

    header = f"{len(tasks)} task(s)"
    if title:
        header = f"{len(tasks)} task(s) | {title}"

    lines = [header]
    for task in tasks:
        lines.append(_format_task_concise(task))

    return "\n".join(lines)


def _format_task_markdown(task: TaskModel) -> str:
    """Format a single task as markdown."""
    lines = []

    icon = "✅" if task.completed else "⬜"
    lines.append(f"### {icon} {task.title or 'Untitled'}")
    lines.append(f"`{task.id}`")

    if task.details:
        lines.append(task.details)

    meta = []
    if task.due_date:
        meta.append(f"**Due**: {format_date_only(task.due_date)}")
    if task.tags:
        meta.append(f"**Tags**: {', '.join(task.tags)}")
    if meta:
        lines.append(" | ".join(meta))

    return "\n".join(lines)


def _format_tasks_markdown(tasks: list[TaskModel], title: str = "Tasks") -> str:
    """Format a list of tasks as markdown."""
    if not tasks:
        return f"# {title}\n\nNo tasks found."

    lines = [f"# {title}", f"*{len(tasks)} task(s)*", ""]

    for task in tasks:
        lines.append(_format_task_markdown(task))
        lines.append("")

    return "\n".join(lines)


def _format_draft_markdown(draft: EditDraft) -> str:
    """Format an open edit draft as markdown."""
    lines = [
        f"# Editing `{draft.task_id}`",
        "",
        f"**Title**: {draft.title or '(empty)'}",
        f"**Details**: {draft.details or '(none)'}",
        f"**Due**: {draft.due_date or '(none)'}",
        f"**Tags**: {', '.join(draft.tags) if draft.tags else '(none)'}",
    ]
    if draft.pending_tag:
        lines.append(f"**Pending tag**: {draft.pending_tag}")
    if not draft.title.strip():
        lines.append("")
        lines.append("⚠️ Title is empty; the draft cannot be saved until it has one.")
    return "\n".join(lines)
