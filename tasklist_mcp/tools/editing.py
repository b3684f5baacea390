"""MCP tools driving the single edit session."""

import json

from mcp.types import ToolAnnotations

from tasklist_mcp.enums import DraftField, ResponseFormat
from tasklist_mcp.models.inputs import (
    AddTagInput,
    CancelEditInput,
    CommitEditInput,
    OpenEditInput,
    RemoveTagInput,
    SetFieldInput,
    ShowEditInput,
)
from tasklist_mcp.server import mcp
from tasklist_mcp.state import get_state
from tasklist_mcp.utils.formatters import _format_draft_markdown, _format_task_concise

NO_SESSION = "Error: No edit session is open.\nTip: Start one with tasklist_edit_open."


def _draft_view() -> str:
    draft = get_state().session.draft
    return _format_draft_markdown(draft) if draft is not None else NO_SESSION


@mcp.tool(
    name="tasklist_edit_open",
    annotations=ToolAnnotations(
        title="Start Editing Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def tasklist_edit_open(params: OpenEditInput) -> str:
    """
    Open an edit session on a task.

    Copies the task into a draft. Changes made with the other tasklist_edit_*
    tools stay in the draft until tasklist_edit_commit saves them. Only one
    session exists; opening another task discards the current draft unsaved.

    Args:
        params: OpenEditInput containing the task_id to edit

    Returns:
        The new draft
    """
    state = get_state()
    task = state.store.get(params.task_id)
    if task is None:
        return f"Error: Task '{params.task_id}' not found.\nTip: Use tasklist_list to find valid task IDs."

    discarded = state.session.task_id
    state.session.open(task)

    lines = []
    if discarded is not None:
        lines.append(f"Discarded unsaved draft for task {discarded}.")
    lines.append(_draft_view())
    return "\n".join(lines)


@mcp.tool(
    name="tasklist_edit_show",
    annotations=ToolAnnotations(
        title="Show Draft",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasklist_edit_show(params: ShowEditInput) -> str:
    """
    Show the draft of the open edit session.

    Args:
        params: ShowEditInput with response_format

    Returns:
        The draft (markdown or JSON)
    """
    session = get_state().session
    draft = session.draft
    if draft is None:
        return NO_SESSION

    if params.response_format == ResponseFormat.JSON:
        return json.dumps({**draft.model_dump(), "can_commit": session.can_commit}, indent=2)

    return _format_draft_markdown(draft)


@mcp.tool(
    name="tasklist_edit_set_field",
    annotations=ToolAnnotations(
        title="Set Draft Field",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasklist_edit_set_field(params: SetFieldInput) -> str:
    """
    Change one field of the draft.

    FIELDS:
    - title: task title (the draft cannot be saved while it is blank)
    - details: free text
    - due_date: YYYY-MM-DD, or empty to clear
    - pending_tag: tag text to add later with tasklist_edit_add_tag

    Args:
        params: SetFieldInput containing field and value

    Returns:
        The updated draft

    Examples:
        - Rename: params with field="title", value="Buy oat milk"
        - Set due date: params with field="due_date", value="2025-03-01"
        - Clear due date: params with field="due_date", value=""
    """
    session = get_state().session
    if not session.is_open:
        return NO_SESSION

    if not session.set_field(params.field, params.value):
        if params.field == DraftField.DUE_DATE:
            return f"Error: '{params.value}' is not a YYYY-MM-DD date. Draft unchanged.\n{_draft_view()}"
        return f"Draft unchanged.\n{_draft_view()}"

    return _draft_view()


@mcp.tool(
    name="tasklist_edit_add_tag",
    annotations=ToolAnnotations(
        title="Add Draft Tag",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def tasklist_edit_add_tag(params: AddTagInput) -> str:
    """
    Append a tag to the draft.

    Without a tag argument the draft's pending_tag is added. Blank tags are
    ignored. Adding a tag the draft already has adds it again.

    Args:
        params: AddTagInput with optional tag text

    Returns:
        The updated draft
    """
    session = get_state().session
    if not session.is_open:
        return NO_SESSION

    if not session.add_tag(params.tag):
        return f"Tag is empty; nothing added.\n{_draft_view()}"

    return _draft_view()


@mcp.tool(
    name="tasklist_edit_remove_tag",
    annotations=ToolAnnotations(
        title="Remove Draft Tag",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasklist_edit_remove_tag(params: RemoveTagInput) -> str:
    """
    Remove a tag from the draft, including any repeats of it.

    Args:
        params: RemoveTagInput with the tag to remove

    Returns:
        The updated draft
    """
    session = get_state().session
    if not session.is_open:
        return NO_SESSION

    if not session.remove_tag(params.tag):
        return f"Draft has no tag '{params.tag}'.\n{_draft_view()}"

    return _draft_view()


@mcp.tool(
    name="tasklist_edit_commit",
    annotations=ToolAnnotations(
        title="Save Draft",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def tasklist_edit_commit(params: CommitEditInput) -> str:
    """
    Save the draft into the task list and close the session.

    Refused while the draft title is blank; the session then stays open so
    the title can be fixed.

    Args:
        params: CommitEditInput (no fields; acts on the open draft)

    Returns:
        Confirmation message with the saved task
    """
    state = get_state()
    session = state.session
    if not session.is_open:
        return NO_SESSION

    if not session.can_commit:
        return "Error: Title cannot be empty. Set a title with tasklist_edit_set_field before saving."

    task_id = session.task_id
    revised = session.commit()
    if revised is None:
        return f"Error: Task '{task_id}' no longer exists; draft discarded."

    state.save()
    return f"Task {task_id} saved.\n{_format_task_concise(revised)}"


@mcp.tool(
    name="tasklist_edit_cancel",
    annotations=ToolAnnotations(
        title="Discard Draft",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasklist_edit_cancel(params: CancelEditInput) -> str:
    """
    Discard the draft without saving. The task is left as it was.

    Args:
        params: CancelEditInput (no fields; acts on the open draft)

    Returns:
        Confirmation message
    """
    session = get_state().session
    task_id = session.task_id
    session.cancel()

    if task_id is None:
        return "No edit session was open."
    return f"Discarded draft for task {task_id}."
