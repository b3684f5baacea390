"""Tests for the single-slot edit session."""

from datetime import datetime, timezone

from tasklist_mcp import DraftField, EditSession, TaskModel, TaskStore


class TestOpen:
    """Tests for opening a session."""

    def test_session_starts_closed(self, session):
        assert session.is_open is False
        assert session.draft is None
        assert session.task_id is None

    def test_open_snapshots_fields(self, seeded_store, session, sample_task_models):
        task = sample_task_models[1]
        draft = session.open(task)

        assert session.is_open
        assert draft.task_id == task.id
        assert draft.title == "Write report"
        assert draft.details == "Quarterly numbers"
        assert draft.due_date == "2025-03-04"
        assert draft.tags == ["work", "urgent"]
        assert draft.pending_tag == ""

    def test_open_defaults_missing_details_and_date(self, session, sample_task_models):
        draft = session.open(sample_task_models[0])
        assert draft.details == ""
        assert draft.due_date == ""

    def test_open_formats_due_date_as_utc_day(self, session):
        late = datetime(2025, 3, 4, 23, 30, tzinfo=timezone.utc)
        draft = session.open(TaskModel(id="x", title="t", due_date=late))
        assert draft.due_date == "2025-03-04"

    def test_open_discards_previous_draft(self, seeded_store, session, sample_task_models):
        session.open(sample_task_models[0])
        session.set_field("title", "never saved")
        session.open(sample_task_models[2])

        assert session.task_id == sample_task_models[2].id
        assert seeded_store.get(sample_task_models[0].id).title == "Buy milk"

    def test_draft_does_not_share_tags_with_task(self, session, sample_task_models):
        task = sample_task_models[0]
        session.open(task)
        session.add_tag("extra")
        assert task.tags == ["errand"]


class TestDraftEdits:
    """Tests for set_field, add_tag and remove_tag."""

    def test_set_field_updates_draft_only(self, seeded_store, session, sample_task_models):
        task = sample_task_models[0]
        session.open(task)
        assert session.set_field(DraftField.TITLE, "Buy oat milk") is True
        assert session.draft.title == "Buy oat milk"
        assert seeded_store.get(task.id).title == "Buy milk"

    def test_set_field_accepts_plain_names(self, session, sample_task_models):
        session.open(sample_task_models[0])
        assert session.set_field("details", "2 litres") is True
        assert session.draft.details == "2 litres"

    def test_set_field_unknown_name_is_noop(self, session, sample_task_models):
        session.open(sample_task_models[0])
        before = session.draft
        assert session.set_field("completed", "true") is False
        assert session.draft == before

    def test_set_field_rejects_malformed_due_date(self, session, sample_task_models):
        session.open(sample_task_models[1])
        assert session.set_field("due_date", "next tuesday") is False
        assert session.set_field("due_date", "2025-02-30") is False
        assert session.draft.due_date == "2025-03-04"

    def test_set_field_none_clears(self, session, sample_task_models):
        session.open(sample_task_models[1])
        assert session.set_field("due_date", None) is True
        assert session.draft.due_date == ""

    def test_set_field_on_closed_session_is_noop(self, session):
        assert session.set_field("title", "x") is False
        assert session.draft is None

    def test_add_tag_trims_and_appends(self, session, sample_task_models):
        session.open(sample_task_models[0])
        assert session.add_tag("  urgent ") is True
        assert session.draft.tags == ["errand", "urgent"]

    def test_add_tag_keeps_duplicates(self, session, sample_task_models):
        session.open(sample_task_models[0])
        session.add_tag("errand")
        assert session.draft.tags == ["errand", "errand"]

    def test_add_blank_tag_is_noop(self, session, sample_task_models):
        session.open(sample_task_models[0])
        session.set_field("pending_tag", "   ")
        assert session.add_tag("   ") is False
        assert session.add_tag() is False
        assert session.draft.tags == ["errand"]

    def test_add_tag_uses_and_clears_pending_tag(self, session, sample_task_models):
        session.open(sample_task_models[0])
        session.set_field(DraftField.PENDING_TAG, "shop")
        assert session.add_tag() is True
        assert session.draft.tags == ["errand", "shop"]
        assert session.draft.pending_tag == ""

    def test_add_explicit_tag_clears_pending_tag(self, session, sample_task_models):
        session.open(sample_task_models[0])
        session.set_field("pending_tag", "typed")
        session.add_tag("other")
        assert session.draft.pending_tag == ""

    def test_remove_tag_removes_all_occurrences(self, session):
        session.open(TaskModel(id="x", title="t", tags=["x", "y", "x"]))
        assert session.remove_tag("x") is True
        assert session.draft.tags == ["y"]

    def test_remove_missing_tag_is_noop(self, session, sample_task_models):
        session.open(sample_task_models[0])
        assert session.remove_tag("nope") is False
        assert session.draft.tags == ["errand"]


class TestCommit:
    """Tests for committing drafts."""

    def test_add_tag_then_commit(self, seeded_store, session, sample_task_models):
        original = sample_task_models[1]
        session.open(seeded_store.get(original.id))
        session.add_tag("review")
        revised = session.commit()

        stored = seeded_store.get(original.id)
        assert revised == stored
        assert stored.tags == ["work", "urgent", "review"]
        assert stored.model_dump(exclude={"tags"}) == original.model_dump(exclude={"tags"})
        assert session.is_open is False

    def test_commit_writes_edited_fields(self, seeded_store, session, sample_task_models):
        original = sample_task_models[0]
        session.open(original)
        session.set_field("title", "Buy oat milk")
        session.set_field("details", "2 litres")
        session.set_field("due_date", "2025-04-01")
        session.commit()

        stored = seeded_store.get(original.id)
        assert stored.title == "Buy oat milk"
        assert stored.details == "2 litres"
        assert stored.due_date == datetime(2025, 4, 1, tzinfo=timezone.utc)
        assert stored.completed is False

    def test_commit_unchanged_due_date_keeps_timestamp(self, seeded_store, session, sample_task_models):
        original = sample_task_models[1]
        session.open(original)
        session.commit()
        assert seeded_store.get(original.id).due_date == datetime(2025, 3, 4, 15, 30, tzinfo=timezone.utc)

    def test_commit_cleared_due_date(self, seeded_store, session, sample_task_models):
        original = sample_task_models[1]
        session.open(original)
        session.set_field("due_date", "")
        session.commit()
        assert seeded_store.get(original.id).due_date is None

    def test_commit_empty_details_stored_as_none(self, seeded_store, session, sample_task_models):
        original = sample_task_models[1]
        session.open(original)
        session.set_field("details", "")
        session.commit()
        assert seeded_store.get(original.id).details is None

    def test_commit_preserves_completed_from_snapshot(self, seeded_store, session, sample_task_models):
        original = sample_task_models[1]
        session.open(original)
        session.set_field("title", "Write final report")
        session.commit()
        assert seeded_store.get(original.id).completed is True

    def test_commit_deleted_task_leaves_store_unchanged(self, seeded_store, session, sample_task_models):
        original = sample_task_models[0]
        session.open(original)
        seeded_store.delete(original.id)
        before = [t.model_dump() for t in seeded_store.tasks]

        assert session.commit() is None
        assert [t.model_dump() for t in seeded_store.tasks] == before
        assert session.is_open is False

    def test_commit_closed_session_returns_none(self, session):
        assert session.commit() is None

    def test_can_commit_tracks_title(self, session, sample_task_models):
        assert session.can_commit is False
        session.open(sample_task_models[0])
        assert session.can_commit is True
        session.set_field("title", "   ")
        assert session.can_commit is False

    def test_commit_does_not_recheck_title(self, seeded_store, session, sample_task_models):
        original = sample_task_models[0]
        session.open(original)
        session.set_field("title", "")
        session.commit()
        assert seeded_store.get(original.id).title == ""


class TestCancel:
    """Tests for cancelling drafts."""

    def test_cancel_leaves_store_unchanged(self, seeded_store, session, sample_task_models):
        original = sample_task_models[1]
        before = seeded_store.get(original.id)

        session.open(original)
        session.set_field("title", "changed")
        session.set_field("due_date", "2030-01-01")
        session.add_tag("new")
        session.remove_tag("work")
        session.cancel()

        assert seeded_store.get(original.id) == before
        assert session.is_open is False
        assert session.draft is None

    def test_cancel_closed_session_is_noop(self, session):
        session.cancel()
        assert session.is_open is False


class TestScenarios:
    """End-to-end flows across store and session."""

    def test_buy_milk_flow(self):
        store = TaskStore()
        session = EditSession(store)

        task = store.create("Buy milk")
        tasks = store.tasks
        assert len(tasks) == 1
        assert tasks[0].title == "Buy milk"
        assert tasks[0].completed is False
        assert tasks[0].tags == []

        store.toggle(task.id)
        assert store.get(task.id).completed is True

        session.open(store.get(task.id))
        session.add_tag("errand")
        session.commit()

        stored = store.get(task.id)
        assert stored.tags == ["errand"]
        assert stored.completed is True

    def test_blank_create_on_empty_store(self):
        store = TaskStore()
        store.create("")
        assert store.tasks == []
