"""
Tests for the task model, snapshots and the task builder.
"""

import dataclasses

import pytest

from models import Snapshot, Task, TaskFilter, TaskOptions, build_task


class TestBuildTask:
    """Test constructing tasks through the builder."""

    def test_defaults(self):
        """A task built from a description alone is pending with no extras."""
        task = build_task("Buy milk")

        assert task.description == "Buy milk"
        assert task.completed is False
        assert task.due_date is None
        assert task.tags == []

    def test_options(self):
        """Due date and tags are taken from TaskOptions."""
        task = build_task("Call Alice", TaskOptions(due_date="2024-01-01", tags=("phone", "family")))

        assert task.due_date == "2024-01-01"
        assert task.tags == ["phone", "family"]
        assert task.completed is False

    def test_empty_due_date_is_none(self):
        task = build_task("Buy milk", TaskOptions(due_date=""))

        assert task.due_date is None

    @pytest.mark.parametrize("description", ["", "   "])
    def test_empty_description_rejected(self, description):
        """Blank descriptions cannot be built."""
        with pytest.raises(ValueError):
            build_task(description)


class TestTaskState:
    """Test completion toggles and memento snapshots."""

    def test_mark_completed_and_pending(self):
        task = build_task("Write report")

        task.mark_completed()
        assert task.is_completed()
        task.mark_completed()
        assert task.is_completed()

        task.mark_pending()
        assert not task.is_completed()
        task.mark_pending()
        assert not task.is_completed()

    def test_snapshot_is_a_copy(self):
        """Later changes to the task do not leak into an earlier snapshot."""
        task = Task(id=3, description="Water plants", due_date="2024-05-01")
        snap = task.snapshot()

        task.mark_completed()
        task.due_date = None

        assert snap == Snapshot(task_id=3, description="Water plants", completed=False, due_date="2024-05-01")

    def test_snapshot_is_frozen(self):
        snap = build_task("Buy milk").snapshot()

        with pytest.raises(dataclasses.FrozenInstanceError):
            snap.completed = True

    def test_restore(self):
        """Restore overwrites description, flag and due date but keeps tags."""
        task = Task(id=1, description="Old", tags=["x"])
        task.restore(Snapshot(task_id=1, description="New", completed=True, due_date="2025-01-01"))

        assert task.description == "New"
        assert task.completed is True
        assert task.due_date == "2025-01-01"
        assert task.tags == ["x"]


class TestTaskFilter:
    """Test filter matching."""

    def test_matches(self):
        done = Task(id=1, description="a", completed=True)
        todo = Task(id=2, description="b")

        assert TaskFilter.SHOW_ALL.matches(done) and TaskFilter.SHOW_ALL.matches(todo)
        assert TaskFilter.SHOW_COMPLETED.matches(done) and not TaskFilter.SHOW_COMPLETED.matches(todo)
        assert TaskFilter.SHOW_PENDING.matches(todo) and not TaskFilter.SHOW_PENDING.matches(done)

    def test_string_values(self):
        assert TaskFilter("Show completed") is TaskFilter.SHOW_COMPLETED
