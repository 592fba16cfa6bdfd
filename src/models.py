"""Data models for the terminal to-do application.

Exposes the Task dataclass, its frozen Snapshot (memento), the builder used
to construct tasks, and the filter / row types used when viewing the list.
Tasks are identified by a sequential integer id assigned by the manager;
descriptions are free text and may repeat.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional, Sequence


@dataclass(frozen=True)
class Snapshot:
    """Immutable capture of a task's mutable fields at one point in time."""
    task_id: int
    description: str
    completed: bool
    due_date: Optional[str] = None


@dataclass
class Task:
    """A single to-do item.

    Fields:
        id: Sequential integer id (0 until the manager adds the task).
        description: Single-line description shown in listings.
        completed: Completion flag; always False when built.
        due_date: Free-form date string (YYYY-MM-DD by convention) or None.
        tags: Labels attached at build time.
        created_at: ISO timestamp set when the task is added.
    """
    id: int
    description: str
    completed: bool = False
    due_date: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    created_at: Optional[str] = None

    def mark_completed(self) -> None:
        if not self.completed:
            self.completed = True

    def mark_pending(self) -> None:
        if self.completed:
            self.completed = False

    def is_completed(self) -> bool:
        return self.completed

    def snapshot(self) -> Snapshot:
        return Snapshot(
            task_id=self.id,
            description=self.description,
            completed=self.completed,
            due_date=self.due_date,
        )

    def restore(self, snapshot: Snapshot) -> None:
        """Overwrite description, completion flag and due date from snapshot."""
        self.description = snapshot.description
        self.completed = snapshot.completed
        self.due_date = snapshot.due_date

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(id={self.id}, description={self.description}, completed={self.completed})"


@dataclass(frozen=True)
class TaskOptions:
    """Optional settings accepted by build_task."""
    due_date: Optional[str] = None
    tags: Sequence[str] = ()


def build_task(description: str, options: Optional[TaskOptions] = None) -> Task:
    """Build a new pending task.

    Raises ValueError when description is empty or whitespace only.
    An empty due date string is treated as no due date.
    """
    if not description or not description.strip():
        raise ValueError("Task description must not be empty.")
    opts = options or TaskOptions()
    return Task(
        id=0,
        description=description,
        due_date=opts.due_date or None,
        tags=list(opts.tags),
    )


class TaskFilter(str, Enum):
    SHOW_ALL = "Show all"
    SHOW_COMPLETED = "Show completed"
    SHOW_PENDING = "Show pending"

    def matches(self, task: Task) -> bool:
        if self is TaskFilter.SHOW_ALL:
            return True
        if self is TaskFilter.SHOW_COMPLETED:
            return task.completed
        return not task.completed


class TaskRow(NamedTuple):
    """One displayed line: 1-based index plus the visible task fields."""
    index: int
    description: str
    completed: bool
    due_date: Optional[str]
