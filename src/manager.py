"""Task list logic: holds tasks, id management, mutation with history, and undo/redo.

Every mutating operation records the task's state before the change and
returns an OpResult instead of raising, so the menu can show a message for
both successes and soft failures (bad index, empty history).
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional, Tuple, Union
from history import EmptyHistory, History
from models import Snapshot, Task, TaskFilter, TaskRow
from theme import color, STATUS_COLOR, ID_COLOR

logger = logging.getLogger(__name__)

FilterLike = Union[TaskFilter, str]


class Outcome(Enum):
    OK = "ok"
    INVALID_INDEX = "invalid-index"
    NO_CHANGE = "no-change"
    EMPTY_HISTORY = "empty-history"
    NO_MATCHING_TASK = "no-matching-task"


@dataclass(frozen=True)
class OpResult:
    outcome: Outcome
    message: str

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK


class TaskView:
    """Lazy, re-iterable listing of the tasks matching a filter.

    Each iteration reads the live collection, so a view taken before a
    mutation reflects it when iterated again. Unknown filters yield nothing.
    """

    def __init__(self, tasks: List[Task], task_filter: FilterLike):
        self._tasks = tasks
        self.filter: Optional[TaskFilter] = _coerce_filter(task_filter)

    def __iter__(self) -> Iterator[TaskRow]:
        if self.filter is None:
            return
        for position, task in enumerate(self._tasks, start=1):
            if self.filter.matches(task):
                yield TaskRow(position, task.description, task.completed, task.due_date)


def _coerce_filter(value: FilterLike) -> Optional[TaskFilter]:
    if isinstance(value, TaskFilter):
        return value
    try:
        return TaskFilter(value)
    except ValueError:
        logger.warning("Unknown task filter %r; nothing will be listed", value)
        return None


def format_task_line(row: TaskRow, use_color: bool = False) -> str:
    """Render ``<index>. <description> - <Completed|Pending>[, Due: <date>]``."""
    status = 'Completed' if row.completed else 'Pending'
    prefix = f"{row.index}."
    if use_color:
        prefix = color(prefix, ID_COLOR)
        status = color(status, STATUS_COLOR[status.lower()])
    line = f"{prefix} {row.description} - {status}"
    if row.due_date:
        line += f", Due: {row.due_date}"
    return line


class TaskListManager:
    def __init__(self, history: Optional[History] = None):
        self._tasks: List[Task] = []
        self._by_id: Dict[int, Task] = {}
        self.history: History = history if history is not None else History()
        self._next_id: int = 1

    # -------------------- id management --------------------
    def _allocate_id(self) -> int:
        nid = self._next_id
        self._next_id += 1
        return nid

    # -------------------- queries --------------------
    @property
    def tasks(self) -> Tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    def _task_at(self, index: int) -> Optional[Task]:
        # negative indices are out of range, not counted from the end
        if 0 <= index < len(self._tasks):
            return self._tasks[index]
        return None

    def view_tasks(self, task_filter: FilterLike = TaskFilter.SHOW_ALL) -> TaskView:
        return TaskView(self._tasks, task_filter)

    # -------------------- task operations --------------------
    def add_task(self, task: Task) -> OpResult:
        task.id = self._allocate_id()
        if not task.created_at:
            task.created_at = datetime.now().isoformat()
        self._tasks.append(task)
        self._by_id[task.id] = task
        self.history.record(task.snapshot())
        logger.info('Added task %d "%s"', task.id, task.description)
        return OpResult(Outcome.OK, "Task added successfully!")

    def mark_completed(self, index: int) -> OpResult:
        return self._set_completed(index, True)

    def mark_pending(self, index: int) -> OpResult:
        return self._set_completed(index, False)

    def _set_completed(self, index: int, completed: bool) -> OpResult:
        label = 'completed' if completed else 'pending'
        task = self._task_at(index)
        if task is None:
            return self._invalid_index(index)
        if task.completed == completed:
            logger.debug('Task %d already %s', task.id, label)
            return OpResult(Outcome.NO_CHANGE, f'Task "{task.description}" is already {label}.')
        self.history.record(task.snapshot())
        if completed:
            task.mark_completed()
        else:
            task.mark_pending()
        logger.info('Marked task %d %s', task.id, label)
        return OpResult(Outcome.OK, f"Task marked as {label}!")

    def delete_task(self, index: int) -> OpResult:
        task = self._task_at(index)
        if task is None:
            return self._invalid_index(index)
        self.history.record(task.snapshot())
        del self._tasks[index]
        del self._by_id[task.id]
        logger.info('Deleted task %d "%s"', task.id, task.description)
        return OpResult(Outcome.OK, "Task deleted successfully!")

    def _invalid_index(self, index: int) -> OpResult:
        logger.debug('Ignoring out-of-range index %d (have %d tasks)', index, len(self._tasks))
        return OpResult(Outcome.INVALID_INDEX, f'No task #{index + 1}.')

    # -------------------- undo / redo --------------------
    def undo(self) -> OpResult:
        return self._replay('undo', self.history.peek_undo, self.history.undo)

    def redo(self) -> OpResult:
        return self._replay('redo', self.history.peek_redo, self.history.redo)

    def _replay(self, action: str,
                peek: Callable[[], Snapshot],
                move: Callable[[Optional[Snapshot]], Snapshot]) -> OpResult:
        """Move one snapshot across the trails and apply it to its task.

        The task's current state goes onto the opposite trail so the next
        undo/redo reverses this one. A snapshot whose task was deleted is
        still moved, but nothing is restored.
        """
        try:
            pending = peek()
        except EmptyHistory as exc:
            logger.debug('%s requested with empty trail', action)
            return OpResult(Outcome.EMPTY_HISTORY, str(exc))
        task = self._by_id.get(pending.task_id)
        snapshot = move(task.snapshot() if task is not None else None)
        if task is None:
            logger.info('%s: task %d no longer exists; snapshot skipped', action, snapshot.task_id)
            return OpResult(Outcome.NO_MATCHING_TASK,
                            f'Task "{snapshot.description}" no longer exists; nothing to restore.')
        task.restore(snapshot)
        logger.info('%s applied to task %d', action, task.id)
        return OpResult(Outcome.OK, f"{action.capitalize()} successful.")

    def __len__(self) -> int:
        return len(self._tasks)

    def __str__(self) -> str:
        done = sum(1 for t in self._tasks if t.completed)
        return (f'{len(self._tasks)} tasks: '
                f'{done} completed, {len(self._tasks) - done} pending')
