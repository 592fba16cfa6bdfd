"""Numbered menu loop for the to-do list.

Each choice is parsed here and forwarded to TaskListManager; the manager's
OpResult message is echoed back. Bad input never ends the session.
"""
import logging
from typing import Callable, Dict, Optional
import click
from models import TaskFilter, TaskOptions, build_task
from manager import TaskListManager, format_task_line
import theme

logger = logging.getLogger(__name__)

MENU = (
    "What would you like to do?",
    "1. Add a new task",
    "2. Mark a task as completed",
    "3. Mark a task as pending",
    "4. Delete a task",
    "5. View all tasks",
    "6. View completed tasks",
    "7. View pending tasks",
    "8. Undo",
    "9. Redo",
    "10. Exit",
)

EXIT_CHOICE = '10'


def _ask(text: str) -> str:
    # empty default so a bare Enter returns "" instead of re-prompting
    return click.prompt(text, default='', show_default=False, prompt_suffix=': ').strip()


class CLI:
    def __init__(self, manager: TaskListManager, use_color: Optional[bool] = None):
        self.manager: TaskListManager = manager
        self.use_color: bool = theme.is_enabled() if use_color is None else use_color
        self._commands: Dict[str, Callable[[], None]] = {
            '1': self._add,
            '2': self._complete,
            '3': self._pending,
            '4': self._delete,
            '5': lambda: self._view(TaskFilter.SHOW_ALL),
            '6': lambda: self._view(TaskFilter.SHOW_COMPLETED),
            '7': lambda: self._view(TaskFilter.SHOW_PENDING),
            '8': self._undo,
            '9': self._redo,
        }

    def run(self) -> int:
        """Main menu loop; returns the process exit code (always 0)."""
        try:
            while True:
                for line in MENU:
                    click.echo(line)
                choice = _ask("Enter your choice")
                if choice == EXIT_CHOICE:
                    break
                handler = self._commands.get(choice)
                if handler is None:
                    logger.debug("Unrecognised menu choice %r", choice)
                    click.echo("Invalid choice. Please try again.")
                    continue
                handler()
        except (click.Abort, KeyboardInterrupt, EOFError):
            click.echo()
        click.echo("Exiting...")
        return 0

    # -------------------- helpers --------------------
    def _read_index(self) -> Optional[int]:
        """Prompt for a 1-based index and return it 0-based, or None if not a number."""
        raw = _ask("Enter task index").rstrip('.')
        if not (raw.isascii() and raw.isdigit()):
            click.echo("Invalid index.")
            return None
        return int(raw) - 1

    # -------------------- commands --------------------
    def _add(self) -> None:
        description = _ask("Enter task description")
        if not description:
            click.echo("Description required.")
            return
        due_date: Optional[str] = None
        if _ask("Do you want to add a due date? (y/n)").lower() == 'y':
            due_date = _ask("Enter due date (YYYY-MM-DD)") or None
        raw_tags = _ask("Enter tags (comma-separated, optional)")
        tags = [t.strip() for t in raw_tags.split(',') if t.strip()]
        task = build_task(description, TaskOptions(due_date=due_date, tags=tags))
        click.echo(self.manager.add_task(task).message)

    def _complete(self) -> None:
        index = self._read_index()
        if index is not None:
            click.echo(self.manager.mark_completed(index).message)

    def _pending(self) -> None:
        index = self._read_index()
        if index is not None:
            click.echo(self.manager.mark_pending(index).message)

    def _delete(self) -> None:
        index = self._read_index()
        if index is not None:
            click.echo(self.manager.delete_task(index).message)

    def _view(self, task_filter: TaskFilter) -> None:
        click.echo(theme.color("Tasks:", theme.HEADER_COLOR, theme.BOLD) if self.use_color else "Tasks:")
        rows = list(self.manager.view_tasks(task_filter))
        if not rows:
            click.echo("(empty)")
        for row in rows:
            click.echo(format_task_line(row, use_color=self.use_color))

    def _undo(self) -> None:
        click.echo(self.manager.undo().message)

    def _redo(self) -> None:
        click.echo(self.manager.redo().message)
