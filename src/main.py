"""Main entry point for the terminal to-do list.

Options fall back to environment variables: TODO_LOG_LEVEL,
TODO_HISTORY_LIMIT and TODO_COLOR.
"""
import logging
import click
from cli import CLI
from history import History
from manager import TaskListManager
import theme

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@click.command()
@click.option('--log-level', envvar='TODO_LOG_LEVEL', default='WARNING', show_default=True,
              type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help='Diagnostics written to stderr.')
@click.option('--color/--no-color', envvar='TODO_COLOR', default=None,
              help='Force coloured output on or off (default: auto-detect).')
@click.option('--history-limit', envvar='TODO_HISTORY_LIMIT', type=click.IntRange(min=1),
              default=None, help='Keep at most this many undo steps (default: unlimited).')
@click.pass_context
def main(ctx: click.Context, log_level: str, color, history_limit) -> None:
    """Interactive to-do list with undo/redo."""
    logging.basicConfig(level=getattr(logging, log_level.upper()), format=LOG_FORMAT)
    if color is not None:
        theme.set_enabled(color)
    manager = TaskListManager(History(max_depth=history_limit))
    ctx.exit(CLI(manager).run())

if __name__ == "__main__":
    main()
