"""
Tests for the interactive menu, driven through click's CliRunner.
"""

from click.testing import CliRunner

import theme
from main import main


def run_menu(*lines):
    runner = CliRunner()
    return runner.invoke(main, ["--no-color"], input="".join(f"{line}\n" for line in lines))


class TestMenu:
    """Test menu dispatch and feedback messages."""

    def test_exit(self):
        result = run_menu("10")

        assert result.exit_code == 0
        assert "1. Add a new task" in result.output
        assert result.output.rstrip().endswith("Exiting...")

    def test_end_of_input_exits_cleanly(self):
        result = CliRunner().invoke(main, ["--no-color"], input="")

        assert result.exit_code == 0
        assert "Exiting..." in result.output

    def test_invalid_choice(self):
        result = run_menu("abc", "42", "10")

        assert result.exit_code == 0
        assert result.output.count("Invalid choice. Please try again.") == 2

    def test_add_with_due_date_and_view(self):
        result = run_menu("1", "Buy milk", "y", "2024-01-01", "home, errands", "5", "10")

        assert "Task added successfully!" in result.output
        assert "Tasks:" in result.output
        assert "1. Buy milk - Pending, Due: 2024-01-01" in result.output

    def test_add_requires_description(self):
        result = run_menu("1", "", "5", "10")

        assert "Description required." in result.output
        assert "(empty)" in result.output

    def test_complete_and_filtered_views(self):
        result = run_menu(
            "1", "Buy milk", "n", "",
            "1", "Call Alice", "n", "",
            "2", "1",
            "6",
            "10",
        )

        assert "Task marked as completed!" in result.output
        assert "1. Buy milk - Completed" in result.output
        assert "2. Call Alice - Pending" not in result.output

    def test_undo_and_redo(self):
        result = run_menu("8", "9", "1", "Buy milk", "n", "", "2", "1", "8", "7", "9", "10")

        assert "Nothing to undo." in result.output
        assert "Nothing to redo." in result.output
        assert "Undo successful." in result.output
        assert "1. Buy milk - Pending" in result.output
        assert "Redo successful." in result.output

    def test_bad_indices(self):
        result = run_menu("1", "Buy milk", "n", "", "2", "x", "4", "5", "10")

        assert "Invalid index." in result.output
        assert "No task #5." in result.output
        assert result.exit_code == 0

    def test_non_ascii_digit_index_is_rejected(self):
        """Unicode digits at the index prompt are reported, not fatal."""
        result = run_menu("1", "Buy milk", "n", "", "2", "²", "3", "١", "10")

        assert result.exit_code == 0
        assert result.exception is None
        assert result.output.count("Invalid index.") == 2
        assert "Exiting..." in result.output

    def test_delete(self):
        result = run_menu("1", "Buy milk", "n", "", "4", "1", "5", "10")

        assert "Task deleted successfully!" in result.output
        assert "(empty)" in result.output

    def test_history_limit_option(self):
        result = CliRunner().invoke(main, ["--no-color", "--history-limit", "0"], input="10\n")

        assert result.exit_code != 0

    def test_color_from_environment(self):
        """TODO_COLOR=1 forces coloured listings without the command-line flag."""
        previous = theme.is_enabled()
        try:
            result = CliRunner().invoke(main, [], input="1\nBuy milk\nn\n\n5\n10\n",
                                        env={"TODO_COLOR": "1"}, color=True)
        finally:
            theme.set_enabled(previous)

        assert result.exit_code == 0
        assert "\033[" in result.output
        assert "Buy milk" in result.output
