"""
Unit tests for src/adapters/display.py
"""

import io

from rich.console import Console

from adapters.display import BufferDisplay, ConsoleDisplay, LiveDisplay
from core.domain.operations import Operation
from core.interfaces.display import DisplayTarget


def _console():
    buffer = io.StringIO()
    return Console(file=buffer, width=100, force_terminal=False, color_system=None), buffer


class TestBufferDisplay:
    """Tests for BufferDisplay."""

    def test_latest_write_wins(self):
        """content should hold only the last write, history all of them."""
        display = BufferDisplay()
        display.write("first", operation=Operation.REGISTER)
        display.write("second")

        assert display.content == "second"
        assert display.history == [(Operation.REGISTER, "first"), (None, "second")]

    def test_satisfies_protocol(self):
        assert isinstance(BufferDisplay(), DisplayTarget)
        assert isinstance(ConsoleDisplay(), DisplayTarget)
        assert isinstance(LiveDisplay(), DisplayTarget)


class TestConsoleDisplay:
    """Tests for ConsoleDisplay."""

    def test_prints_panel_with_label(self):
        console, buffer = _console()
        ConsoleDisplay(console).write("hello", operation=Operation.ACTIVATE)

        output = buffer.getvalue()
        assert "hello" in output
        assert "Activate account" in output

    def test_markup_is_not_interpreted(self):
        """Response text should be printed literally."""
        console, buffer = _console()
        ConsoleDisplay(console).write("[bold]raw[/bold]")

        assert "[bold]raw[/bold]" in buffer.getvalue()


class TestLiveDisplay:
    """Tests for LiveDisplay."""

    def test_final_render_shows_last_write(self):
        """Only the last write should remain in a non-terminal render."""
        console, buffer = _console()
        with LiveDisplay(console) as display:
            display.write("old result", operation=Operation.REGISTER)
            display.write("new result", operation=Operation.REGISTER)

        output = buffer.getvalue()
        assert "new result" in output
        assert "old result" not in output

    def test_write_outside_context_prints(self):
        console, buffer = _console()
        LiveDisplay(console).write("standalone")

        assert "standalone" in buffer.getvalue()
