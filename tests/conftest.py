"""Pytest configuration and shared fixtures."""
import io
from datetime import datetime

import pytest
from rich.console import Console

from lanchat.render import Rect, Surface
from lanchat.state import ApplicationState, ChatEntry, Connection, Content


class RecordingSurface(Surface):
    """Surface that records what the renderer asks of it."""

    def __init__(self, width: int = 40, height: int = 20, fail_with: Exception | None = None):
        self._area = Rect(0, 0, width, height)
        self.fail_with = fail_with
        self.rendered: list[tuple[object, Rect]] = []
        self.cursor: tuple[int, int] | None = None
        self.commits = 0
        self.discards = 0

    @property
    def area(self) -> Rect:
        return self._area

    def render(self, renderable, area: Rect) -> None:
        self.rendered.append((renderable, area))

    def set_cursor(self, x: int, y: int) -> None:
        self.cursor = (x, y)

    def commit(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.commits += 1

    def discard(self) -> None:
        self.discards += 1


@pytest.fixture
def timestamp():
    """Return a fixed timestamp for entries."""
    return datetime(2024, 3, 9, 7, 5, 3)


@pytest.fixture
def make_console():
    """Return a factory for uncolored, in-memory consoles."""
    def _make(width: int = 40, height: int = 20, file=None) -> Console:
        return Console(
            file=file or io.StringIO(),
            width=width,
            height=height,
            color_system=None,
            legacy_windows=False,
        )
    return _make


@pytest.fixture
def recording_surface():
    """Return a 40x20 recording surface."""
    return RecordingSurface()


@pytest.fixture
def state(timestamp):
    """Return a state with a short conversation between alice (local) and bob."""
    app_state = ApplicationState(local_user="alice")
    app_state.add_entry(ChatEntry(user="bob", timestamp=timestamp, kind=Connection()))
    app_state.add_entry(ChatEntry(user="bob", timestamp=timestamp, kind=Content(text="hi alice")))
    app_state.add_entry(ChatEntry(user="alice", timestamp=timestamp, kind=Content(text="hey bob")))
    return app_state


def render_plain(console: Console, renderable, width: int, height: int) -> list[str]:
    """Render into a width x height block and return the plain text rows."""
    options = console.options.update_dimensions(width, height)
    lines = console.render_lines(renderable, options, pad=True)
    return ["".join(segment.text for segment in line) for line in lines]


@pytest.fixture
def render_rows():
    """Return the render_plain helper."""
    return render_plain


@pytest.fixture
def surface_factory():
    """Return the RecordingSurface class for custom sizes or failures."""
    return RecordingSurface
