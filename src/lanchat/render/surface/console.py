"""Rich Console backed surface.

Regions are rendered with Console.render_lines at their exact size,
stitched into full-width rows and written in one buffered pass, starting
from the top-left corner of the screen.
"""

from rich.console import Console, RenderableType
from rich.control import Control
from rich.errors import ConsoleError
from rich.segment import Segment, Segments

from ..errors import RenderError
from ..models import Rect
from .base import Surface

Row = list[Segment]


class ConsoleSurface(Surface):
    """Surface writing frames to a Rich Console.

    Example:
        surface = ConsoleSurface(Console())
        draw(surface, state)

    The plain text of the last committed frame is kept in `last_frame`,
    and its cursor in `last_cursor`.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()
        self._pending: list[tuple[RenderableType, Rect]] = []
        self._cursor: tuple[int, int] | None = None
        self.last_frame: list[str] = []
        self.last_cursor: tuple[int, int] | None = None

    @property
    def console(self) -> Console:
        return self._console

    @property
    def area(self) -> Rect:
        width, height = self._console.size
        return Rect(0, 0, width, height)

    def render(self, renderable: RenderableType, area: Rect) -> None:
        self._pending.append((renderable, area))

    def set_cursor(self, x: int, y: int) -> None:
        self._cursor = (x, y)

    def commit(self) -> None:
        area = self.area
        try:
            rows = self._compose(area)
            self._write(rows)
        except (OSError, ConsoleError) as e:
            raise RenderError(str(e)) from e
        finally:
            cursor = self._cursor
            self.discard()

        self.last_frame = [
            "".join(segment.text for segment in row if not segment.control)
            for row in rows
        ]
        self.last_cursor = cursor

    def discard(self) -> None:
        self._pending.clear()
        self._cursor = None

    def _compose(self, area: Rect) -> list[Row]:
        """Render every queued region into a grid of full-width rows."""
        rows: list[Row] = [[Segment(" " * area.width)] for _ in range(area.height)]
        for renderable, region in self._pending:
            if region.is_empty:
                continue
            options = self._console.options.update_dimensions(region.width, region.height)
            lines = self._console.render_lines(renderable, options, pad=True)
            for offset, line in enumerate(lines[:region.height]):
                y = region.y + offset
                if 0 <= y < area.height:
                    rows[y] = self._place(line, region, area.width)
        return rows

    @staticmethod
    def _place(line: Row, region: Rect, width: int) -> Row:
        # Regions never share a row, so the rest of the row is blank.
        right = max(width - region.x - region.width, 0)
        return [Segment(" " * region.x), *line, Segment(" " * right)]

    def _write(self, rows: list[Row]) -> None:
        segments: Row = []
        for index, row in enumerate(rows):
            if index:
                segments.append(Segment.line())
            segments.extend(row)

        console = self._console
        with console:
            console.control(Control.home())
            console.print(Segments(segments), end="", soft_wrap=True)
            if self._cursor is not None:
                console.control(Control.move_to(*self._cursor))
                console.show_cursor(True)
