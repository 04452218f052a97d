"""Input panel: the bordered draft message box and its cursor.

The draft is broken into fixed-width chunks (no word wrapping), and the
cursor position is derived with the same width so both always agree.
"""

from rich import box
from rich.console import Console, ConsoleOptions, RenderResult
from rich.panel import Panel
from rich.text import Text

from ..state import InputBuffer
from .config import INPUT_TITLE, PANEL_BORDER
from .models import Rect
from .themes import DEFAULT_THEME


def split_each(text: str, width: int) -> list[str]:
    """Split text into consecutive chunks of `width` characters.

    The last chunk may be shorter. Joining the chunks gives back `text`.
    """
    width = max(width, 1)
    return [text[start:start + width] for start in range(0, len(text), width)]


def cursor_position(offset: int, width: int) -> tuple[int, int]:
    """Visual (row, col) of a character offset in text split by `split_each`.

    An offset on a chunk boundary lands at column 0 of the next row.
    """
    return divmod(max(offset, 0), max(width, 1))


def inner_width(panel_width: int) -> int:
    """Usable text columns of a bordered panel, at least 1."""
    return max(panel_width - 2 * PANEL_BORDER, 1)


class InputPanel:
    """Rich renderable for the input region, plus the cursor it implies."""

    def __init__(
        self,
        lines: list[str],
        cursor_row: int,
        cursor_col: int,
        title: str = INPUT_TITLE,
        style: str = DEFAULT_THEME.panel,
    ) -> None:
        self.lines = lines
        self.cursor_row = cursor_row
        self.cursor_col = cursor_col
        self.title = title
        self.style = style

    def screen_cursor(self, area: Rect) -> tuple[int, int]:
        """Absolute (x, y) of the cursor when the panel is drawn at `area`."""
        return (
            area.x + PANEL_BORDER + self.cursor_col,
            area.y + PANEL_BORDER + self.cursor_row,
        )

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        height = options.height
        if options.max_width < 2 * PANEL_BORDER or (
            height is not None and height < 2 * PANEL_BORDER
        ):
            yield Text("")
            return
        body = Text("\n".join(self.lines), no_wrap=True, overflow="crop")
        yield Panel(
            body,
            title=Text(self.title, style="bold"),
            title_align="left",
            box=box.SQUARE,
            style=self.style,
            padding=0,
            height=height,
        )


def build_input(
    input_buffer: InputBuffer,
    panel_width: int,
    title: str = INPUT_TITLE,
    style: str = DEFAULT_THEME.panel,
) -> InputPanel:
    """Build the input region for one frame.

    Args:
        input_buffer: The draft and its cursor offset
        panel_width: Full width of the region, borders included
        title: Border title
        style: Base style of the panel

    Returns:
        InputPanel with the wrapped lines and the cursor row/column
    """
    width = inner_width(panel_width)
    lines = split_each(input_buffer.text, width)
    row, col = cursor_position(input_buffer.cursor, width)
    return InputPanel(lines, row, col, title=title, style=style)
