"""Transcript panel: the scrollable, bordered list of chat lines."""

from collections.abc import Iterable, Sequence

from rich import box
from rich.console import Console, ConsoleOptions, RenderResult
from rich.panel import Panel
from rich.text import Text

from ..state import ChatEntry, TransferProgress, UserColorTable
from .config import PANEL_BORDER, PROGRESS_MARGIN, TIMESTAMP_FORMAT, TRANSCRIPT_TITLE
from .formatter import format_entry
from .models import StyledLine
from .overlay import make_overlay
from .themes import DEFAULT_THEME, ColorTheme


class TranscriptPanel:
    """Rich renderable for the transcript region.

    Lines are stored newest first. When rendered, each line soft-wraps to the
    inner width and the wrapped rows are scrolled by `scroll_offset` from the
    top. Horizontal scroll is always zero.
    """

    def __init__(
        self,
        lines: list[StyledLine],
        scroll_offset: int = 0,
        title: str = TRANSCRIPT_TITLE,
        style: str = DEFAULT_THEME.panel,
    ) -> None:
        self.lines = lines
        self.scroll_offset = max(scroll_offset, 0)
        self.title = title
        self.style = style

    def wrapped_rows(self, console: Console, width: int) -> list[Text]:
        """All display rows after soft-wrapping to `width` columns."""
        width = max(width, 1)
        rows: list[Text] = []
        for line in self.lines:
            rows.extend(line.to_text().wrap(console, width))
        return rows

    def visible_rows(
        self, console: Console, width: int, height: int | None
    ) -> list[Text]:
        """Rows shown inside a panel of the given outer size."""
        inner_width = width - 2 * PANEL_BORDER
        rows = self.wrapped_rows(console, inner_width)[self.scroll_offset:]
        if height is None:
            return rows
        return rows[:max(height - 2 * PANEL_BORDER, 0)]

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        width = options.max_width
        height = options.height
        if width < 2 * PANEL_BORDER or (height is not None and height < 2 * PANEL_BORDER):
            yield Text("")
            return
        rows = self.visible_rows(console, width, height)
        body = Text("\n", no_wrap=True, overflow="crop").join(rows)
        yield Panel(
            body,
            title=Text(self.title, style="bold"),
            title_align="left",
            box=box.SQUARE,
            style=self.style,
            padding=0,
            height=height,
        )


def display_lines(
    entries: Iterable[ChatEntry],
    color_table: UserColorTable,
    local_user: str | None,
    progress: TransferProgress | None,
    panel_width: int,
    theme: ColorTheme = DEFAULT_THEME,
    timestamp_format: str = TIMESTAMP_FORMAT,
    progress_margin: int = PROGRESS_MARGIN,
) -> list[StyledLine]:
    """Format the log newest first, with the progress overlay on top."""
    lines = [
        format_entry(entry, color_table, local_user, theme, timestamp_format)
        for entry in entries
    ]
    lines.reverse()
    if progress is not None:
        lines.insert(0, make_overlay(progress, panel_width, theme, progress_margin))
    return lines


def build_transcript(
    entries: Sequence[ChatEntry],
    color_table: UserColorTable,
    local_user: str | None,
    progress: TransferProgress | None,
    scroll_offset: int,
    panel_width: int,
    theme: ColorTheme = DEFAULT_THEME,
    title: str = TRANSCRIPT_TITLE,
    timestamp_format: str = TIMESTAMP_FORMAT,
    progress_margin: int = PROGRESS_MARGIN,
) -> TranscriptPanel:
    """Build the transcript region for one frame.

    Args:
        entries: Chat log, oldest first
        color_table: Read-only user -> palette index mapping
        local_user: Name of the user running this client
        progress: Active transfer, or None
        scroll_offset: Wrapped rows scrolled from the newest line
        panel_width: Full width of the region, used to size the progress bar
        theme: Colors to use
        title: Border title
        timestamp_format: strftime format of the timestamp prefix
        progress_margin: Columns not used by the progress bar

    Returns:
        TranscriptPanel ready to be rendered into the region
    """
    lines = display_lines(
        entries,
        color_table,
        local_user,
        progress,
        panel_width,
        theme,
        timestamp_format,
        progress_margin,
    )
    return TranscriptPanel(lines, scroll_offset, title=title, style=theme.panel)
