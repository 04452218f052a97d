"""Progress bar overlay for an active file transfer."""

from ..state import TransferProgress
from .config import PROGRESS_EMPTY, PROGRESS_FILLED, PROGRESS_LABEL, PROGRESS_MARGIN
from .models import StyledLine, StyledRun
from .themes import DEFAULT_THEME, ColorTheme


def bar_cells(completed: int, total: int, width: int) -> tuple[int, int]:
    """Number of filled and empty cells of a bar `width` cells wide.

    Scales by width / total and rounds each count down. Integer arithmetic
    keeps a finished transfer exactly `width` cells full.
    """
    if total <= 0 or width <= 0:
        return 0, 0
    filled = completed * width // total
    empty = max(total - completed, 0) * width // total
    return filled, empty


def make_overlay(
    progress: TransferProgress,
    panel_width: int,
    theme: ColorTheme = DEFAULT_THEME,
    margin: int = PROGRESS_MARGIN,
) -> StyledLine:
    """Build the "Sending: [###---]" line shown above the transcript.

    Args:
        progress: Completed and total amounts of the transfer
        panel_width: Full width of the transcript panel
        theme: Colors to use
        margin: Columns reserved for the label and brackets

    Returns:
        StyledLine with the label and the bar
    """
    width = max(panel_width - margin, 0)
    filled, empty = bar_cells(progress.completed, progress.total, width)
    bar = f"[{PROGRESS_FILLED * filled}{PROGRESS_EMPTY * empty}]"
    return StyledLine([
        StyledRun(PROGRESS_LABEL, theme.progress),
        StyledRun(bar, theme.progress),
    ])
