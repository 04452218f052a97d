"""Frame layout: how the screen is divided between the two panels."""

from .config import INPUT_PANEL_HEIGHT
from .models import Rect


def split_frame(area: Rect, input_height: int = INPUT_PANEL_HEIGHT) -> tuple[Rect, Rect]:
    """Split the frame into (transcript, input) regions, stacked vertically.

    The input region has a fixed height at the bottom; the transcript takes
    whatever is left, possibly nothing. On screens shorter than the input
    height the input region gets the whole height.
    """
    input_rows = min(max(input_height, 0), max(area.height, 0))
    transcript_rows = max(area.height - input_rows, 0)
    transcript = Rect(area.x, area.y, area.width, transcript_rows)
    input_area = Rect(area.x, area.y + transcript_rows, area.width, input_rows)
    return transcript, input_area
