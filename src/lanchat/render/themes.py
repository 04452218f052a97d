"""Color definitions for the renderer.

This module hides the design decisions about:
- The palette remote users are drawn from
- The reserved color of the local user
- Accent colors for timestamps, commands, notices and the progress bar

Colors are Rich color names. To change the look, define another ColorTheme
here and pass it to the renderer.
"""

from pydantic import BaseModel, ConfigDict, Field

from ..state import Severity


class ColorTheme(BaseModel):
    """Colors used by the message formatter and panels."""

    model_config = ConfigDict(frozen=True)

    # Remote users cycle through the palette by color table index
    user_palette: tuple[str, ...] = Field(
        default=("blue", "yellow", "cyan", "magenta"),
        min_length=1,
    )
    local_user: str = "green"
    timestamp: str = "bright_black"
    command: str = "bright_yellow"
    progress: str = "bright_green"
    panel: str = "white"

    # (name color, body color) per notice severity
    notice_info: tuple[str, str] = ("yellow", "bright_yellow")
    notice_error: tuple[str, str] = ("red", "bright_red")

    def user_color(self, index: int) -> str:
        """Palette color for a color table index."""
        return self.user_palette[index % len(self.user_palette)]

    def notice_colors(self, severity: Severity) -> tuple[str, str]:
        if severity is Severity.ERROR:
            return self.notice_error
        return self.notice_info


DEFAULT_THEME = ColorTheme()
