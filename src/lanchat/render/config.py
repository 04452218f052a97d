"""Renderer configuration constants.

Centralizes magic numbers and configuration values for the render module.
"""

from enum import IntEnum

from pydantic import BaseModel, Field


class LogLevel(IntEnum):
    """Threshold of the renderer trace; a message shows when its level >= the threshold."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """Parse a level name case-insensitively. Unknown names mean DEBUG."""
        return cls.__members__.get(level_str.upper(), cls.DEBUG)


# Message line configuration
TIMESTAMP_FORMAT = "%H:%M:%S "  # 24-hour clock, trailing space separates the user

# Inline commands highlighted at the start of a message
SEND_COMMAND = "?send"
RECOGNIZED_COMMANDS = (SEND_COMMAND,)

# Progress overlay configuration
PROGRESS_MARGIN = 20  # Columns reserved for the label and brackets
PROGRESS_LABEL = "Sending: "
PROGRESS_FILLED = "#"
PROGRESS_EMPTY = "-"

# Panel configuration
INPUT_PANEL_HEIGHT = 6  # Rows, borders included
PANEL_BORDER = 1  # Columns/rows taken by the border on each side
TRANSCRIPT_TITLE = "LAN Room"
INPUT_TITLE = "Your message"


class RenderConfig(BaseModel):
    """Tunables for one renderer."""

    input_height: int = Field(
        default=INPUT_PANEL_HEIGHT,
        ge=1,
        description="Height of the input panel in rows"
    )
    progress_margin: int = Field(
        default=PROGRESS_MARGIN,
        ge=0,
        description="Columns of the transcript width not used by the progress bar"
    )
    timestamp_format: str = Field(
        default=TIMESTAMP_FORMAT,
        description="strftime format of the timestamp prefix"
    )
    transcript_title: str = Field(default=TRANSCRIPT_TITLE)
    input_title: str = Field(default=INPUT_TITLE)
