"""Inline command highlighting for message content."""

from .config import RECOGNIZED_COMMANDS
from .models import StyledRun
from .themes import DEFAULT_THEME, ColorTheme


def _highlight_command(content: str, command: str, style: str) -> list[StyledRun]:
    # Only the first occurrence is special; the rest stays verbatim.
    _, remainder = content.split(command, 1)
    return [StyledRun(command, style), StyledRun(remainder)]


def parse_content(
    content: str,
    theme: ColorTheme = DEFAULT_THEME,
    commands: tuple[str, ...] = RECOGNIZED_COMMANDS,
) -> list[StyledRun]:
    """Split message content into styled runs.

    Content starting with a recognized command (e.g. "?send") yields the
    command in the highlight color followed by the rest of the text.
    Anything else yields a single unstyled run.

    Args:
        content: Raw message text
        theme: Colors to use for the command highlight
        commands: Command tokens recognized at the start of the content

    Returns:
        One or two runs; never empty
    """
    for command in commands:
        if content.startswith(command):
            return _highlight_command(content, command, theme.command)
    return [StyledRun(content)]
