"""Chat entry formatting.

Hides how a chat log entry becomes a single styled display line: the
timestamp prefix, the color chosen for the user and the per-kind layout.
"""

from ..state import (
    ChatEntry,
    Connection,
    Content,
    Disconnection,
    SystemNotice,
    UserColorTable,
)
from .config import TIMESTAMP_FORMAT
from .models import StyledLine, StyledRun
from .parser import parse_content
from .themes import DEFAULT_THEME, ColorTheme


def user_color(
    user: str,
    color_table: UserColorTable,
    local_user: str | None,
    theme: ColorTheme = DEFAULT_THEME,
) -> str:
    """Pick the display color of a user.

    The local user is never in the color table and always gets the reserved
    color; so does any user the table has not seen.
    """
    if user == local_user:
        return theme.local_user
    index = color_table.get(user)
    if index is None:
        return theme.local_user
    return theme.user_color(index)


def format_entry(
    entry: ChatEntry,
    color_table: UserColorTable,
    local_user: str | None,
    theme: ColorTheme = DEFAULT_THEME,
    timestamp_format: str = TIMESTAMP_FORMAT,
) -> StyledLine:
    """Format one chat entry as a styled line.

    Args:
        entry: The chat log entry
        color_table: Read-only user -> palette index mapping
        local_user: Name of the user running this client
        theme: Colors to use
        timestamp_format: strftime format of the leading timestamp

    Returns:
        StyledLine starting with the timestamp run
    """
    runs = [StyledRun(entry.timestamp.strftime(timestamp_format), theme.timestamp)]
    kind = entry.kind

    if isinstance(kind, SystemNotice):
        name_color, body_color = theme.notice_colors(kind.severity)
        runs.append(StyledRun(entry.user, name_color))
        runs.append(StyledRun(kind.text, body_color))
        return StyledLine(runs)

    color = user_color(entry.user, color_table, local_user, theme)
    runs.append(StyledRun(entry.user, color))

    if isinstance(kind, Connection):
        runs.append(StyledRun(" is online", color))
    elif isinstance(kind, Disconnection):
        runs.append(StyledRun(" is offline", color))
    elif isinstance(kind, Content):
        runs.append(StyledRun(": ", color))
        runs.extend(parse_content(kind.text, theme))
    else:
        raise TypeError(f"Unsupported message kind: {type(kind).__name__}")

    return StyledLine(runs)
