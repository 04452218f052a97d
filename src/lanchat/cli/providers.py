"""Provider factory functions for CLI.

Centralizes creation of the renderer, its debug log and the preview state
from environment variables. Hides configuration details from command
implementations.
"""

import os
import time
from datetime import datetime, timedelta
from typing import Any

from rich.console import Console
from rich.markup import escape

from ..render import LogLevel, RenderConfig, Renderer
from ..state import (
    ApplicationState,
    ChatEntry,
    Connection,
    Content,
    Disconnection,
    Severity,
    SystemNotice,
)

# Debug output goes to stderr so it never mixes with a frame
_console = Console(stderr=True)

_LEVEL_COLORS = {
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
}


def get_local_user() -> str:
    """Name of the local user.

    Environment variables:
        LANCHAT_USER: Local user name (default: $USER, then "me")
    """
    return os.getenv("LANCHAT_USER") or os.getenv("USER") or "me"


def get_render_config() -> RenderConfig:
    """Create renderer configuration from environment variables.

    Environment variables:
        LANCHAT_INPUT_HEIGHT: Input panel height in rows (default: 6)

    Raises:
        ValueError: If a variable holds an invalid value
    """
    input_height = os.getenv("LANCHAT_INPUT_HEIGHT")
    if input_height is None:
        return RenderConfig()
    return RenderConfig(input_height=int(input_height))


def get_debug_callback(level: str | None, console: Console | None = None) -> Any | None:
    """Create a debug callback printing trace lines at or above `level`.

    Args:
        level: Threshold name (debug, info, warning, error), or None to
               fall back to LANCHAT_LOG_LEVEL; no threshold disables tracing
        console: Optional Rich console for output

    Returns:
        Callable(level, component, message), or None when tracing is off
    """
    level = level or os.getenv("LANCHAT_LOG_LEVEL")
    if not level:
        return None

    con = console or _console
    threshold = LogLevel.from_string(level)

    def callback(level_str: str, component: str, message: str) -> None:
        msg_level = LogLevel.from_string(level_str)
        if msg_level < threshold:
            return
        color = _LEVEL_COLORS.get(msg_level, "white")
        timestamp = time.strftime("%H:%M:%S")
        con.print(
            f"[dim]{timestamp}[/dim] [{color}]{msg_level.name:<7}[/] "
            f"[bold]{escape(component)}[/bold] {escape(message)}"
        )

    return callback


def get_renderer(log_level: str | None = None, console: Console | None = None) -> Renderer:
    """Create a renderer configured from the environment."""
    renderer = Renderer(get_render_config())
    renderer.set_debug_callback(get_debug_callback(log_level, console))
    return renderer


def get_preview_state(
    local_user: str,
    draft: str = "",
    scroll: int = 0,
    progress: tuple[int, int] | None = None,
) -> ApplicationState:
    """Build a small sample conversation to preview the view with."""
    state = ApplicationState(local_user=local_user)
    start = datetime.now() - timedelta(minutes=5)

    def at(seconds: int) -> datetime:
        return start + timedelta(seconds=seconds)

    state.add_entry(ChatEntry(user="Termchat: ", timestamp=at(0), kind=SystemNotice(
        text="Listening on the LAN room", severity=Severity.INFO)))
    state.add_entry(ChatEntry(user="bob", timestamp=at(12), kind=Connection()))
    state.add_entry(ChatEntry(user="bob", timestamp=at(20), kind=Content(text="hi everyone!")))
    state.add_entry(ChatEntry(user="carol", timestamp=at(31), kind=Connection()))
    state.add_entry(ChatEntry(user=local_user, timestamp=at(45), kind=Content(
        text="?send ./holiday.png")))
    state.add_entry(ChatEntry(user="carol", timestamp=at(50), kind=Content(
        text="nice, send it over when you can")))
    state.add_entry(ChatEntry(user="Termchat: ", timestamp=at(61), kind=SystemNotice(
        text="carol could not receive the file", severity=Severity.ERROR)))
    state.add_entry(ChatEntry(user="bob", timestamp=at(70), kind=Disconnection()))

    state.input_write(draft)
    state.scroll_up(scroll)
    if progress is not None:
        state.set_progress(*progress)
    return state
