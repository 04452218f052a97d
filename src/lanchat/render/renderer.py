"""Frame renderer: the single entry point called once per redraw tick.

Splits the surface into the transcript and input regions, builds both
panels from the current state and commits them with the cursor in one
all-or-nothing pass. Nothing is kept between frames.
"""

from typing import Any

from ..state import ApplicationState
from .config import RenderConfig
from .errors import RenderError
from .input_panel import build_input
from .layout import split_frame
from .surface import Surface
from .themes import DEFAULT_THEME, ColorTheme
from .transcript import build_transcript


class Renderer:
    """Draws ApplicationState snapshots onto a surface."""

    def __init__(
        self,
        config: RenderConfig | None = None,
        theme: ColorTheme = DEFAULT_THEME,
    ) -> None:
        self._config = config or RenderConfig()
        self._theme = theme
        self._debug_callback: Any | None = None

    @property
    def config(self) -> RenderConfig:
        return self._config

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for frame tracing.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
                      component: Source component name
                      message: Log message
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    def draw(self, surface: Surface, state: ApplicationState) -> None:
        """Draw one frame.

        Args:
            surface: Target surface, sized to the terminal
            state: Snapshot to draw; read only

        Raises:
            RenderError: If the frame cannot be written to the surface
        """
        config = self._config
        area = surface.area
        transcript_area, input_area = split_frame(area, config.input_height)
        self._debug(
            "debug",
            "Layout",
            f"Frame {area.width}x{area.height}: transcript {transcript_area.height} rows, "
            f"input {input_area.height} rows",
        )

        entries = state.entries
        transcript = build_transcript(
            entries,
            state.users,
            state.local_user,
            state.progress,
            state.scroll_offset,
            transcript_area.width,
            theme=self._theme,
            title=config.transcript_title,
            timestamp_format=config.timestamp_format,
            progress_margin=config.progress_margin,
        )
        self._debug(
            "debug",
            "Transcript",
            f"{len(entries)} entries, {len(transcript.lines)} lines, scroll {transcript.scroll_offset}",
        )

        input_panel = build_input(
            state.input,
            input_area.width,
            title=config.input_title,
            style=self._theme.panel,
        )
        self._debug(
            "debug",
            "Input",
            f"{len(input_panel.lines)} lines, cursor at row {input_panel.cursor_row} "
            f"col {input_panel.cursor_col}",
        )

        try:
            surface.render(transcript, transcript_area)
            surface.render(input_panel, input_area)
            if not input_area.is_empty:
                surface.set_cursor(*input_panel.screen_cursor(input_area))
            surface.commit()
        except RenderError as e:
            self._debug("error", "Surface", str(e))
            surface.discard()
            raise
        except OSError as e:
            self._debug("error", "Surface", str(e))
            surface.discard()
            raise RenderError(str(e), stage="render") from e


def draw(
    surface: Surface,
    state: ApplicationState,
    config: RenderConfig | None = None,
) -> None:
    """Draw one frame of `state` onto `surface` with a default renderer.

    Raises:
        RenderError: If the frame cannot be written to the surface
    """
    Renderer(config).draw(surface, state)
