"""Rendering pipeline for the chat view.

Module structure (each module hides a design decision):
- models.py: Styled text and screen regions
- config.py: Layout constants and renderer tunables
- themes.py: Color palette
- parser.py: Inline command highlighting
- formatter.py: Chat entry -> styled line
- overlay.py: Transfer progress bar
- transcript.py: Scrollable transcript panel
- input_panel.py: Input panel and cursor placement
- layout.py: Division of the screen between panels
- surface/: Frame buffers the renderer writes to
- renderer.py: Per-frame orchestration
"""

from .config import LogLevel, RenderConfig
from .errors import RenderError
from .formatter import format_entry, user_color
from .input_panel import InputPanel, build_input, cursor_position, split_each
from .layout import split_frame
from .models import Rect, StyledLine, StyledRun
from .overlay import make_overlay
from .parser import parse_content
from .renderer import Renderer, draw
from .surface import ConsoleSurface, Surface, create_surface
from .themes import DEFAULT_THEME, ColorTheme
from .transcript import TranscriptPanel, build_transcript

__all__ = [
    "ColorTheme",
    "ConsoleSurface",
    "DEFAULT_THEME",
    "InputPanel",
    "LogLevel",
    "Rect",
    "RenderConfig",
    "RenderError",
    "Renderer",
    "StyledLine",
    "StyledRun",
    "Surface",
    "TranscriptPanel",
    "build_input",
    "build_transcript",
    "create_surface",
    "cursor_position",
    "draw",
    "format_entry",
    "make_overlay",
    "parse_content",
    "split_each",
    "split_frame",
    "user_color",
]
