"""Data models for the renderer.

Hides the representation of styled text and screen regions.
"""

from dataclasses import dataclass, field

from rich.text import Text


@dataclass(frozen=True)
class StyledRun:
    """A span of text with a Rich style ("" means unstyled)."""

    text: str
    style: str = ""


@dataclass
class StyledLine:
    """One display record: an ordered sequence of runs."""

    runs: list[StyledRun] = field(default_factory=list)

    @property
    def plain(self) -> str:
        return "".join(run.text for run in self.runs)

    def to_text(self) -> Text:
        """Convert to a Rich Text, one span per styled run."""
        return Text.assemble(*((run.text, run.style) for run in self.runs))


@dataclass(frozen=True)
class Rect:
    """A rectangular screen region in cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0
