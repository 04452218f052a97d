"""Main CLI application using Typer."""
import io

import typer
from dotenv import load_dotenv
from rich.console import Console

from .. import __version__
from ..render import RenderError, create_surface
from .providers import get_local_user, get_preview_state, get_renderer

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="lanchat",
    help="Terminal view renderer for a LAN chat client",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


def _parse_progress(value: str | None) -> tuple[int, int] | None:
    if value is None:
        return None
    try:
        completed, total = (int(part) for part in value.split("/", 1))
    except ValueError:
        raise typer.BadParameter("expected COMPLETED/TOTAL, e.g. 3/10") from None
    return completed, total


@app.command()
def preview(
    width: int = typer.Option(
        80,
        "--width",
        "-w",
        min=1,
        help="Frame width in columns"
    ),
    height: int = typer.Option(
        20,
        "--height",
        min=1,
        help="Frame height in rows"
    ),
    user: str | None = typer.Option(
        None,
        "--user",
        "-u",
        help="Local user name (default: $LANCHAT_USER)"
    ),
    draft: str = typer.Option(
        "",
        "--draft",
        "-d",
        help="Unsent text shown in the input panel"
    ),
    scroll: int = typer.Option(
        0,
        "--scroll",
        "-s",
        min=0,
        help="Lines to scroll the transcript up"
    ),
    progress: str | None = typer.Option(
        None,
        "--progress",
        "-p",
        help="Show a transfer progress bar, as COMPLETED/TOTAL"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Trace rendering at this level (debug, info, warning, error)"
    ),
):
    """Render one frame of a sample conversation."""
    local_user = user or get_local_user()
    try:
        state = get_preview_state(
            local_user,
            draft=draft,
            scroll=scroll,
            progress=_parse_progress(progress),
        )
        renderer = get_renderer(log_level)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    buffer = io.StringIO()
    frame_console = Console(
        file=buffer,
        width=width,
        height=height,
        color_system=console.color_system,
        legacy_windows=False,
    )
    surface = create_surface("console", console=frame_console)

    try:
        renderer.draw(surface, state)
    except RenderError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    typer.echo(buffer.getvalue())
    if surface.last_cursor is not None:
        x, y = surface.last_cursor
        console.print(f"[dim]Cursor at column {x}, row {y}[/dim]")


@app.command()
def version():
    """Show the installed version."""
    console.print(f"lanchat {__version__}")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
