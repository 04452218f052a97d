"""Tests for frame layout, drawing and surfaces."""
import io

import pytest

from lanchat.render import (
    ConsoleSurface,
    InputPanel,
    Rect,
    RenderConfig,
    RenderError,
    Renderer,
    TranscriptPanel,
    create_surface,
    draw,
    split_frame,
)


class TestSplitFrame:
    """Tests for the vertical split of the screen."""

    def test_fixed_input_height(self):
        """Test that the input region is six rows at the bottom."""
        transcript, input_area = split_frame(Rect(0, 0, 80, 24))

        assert transcript == Rect(0, 0, 80, 18)
        assert input_area == Rect(0, 18, 80, 6)

    def test_short_screen_gives_input_everything(self):
        """Test that the transcript shrinks to nothing on tiny screens."""
        transcript, input_area = split_frame(Rect(0, 0, 80, 4))

        assert transcript.height == 0
        assert transcript.is_empty
        assert input_area == Rect(0, 0, 80, 4)

    def test_offset_area(self):
        """Test that the split keeps the area's origin."""
        transcript, input_area = split_frame(Rect(3, 2, 10, 10), input_height=3)

        assert transcript == Rect(3, 2, 10, 7)
        assert input_area == Rect(3, 9, 10, 3)


class TestRenderer:
    """Tests for Renderer.draw."""

    def test_draws_both_panels(self, recording_surface, state):
        """Test that both regions are rendered and the frame is committed."""
        draw(recording_surface, state)

        (transcript, transcript_area), (input_panel, input_area) = recording_surface.rendered
        assert isinstance(transcript, TranscriptPanel)
        assert isinstance(input_panel, InputPanel)
        assert transcript_area == Rect(0, 0, 40, 14)
        assert input_area == Rect(0, 14, 40, 6)
        assert recording_surface.commits == 1

    def test_transcript_is_newest_first(self, recording_surface, state):
        """Test that the transcript starts with the latest entry."""
        draw(recording_surface, state)

        transcript = recording_surface.rendered[0][0]
        assert transcript.lines[0].plain.endswith("alice: hey bob")
        assert transcript.lines[-1].plain.endswith("bob is online")

    def test_progress_overlay(self, recording_surface, state):
        """Test that an active transfer adds the bar above the newest entry."""
        state.set_progress(3, 10)

        draw(recording_surface, state)

        transcript = recording_surface.rendered[0][0]
        assert transcript.lines[0].plain == "Sending: [######--------------]"

    def test_cursor_position(self, recording_surface, state):
        """Test that the cursor is placed inside the input border."""
        state.input_write("hello")

        draw(recording_surface, state)

        assert recording_surface.cursor == (6, 15)

    def test_cursor_on_wrapped_line(self, surface_factory, state):
        """Test the cursor on the second line of a wrapped draft."""
        surface = surface_factory(width=12, height=20)
        state.input_write("hello world!")

        draw(surface, state)

        assert surface.cursor == (3, 16)

    def test_scroll_offset_is_passed(self, recording_surface, state):
        """Test that the scroll offset reaches the transcript."""
        state.scroll_up(2)

        draw(recording_surface, state)

        assert recording_surface.rendered[0][0].scroll_offset == 2

    def test_custom_config(self, recording_surface, state):
        """Test that the input height and titles come from the config."""
        renderer = Renderer(RenderConfig(input_height=3, transcript_title="Room"))

        renderer.draw(recording_surface, state)

        (transcript, transcript_area), (_, input_area) = recording_surface.rendered
        assert transcript.title == "Room"
        assert input_area == Rect(0, 17, 40, 3)

    def test_debug_callback(self, recording_surface, state):
        """Test that frame tracing goes to the debug callback."""
        calls = []
        renderer = Renderer()
        renderer.set_debug_callback(lambda level, component, message: calls.append((level, component)))

        renderer.draw(recording_surface, state)

        assert ("debug", "Layout") in calls
        assert ("debug", "Transcript") in calls
        assert ("debug", "Input") in calls

    def test_commit_failure_raises_render_error(self, surface_factory, state):
        """Test that an I/O failure aborts the frame with RenderError."""
        surface = surface_factory(fail_with=OSError("terminal went away"))

        with pytest.raises(RenderError) as exc_info:
            draw(surface, state)

        assert isinstance(exc_info.value.__cause__, OSError)
        assert surface.discards == 1
        assert surface.commits == 0

    def test_render_error_propagates(self, surface_factory, state):
        """Test that a RenderError from the surface is re-raised as is."""
        error = RenderError("boom")
        surface = surface_factory(fail_with=error)

        with pytest.raises(RenderError) as exc_info:
            draw(surface, state)

        assert exc_info.value is error
        assert surface.discards == 1

    def test_draw_is_idempotent(self, surface_factory, state, make_console, render_rows):
        """Test that the same state renders the same frame twice."""
        first, second = surface_factory(), surface_factory()

        draw(first, state)
        draw(second, state)

        console = make_console()
        for (a, area), (b, _) in zip(first.rendered, second.rendered):
            assert render_rows(console, a, area.width, area.height) == render_rows(
                console, b, area.width, area.height
            )
        assert first.cursor == second.cursor

    def test_state_is_not_mutated(self, recording_surface, state):
        """Test that drawing leaves the state untouched."""
        state.input_write("draft")
        before = (state.entries, state.input.text, state.input.cursor, state.scroll_offset, len(state.users))

        draw(recording_surface, state)

        after = (state.entries, state.input.text, state.input.cursor, state.scroll_offset, len(state.users))
        assert before == after


class TestConsoleSurface:
    """Tests for the Rich console surface."""

    def test_full_frame(self, make_console, state):
        """Test that a frame is composed of both panels and a cursor."""
        surface = ConsoleSurface(make_console(width=40, height=12))
        state.input_write("hi")

        draw(surface, state)

        frame = surface.last_frame
        assert len(frame) == 12
        assert all(len(row) == 40 for row in frame)
        assert "LAN Room" in frame[0]
        assert frame[1].startswith("│07:05:03 alice: hey bob")
        assert frame[3].startswith("│07:05:03 bob is online")
        assert frame[5].startswith("└")
        assert "Your message" in frame[6]
        assert frame[7].startswith("│hi ")
        assert frame[11].startswith("└")
        assert surface.last_cursor == (3, 7)

    def test_writes_frame_to_console(self, make_console, state):
        """Test that the frame text reaches the console's file."""
        buffer = io.StringIO()
        surface = ConsoleSurface(make_console(width=40, height=12, file=buffer))

        draw(surface, state)

        assert "bob: hi alice" in buffer.getvalue()
        assert "Your message" in buffer.getvalue()

    def test_scrolled_frame(self, make_console, state):
        """Test that scrolling hides the newest rows."""
        surface = ConsoleSurface(make_console(width=40, height=12))
        state.scroll_up(1)

        draw(surface, state)

        assert surface.last_frame[1].startswith("│07:05:03 bob: hi alice")

    def test_pending_regions_are_cleared(self, make_console):
        """Test that committing twice does not redraw old regions."""
        surface = ConsoleSurface(make_console(width=10, height=3))
        surface.render(TranscriptPanel([]), Rect(0, 0, 10, 3))
        surface.commit()

        surface.commit()

        assert surface.last_frame == [" " * 10] * 3
        assert surface.last_cursor is None

    def test_io_failure_raises_render_error(self, make_console, state):
        """Test that a failing terminal write becomes a RenderError."""

        class BrokenFile(io.StringIO):
            def write(self, s):
                raise OSError(5, "Input/output error")

        surface = ConsoleSurface(make_console(width=40, height=12, file=BrokenFile()))

        with pytest.raises(RenderError) as exc_info:
            draw(surface, state)

        assert isinstance(exc_info.value.__cause__, OSError)
        assert surface.last_frame == []

    def test_factory(self, make_console):
        """Test creating a console surface via the factory."""
        console = make_console()

        surface = create_surface("console", console=console)

        assert isinstance(surface, ConsoleSurface)
        assert surface.area == Rect(0, 0, 40, 20)

    def test_factory_unknown_surface(self):
        """Test that unknown surface kinds are rejected."""
        with pytest.raises(ValueError, match="Unsupported surface"):
            create_surface("curses")
