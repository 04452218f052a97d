"""Application state aggregate.

Owns the chat log, the user color table and the transient UI state that the
renderer reads once per frame. All mutation happens here; the renderer only
reads.
"""

from .models import ChatEntry, InputBuffer, SystemNotice, TransferProgress


class UserColorTable:
    """Assigns each remote user a stable small index on first sight.

    The index selects a display color from a fixed palette. The local user is
    never registered.
    """

    def __init__(self) -> None:
        self._ids: dict[str, int] = {}

    def register(self, user: str) -> int:
        """Return the user's index, assigning the next free one if unseen."""
        if user not in self._ids:
            self._ids[user] = len(self._ids)
        return self._ids[user]

    def get(self, user: str) -> int | None:
        return self._ids.get(user)

    def __contains__(self, user: object) -> bool:
        return user in self._ids

    def __len__(self) -> int:
        return len(self._ids)


class ApplicationState:
    """Snapshot of everything the renderer needs for one frame.

    Example:
        state = ApplicationState(local_user="alice")
        state.add_entry(ChatEntry(user="bob", kind=Connection()))
        state.input_write("h")
        draw(surface, state)
    """

    def __init__(self, local_user: str) -> None:
        self.local_user = local_user
        self._entries: list[ChatEntry] = []
        self._users = UserColorTable()
        self._input = InputBuffer()
        self._scroll = 0
        self._progress: TransferProgress | None = None

    # Read side, used by the renderer

    @property
    def entries(self) -> tuple[ChatEntry, ...]:
        return tuple(self._entries)

    @property
    def users(self) -> UserColorTable:
        return self._users

    @property
    def input(self) -> InputBuffer:
        return self._input

    @property
    def scroll_offset(self) -> int:
        return self._scroll

    @property
    def progress(self) -> TransferProgress | None:
        return self._progress

    # Write side, used by the session and input handling layers

    def add_entry(self, entry: ChatEntry) -> None:
        """Append an entry to the log, registering unseen remote users.

        System notices are colored by severity, so their author never takes
        a palette slot.
        """
        if entry.user != self.local_user and not isinstance(entry.kind, SystemNotice):
            self._users.register(entry.user)
        self._entries.append(entry)

    def input_write(self, char: str) -> None:
        """Insert characters at the cursor and move the cursor past them."""
        chars = self._input.chars
        pos = self._input.cursor
        chars[pos:pos] = list(char)
        self._input.cursor = pos + len(char)

    def input_remove(self) -> None:
        """Delete the character before the cursor (backspace)."""
        if self._input.cursor > 0:
            self._input.cursor -= 1
            del self._input.chars[self._input.cursor]

    def input_remove_previous_word(self) -> None:
        """Delete from the cursor back to the start of the previous word."""
        chars = self._input.chars
        pos = self._input.cursor
        start = pos
        while start > 0 and chars[start - 1] == " ":
            start -= 1
        while start > 0 and chars[start - 1] != " ":
            start -= 1
        del chars[start:pos]
        self._input.cursor = start

    def input_move_cursor_left(self) -> None:
        if self._input.cursor > 0:
            self._input.cursor -= 1

    def input_move_cursor_right(self) -> None:
        if self._input.cursor < len(self._input):
            self._input.cursor += 1

    def input_move_cursor_home(self) -> None:
        self._input.cursor = 0

    def input_move_cursor_end(self) -> None:
        self._input.cursor = len(self._input)

    def take_input(self) -> str:
        """Return the draft and reset the buffer."""
        text = self._input.text
        self._input = InputBuffer()
        return text

    def scroll_up(self, lines: int = 1) -> None:
        """Scroll further into the history, clamped to the log length.

        The transcript scrolls by wrapped rows, so with long lines the oldest
        rows may stay out of reach.
        """
        self._scroll = min(self._scroll + lines, len(self._entries))

    def scroll_down(self, lines: int = 1) -> None:
        self._scroll = max(self._scroll - lines, 0)

    def reset_scroll(self) -> None:
        self._scroll = 0

    def set_progress(self, completed: int, total: int) -> None:
        """Record transfer progress; raises ValueError on invalid values."""
        self._progress = TransferProgress(completed=completed, total=total)

    def clear_progress(self) -> None:
        self._progress = None
