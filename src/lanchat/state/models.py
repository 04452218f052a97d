"""Data models for the chat session state.

Hides the representation of chat log entries, transfer progress and the
unsent input draft.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Severity(str, Enum):
    """Severity of a local system notice."""

    INFO = "info"
    ERROR = "error"


class Connection(BaseModel):
    """A user joined the room."""

    model_config = ConfigDict(frozen=True)

    type: Literal["connection"] = "connection"


class Disconnection(BaseModel):
    """A user left the room."""

    model_config = ConfigDict(frozen=True)

    type: Literal["disconnection"] = "disconnection"


class Content(BaseModel):
    """A text message written by a user."""

    model_config = ConfigDict(frozen=True)

    type: Literal["content"] = "content"
    text: str


class SystemNotice(BaseModel):
    """A notice produced locally by the client itself."""

    model_config = ConfigDict(frozen=True)

    type: Literal["system_notice"] = "system_notice"
    text: str
    severity: Severity = Severity.INFO


MessageKind = Annotated[
    Connection | Disconnection | Content | SystemNotice,
    Field(discriminator="type"),
]


class ChatEntry(BaseModel):
    """One immutable record of the chat log."""

    model_config = ConfigDict(frozen=True)

    user: str = Field(description="Name of the user the entry belongs to")
    timestamp: datetime = Field(default_factory=datetime.now)
    kind: MessageKind


class TransferProgress(BaseModel):
    """Progress of an active outbound file transfer."""

    model_config = ConfigDict(frozen=True)

    completed: int = Field(ge=0, description="Bytes already sent")
    total: int = Field(gt=0, description="Total bytes to send")

    @model_validator(mode="after")
    def validate_completed(self) -> "TransferProgress":
        """Ensure completed <= total."""
        if self.completed > self.total:
            raise ValueError("completed must be <= total")
        return self


class InputBuffer(BaseModel):
    """The unsent draft message and its cursor offset."""

    chars: list[str] = Field(default_factory=list)
    cursor: int = Field(default=0, ge=0, description="Character index of the cursor")

    @model_validator(mode="after")
    def validate_cursor(self) -> "InputBuffer":
        """Ensure the cursor never points past the end of the draft."""
        if self.cursor > len(self.chars):
            raise ValueError("cursor must be <= input length")
        return self

    @classmethod
    def from_text(cls, text: str, cursor: int | None = None) -> "InputBuffer":
        """Build a buffer from a string, cursor at the end by default."""
        chars = list(text)
        return cls(chars=chars, cursor=len(chars) if cursor is None else cursor)

    @property
    def text(self) -> str:
        return "".join(self.chars)

    def __len__(self) -> int:
        return len(self.chars)
