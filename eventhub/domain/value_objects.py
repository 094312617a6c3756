"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self
from uuid import uuid4


class Role(Enum):
    """Role issued to a user by the authentication provider."""

    MEMBER = "member"
    ADMIN = "admin"


class Mode(Enum):
    """View mode of a session. Only admins may switch to ADMIN."""

    MEMBER = "member"
    ADMIN = "admin"

    def flipped(self) -> "Mode":
        return Mode.MEMBER if self is Mode.ADMIN else Mode.ADMIN


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("EventId cannot be blank")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=value.strip())

    def __str__(self) -> str:
        return self.value


def new_event_id() -> str:
    """Default id generator: a random UUID4 string."""
    return str(uuid4())
