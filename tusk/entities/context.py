from dataclasses import dataclass, field

from .account import Account
from .base import Entity
from .status import Status


@dataclass
class Context(Entity):
    """The thread around a status."""

    ancestors: list[Status] = field(default_factory=list)
    descendants: list[Status] = field(default_factory=list)


@dataclass
class Conversation(Entity):
    """A thread of direct messages."""

    id: str
    unread: bool = False
    accounts: list[Account] = field(default_factory=list)
    last_status: Status | None = None
