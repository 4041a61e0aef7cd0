from dataclasses import dataclass
from enum import Enum

from .base import Entity


class RepliesPolicy(str, Enum):
    """Which replies are shown in a list."""

    FOLLOWED = "followed"
    LIST = "list"
    NONE = "none"


@dataclass
class List(Entity):
    id: str
    title: str
    replies_policy: RepliesPolicy = RepliesPolicy.LIST
