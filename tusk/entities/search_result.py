from dataclasses import dataclass, field

from .account import Account
from .base import Entity
from .status import Status
from .tag import Tag


@dataclass
class SearchResult(Entity):
    accounts: list[Account] = field(default_factory=list)
    statuses: list[Status] = field(default_factory=list)
    hashtags: list[Tag] = field(default_factory=list)
