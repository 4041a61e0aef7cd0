from dataclasses import dataclass, field
from datetime import datetime

from .base import Entity
from .custom_emoji import CustomEmoji
from .tag import Tag


@dataclass
class AnnouncementAccount(Entity):
    id: str
    username: str
    url: str
    acct: str


@dataclass
class AnnouncementStatus(Entity):
    id: str
    url: str


@dataclass
class Reaction(Entity):
    """Emoji reaction to an announcement."""

    name: str
    count: int
    me: bool | None = None
    url: str | None = None
    static_url: str | None = None


@dataclass
class Announcement(Entity):
    """Announcement set by an administrator."""

    id: str
    content: str
    published_at: datetime
    updated_at: datetime
    starts_at: datetime | None = None
    ends_at: datetime | None = None
    all_day: bool = False
    read: bool = False
    mentions: list[AnnouncementAccount] = field(default_factory=list)
    statuses: list[AnnouncementStatus] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)
    emojis: list[CustomEmoji] = field(default_factory=list)
    reactions: list[Reaction] = field(default_factory=list)
