"""Hashtags."""

from dataclasses import dataclass, field

from .base import Entity


@dataclass
class TagHistory(Entity):
    """Daily use of a hashtag. Mastodon sends the numbers as strings."""

    day: str
    uses: int
    accounts: int


@dataclass
class Tag(Entity):
    name: str
    url: str
    history: list[TagHistory] = field(default_factory=list)
    following: bool | None = None


@dataclass
class FeaturedTag(Entity):
    """Hashtag shown on a profile."""

    id: str
    name: str
    url: str
    statuses_count: int = 0
    last_status_at: str | None = None
