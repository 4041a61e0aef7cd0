"""Statuses (toots) and the things embedded in them."""

from dataclasses import dataclass, field
from datetime import datetime

from .account import Account
from .application import Application
from .attachment import Attachment
from .base import Entity
from .card import Card
from .custom_emoji import CustomEmoji
from .filter import FilterResult
from .tag import Tag
from .visibility import Visibility


@dataclass
class Mention(Entity):
    id: str
    username: str
    acct: str
    url: str


@dataclass
class PollOption(Entity):
    title: str
    votes_count: int | None = None


@dataclass
class Poll(Entity):
    id: str
    expired: bool = False
    multiple: bool = False
    votes_count: int = 0
    voters_count: int | None = None
    expires_at: datetime | None = None
    options: list[PollOption] = field(default_factory=list)
    emojis: list[CustomEmoji] = field(default_factory=list)
    voted: bool | None = None
    own_votes: list[int] = field(default_factory=list)


@dataclass
class Status(Entity):
    id: str
    uri: str
    created_at: datetime
    account: Account
    content: str = ""
    url: str | None = None
    in_reply_to_id: str | None = None
    in_reply_to_account_id: str | None = None
    reblog: "Status | None" = None
    edited_at: datetime | None = None
    visibility: Visibility = Visibility.PUBLIC
    sensitive: bool = False
    spoiler_text: str = ""
    media_attachments: list[Attachment] = field(default_factory=list)
    application: Application | None = None
    mentions: list[Mention] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)
    emojis: list[CustomEmoji] = field(default_factory=list)
    replies_count: int = 0
    reblogs_count: int = 0
    favourites_count: int = 0
    poll: Poll | None = None
    card: Card | None = None
    language: str | None = None
    text: str | None = None
    favourited: bool | None = None
    reblogged: bool | None = None
    muted: bool | None = None
    bookmarked: bool | None = None
    pinned: bool | None = None
    filtered: list[FilterResult] = field(default_factory=list)


@dataclass
class PollEditOption(Entity):
    title: str


@dataclass
class PollEdit(Entity):
    options: list[PollEditOption] = field(default_factory=list)


@dataclass
class StatusEdit(Entity):
    """One revision of a status."""

    content: str
    created_at: datetime
    account: Account
    spoiler_text: str = ""
    sensitive: bool = False
    poll: PollEdit | None = None
    media_attachments: list[Attachment] = field(default_factory=list)
    emojis: list[CustomEmoji] = field(default_factory=list)


@dataclass
class StatusSource(Entity):
    """Plain text of a status, for editing."""

    id: str
    text: str
    spoiler_text: str = ""


@dataclass
class ScheduledPoll(Entity):
    options: list[str]
    expires_in: int
    multiple: bool | None = None
    hide_totals: bool | None = None


@dataclass
class ScheduledParams(Entity):
    text: str
    poll: ScheduledPoll | None = None
    media_ids: list[str] | None = None
    sensitive: bool | None = None
    spoiler_text: str | None = None
    visibility: Visibility | None = None
    in_reply_to_id: str | None = None
    language: str | None = None
    application_id: str | None = None
    idempotency: str | None = None
    with_rate_limit: bool = False


@dataclass
class ScheduledStatus(Entity):
    """A status that will be posted later."""

    id: str
    scheduled_at: datetime
    params: ScheduledParams
    media_attachments: list[Attachment] = field(default_factory=list)
