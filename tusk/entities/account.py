"""Accounts: users on this or another instance."""

from dataclasses import dataclass, field
from datetime import datetime

from .base import Entity, renamed
from .custom_emoji import CustomEmoji
from .visibility import Visibility


@dataclass
class MetadataField(Entity):
    """Name and value pair shown in a profile."""

    name: str
    value: str
    verified_at: datetime | None = None


@dataclass
class Source(Entity):
    """Account details visible only to the owner, in plain text."""

    privacy: Visibility | None = None
    sensitive: bool = False
    note: str | None = None
    fields: list[MetadataField] | None = None
    language: str | None = None
    follow_requests_count: int = 0


@dataclass
class Role(Entity):
    id: str
    name: str
    color: str = ""
    permissions: int = 0
    highlighted: bool = False
    position: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    # Bits of `permissions`.
    ADMINISTRATOR = 0x1
    DEVOPS = 0x2
    VIEW_AUDIT_LOG = 0x4
    VIEW_DASHBOARD = 0x8
    MANAGE_REPORTS = 0x10
    MANAGE_FEDERATION = 0x20
    MANAGE_SETTINGS = 0x40
    MANAGE_BLOCKS = 0x80
    MANAGE_TAXONOMIES = 0x100
    MANAGE_APPEALS = 0x200
    MANAGE_USERS = 0x400
    MANAGE_INVITES = 0x800
    MANAGE_RULES = 0x1000
    MANAGE_ANNOUNCEMENTS = 0x2000
    MANAGE_CUSTOM_EMOJIS = 0x4000
    MANAGE_WEBHOOKS = 0x8000
    INVITE_USERS = 0x10000
    MANAGE_ROLES = 0x20000
    MANAGE_USER_ACCESS = 0x40000
    DELETE_USER_DATA = 0x80000

    def has_permission(self, bit):
        return bool(self.permissions & (bit | self.ADMINISTRATOR))


@dataclass
class Account(Entity):
    """A Mastodon user.

    `acct` is the user name for local users and `user@domain` for remote ones.
    """

    id: str
    username: str
    acct: str
    url: str
    display_name: str = ""
    note: str = ""
    avatar: str = ""
    avatar_static: str = ""
    header: str = ""
    header_static: str = ""
    locked: bool = False
    bot: bool | None = None
    group: bool = False
    discoverable: bool | None = None
    no_index: bool | None = renamed("noindex", default=None)
    limited: bool = False
    suspended: bool = False
    created_at: datetime | None = None
    last_status_at: str | None = None
    statuses_count: int = 0
    followers_count: int = 0
    following_count: int = 0
    emojis: list[CustomEmoji] = field(default_factory=list)
    fields: list[MetadataField] = field(default_factory=list)
    moved: "Account | None" = None
    source: Source | None = None
    role: Role | None = None

    def __str__(self):
        return f"@{self.acct}"


@dataclass
class CredentialAccount(Account):
    """The account of the user we are authenticated as."""
