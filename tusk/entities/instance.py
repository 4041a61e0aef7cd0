"""Information about the instance itself.

`Instance` is what `/api/v2/instance` returns; `InstanceV1` is the older
`/api/v1/instance` form, which is laid out differently.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .account import Account
from .base import Entity, renamed


@dataclass
class Rule(Entity):
    id: str
    text: str


class DomainBlockSeverity(str, Enum):
    SILENCE = "silence"
    SUSPEND = "suspend"
    NOOP = "noop"


@dataclass
class DomainBlock(Entity):
    """Domain blocked by the instance, as shown to the public."""

    domain: str
    digest: str
    severity: DomainBlockSeverity
    comment: str | None = None


@dataclass
class Activity(Entity):
    """Weekly use of the instance. The counts arrive as strings."""

    week: str
    statuses: int
    logins: int
    registrations: int


@dataclass
class ExtendedDescription(Entity):
    updated_at: datetime
    content: str


@dataclass
class AccountsConfiguration(Entity):
    max_featured_tags: int | None = None


@dataclass
class StatusesConfiguration(Entity):
    max_characters: int = 500
    max_media_attachments: int = 4
    characters_reserved_per_url: int = 23


@dataclass
class MediaAttachmentsConfiguration(Entity):
    supported_mime_types: list[str] = field(default_factory=list)
    image_size_limit: int | None = None
    image_matrix_limit: int | None = None
    video_size_limit: int | None = None
    video_frame_rate_limit: int | None = None
    video_matrix_limit: int | None = None


@dataclass
class PollsConfiguration(Entity):
    max_options: int | None = None
    max_characters_per_option: int | None = None
    min_expiration: int | None = None
    max_expiration: int | None = None


@dataclass
class UrlsConfiguration(Entity):
    streaming: str | None = None


@dataclass
class TranslationConfiguration(Entity):
    enabled: bool = False


@dataclass
class Configuration(Entity):
    urls: UrlsConfiguration | None = None
    accounts: AccountsConfiguration | None = None
    statuses: StatusesConfiguration = field(default_factory=StatusesConfiguration)
    media_attachments: MediaAttachmentsConfiguration = field(default_factory=MediaAttachmentsConfiguration)
    polls: PollsConfiguration | None = None
    translation: TranslationConfiguration | None = None


@dataclass
class Users(Entity):
    active_month: int = 0


@dataclass
class Usage(Entity):
    users: Users = field(default_factory=Users)


@dataclass
class ThumbnailVersions(Entity):
    at_1x: str | None = renamed("@1x", default=None)
    at_2x: str | None = renamed("@2x", default=None)


@dataclass
class Thumbnail(Entity):
    url: str
    blurhash: str | None = None
    versions: ThumbnailVersions | None = None


@dataclass
class Registrations(Entity):
    enabled: bool = False
    approval_required: bool = False
    message: str | None = None


@dataclass
class Contact(Entity):
    email: str = ""
    account: Account | None = None


@dataclass
class Instance(Entity):
    domain: str
    title: str
    version: str
    source_url: str = ""
    description: str = ""
    usage: Usage = field(default_factory=Usage)
    thumbnail: Thumbnail | None = None
    languages: list[str] = field(default_factory=list)
    configuration: Configuration = field(default_factory=Configuration)
    registrations: Registrations = field(default_factory=Registrations)
    contact: Contact = field(default_factory=Contact)
    rules: list[Rule] = field(default_factory=list)


@dataclass
class Stats(Entity):
    user_count: int = 0
    status_count: int = 0
    domain_count: int = 0


@dataclass
class InstanceV1Urls(Entity):
    streaming_api: str


@dataclass
class InstanceV1(Entity):
    uri: str
    title: str
    version: str
    description: str = ""
    short_description: str = ""
    email: str = ""
    urls: InstanceV1Urls | None = None
    stats: Stats | None = None
    thumbnail: str | None = None
    languages: list[str] | None = None
    registrations: bool = False
    approval_required: bool = False
    contact_account: Account | None = None
    rules: list[Rule] = field(default_factory=list)
    configuration: Configuration | None = None
