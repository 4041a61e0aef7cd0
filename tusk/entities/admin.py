"""Entities returned by the admin API (`/api/v1/admin/...`)."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum

from ..utils import datetime_of_timestamp
from .account import Account, Role
from .base import Entity, converted
from .instance import DomainBlockSeverity, Rule
from .report import ReportCategory
from .status import Status
from .tag import Tag


@dataclass
class AdminIp(Entity):
    ip: str
    used_at: datetime


@dataclass
class AdminAccount(Entity):
    """An account with the details only moderators see."""

    id: str
    username: str
    created_at: datetime
    account: Account
    domain: str | None = None
    email: str = ""
    ip: str | None = None
    ips: list[AdminIp] = field(default_factory=list)
    locale: str | None = None
    invite_request: str | None = None
    role: Role | None = None
    confirmed: bool = False
    approved: bool = False
    disabled: bool = False
    silenced: bool = False
    suspended: bool = False
    created_by_application_id: str | None = None
    invited_by_account_id: str | None = None


@dataclass
class CanonicalEmailBlock(Entity):
    id: str
    canonical_email_hash: str


class CohortFrequency(str, Enum):
    DAY = "day"
    MONTH = "month"


@dataclass
class CohortData(Entity):
    date: datetime
    rate: float
    value: int


@dataclass
class Cohort(Entity):
    """Retention of users who signed up in one period."""

    period: datetime
    frequency: CohortFrequency
    data: list[CohortData] = field(default_factory=list)


@dataclass
class DimensionData(Entity):
    key: str
    human_key: str
    value: str
    unit: str | None = None
    human_value: str | None = None


@dataclass
class Dimension(Entity):
    key: str
    data: list[DimensionData] = field(default_factory=list)


@dataclass
class MeasureData(Entity):
    date: datetime
    value: int


@dataclass
class Measure(Entity):
    key: str
    total: int
    unit: str | None = None
    human_value: str | None = None
    previous_total: int | None = None
    data: list[MeasureData] = field(default_factory=list)


@dataclass
class DomainAllow(Entity):
    id: str
    domain: str
    created_at: datetime


@dataclass
class AdminDomainBlock(Entity):
    id: str
    domain: str
    created_at: datetime
    severity: DomainBlockSeverity
    reject_media: bool = False
    reject_reports: bool = False
    private_comment: str | None = None
    public_comment: str | None = None
    obfuscate: bool = False


def date_of_timestamp(timestamp):
    if timestamp is not None:
        return datetime_of_timestamp(timestamp).date()


def timestamp_of_date(value):
    if value is not None:
        return str(int(datetime(value.year, value.month, value.day, tzinfo=timezone.utc).timestamp()))


@dataclass
class EmailDomainBlockHistory(Entity):
    day: date = converted(date_of_timestamp, timestamp_of_date)
    accounts: int = 0
    uses: int = 0


@dataclass
class EmailDomainBlock(Entity):
    id: str
    domain: str
    created_at: datetime
    history: list[EmailDomainBlockHistory] = field(default_factory=list)


class IpBlockSeverity(str, Enum):
    SIGN_UP_REQUIRES_APPROVAL = "sign_up_requires_approval"
    SIGN_UP_BLOCK = "sign_up_block"
    NO_ACCESS = "no_access"


@dataclass
class IpBlock(Entity):
    id: str
    ip: str
    severity: IpBlockSeverity
    created_at: datetime
    comment: str = ""
    expires_at: datetime | None = None


@dataclass
class AdminReport(Entity):
    id: str
    created_at: datetime
    updated_at: datetime
    account: AdminAccount
    target_account: AdminAccount
    action_taken: bool = False
    action_taken_at: datetime | None = None
    category: ReportCategory = ReportCategory.OTHER
    comment: str = ""
    forwarded: bool = False
    assigned_account: AdminAccount | None = None
    action_taken_by_account: AdminAccount | None = None
    statuses: list[Status] = field(default_factory=list)
    rules: list[Rule] = field(default_factory=list)


@dataclass
class AdminTag(Entity):
    """Hashtag with its moderation settings."""

    tag: Tag
    id: str
    trendable: bool = False
    usable: bool = False
    requires_review: bool = False

    @classmethod
    def from_json(cls, obj):
        tag = Tag.from_json(obj)
        return cls(
            tag,
            obj["id"],
            trendable=obj.get("trendable", False),
            usable=obj.get("usable", False),
            requires_review=obj.get("requires_review", False),
        )

    def to_json(self):
        return {
            **self.tag.to_json(),
            "id": self.id,
            "trendable": self.trendable,
            "usable": self.usable,
            "requires_review": self.requires_review,
        }
