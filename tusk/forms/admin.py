"""Bodies of admin API calls."""

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

from ..entities.admin import IpBlockSeverity
from ..entities.base import renamed
from ..entities.instance import DomainBlockSeverity
from ..entities.report import ReportCategory
from ..errors import BuilderError
from .base import Form


class AccountAction(str, Enum):
    NONE = "none"
    SENSITIVE = "sensitive"
    DISABLE = "disable"
    SILENCE = "silence"
    SUSPEND = "suspend"


@dataclass
class AccountActionRequest(Form):
    """Moderate an account, optionally resolving a report."""

    action: AccountAction = renamed("type", default=AccountAction.NONE)
    report_id: str | None = None
    warning_preset_id: str | None = None
    text: str | None = None
    send_email_notification: bool | None = None


@dataclass
class AddCanonicalEmailBlockRequest(Form):
    """Block an e-mail address, given either as an address or as its hash.

    The hash is given as bytes and sent as hexadecimal.
    """

    email: str | None = None
    canonical_email_hash: bytes | None = None

    def __post_init__(self):
        if (self.email is None) == (self.canonical_email_hash is None):
            raise BuilderError("one of email or canonical_email_hash is required")

    def to_json(self):
        if self.email is not None:
            return {"email": self.email}
        return {"canonical_email_hash": self.canonical_email_hash.hex()}


@dataclass
class CanonicalEmailBlocksTestRequest(Form):
    email: str


@dataclass
class AddDomainAllowRequest(Form):
    domain: str


@dataclass
class AddDomainBlockRequest(Form):
    domain: str
    severity: DomainBlockSeverity | None = None
    reject_media: bool | None = None
    reject_reports: bool | None = None
    private_comment: str | None = None
    public_comment: str | None = None
    obfuscate: bool | None = None


@dataclass
class AddEmailDomainBlockRequest(Form):
    domain: str


@dataclass
class AddIpBlockRequest(Form):
    """Block an address or CIDR range. `expires_in` is sent in seconds."""

    severity: IpBlockSeverity
    ip: str | None = None
    comment: str | None = None
    expires_in: timedelta | None = None


@dataclass
class UpdateIpBlockRequest(Form):
    severity: IpBlockSeverity | None = None
    ip: str | None = None
    comment: str | None = None
    expires_in: timedelta | None = None


@dataclass
class UpdateReportRequest(Form):
    category: ReportCategory | None = None
    rule_ids: list[str] | None = None
