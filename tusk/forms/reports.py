from dataclasses import dataclass

from ..entities.report import ReportCategory
from .base import Form


@dataclass
class AddReportRequest(Form):
    """Report an account (and optionally some of its statuses) to the moderators."""

    account_id: str
    status_ids: list[str] | None = None
    comment: str | None = None
    forward: bool | None = None
    category: ReportCategory | None = None
    rule_ids: list[str] | None = None
