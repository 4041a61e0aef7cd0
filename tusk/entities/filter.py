"""Filters that hide or warn about statuses."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .base import Entity


class FilterContext(str, Enum):
    """Where a filter applies."""

    HOME = "home"
    NOTIFICATIONS = "notifications"
    PUBLIC = "public"
    THREAD = "thread"
    ACCOUNT = "account"


class FilterAction(str, Enum):
    """What to do with a status matching a filter."""

    WARN = "warn"
    HIDE = "hide"

    @classmethod
    def _missing_(cls, value):
        # Anything we do not know how to hide gets a warning.
        return cls.WARN


@dataclass
class FilterKeyword(Entity):
    id: str
    keyword: str
    whole_word: bool = False


@dataclass
class FilterStatus(Entity):
    """A status that, if matched, triggers the filter."""

    id: str
    status_id: str


@dataclass
class Filter(Entity):
    """A filter as returned by the v2 filters API."""

    id: str
    title: str
    context: list[FilterContext] = field(default_factory=list)
    expires_at: datetime | None = None
    filter_action: FilterAction = FilterAction.WARN
    keywords: list[FilterKeyword] = field(default_factory=list)
    statuses: list[FilterStatus] = field(default_factory=list)


@dataclass
class FilterV1(Entity):
    """A filter as returned by the older v1 filters API."""

    id: str
    phrase: str
    context: list[FilterContext] = field(default_factory=list)
    expires_at: datetime | None = None
    irreversible: bool = False
    whole_word: bool = False


@dataclass
class FilterResult(Entity):
    """Why a status in a timeline matched a filter."""

    filter: Filter
    keyword_matches: list[str] | None = None
    status_matches: list[str] | None = None
