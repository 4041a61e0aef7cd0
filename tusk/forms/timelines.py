"""Paging and filtering parameters for timelines."""

from dataclasses import dataclass

from .base import Form


@dataclass
class HomeTimelineRequest(Form):
    max_id: str | None = None
    since_id: str | None = None
    min_id: str | None = None
    limit: int | None = None


@dataclass
class ListTimelineRequest(HomeTimelineRequest):
    pass


@dataclass
class PublicTimelineRequest(HomeTimelineRequest):
    local: bool | None = None
    remote: bool | None = None
    only_media: bool | None = None


@dataclass
class HashtagTimelineRequest(PublicTimelineRequest):
    """Statuses with a hashtag, optionally combined with others.

    Each of `any`, `all` and `none` is a list of extra tag names.
    """

    any: list[str] | None = None
    all: list[str] | None = None
    none: list[str] | None = None
