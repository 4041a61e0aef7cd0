"""Parameters for posting statuses and for listing an account's statuses."""

from dataclasses import dataclass, replace
from datetime import datetime

from ..entities.visibility import Visibility
from ..errors import BuilderError
from .base import Form, flag


@dataclass
class StatusesRequest(Form):
    """Which of an account's statuses to list.

        StatusesRequest(only_media=True, limit=10)
    """

    only_media: bool = flag()
    exclude_replies: bool = flag()
    pinned: bool = flag()
    exclude_reblogs: bool = flag()
    max_id: str | None = None
    since_id: str | None = None
    min_id: str | None = None
    limit: int | None = None
    tagged: str | None = None


@dataclass
class NewPoll(Form):
    options: list[str]
    expires_in: int
    multiple: bool | None = None
    hide_totals: bool | None = None


@dataclass
class NewStatus(Form):
    """Body of a request to post (or edit) a status. Created with `StatusBuilder`."""

    status: str | None = None
    in_reply_to_id: str | None = None
    media_ids: list[str] | None = None
    sensitive: bool | None = None
    spoiler_text: str | None = None
    visibility: Visibility | None = None
    language: str | None = None
    content_type: str | None = None
    scheduled_at: datetime | None = None
    poll: NewPoll | None = None


class StatusBuilder:
    """Assemble a `NewStatus`.

        new_status = StatusBuilder().status('Hello').visibility(Visibility.UNLISTED).build()
    """

    def __init__(self):
        self.new_status = NewStatus()

    def status(self, text):
        self.new_status.status = text
        return self

    def in_reply_to(self, status_id):
        self.new_status.in_reply_to_id = status_id
        return self

    def media_ids(self, ids):
        self.new_status.media_ids = list(ids)
        return self

    def sensitive(self, value=True):
        self.new_status.sensitive = value
        return self

    def spoiler_text(self, text):
        self.new_status.spoiler_text = text
        return self

    def content_type(self, media_type):
        """Markup of the text (`text/plain`, `text/markdown`, ...), where the server supports it."""
        self.new_status.content_type = media_type
        return self

    def visibility(self, visibility):
        self.new_status.visibility = Visibility(visibility)
        return self

    def language(self, language):
        self.new_status.language = language
        return self

    def scheduled_at(self, when):
        self.new_status.scheduled_at = when
        return self

    def poll(self, options, expires_in, multiple=None, hide_totals=None):
        self.new_status.poll = NewPoll(list(options), expires_in, multiple, hide_totals)
        return self

    def build(self) -> NewStatus:
        if not self.new_status.status and not self.new_status.media_ids:
            raise BuilderError("status text or media ids are required in order to post a status")
        return replace(self.new_status)

