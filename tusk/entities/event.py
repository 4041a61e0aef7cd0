"""Events received from the streaming API."""

from dataclasses import dataclass

from .notification import Notification
from .status import Status


class Event:
    """Base class of the events a stream can deliver."""


@dataclass
class UpdateEvent(Event):
    """A status was posted to the timeline being streamed."""

    status: Status


@dataclass
class NotificationEvent(Event):
    notification: Notification


@dataclass
class DeleteEvent(Event):
    """A status was deleted. Only its ID is known."""

    status_id: str


@dataclass
class FiltersChangedEvent(Event):
    """The user's filters changed and cached filters need reloading."""
