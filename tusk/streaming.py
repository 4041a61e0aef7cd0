"""Parsing events from the streaming API.

The server-sent events form of the stream looks like this:

    :thump
    event: update
    data: {"id": "1234", ...}

    event: delete
    data: 1234

Lines starting with a colon are heartbeats. The WebSocket form sends each
event as one JSON message instead:

    {"stream": ["user"], "event": "update", "payload": "{\"id\": ...}"}

`event_stream` accepts either, since it just needs the text one line or
message at a time.
"""

import json
import logging

from .entities.event import (
    DeleteEvent,
    Event,
    FiltersChangedEvent,
    NotificationEvent,
    UpdateEvent,
)
from .entities.notification import Notification
from .entities.status import Status
from .errors import DeserializeError, EventError


LOG = logging.getLogger(__name__)


def event_stream(lines):
    """Generate events from an iterable of lines of text.

    Lines are collected until they amount to an event. A blank line ends an
    event, so anything left over by then (an event we do not recognize, say)
    is discarded.
    """
    buffer = []
    for line in lines:
        if isinstance(line, bytes):
            line = line.decode("UTF-8")
        line = line.strip()
        if not line:
            if buffer:
                LOG.debug("Discarding incomplete event: %r", buffer)
                buffer = []
            continue
        if line.startswith(":"):
            continue
        # A JSON message is a whole event by itself.
        is_message = line.startswith("{")
        if is_message:
            buffer = [line]
        else:
            buffer.append(line)
        try:
            event = make_event(buffer)
        except (EventError, DeserializeError) as e:
            LOG.debug("No event yet: %s", e)
            if is_message:
                buffer = []
            continue
        LOG.debug("Received %s", type(event).__name__)
        buffer = []
        yield event


def make_event(lines: list[str]) -> Event:
    """Make an event from the lines received so far.

    Raises EventError if these lines are not (or not yet) a complete event.
    """
    if event_line := next((line for line in lines if line.startswith("event:")), None):
        name = event_line[len("event:"):].strip()
        data_line = next((line for line in lines if line.startswith("data:")), None)
        data = data_line[len("data:"):].strip() if data_line is not None else None
    else:
        try:
            message = json.loads(lines[0])
        except ValueError as e:
            raise EventError(f"{lines[0]!r}: neither an event line nor a JSON message") from e
        if not isinstance(message, dict) or "event" not in message:
            raise EventError(f"{lines[0]!r}: message has no event")
        name = message["event"]
        data = message.get("payload")

    match name:
        case "notification":
            return NotificationEvent(Notification.from_json(parse_data(name, data)))
        case "update":
            return UpdateEvent(Status.from_json(parse_data(name, data)))
        case "delete":
            if data is None:
                raise EventError("Missing `data` line for delete")
            return DeleteEvent(data)
        case "filters_changed":
            return FiltersChangedEvent()
    raise EventError(f"Unknown event `{name}`")


def parse_data(name, data):
    if data is None:
        raise EventError(f"Missing `data` line for {name}")
    if isinstance(data, dict):
        return data
    try:
        return json.loads(data)
    except ValueError as e:
        raise EventError(f"Bad `data` for {name}: {e}") from e


class EventHandler:
    """Does something with each event.

    Subclass and override the `on_…` methods. By default each event is
    logged.
    """

    def on_update(self, status: Status):
        LOG.info("Update: %s %s", status.account, status.url or status.uri)

    def on_notification(self, notification: Notification):
        LOG.info("Notification: %s from %s", notification.notification_type.value, notification.account)

    def on_delete(self, status_id: str):
        LOG.info("Delete: %s", status_id)

    def on_filters_changed(self):
        LOG.info("Filters changed")

    def handle(self, event: Event):
        match event:
            case UpdateEvent(status):
                self.on_update(status)
            case NotificationEvent(notification):
                self.on_notification(notification)
            case DeleteEvent(status_id):
                self.on_delete(status_id)
            case FiltersChangedEvent():
                self.on_filters_changed()
            case _:
                raise TypeError(f"{event!r}: not an event")

    def run(self, events):
        """Handle events until they run out."""
        for event in events:
            self.handle(event)
