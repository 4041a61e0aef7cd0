import json
from unittest import TestCase
from unittest.mock import MagicMock

from ..entities.event import DeleteEvent, FiltersChangedEvent, NotificationEvent, UpdateEvent
from ..entities.notification import NotificationType
from ..errors import EventError
from ..streaming import EventHandler, event_stream, make_event
from .factories import NotificationFactory, StatusFactory


def sse(event, data=None):
    """Lines of a server-sent event."""
    lines = [f"event: {event}"]
    if data is not None:
        lines.append(f"data: {data if isinstance(data, str) else json.dumps(data)}")
    return lines + [""]


class TestEventStream(TestCase):
    def test_update_and_delete(self):
        lines = [":thump", ""] + sse("update", StatusFactory(id="9")) + sse("delete", "9")

        events = list(event_stream(lines))

        self.assertEqual(len(events), 2)
        self.assertIsInstance(events[0], UpdateEvent)
        self.assertEqual(events[0].status.id, "9")
        self.assertEqual(events[1], DeleteEvent("9"))

    def test_notification(self):
        lines = sse("notification", NotificationFactory(type="mention"))

        (event,) = event_stream(lines)

        self.assertIsInstance(event, NotificationEvent)
        self.assertEqual(event.notification.notification_type, NotificationType.MENTION)

    def test_filters_changed_needs_no_data(self):
        self.assertEqual(list(event_stream(sse("filters_changed"))), [FiltersChangedEvent()])

    def test_accepts_bytes(self):
        lines = [line.encode("UTF-8") for line in sse("delete", "12")]

        self.assertEqual(list(event_stream(lines)), [DeleteEvent("12")])

    def test_unknown_event_discarded_at_blank_line(self):
        lines = sse("announcement", {"id": "1"}) + sse("delete", "3")

        with self.assertLogs("tusk.streaming", "DEBUG"):
            events = list(event_stream(lines))

        self.assertEqual(events, [DeleteEvent("3")])

    def test_bad_json_discarded(self):
        lines = sse("update", "{not json") + sse("delete", "4")

        self.assertEqual(list(event_stream(lines)), [DeleteEvent("4")])

    def test_status_with_wrong_types_discarded(self):
        lines = (
            sse("update", StatusFactory(id="1", created_at=12345))
            + sse("update", StatusFactory(id="2", tags={"name": "tusk"}))
            + sse("delete", "99")
        )

        self.assertEqual(list(event_stream(lines)), [DeleteEvent("99")])

    def test_websocket_messages(self):
        messages = [
            json.dumps({"stream": ["user"], "event": "update", "payload": json.dumps(StatusFactory(id="5"))}),
            json.dumps({"stream": ["user"], "event": "delete", "payload": "6"}),
        ]

        events = list(event_stream(messages))

        self.assertEqual(events[0].status.id, "5")
        self.assertEqual(events[1], DeleteEvent("6"))

    def test_unknown_websocket_message_skipped(self):
        messages = [
            json.dumps({"stream": ["user"], "event": "announcement.reaction", "payload": "{}"}),
            json.dumps({"stream": ["user"], "event": "delete", "payload": "8"}),
        ]

        self.assertEqual(list(event_stream(messages)), [DeleteEvent("8")])


class TestMakeEvent(TestCase):
    def test_incomplete(self):
        with self.assertRaises(EventError):
            make_event(["event: update"])

    def test_delete_needs_data(self):
        with self.assertRaises(EventError):
            make_event(["event: delete"])

    def test_not_event_or_json(self):
        with self.assertRaises(EventError):
            make_event(["data: 1"])

    def test_unknown(self):
        with self.assertRaises(EventError):
            make_event(["event: status.update", "data: {}"])


class TestEventHandler(TestCase):
    def test_dispatches_events(self):
        handler = EventHandler()
        handler.on_update = MagicMock()
        handler.on_notification = MagicMock()
        handler.on_delete = MagicMock()
        handler.on_filters_changed = MagicMock()
        lines = (
            sse("update", StatusFactory(id="1"))
            + sse("notification", NotificationFactory(id="2"))
            + sse("delete", "3")
            + sse("filters_changed")
        )

        handler.run(event_stream(lines))

        self.assertEqual(handler.on_update.call_args.args[0].id, "1")
        self.assertEqual(handler.on_notification.call_args.args[0].id, "2")
        handler.on_delete.assert_called_once_with("3")
        handler.on_filters_changed.assert_called_once_with()

    def test_logs_by_default(self):
        with self.assertLogs("tusk.streaming", "INFO") as logs:
            EventHandler().handle(DeleteEvent("77"))

        self.assertEqual(logs.output, ["INFO:tusk.streaming:Delete: 77"])

    def test_rejects_non_events(self):
        with self.assertRaises(TypeError):
            EventHandler().handle("update")
