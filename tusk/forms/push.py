"""Subscribing to web push notifications."""

from dataclasses import dataclass

from .base import Form


@dataclass
class Keys(Form):
    """Keys from the browser's push subscription, base64url-encoded."""

    p256dh: str
    auth: str


@dataclass
class AddPushRequest:
    """Subscribe `endpoint` to push notifications.

    The alerts wanted are flags; if none are set the server's defaults apply.
    """

    endpoint: str
    keys: Keys
    follow: bool | None = None
    favourite: bool | None = None
    reblog: bool | None = None
    mention: bool | None = None

    def alerts(self):
        return {
            name: value
            for name in ("follow", "favourite", "reblog", "mention")
            if (value := getattr(self, name)) is not None
        }

    def to_json(self) -> dict:
        body = {
            "subscription": {
                "endpoint": self.endpoint,
                "keys": self.keys.to_json(),
            },
        }
        if alerts := self.alerts():
            body["data"] = {"alerts": alerts}
        return body


@dataclass
class UpdatePushRequest:
    """Change which alerts the existing subscription delivers."""

    id: str
    follow: bool | None = None
    favourite: bool | None = None
    reblog: bool | None = None
    mention: bool | None = None

    alerts = AddPushRequest.alerts

    def to_json(self) -> dict:
        body = {"id": self.id}
        if alerts := self.alerts():
            body["data"] = {"alerts": alerts}
        return body
