"""Web push subscriptions."""

from dataclasses import dataclass, field

from .base import Entity


@dataclass
class Alerts(Entity):
    """Which notifications are pushed."""

    follow: bool | None = None
    favourite: bool | None = None
    reblog: bool | None = None
    mention: bool | None = None
    poll: bool | None = None


@dataclass
class Subscription(Entity):
    id: str
    endpoint: str
    server_key: str
    alerts: Alerts = field(default_factory=Alerts)
