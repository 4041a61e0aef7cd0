from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .account import Account
from .base import Entity, renamed
from .status import Status


class NotificationType(str, Enum):
    MENTION = "mention"
    STATUS = "status"
    REBLOG = "reblog"
    FAVOURITE = "favourite"
    FOLLOW = "follow"
    FOLLOW_REQUEST = "follow_request"
    POLL = "poll"
    UPDATE = "update"


@dataclass
class Notification(Entity):
    id: str
    notification_type: NotificationType = renamed("type")
    created_at: datetime
    account: Account
    status: Status | None = None
