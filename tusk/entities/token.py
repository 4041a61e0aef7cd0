from dataclasses import dataclass, field
from datetime import datetime

from ..scopes import Scopes
from ..utils import datetime_of_timestamp, timestamp_of_datetime
from .base import Entity, converted


@dataclass
class Token(Entity):
    """OAuth access token.

    Unlike most timestamps in the API, `created_at` is sent as seconds
    since the epoch.
    """

    access_token: str
    token_type: str = "Bearer"
    scope: Scopes = field(default_factory=Scopes.read_all)
    created_at: datetime | None = converted(datetime_of_timestamp, timestamp_of_datetime, default=None)

    def as_oauth_token(self) -> dict:
        """Return the dict `requests_oauthlib` expects."""
        return {"access_token": self.access_token, "token_type": self.token_type}
