"""Client library for the Mastodon API."""

from .client import Mastodon, MastodonUnauthenticated
from .data import Data
from .errors import ApiError, Error
from .page import Page
from .registration import Registered, Registration
from .scopes import Scopes
from .streaming import EventHandler, event_stream

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "Data",
    "Error",
    "EventHandler",
    "Mastodon",
    "MastodonUnauthenticated",
    "Page",
    "Registered",
    "Registration",
    "Scopes",
    "event_stream",
]
