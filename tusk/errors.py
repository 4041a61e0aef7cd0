"""Exceptions raised by tusk.

Failures of the transport itself (connection refused, timeouts and the like)
are not wrapped: they arrive as the usual `requests` exceptions.
"""

from enum import Enum


class Error(Exception):
    """Base class for errors raised by tusk."""


class ApiError(Error):
    """The Mastodon instance answered with an error status.

    Attributes --
        status -- the HTTP status code
        response -- an `ApiErrorResponse` if the body was the usual JSON error object, else None
        call_id -- identifies the request in log messages
    """

    def __init__(self, status, response=None, call_id=None, text=None):
        self.status = status
        self.response = response
        self.call_id = call_id
        self.text = text
        super().__init__(status, response)

    def __str__(self):
        if self.response and self.response.error:
            return f"{self.status}: {self.response.error}"
        return f"{self.status}: {self.text or 'no error message'}"


class DeserializeError(Error, ValueError):
    """JSON from the server did not have the expected shape."""


class ClientIdRequired(Error):
    def __str__(self):
        return "client ID is required"


class ClientSecretRequired(Error):
    def __str__(self):
        return "client secret is required"


class AccessTokenRequired(Error):
    def __str__(self):
        return "access token is required"


class ConfigurationError(Error):
    """Configuration could not be loaded."""


class LinkHeaderError(Error):
    """Could not make sense of a `Link` header."""


class UnrecognizedRel(LinkHeaderError):
    """A `Link` header used a relation other than `next` or `prev`."""

    def __init__(self, rel, link):
        self.rel = rel
        self.link = link
        super().__init__(rel, link)

    def __str__(self):
        return f"unrecognized rel {self.rel!r} in link header {self.link!r}"


class EventError(Error):
    """A message from the streaming API could not be turned in to an event."""


class InvalidScope(Error, ValueError):
    """Not one of the OAuth scopes Mastodon defines."""

    def __str__(self):
        return f"{self.args[0]!r}: unknown scope"


class BuilderError(Error, ValueError):
    """A request was not filled in enough to be sent."""


class ErrorCode(str, Enum):
    """Codes found in the `details` of a validation error."""

    BLOCKED = "ERR_BLOCKED"
    UNREACHABLE = "ERR_UNREACHABLE"
    TAKEN = "ERR_TAKEN"
    RESERVED = "ERR_RESERVED"
    ACCEPTED = "ERR_ACCEPTED"
    BLANK = "ERR_BLANK"
    INVALID = "ERR_INVALID"
    TOO_LONG = "ERR_TOO_LONG"
    TOO_SHORT = "ERR_TOO_SHORT"
    INCLUSION = "ERR_INCLUSION"
