"""Sending requests and reading responses."""

import logging

from .entities.base import decode
from .entities.error import ApiErrorResponse
from .errors import ApiError, DeserializeError


LOG = logging.getLogger(__name__)


def send(session, method, url, call_id, **kwargs):
    """Make one HTTP request, logging it with its call ID."""
    kwargs.setdefault("headers", {}).setdefault("Accept", "application/json")
    LOG.debug("%s: %s %s", call_id, method.upper(), url)
    r = session.request(method, url, **kwargs)
    LOG.debug("%s: %s %s -> %d", call_id, method.upper(), url, r.status_code)
    return r


def api_error(r, call_id=None) -> ApiError:
    """Make an exception describing an error response."""
    try:
        response = ApiErrorResponse.from_json(r.json())
    except ValueError:
        response = None
    LOG.error(
        "%s: %s failed: %d %s",
        call_id,
        r.url,
        r.status_code,
        response.error if response and response.error else r.reason,
    )
    return ApiError(r.status_code, response, call_id, text=r.text)


def read_response(r, target, call_id=None):
    """Check the response succeeded and decode its body.

    Arguments --
        r -- a `requests.Response`
        target -- the type to decode to, such as `Status` or `list[Account]`;
            or None if the body is to be ignored
        call_id -- identifies the call in log messages
    """
    if not r.ok:
        raise api_error(r, call_id)
    if target is None:
        return None
    try:
        obj = r.json()
    except ValueError as e:
        LOG.warning("%s: %s: response is not JSON: %r", call_id, r.url, r.text[:100])
        raise DeserializeError(f"{r.url}: response is not JSON") from e
    result = decode(target, obj)
    LOG.debug("%s: parsed %s", call_id, getattr(target, "__name__", target))
    return result
