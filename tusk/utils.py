from datetime import datetime, timezone
import os
from urllib.parse import urlsplit, urlunsplit


def datetime_of_timestamp(timestamp):
    """Given seconds since the epoch, return a timezone-aware datetime instance."""
    if timestamp is not None:
        return datetime.fromtimestamp(int(timestamp), timezone.utc)


def timestamp_of_datetime(value):
    if value is not None:
        return int(value.timestamp())


def parse_datetime(value):
    """Parse an ISO 8601 timestamp as written by Mastodon.

    Mastodon uses a trailing `Z` and milliseconds, and naive values are
    taken to be UTC.
    """
    if not value:
        return None
    result = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if result.tzinfo is None:
        result = result.replace(tzinfo=timezone.utc)
    return result


def format_datetime(value):
    """Write an aware datetime the way Mastodon does (UTC, milliseconds, `Z`)."""
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def normalize_base(base):
    """Return the HTTPS origin for an instance given as a host name or URL.

    `mastodon.social`, `http://mastodon.social` and `https://mastodon.social/`
    all become `https://mastodon.social`.
    """
    base = base.strip()
    if not base.startswith("https://"):
        base = "https://" + base.removeprefix("http://")
    scheme, netloc, path, _, _ = urlsplit(base)
    return urlunsplit((scheme, netloc, path.rstrip("/"), "", ""))


def file_name(file):
    """Name to give a file uploaded from a path or open file."""
    name = file if isinstance(file, (str, os.PathLike)) else getattr(file, "name", None)
    if isinstance(name, (str, os.PathLike)):
        return os.path.basename(os.fspath(name))
    return "file"
