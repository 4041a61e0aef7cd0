"""Translating between JSON objects and entity dataclasses.

Entities are dataclasses whose fields carry type annotations.
`Entity.from_json` uses the annotations to decide how each value is decoded:

- `datetime` from an ISO 8601 string,
- enumerations from their value,
- other entities (anything with a `from_json` classmethod) recursively,
- `list[X]` and `dict[str, X]` item by item,
- `X | None` as X unless null,
- `int`, `float` and `bool` also from strings, since Mastodon
  sends some counts and flags as strings.

A field whose JSON name differs from its Python name has `json` in its
metadata. A field needing a special conversion has `decode` (and
optionally `encode`) functions in its metadata.
"""

from dataclasses import field, fields
from datetime import date, datetime, timedelta
from enum import Enum
from functools import cache
import types
import typing

from ..errors import DeserializeError
from ..utils import format_datetime, parse_datetime


def renamed(name, **kwargs):
    """Field that has a different name in JSON."""
    metadata = {"json": name, **kwargs.pop("metadata", {})}
    return field(metadata=metadata, **kwargs)


def converted(decode, encode=None, **kwargs):
    """Field whose value needs special treatment."""
    metadata = {"decode": decode, **kwargs.pop("metadata", {})}
    if encode:
        metadata["encode"] = encode
    return field(metadata=metadata, **kwargs)


def empty_as_none(value):
    return value or None


class Entity:
    """Mixin for dataclasses that mirror a JSON object from the API."""

    @classmethod
    def from_json(cls, obj: dict):
        if not isinstance(obj, dict):
            raise DeserializeError(f"{cls.__name__}: expected object, got {obj!r}")
        hints = field_types(cls)
        kwargs = {}
        try:
            for f in fields(cls):
                key = f.metadata.get("json", f.name)
                if key not in obj:
                    continue
                value = obj[key]
                if decoder := f.metadata.get("decode"):
                    kwargs[f.name] = decoder(value)
                else:
                    kwargs[f.name] = decode(hints[f.name], value)
            return cls(**kwargs)
        except DeserializeError:
            raise
        except (AttributeError, TypeError, ValueError) as e:
            raise DeserializeError(f"{cls.__name__}: {e}") from e

    def to_json(self) -> dict:
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if encoder := f.metadata.get("encode"):
                value = encoder(value)
            else:
                value = encode(value)
            result[f.metadata.get("json", f.name)] = value
        return result


@cache
def field_types(cls):
    return typing.get_type_hints(cls)


def decode(tp, value):
    """Convert a value parsed from JSON to the Python type `tp`."""
    if value is None or tp is typing.Any:
        return value
    origin = typing.get_origin(tp)
    if origin in (typing.Union, types.UnionType):
        (tp,) = [t for t in typing.get_args(tp) if t is not type(None)]
        return decode(tp, value)
    if origin is list:
        if not isinstance(value, list):
            raise DeserializeError(f"expected array, got {value!r}")
        (item_type,) = typing.get_args(tp)
        return [decode(item_type, x) for x in value]
    if origin is dict:
        if not isinstance(value, dict):
            raise DeserializeError(f"expected object, got {value!r}")
        _, item_type = typing.get_args(tp)
        return {k: decode(item_type, v) for k, v in value.items()}
    if tp in (datetime, date) and not isinstance(value, str):
        raise DeserializeError(f"expected date string, got {value!r}")
    if tp is datetime:
        return parse_datetime(value)
    if tp is date:
        return date.fromisoformat(value)
    if tp is bool and isinstance(value, str):
        return value.lower() == "true"
    if tp in (int, float) and isinstance(value, str):
        return tp(value)
    if isinstance(tp, type) and issubclass(tp, Enum):
        return tp(value)
    if hasattr(tp, "from_json"):
        return tp.from_json(value)
    return value


def encode(value):
    """Convert a Python value to something `json.dumps` can write."""
    if isinstance(value, Enum):
        return value.value
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, timedelta):
        return int(value.total_seconds())
    if hasattr(value, "to_json"):
        return value.to_json()
    if isinstance(value, dict):
        return {k: encode(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [encode(x) for x in value]
    raise TypeError(f"{value!r}: cannot encode as JSON")

