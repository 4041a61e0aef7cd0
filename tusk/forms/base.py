"""Serializing request parameters.

Forms are dataclasses. Unset (None) fields are left out. A field can be
sent under another name (`json` in its metadata, see `entities.base.renamed`)
or be a flag, sent as `1` when true and left out when false.
"""

from dataclasses import field, fields
from urllib.parse import urlencode

from ..entities.base import encode


def flag(**kwargs):
    return field(default=False, metadata={"flag": True}, **kwargs)


class Form:
    """Mixin for dataclasses describing parameters of an API call."""

    def _items(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None or (f.metadata.get("flag") and not value):
                continue
            yield f, f.metadata.get("json", f.name), value

    def to_json(self) -> dict:
        """Return the parameters as a JSON request body."""
        return {key: encode(value) for _, key, value in self._items()}

    def to_params(self) -> list[tuple[str, str]]:
        """Return the parameters as query parameters (for `requests`' `params`)."""
        params = []
        for f, key, value in self._items():
            if f.metadata.get("flag"):
                params.append((key, "1"))
                continue
            value = encode(value)
            if isinstance(value, list):
                params.extend((f"{key}[]", param_value(x)) for x in value)
            else:
                params.append((key, param_value(value)))
        return params

    def to_querystring(self) -> str:
        """Return the parameters as a query string, with a leading `?` unless empty."""
        params = self.to_params()
        return "?" + urlencode(params) if params else ""


def param_value(value):
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
