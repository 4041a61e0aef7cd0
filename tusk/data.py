"""Credentials needed to use an instance, and ways to store them."""

from dataclasses import asdict, dataclass, fields
import json
import logging
import os
import tomllib

from .errors import ConfigurationError
from .forms.apps import OOB_REDIRECT


LOG = logging.getLogger(__name__)


@dataclass
class Data:
    """Everything needed to make authenticated calls to an instance.

    Attributes --
        base -- origin of the instance, like `https://mastodon.social`
        client_id, client_secret -- supplied by the instance when the app was registered
        redirect -- redirect URI registered with the app
        token -- the user's access token (blank until authorized)
    """

    base: str
    client_id: str
    client_secret: str
    redirect: str = OOB_REDIRECT
    token: str = ""

    @classmethod
    def from_dict(cls, obj: dict, source="data") -> "Data":
        if not isinstance(obj, dict):
            raise ConfigurationError(f"{source}: expected an object, got {type(obj).__name__}")
        missing = [name for name in ("base", "client_id", "client_secret") if not obj.get(name)]
        if missing:
            raise ConfigurationError(f"{source}: missing {', '.join(missing)}")
        return cls(**{f.name: obj[f.name] for f in fields(cls) if obj.get(f.name) is not None})

    @classmethod
    def from_env(cls, prefix="", environ=None) -> "Data":
        """Read from environment variables BASE, CLIENT_ID, CLIENT_SECRET, REDIRECT, and TOKEN.

        Arguments --
            prefix -- prepended to each name, e.g. `TUSK_` to read `TUSK_BASE` etc.
            environ -- mapping to use instead of `os.environ`
        """
        environ = os.environ if environ is None else environ
        obj = {f.name: environ.get(prefix + f.name.upper()) for f in fields(cls)}
        return cls.from_dict(obj, source=f"environment ({prefix}*)")

    @classmethod
    def from_json(cls, text) -> "Data":
        try:
            obj = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"not JSON: {e}") from e
        return cls.from_dict(obj)

    @classmethod
    def from_file(cls, path) -> "Data":
        """Read from a JSON file as written by `to_file`."""
        LOG.debug("Loading %s", path)
        try:
            with open(path, encoding="UTF-8") as input:
                text = input.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"{path}: {e}") from e
        try:
            return cls.from_json(text)
        except ConfigurationError as e:
            raise ConfigurationError(f"{path}: {e}") from e

    @classmethod
    def from_toml(cls, text) -> "Data":
        try:
            obj = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"not TOML: {e}") from e
        return cls.from_dict(obj)

    @classmethod
    def from_toml_file(cls, path) -> "Data":
        LOG.debug("Loading %s", path)
        try:
            with open(path, "rb") as input:
                obj = tomllib.load(input)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"{path}: not TOML: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"{path}: {e}") from e
        return cls.from_dict(obj, source=str(path))

    def to_json(self, pretty=False) -> str:
        return json.dumps(asdict(self), indent=2 if pretty else None)

    def to_file(self, path, pretty=True):
        """Write as JSON. The file holds secrets so is only readable by its owner."""
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with open(fd, "w", encoding="UTF-8") as output:
            output.write(self.to_json(pretty=pretty))
            output.write("\n")
