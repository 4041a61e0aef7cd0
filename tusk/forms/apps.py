from dataclasses import dataclass, field

from ..scopes import Scopes
from .base import Form

OOB_REDIRECT = "urn:ietf:wg:oauth:2.0:oob"


@dataclass
class Application(Form):
    """Details of an app to register with an instance."""

    client_name: str
    redirect_uris: str = OOB_REDIRECT
    scopes: Scopes = field(default_factory=Scopes.read_all)
    website: str | None = None
