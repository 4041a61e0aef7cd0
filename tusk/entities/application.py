from dataclasses import dataclass

from .base import Entity


@dataclass
class Application(Entity):
    """An app registered with an instance.

    Statuses carry only the name and website. When the app is registered
    the client credentials are also sent, once.
    """

    name: str
    website: str | None = None
    vapid_key: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    redirect_uri: str | None = None
