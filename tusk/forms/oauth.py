"""Forms used in the OAuth dance."""

from dataclasses import dataclass
from enum import Enum

from ..scopes import Scopes
from .apps import OOB_REDIRECT
from .base import Form


@dataclass
class AuthorizationRequest(Form):
    """Parameters of the page where the user authorizes the app."""

    client_id: str
    redirect_uri: str = OOB_REDIRECT
    scope: Scopes | None = None
    response_type: str = "code"
    force_login: bool | None = None
    lang: str | None = None

    def url(self, base) -> str:
        return f"{base}/oauth/authorize{self.to_querystring()}"


class GrantType(str, Enum):
    AUTHORIZATION_CODE = "authorization_code"
    CLIENT_CREDENTIALS = "client_credentials"


@dataclass
class TokenRequest(Form):
    """Ask for an access token.

    With a `code` from the authorization page this gets a user token;
    with `client_credentials` it gets an app token.
    """

    client_id: str
    client_secret: str
    redirect_uri: str = OOB_REDIRECT
    grant_type: GrantType = GrantType.CLIENT_CREDENTIALS
    code: str | None = None
    scope: Scopes | None = None


@dataclass
class Revocation(Form):
    client_id: str
    client_secret: str
    token: str
