"""Registering an app with an instance and getting the user to authorize it.

    registration = Registration("mastodon.example").client_name("my-app")
    registered = registration.build()
    print("Visit", registered.authorize_url())
    mastodon = registered.complete(input("Code: "))
"""

from dataclasses import dataclass
import logging
import uuid

import requests
import requests_oauthlib

from . import protocol
from .client import Mastodon
from .data import Data
from .entities.application import Application as RegisteredApplication
from .errors import BuilderError
from .forms.apps import OOB_REDIRECT, Application
from .http import read_response, send
from .scopes import Scopes
from .utils import normalize_base


LOG = logging.getLogger(__name__)


class Registration:
    """Collects the details of an app before registering it.

    The setters return the registration so they can be chained.
    """

    def __init__(self, base, session=None, timeout=protocol.DEFAULT_TIMEOUT):
        self.base = normalize_base(base)
        self.session = session or requests.Session()
        self.timeout = timeout
        self._client_name = None
        self._redirect_uris = OOB_REDIRECT
        self._scopes = Scopes.read_all()
        self._website = None
        self._force_login = False

    def client_name(self, name):
        self._client_name = name
        return self

    def redirect_uris(self, uris):
        self._redirect_uris = uris
        return self

    def scopes(self, scopes):
        self._scopes = scopes
        return self

    def website(self, website):
        self._website = website
        return self

    def force_login(self, force_login=True):
        """Make the authorization page ask the user to log in even if they already are."""
        self._force_login = force_login
        return self

    def app(self) -> Application:
        if not self._client_name:
            raise BuilderError("client_name is required in order to register an app")
        return Application(
            client_name=self._client_name,
            redirect_uris=self._redirect_uris,
            scopes=self._scopes,
            website=self._website,
        )

    def build(self) -> "Registered":
        """Register the app with the instance."""
        return self.register(self.app())

    def register(self, app: Application) -> "Registered":
        """Register an app described by an `Application` form."""
        call_id = uuid.uuid4()
        url = self.base + protocol.apps_path
        LOG.info("%s: registering %s with %s", call_id, app.client_name, self.base)
        r = send(self.session, "post", url, call_id, json=app.to_json(), timeout=self.timeout)
        registered = read_response(r, RegisteredApplication, call_id)
        return Registered(
            base=self.base,
            client_id=registered.client_id,
            client_secret=registered.client_secret,
            redirect=registered.redirect_uri or app.redirect_uris,
            scopes=app.scopes,
            force_login=self._force_login,
        )


@dataclass
class Registered:
    """An app registered with an instance but not yet authorized by a user.

    Can be made directly (with `from_parts`) if the client ID and secret
    were saved from an earlier registration.
    """

    base: str
    client_id: str
    client_secret: str
    redirect: str = OOB_REDIRECT
    scopes: Scopes = None
    force_login: bool = False

    def __post_init__(self):
        self.base = normalize_base(self.base)
        if self.scopes is None:
            self.scopes = Scopes.read_all()
        elif isinstance(self.scopes, str):
            self.scopes = Scopes.parse(self.scopes)

    @classmethod
    def from_parts(cls, base, client_id, client_secret, redirect, scopes, force_login) -> "Registered":
        return cls(base, client_id, client_secret, redirect, scopes, force_login)

    def into_parts(self) -> tuple:
        return self.base, self.client_id, self.client_secret, self.redirect, self.scopes, self.force_login

    def make_oauth(self):
        """Return an OAuth2 session ready for the authorization dance."""
        return requests_oauthlib.OAuth2Session(
            self.client_id,
            redirect_uri=self.redirect,
            scope=self.scopes.to_list(),
        )

    def authorize_url(self) -> str:
        """Return the URL of the page where the user authorizes the app."""
        kwargs = {"force_login": "true"} if self.force_login else {}
        url, _ = self.make_oauth().authorization_url(self.base + protocol.authorize_path, **kwargs)
        return url

    def complete(self, code, timeout=protocol.DEFAULT_TIMEOUT) -> Mastodon:
        """Exchange the code shown to the user after authorizing for an access token."""
        oauth = self.make_oauth()
        LOG.info("Completing registration with %s", self.base)
        token = oauth.fetch_token(
            self.base + protocol.token_path,
            code=code,
            client_secret=self.client_secret,
            timeout=timeout,
        )
        return Mastodon(self.data(token["access_token"]), session=oauth, timeout=timeout)

    def data(self, token="") -> Data:
        return Data(
            base=self.base,
            client_id=self.client_id,
            client_secret=self.client_secret,
            redirect=self.redirect,
            token=token,
        )
