"""Parameters of account-related calls."""

from dataclasses import dataclass, field

from .base import Form


@dataclass
class AccountCreation(Form):
    """Sign up a new account (needs an app token)."""

    username: str
    email: str
    password: str
    agreement: bool
    locale: str = "en"
    reason: str | None = None


@dataclass
class FollowOptions(Form):
    """Options when following an account.

    Only the choices that differ from the server's defaults are sent:
    `reblogs` when False and `notify` when True.
    """

    reblogs: bool = True
    notify: bool | None = None
    languages: list[str] | None = None

    def to_params(self):
        defaults = {("reblogs", "true"), ("notify", "false")}
        return [(k, v) for k, v in super().to_params() if (k, v) not in defaults]


@dataclass
class IdList(Form):
    id: list[str] = field(default_factory=list)


@dataclass
class AccountSearch(Form):
    q: str
    limit: int | None = None
    resolve: bool | None = None
    following: bool | None = None
