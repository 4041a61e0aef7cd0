from dataclasses import dataclass

from .account import Account
from .base import Entity


@dataclass
class Relationship(Entity):
    """How we stand with another account."""

    id: str
    following: bool = False
    showing_reblogs: bool = False
    notifying: bool | None = None
    languages: list[str] | None = None
    followed_by: bool = False
    blocking: bool = False
    blocked_by: bool | None = None
    muting: bool = False
    muting_notifications: bool = False
    requested: bool = False
    domain_blocking: bool = False
    endorsed: bool | None = None
    note: str | None = None


@dataclass
class FamiliarFollowers(Entity):
    """Accounts we follow that also follow the account with this ID."""

    id: str
    accounts: list[Account]
