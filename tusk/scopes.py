"""OAuth scopes.

A scope is written `read`, `read:statuses`, `admin:write:reports` and so on.
Apps ask for a set of them, written as a space-separated list.
"""

from .errors import InvalidScope


READ_SUBSCOPES = frozenset([
    "accounts",
    "blocks",
    "favourites",
    "filters",
    "follows",
    "lists",
    "mutes",
    "notifications",
    "reports",
    "search",
    "statuses",
])
WRITE_SUBSCOPES = (READ_SUBSCOPES - {"search"}) | {"media"}
ADMIN_SUBSCOPES = frozenset([
    "accounts",
    "canonical_email_blocks",
    "domain_allows",
    "domain_blocks",
    "email_domain_blocks",
    "ip_blocks",
    "reports",
])

# Scopes sort in this order, then by subscope.
KINDS = {
    "read": READ_SUBSCOPES,
    "write": WRITE_SUBSCOPES,
    "follow": frozenset(),
    "push": frozenset(),
    "admin:read": ADMIN_SUBSCOPES,
    "admin:write": ADMIN_SUBSCOPES,
}
KIND_ORDER = {kind: i for i, kind in enumerate(KINDS)}


class Scope:
    """One OAuth scope, such as `read` or `write:media`."""

    __slots__ = 'kind', 'sub'

    def __init__(self, kind, sub=None):
        if kind not in KINDS or (sub is not None and sub not in KINDS[kind]):
            raise InvalidScope(f'{kind}:{sub}' if sub else kind)
        self.kind = kind
        self.sub = sub

    @classmethod
    def parse(cls, string):
        """Create instance from the form used in the API."""
        if string in KINDS:
            return cls(string)
        kind, sep, sub = string.rpartition(':')
        if not sep or kind not in KINDS:
            raise InvalidScope(string)
        try:
            return cls(kind, sub)
        except InvalidScope:
            raise InvalidScope(string) from None

    def sort_key(self):
        return KIND_ORDER[self.kind], self.sub or ''

    def __str__(self):
        return f'{self.kind}:{self.sub}' if self.sub else self.kind

    def __repr__(self):
        return f'Scope.parse({str(self)!r})'

    def __eq__(self, other):
        if not isinstance(other, Scope):
            return NotImplemented
        return self.kind == other.kind and self.sub == other.sub

    def __lt__(self, other):
        return self.sort_key() < other.sort_key()

    def __hash__(self):
        return hash((self.kind, self.sub))


class Scopes:
    """Set of scopes requested by, or granted to, an app.

    Combine with `|`:

        Scopes.read_all() | Scopes.write('statuses')
    """

    __slots__ = ('scopes',)

    def __init__(self, scopes=()):
        self.scopes = frozenset(scopes)

    @classmethod
    def all(cls):
        return cls.read_all() | cls.write_all() | cls.follow() | cls.push()

    @classmethod
    def read_all(cls):
        return cls([Scope('read')])

    @classmethod
    def write_all(cls):
        return cls([Scope('write')])

    @classmethod
    def read(cls, sub):
        return cls([Scope('read', sub)])

    @classmethod
    def write(cls, sub):
        return cls([Scope('write', sub)])

    @classmethod
    def follow(cls):
        return cls([Scope('follow')])

    @classmethod
    def push(cls):
        return cls([Scope('push')])

    @classmethod
    def admin_read(cls, sub=None):
        return cls([Scope('admin:read', sub)])

    @classmethod
    def admin_write(cls, sub=None):
        return cls([Scope('admin:write', sub)])

    @classmethod
    def parse(cls, string):
        """Parse space-separated scopes. Raises InvalidScope."""
        return cls(Scope.parse(word) for word in string.split())

    @classmethod
    def from_json(cls, value):
        if isinstance(value, list):
            return cls(Scope.parse(word) for word in value)
        return cls.parse(value)

    def to_json(self):
        return str(self)

    def to_list(self):
        """Scopes as strings, the way `requests_oauthlib` takes them."""
        return [str(s) for s in sorted(self.scopes)]

    def __or__(self, other):
        if isinstance(other, Scope):
            other = Scopes([other])
        if not isinstance(other, Scopes):
            return NotImplemented
        return Scopes(self.scopes | other.scopes)

    def __str__(self):
        return ' '.join(self.to_list())

    def __repr__(self):
        return f'Scopes.parse({str(self)!r})'

    def __iter__(self):
        return iter(sorted(self.scopes))

    def __len__(self):
        return len(self.scopes)

    def __contains__(self, scope):
        if isinstance(scope, str):
            scope = Scope.parse(scope)
        return scope in self.scopes

    def __eq__(self, other):
        if not isinstance(other, Scopes):
            return NotImplemented
        return self.scopes == other.scopes

    def __hash__(self):
        return hash(self.scopes)
