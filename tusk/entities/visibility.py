from enum import Enum


class Visibility(str, Enum):
    """Who can see a status."""

    DIRECT = "direct"
    PRIVATE = "private"
    UNLISTED = "unlisted"
    PUBLIC = "public"

    @classmethod
    def default(cls):
        return cls.PUBLIC
