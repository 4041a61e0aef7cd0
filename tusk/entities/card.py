"""Preview cards for links in statuses."""

from dataclasses import dataclass, field
from enum import Enum

from .base import Entity, converted, empty_as_none, renamed
from .tag import TagHistory


class CardType(str, Enum):
    LINK = "link"
    PHOTO = "photo"
    VIDEO = "video"
    RICH = "rich"


@dataclass
class Card(Entity):
    """Rich preview generated from OpenGraph or oEmbed data.

    Mastodon sends an empty string rather than null for missing URLs;
    these become None.
    """

    url: str
    title: str = ""
    description: str = ""
    card_type: CardType = renamed("type", default=CardType.LINK)
    author_name: str = ""
    author_url: str | None = converted(empty_as_none, default=None)
    provider_name: str = ""
    provider_url: str | None = converted(empty_as_none, default=None)
    html: str = ""
    width: int = 0
    height: int = 0
    image: str | None = None
    embed_url: str | None = converted(empty_as_none, default=None)
    blurhash: str | None = None


@dataclass
class TrendsLink(Entity):
    """Card for a link that is trending, with its daily use."""

    card: Card
    history: list[TagHistory] = field(default_factory=list)

    @classmethod
    def from_json(cls, obj):
        card = Card.from_json({k: v for k, v in obj.items() if k != "history"})
        return cls(card, [TagHistory.from_json(x) for x in obj.get("history", [])])

    def to_json(self):
        return {**self.card.to_json(), "history": [x.to_json() for x in self.history]}
