from dataclasses import dataclass

from .base import Entity


@dataclass
class CustomEmoji(Entity):
    """Emoji defined by the instance, used in text as `:shortcode:`."""

    shortcode: str
    url: str
    static_url: str
    visible_in_picker: bool = True
    category: str | None = None
