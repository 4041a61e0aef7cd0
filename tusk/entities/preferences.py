"""User preferences.

The API sends these as a flat object with keys like
`posting:default:visibility`; here they are nested objects so that
`preferences.posting.default.visibility` works.
"""

from dataclasses import dataclass, field
from enum import Enum

from .base import Entity
from .visibility import Visibility


class MediaExpansion(str, Enum):
    DEFAULT = "default"
    SHOW_ALL = "show_all"
    HIDE_ALL = "hide_all"


@dataclass
class PostDefaults(Entity):
    visibility: Visibility = Visibility.PUBLIC
    sensitive: bool = False
    language: str | None = None


@dataclass
class PostingPreferences(Entity):
    default: PostDefaults = field(default_factory=PostDefaults)


@dataclass
class ReadingExpansionPreferences(Entity):
    media: MediaExpansion = MediaExpansion.DEFAULT
    spoilers: bool = False


@dataclass
class ReadingPreferences(Entity):
    expand: ReadingExpansionPreferences = field(default_factory=ReadingExpansionPreferences)


@dataclass
class Preferences(Entity):
    posting: PostingPreferences = field(default_factory=PostingPreferences)
    reading: ReadingPreferences = field(default_factory=ReadingPreferences)

    @classmethod
    def from_json(cls, obj: dict) -> "Preferences":
        return cls(
            posting=PostingPreferences(
                default=PostDefaults.from_json({
                    key.removeprefix("posting:default:"): value
                    for key, value in obj.items()
                    if key.startswith("posting:default:")
                })
            ),
            reading=ReadingPreferences(
                expand=ReadingExpansionPreferences.from_json({
                    key.removeprefix("reading:expand:"): value
                    for key, value in obj.items()
                    if key.startswith("reading:expand:")
                })
            ),
        )

    def to_json(self) -> dict:
        return {
            **{f"posting:default:{k}": v for k, v in self.posting.default.to_json().items()},
            **{f"reading:expand:{k}": v for k, v in self.reading.expand.to_json().items()},
        }
