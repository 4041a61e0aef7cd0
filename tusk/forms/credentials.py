"""Updating the profile of the authenticated user."""

from dataclasses import dataclass, field
import os

from ..entities.account import MetadataField
from ..entities.visibility import Visibility
from .base import param_value


@dataclass
class UpdateCredentialsRequest:
    """Changes to a profile.

    Fields left as None are not changed. `avatar` and `header` are image
    files, given as paths or open binary files. `fields_attributes` replaces
    all the profile metadata fields.
    """

    display_name: str | None = None
    note: str | None = None
    avatar: str | os.PathLike | None = None
    header: str | os.PathLike | None = None
    locked: bool | None = None
    bot: bool | None = None
    discoverable: bool | None = None
    privacy: Visibility | None = None
    sensitive: bool | None = None
    language: str | None = None
    fields_attributes: list[MetadataField] = field(default_factory=list)

    def field_attribute(self, name, value):
        self.fields_attributes.append(MetadataField(name, value))
        return self

    def to_data(self) -> list[tuple[str, str]]:
        """Form fields, in the bracketed form Rails expects."""
        data = [
            (name, param_value(value))
            for name in ("display_name", "note", "locked", "bot", "discoverable")
            if (value := getattr(self, name)) is not None
        ]
        if self.privacy is not None:
            data.append(("source[privacy]", Visibility(self.privacy).value))
        if self.sensitive is not None:
            data.append(("source[sensitive]", param_value(self.sensitive)))
        if self.language is not None:
            data.append(("source[language]", self.language))
        for i, attribute in enumerate(self.fields_attributes):
            data.append((f"fields_attributes[{i}][name]", attribute.name))
            data.append((f"fields_attributes[{i}][value]", attribute.value))
        return data

    def files(self) -> dict:
        """Paths or open files of images to upload."""
        return {
            name: value
            for name in ("avatar", "header")
            if (value := getattr(self, name)) is not None
        }
