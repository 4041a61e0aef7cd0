"""Media attachments."""

from dataclasses import dataclass
from enum import Enum

from .base import Entity, renamed


class MediaType(str, Enum):
    AUDIO = "audio"
    IMAGE = "image"
    VIDEO = "video"
    GIFV = "gifv"
    UNKNOWN = "unknown"


@dataclass
class FocalPoint(Entity):
    """Where to centre a cropped preview; both coordinates run from -1.0 to 1.0."""

    x: float
    y: float


@dataclass
class SizeSpecificDetails(Entity):
    width: int | None = None
    height: int | None = None
    size: str | None = None
    aspect: float | None = None
    frame_rate: str | None = None
    duration: float | None = None
    bitrate: int | None = None


@dataclass
class Meta(Entity):
    length: str | None = None
    duration: float | None = None
    fps: int | None = None
    size: str | None = None
    width: int | None = None
    height: int | None = None
    aspect: float | None = None
    audio_encode: str | None = None
    audio_bitrate: str | None = None
    audio_channels: str | None = None
    original: SizeSpecificDetails | None = None
    small: SizeSpecificDetails | None = None
    focus: FocalPoint | None = None


@dataclass
class Attachment(Entity):
    """Attached media.

    Right after uploading large media `url` is None until the instance
    has finished processing it. See `Mastodon.wait_for_processing`.
    """

    id: str
    media_type: MediaType = renamed("type")
    url: str | None = None
    preview_url: str | None = None
    remote_url: str | None = None
    text_url: str | None = None
    meta: Meta | None = None
    description: str | None = None
    blurhash: str | None = None


@dataclass
class ProcessedAttachment(Entity):
    """Attachment whose media is ready to be used."""

    id: str
    media_type: MediaType = renamed("type")
    url: str = ""
    preview_url: str | None = None
    remote_url: str | None = None
    text_url: str | None = None
    meta: Meta | None = None
    description: str | None = None
    blurhash: str | None = None

    @classmethod
    def from_attachment(cls, attachment: Attachment) -> "ProcessedAttachment":
        return cls(
            id=attachment.id,
            media_type=attachment.media_type,
            url=attachment.url,
            preview_url=attachment.preview_url,
            remote_url=attachment.remote_url,
            text_url=attachment.text_url,
            meta=attachment.meta,
            description=attachment.description,
            blurhash=attachment.blurhash,
        )
