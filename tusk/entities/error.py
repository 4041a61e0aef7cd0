from dataclasses import dataclass, field

from ..errors import ErrorCode
from .base import Entity


@dataclass
class ApiErrorDetail(Entity):
    """Why one attribute failed validation."""

    error: str
    description: str = ""

    @property
    def code(self) -> ErrorCode | None:
        """The `error` as an `ErrorCode`, or None if it is not one we know."""
        try:
            return ErrorCode(self.error)
        except ValueError:
            return None


@dataclass
class ApiErrorResponse(Entity):
    """Body of an error response."""

    error: str | None = None
    error_description: str | None = None
    details: dict[str, list[ApiErrorDetail]] = field(default_factory=dict)
