from dataclasses import dataclass
from datetime import datetime

from .base import Entity


@dataclass
class Marker(Entity):
    """Position saved in a timeline."""

    last_read_id: str
    version: int
    updated_at: datetime
