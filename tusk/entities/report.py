from dataclasses import dataclass
from enum import Enum

from .base import Entity


class ReportCategory(str, Enum):
    SPAM = "spam"
    VIOLATION = "violation"
    OTHER = "other"


@dataclass
class Report(Entity):
    """A report we have filed."""

    id: str
    action_taken: bool = False
