"""Creating filters."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from ..entities.filter import FilterAction, FilterContext
from .base import Form


@dataclass
class AddFilterRequest(Form):
    """Body for the v1 filters API. `expires_in` is sent in seconds."""

    phrase: str
    context: list[FilterContext]
    irreversible: bool | None = None
    whole_word: bool | None = None
    expires_in: timedelta | None = None


@dataclass
class FilterKeywordAttributes(Form):
    keyword: str
    whole_word: bool = False


@dataclass
class AddFilterV2Request(Form):
    """Body for the v2 filters API, which groups keywords under a title."""

    title: str
    context: list[FilterContext]
    filter_action: FilterAction = FilterAction.WARN
    expires_at: datetime | None = None
    keywords_attributes: list[FilterKeywordAttributes] = field(default_factory=list)

    def with_keyword(self, keyword, whole_word=False):
        self.keywords_attributes.append(FilterKeywordAttributes(keyword, whole_word))
        return self
