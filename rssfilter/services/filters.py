import logging
from enum import Enum
from typing import Callable, Dict, Iterable, List, Mapping, Tuple, Union
from pydantic import BaseModel
from rssfilter.errors import ValidationError
from rssfilter.models import FeedItem

logger = logging.getLogger(__name__)

# Query parameter that names the source feed; never a filter.
URL_PARAM = "url"

QueryParams = Union[Mapping[str, str], Iterable[Tuple[str, str]]]

class FilterField(str, Enum):
    TITLE = "title"
    DESCRIPTION = "description"
    AUTHOR = "author"
    CONTENT = "content"

class Filter(BaseModel):
    field: FilterField
    value: str

def _contains(text: str, keyword: str) -> bool:
    return keyword in (text or "").lower()

def match_title(item: FeedItem, keyword: str) -> bool:
    return _contains(item.title, keyword)

def match_description(item: FeedItem, keyword: str) -> bool:
    return _contains(item.description, keyword)

def match_author(item: FeedItem, keyword: str) -> bool:
    # no author is a plain miss
    return bool(item.author) and _contains(item.author, keyword)

def match_content(item: FeedItem, keyword: str) -> bool:
    return (
        match_title(item, keyword)
        or match_description(item, keyword)
        or match_author(item, keyword)
    )

MATCHERS: Dict[FilterField, Callable[[FeedItem, str], bool]] = {
    FilterField.TITLE: match_title,
    FilterField.DESCRIPTION: match_description,
    FilterField.AUTHOR: match_author,
    FilterField.CONTENT: match_content,
}

def query_pairs(query_params: QueryParams) -> List[Tuple[str, str]]:
    """Normalize a mapping or a sequence of (name, value) pairs to a list of pairs."""
    if isinstance(query_params, Mapping):
        return list(query_params.items())
    return list(query_params)

def parse_filters(query_params: QueryParams) -> List[Filter]:
    """
    Build filters from query parameters. Every parameter except ``url`` names a
    field (case-insensitive) and its value is the keyword. Repeated names give
    one filter each. Raises ValidationError on the first unknown field name.
    """
    filters: List[Filter] = []
    for name, value in query_pairs(query_params):
        if name == URL_PARAM:
            continue
        try:
            field = FilterField(name.lower())
        except ValueError:
            raise ValidationError(f"invalid filter field: {name}") from None
        filters.append(Filter(field=field, value=value or ""))
    logger.debug("[filter] parsed %d filter(s)", len(filters))
    return filters

def passes_all_filters(item: FeedItem, filters: List[Filter]) -> bool:
    for f in filters:
        if not MATCHERS[f.field](item, f.value.lower()):
            return False
    return True
