import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional
from rssfilter.errors import EncodingError, FetchError, ValidationError
from rssfilter.models import RssDocument, SourceFeed
from rssfilter.services.feed_fetcher import fetch_feed
from rssfilter.services.filters import (
    URL_PARAM, Filter, QueryParams, parse_filters, passes_all_filters, query_pairs,
)
from rssfilter.services.rss_writer import CONTENT_TYPE, build_rss_document, encode_rss

logger = logging.getLogger(__name__)

MISSING_URL = "Missing 'url' parameter"
INVALID_PARAMS = "Invalid query parameters"
ENCODING_FAILED = "Error encoding XML"

Fetcher = Callable[[str], SourceFeed]

@dataclass
class FilterResponse:
    status_code: int
    body: str
    headers: Dict[str, str] = field(default_factory=dict)

def filter_feed(feed_url: str, filters: List[Filter], fetch: Optional[Fetcher] = None) -> RssDocument:
    feed = (fetch or fetch_feed)(feed_url)
    kept = [item for item in feed.items if passes_all_filters(item, filters)]
    logger.info("[filter] kept %d of %d item(s) from %s", len(kept), len(feed.items), feed_url)
    return build_rss_document(feed, kept)

def handle(query_params: QueryParams, fetch: Optional[Fetcher] = None) -> FilterResponse:
    """Run one filter request end to end and describe the HTTP reply."""
    params = query_pairs(query_params)
    feed_url = next((v for k, v in reversed(params) if k == URL_PARAM), "")
    if not feed_url:
        return FilterResponse(400, MISSING_URL)

    try:
        filters = parse_filters(params)
    except ValidationError as e:
        logger.warning("[filter] rejected request: %s", e)
        return FilterResponse(400, INVALID_PARAMS)

    try:
        doc = filter_feed(feed_url, filters, fetch=fetch)
    except FetchError as e:
        logger.error("[filter] fetch failed for %s: %s", feed_url, e)
        return FilterResponse(500, str(e))
    except Exception as e:
        logger.exception("[filter] unexpected error for %s", feed_url)
        return FilterResponse(500, str(e))

    try:
        body = encode_rss(doc)
    except EncodingError as e:
        logger.error("[filter] %s: %s", ENCODING_FAILED, e.__cause__)
        return FilterResponse(500, ENCODING_FAILED)
    except Exception:
        logger.exception("[filter] %s", ENCODING_FAILED)
        return FilterResponse(500, ENCODING_FAILED)

    return FilterResponse(200, body, {"Content-Type": CONTENT_TYPE})
