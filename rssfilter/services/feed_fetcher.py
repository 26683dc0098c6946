import logging
from typing import Optional
import feedparser
import httpx
from rssfilter.config import settings
from rssfilter.errors import FetchError
from rssfilter.models import FeedItem, SourceFeed

logger = logging.getLogger(__name__)

def _author_name(entry) -> Optional[str]:
    # Flatten feedparser's structured author to a display name
    detail = entry.get("author_detail") or {}
    name = detail.get("name") or entry.get("author")
    return name or None

def _to_item(entry) -> FeedItem:
    return FeedItem(
        title=entry.get("title", ""),
        link=entry.get("link", ""),
        description=entry.get("summary", "") or entry.get("description", ""),
        author=_author_name(entry),
        # Atom entries without <published> fall back to <updated>
        published=entry.get("published") or entry.get("updated") or None,
    )

def parse_feed(content: bytes, content_type: Optional[str] = None) -> SourceFeed:
    headers = {"content-type": content_type} if content_type else None
    # keep item markup exactly as the source wrote it
    parsed = feedparser.parse(
        content, response_headers=headers,
        sanitize_html=False, resolve_relative_uris=False,
    )
    if not parsed.get("version"):
        # feedparser never raises; an undetected format means the body is not a feed
        err = parsed.get("bozo_exception")
        raise FetchError(str(err) if err else "Failed to detect feed type")

    meta = parsed.feed
    return SourceFeed(
        title=meta.get("title", ""),
        link=meta.get("link", ""),
        description=meta.get("subtitle", "") or meta.get("description", ""),
        items=[_to_item(e) for e in parsed.entries],
    )

def fetch_feed(feed_url: str, timeout: Optional[float] = None,
               transport: Optional[httpx.BaseTransport] = None) -> SourceFeed:
    timeout = settings.fetch_timeout if timeout is None else timeout
    headers = {"User-Agent": settings.user_agent}
    try:
        with httpx.Client(timeout=timeout, follow_redirects=True, transport=transport) as client:
            r = client.get(feed_url, headers=headers)
            r.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error("[fetch] %s failed: %s", feed_url, e)
        raise FetchError(str(e)) from e

    feed = parse_feed(r.content, r.headers.get("content-type"))
    logger.info("[fetch] %s -> %d item(s)", feed_url, len(feed.items))
    return feed
