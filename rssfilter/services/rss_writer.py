import re
import xml.etree.ElementTree as ET
from typing import Iterable
from rssfilter.errors import EncodingError
from rssfilter.models import FeedItem, RssChannel, RssDocument, RssItem, SourceFeed

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'
CONTENT_TYPE = "application/rss+xml"

def to_rss_item(item: FeedItem) -> RssItem:
    return RssItem(
        title=item.title,
        link=item.link,
        description=item.description,
        author=item.author or "",
        pub_date=item.published or "",
    )

def build_rss_document(feed: SourceFeed, items: Iterable[FeedItem]) -> RssDocument:
    """Channel metadata always comes from ``feed``; ``items`` are the survivors, in order."""
    return RssDocument(
        channel=RssChannel(
            title=feed.title,
            link=feed.link,
            description=feed.description,
            items=[to_rss_item(i) for i in items],
        )
    )

# Anything outside the XML 1.0 Char production; ElementTree writes these unescaped
_INVALID_XML_CHARS = re.compile(
    "[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)

def _sub(parent: ET.Element, tag: str, text: str) -> ET.Element:
    el = ET.SubElement(parent, tag)
    el.text = _INVALID_XML_CHARS.sub("\ufffd", text)
    return el

def _to_element(doc: RssDocument) -> ET.Element:
    rss = ET.Element("rss", {"version": doc.version})
    channel = ET.SubElement(rss, "channel")
    _sub(channel, "title", doc.channel.title)
    _sub(channel, "link", doc.channel.link)
    _sub(channel, "description", doc.channel.description)
    for item in doc.channel.items:
        el = ET.SubElement(channel, "item")
        _sub(el, "title", item.title)
        _sub(el, "link", item.link)
        _sub(el, "description", item.description)
        # optional elements are left out rather than written empty
        if item.author:
            _sub(el, "author", item.author)
        if item.pub_date:
            _sub(el, "pubDate", item.pub_date)
    return rss

def encode_rss(doc: RssDocument) -> str:
    try:
        root = _to_element(doc)
        ET.indent(root, space="  ")
        return XML_HEADER + ET.tostring(root, encoding="unicode", short_empty_elements=False)
    except (TypeError, ValueError) as e:
        raise EncodingError("Error encoding XML") from e
