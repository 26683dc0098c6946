import httpx
import pytest
from rssfilter.config import settings
from rssfilter.errors import FetchError
from rssfilter.services.feed_fetcher import fetch_feed, parse_feed

RSS_BODY = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:dc="http://purl.org/dc/elements/1.1/">
  <channel>
    <title>Example News</title>
    <link>https://example.com/</link>
    <description>All the news</description>
    <item>
      <title>Go Release</title>
      <link>https://example.com/go</link>
      <description>Go 1.22 is out</description>
      <dc:creator>Rob Pike</dc:creator>
      <pubDate>Mon, 01 Jan 2024 10:00:00 GMT</pubDate>
    </item>
    <item>
      <title>Python News</title>
      <link>https://example.com/py</link>
      <description>PEP roundup</description>
    </item>
  </channel>
</rss>
"""

ATOM_BODY = b"""<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Atom Example</title>
  <link href="https://atom.example.com/"/>
  <subtitle>Atom things</subtitle>
  <id>urn:example:feed</id>
  <updated>2024-01-02T03:04:05Z</updated>
  <entry>
    <title>First entry</title>
    <link href="https://atom.example.com/1"/>
    <id>urn:example:1</id>
    <updated>2024-01-02T03:04:05Z</updated>
    <published>2024-01-02T03:04:05Z</published>
    <summary>Entry summary</summary>
    <author><name>Jane Doe</name></author>
  </entry>
</feed>
"""

def transport_for(body=RSS_BODY, status=200, seen=None):
    def handler(request):
        if seen is not None:
            seen.append(request)
        return httpx.Response(status, content=body, headers={"content-type": "application/rss+xml"})
    return httpx.MockTransport(handler)


def test_rss_feed_is_mapped():
    feed = fetch_feed("https://example.com/feed", transport=transport_for())
    assert feed.title == "Example News"
    assert feed.link == "https://example.com/"
    assert feed.description == "All the news"
    assert [i.title for i in feed.items] == ["Go Release", "Python News"]
    first, second = feed.items
    assert first.link == "https://example.com/go"
    assert first.description == "Go 1.22 is out"
    assert first.author == "Rob Pike"
    assert first.published == "Mon, 01 Jan 2024 10:00:00 GMT"
    assert second.author is None
    assert second.published is None

def test_atom_feed_is_mapped():
    feed = parse_feed(ATOM_BODY, "application/atom+xml")
    assert feed.title == "Atom Example"
    assert feed.link == "https://atom.example.com/"
    assert feed.description == "Atom things"
    (entry,) = feed.items
    assert entry.title == "First entry"
    assert entry.link == "https://atom.example.com/1"
    assert entry.description == "Entry summary"
    assert entry.author == "Jane Doe"
    assert entry.published == "2024-01-02T03:04:05Z"

def test_request_uses_configured_timeout_and_user_agent(monkeypatch):
    monkeypatch.setattr(settings, "fetch_timeout", 3.5)
    monkeypatch.setattr(settings, "user_agent", "test-agent/1.0")
    seen = []
    fetch_feed("https://example.com/feed", transport=transport_for(seen=seen))
    (request,) = seen
    assert request.headers["user-agent"] == "test-agent/1.0"
    assert request.extensions["timeout"]["read"] == 3.5

def test_explicit_timeout_overrides_settings():
    seen = []
    fetch_feed("https://example.com/feed", timeout=1.0, transport=transport_for(seen=seen))
    assert seen[0].extensions["timeout"]["connect"] == 1.0

def test_http_error_status_raises_fetch_error():
    with pytest.raises(FetchError) as exc:
        fetch_feed("https://example.com/missing", transport=transport_for(body=b"nope", status=404))
    assert "404" in str(exc.value)

def test_transport_error_raises_fetch_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)
    with pytest.raises(FetchError, match="connection refused"):
        fetch_feed("https://example.com/feed", transport=httpx.MockTransport(handler))

def test_non_feed_body_raises_fetch_error():
    with pytest.raises(FetchError):
        fetch_feed("https://example.com/feed", transport=transport_for(body=b"this is not a feed"))

HTML_BODY = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Markup</title>
    <link>https://example.com/</link>
    <description>Raw HTML descriptions</description>
    <item>
      <title>Tracked post</title>
      <link>https://example.com/tracked</link>
      <description>&lt;p style="color:red"&gt;Hi&lt;/p&gt;&lt;script&gt;track()&lt;/script&gt;&lt;img src="/rel.png"&gt;</description>
    </item>
  </channel>
</rss>
"""

ATOM_UPDATED_ONLY = b"""<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Atom Example</title>
  <id>urn:example:feed</id>
  <updated>2024-03-04T05:06:07Z</updated>
  <entry>
    <title>Only updated</title>
    <link href="https://atom.example.com/2"/>
    <id>urn:example:2</id>
    <updated>2024-03-04T05:06:07Z</updated>
  </entry>
</feed>
"""

def test_html_description_is_kept_verbatim():
    feed = fetch_feed("https://example.com/feed", transport=transport_for(body=HTML_BODY))
    (item,) = feed.items
    assert item.description == '<p style="color:red">Hi</p><script>track()</script><img src="/rel.png">'

def test_atom_entry_without_published_uses_updated():
    feed = parse_feed(ATOM_UPDATED_ONLY, "application/atom+xml")
    assert feed.items[0].published == "2024-03-04T05:06:07Z"
