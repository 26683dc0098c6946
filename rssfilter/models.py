from typing import List, Optional
from pydantic import BaseModel

# Parsed source feed. Read-only input to the filter pipeline.

class FeedItem(BaseModel):
    title: str = ""
    link: str = ""
    description: str = ""
    author: Optional[str] = None
    # raw date string from the source, never reparsed
    published: Optional[str] = None

class SourceFeed(BaseModel):
    title: str = ""
    link: str = ""
    description: str = ""
    items: List[FeedItem] = []

# RSS 2.0 output document

class RssItem(BaseModel):
    title: str = ""
    link: str = ""
    description: str = ""
    author: str = ""
    pub_date: str = ""

class RssChannel(BaseModel):
    title: str = ""
    link: str = ""
    description: str = ""
    items: List[RssItem] = []

class RssDocument(BaseModel):
    version: str = "2.0"
    channel: RssChannel
