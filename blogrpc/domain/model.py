from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

# Media type reported when the client leaves ``type`` out of the struct.
MIME_TYPE_NOT_SENT = "notsent"


# --- Struct values ---


@dataclass(eq=True, frozen=True)
class PostValue:
    title: str
    description: str
    link: str = ""
    comment_policy: str = ""
    excerpt: str = ""
    slug: str = ""
    author_id: str = ""
    categories: Tuple[str, ...] = ()
    post_date: Optional[datetime] = None
    tags: Tuple[str, ...] = ()


@dataclass(eq=True, frozen=True)
class PageValue:
    title: str
    description: str
    link: Optional[str] = None
    page_date: Optional[datetime] = None
    keywords: str = ""
    page_parent_id: Optional[str] = None


@dataclass(eq=True, frozen=True)
class MediaObjectValue:
    name: str = ""
    mime_type: str = MIME_TYPE_NOT_SENT
    bits: bytes = b""
