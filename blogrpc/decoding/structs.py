"""
Decoders for the Post, Page and MediaObject structs.

Required members raise ``MissingRequiredField``; every other member falls
back to a default. Dates are lenient: a bad date leaves the field unset.
"""
from __future__ import annotations

import base64
from typing import List, Tuple
from xml.etree.ElementTree import Element

from blogrpc.decoding.accessor import StructAccessor
from blogrpc.decoding.dates import parse_timestamp
from blogrpc.domain import exceptions
from blogrpc.domain.model import MIME_TYPE_NOT_SENT, MediaObjectValue, PageValue, PostValue


def split_tags(keywords: str) -> Tuple[str, ...]:
    """
    Comma separated keywords to tags. Each token is trimmed and tokens left
    empty are dropped; later tokens that match an earlier one ignoring case
    are dropped too.
    """
    tags: List[str] = []
    seen = set()
    for token in keywords.split(","):
        tag = token.strip()
        if not tag or tag.casefold() in seen:
            continue
        seen.add(tag.casefold())
        tags.append(tag)
    return tuple(tags)


def decode_post(node: Element) -> PostValue:
    struct = StructAccessor(node, kind="Post")
    title = struct.get_required("title")
    description = struct.get_required("description")

    # dateCreated wins; pubDate is only consulted when it yields nothing
    post_date = parse_timestamp(struct.get_optional("dateCreated"))
    if post_date is None:
        post_date = parse_timestamp(struct.get_optional("pubDate"))

    return PostValue(
        title=title,
        description=description,
        link=struct.get_optional("link", ""),
        comment_policy=struct.get_optional("mt_allow_comments", ""),
        excerpt=struct.get_optional("mt_excerpt", ""),
        slug=struct.get_optional("wp_slug", ""),
        author_id=struct.get_optional("wp_author_id", ""),
        categories=struct.get_array("categories"),
        post_date=post_date,
        tags=split_tags(struct.get_optional("mt_keywords", "")),
    )


def decode_page(node: Element) -> PageValue:
    struct = StructAccessor(node, kind="Page")
    title = struct.get_required("title")
    description = struct.get_required("description")

    return PageValue(
        title=title,
        description=description,
        link=struct.get_optional("link"),
        page_date=parse_timestamp(struct.get_optional("dateCreated")),
        keywords=struct.get_optional("mt_keywords", ""),
        page_parent_id=struct.get_optional("wp_page_parent_id"),
    )


def decode_media_object(node: Element) -> MediaObjectValue:
    struct = StructAccessor(node, kind="MediaObject")
    # base64 may arrive line-wrapped
    encoded = "".join(struct.get_optional("bits", "").split())
    try:
        bits = base64.b64decode(encoded, validate=True)
    except ValueError as e:
        raise exceptions.MalformedPayload(f"MediaObject bits are not valid base64: {e}") from e

    return MediaObjectValue(
        name=struct.get_optional("name", ""),
        mime_type=struct.get_optional("type", MIME_TYPE_NOT_SENT),
        bits=bits,
    )
