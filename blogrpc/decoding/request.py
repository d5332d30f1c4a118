"""
Entry point of the decoder: raw XML-RPC bytes to a command.

    <?xml version="1.0"?>
    <methodCall>
      <methodName>metaWeblog.getRecentPosts</methodName>
      <params>
        <param><value><string>1</string></value></param>
        <param><value><string>admin</string></value></param>
        <param><value><string>secret</string></value></param>
        <param><value><int>10</int></value></param>
      </params>
    </methodCall>
    ==> GetRecentPosts(method="metaWeblog.getRecentPosts", blog_id="1",
                       username="admin", password="secret", number_of_posts=10)

The payload is always parsed with ``defusedxml``; entity declarations and
external references are refused.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Callable, Dict, List
from xml.etree.ElementTree import Element, ParseError

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import fromstring

from blogrpc.decoding import structs
from blogrpc.decoding.accessor import inner_text
from blogrpc.decoding.dispatch import Slot, SlotKind, lookup
from blogrpc.domain import commands, exceptions

logger = logging.getLogger(__name__)

INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
_INTEGER_RE = re.compile(r"\s*[+-]?[0-9]+\s*")
FALSE_FLAGS = ("0", "false")

_STRUCT_DECODERS: Dict[SlotKind, Callable[[Element], Any]] = {
    SlotKind.POST: structs.decode_post,
    SlotKind.PAGE: structs.decode_page,
    SlotKind.MEDIA: structs.decode_media_object,
}


def _to_text(payload: bytes) -> str:
    try:
        text = payload.decode("utf-8")
    except UnicodeDecodeError as e:
        raise exceptions.MalformedPayload(str(e)) from e

    text = text.lstrip("\ufeff \t\r\n")
    # Some clients send junk ahead of the XML declaration
    if not (text.startswith("<?xml") or text.startswith("<method")):
        start = text.find("<?xml")
        if start < 0:
            raise exceptions.MalformedPayload("no XML document found")
        text = text[start:]
    return text


def parse_document(payload: bytes) -> Element:
    text = _to_text(payload)
    try:
        return fromstring(text)
    except (ParseError, DefusedXmlException) as e:
        raise exceptions.MalformedPayload(str(e)) from e


def parse_count(method: str, index: int, text: str) -> int:
    if not _INTEGER_RE.fullmatch(text):
        raise exceptions.InvalidParameter(method, index, f"{text!r} is not an integer")
    value = int(text)
    if not INT32_MIN <= value <= INT32_MAX:
        raise exceptions.InvalidParameter(method, index, f"{value} is out of range")
    return value


def parse_flag(text: str) -> bool:
    return text not in FALSE_FLAGS


def _read_slot(method: str, index: int, slot: Slot, param: Element) -> Any:
    if slot.kind in _STRUCT_DECODERS:
        return _STRUCT_DECODERS[slot.kind](param)
    text = inner_text(param)
    if slot.kind is SlotKind.COUNT:
        return parse_count(method, index, text)
    if slot.kind is SlotKind.FLAG:
        return parse_flag(text)
    return text


def decode(payload: bytes) -> commands.Command:
    """
    Decode one XML-RPC method call into the command for its method.

    Raises a ``DecodeFault`` subclass on the first problem found; nothing
    partially decoded is ever returned.
    """
    root = parse_document(payload)
    if len(root) == 0:
        raise exceptions.MalformedPayload("method name not found")
    method = inner_text(root[0])

    params: List[Element] = root.findall("params/param") if root.tag == "methodCall" else []

    schema = lookup(method)
    if schema is None:
        raise exceptions.UnknownMethod(method)

    values = {}
    for index, slot in enumerate(schema.slots):
        if index >= len(params):
            raise exceptions.MissingParameter(method, index)
        values[slot.field_name] = _read_slot(method, index, slot, params[index])

    logger.debug("Decoded %s with %d params into %s", method, len(params), schema.command.__name__)
    return schema.command(method=method, **values)
