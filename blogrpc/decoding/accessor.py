"""
Field access on XML-RPC values.

Every struct decoder reads members through ``StructAccessor`` so the
required/optional policy lives in one place.
"""
from __future__ import annotations

from typing import Dict, Optional, Tuple, TypeVar
from xml.etree.ElementTree import Element

from blogrpc.domain import exceptions

T = TypeVar("T")


def inner_text(node: Optional[Element]) -> str:
    """
    All descendant text of ``node`` concatenated. Whitespace-only text nodes
    are indentation from pretty-printed payloads and are skipped.
    """
    if node is None:
        return ""
    return "".join(text for text in node.itertext() if text.strip())


class StructAccessor:
    """Named members of the ``<struct>`` held by a param or value node."""

    def __init__(self, node: Element, kind: str) -> None:
        self.kind = kind
        self._members: Dict[str, Element] = {}
        struct = node.find("value/struct")
        if struct is None:
            return
        for member in struct.findall("member"):
            children = list(member)
            if not children:
                continue
            name = inner_text(member.find("name"))
            # first occurrence wins; the value is the member's last child
            self._members.setdefault(name, children[-1])

    def has(self, name: str) -> bool:
        return name in self._members

    def get_required(self, name: str) -> str:
        if name not in self._members:
            raise exceptions.MissingRequiredField(self.kind, name)
        return inner_text(self._members[name])

    def get_optional(self, name: str, default: T = None) -> str | T:
        if name not in self._members:
            return default
        return inner_text(self._members[name])

    def get_array(self, name: str) -> Tuple[str, ...]:
        """String items of an array member, in order. Absent member gives ``()``."""
        value = self._members.get(name)
        if value is None:
            return ()
        items = []
        for item in value.findall("array/data/value"):
            typed = list(item)
            if not typed:
                items.append(inner_text(item))
            elif typed[0].tag == "string":
                items.append(inner_text(typed[0]))
        return tuple(items)
