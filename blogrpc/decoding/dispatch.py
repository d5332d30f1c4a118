"""
Positional parameter schemas, keyed by XML-RPC method name.

Each slot names the command field it fills; ``decode`` walks the slots in
order and reads parameter ``i`` for slot ``i``.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple, Type

from blogrpc.domain import commands


class SlotKind(str, Enum):
    TEXT = "text"
    COUNT = "count"
    FLAG = "flag"
    POST = "post"
    PAGE = "page"
    MEDIA = "media"


class Slot(Enum):
    APP_KEY = ("app_key", SlotKind.TEXT)
    BLOG_ID = ("blog_id", SlotKind.TEXT)
    POST_ID = ("post_id", SlotKind.TEXT)
    PAGE_ID = ("page_id", SlotKind.TEXT)
    USER = ("username", SlotKind.TEXT)
    PASSWORD = ("password", SlotKind.TEXT)
    COUNT = ("number_of_posts", SlotKind.COUNT)
    PUBLISH = ("publish", SlotKind.FLAG)
    POST_STRUCT = ("post", SlotKind.POST)
    PAGE_STRUCT = ("page", SlotKind.PAGE)
    MEDIA_STRUCT = ("media_object", SlotKind.MEDIA)

    def __init__(self, field_name: str, kind: SlotKind) -> None:
        self.field_name = field_name
        self.kind = kind


@dataclass(frozen=True)
class MethodSchema:
    command: Type[commands.Command]
    slots: Tuple[Slot, ...]


_S = Slot

_BLOG_QUERY = (_S.BLOG_ID, _S.USER, _S.PASSWORD)
_APP_QUERY = (_S.APP_KEY, _S.USER, _S.PASSWORD)

METHODS: Mapping[str, MethodSchema] = MappingProxyType(
    {
        # metaWeblog
        "metaWeblog.newPost": MethodSchema(
            commands.NewPost, (_S.BLOG_ID, _S.USER, _S.PASSWORD, _S.POST_STRUCT, _S.PUBLISH)
        ),
        "metaWeblog.editPost": MethodSchema(
            commands.EditPost, (_S.POST_ID, _S.USER, _S.PASSWORD, _S.POST_STRUCT, _S.PUBLISH)
        ),
        "metaWeblog.getPost": MethodSchema(commands.GetPost, (_S.POST_ID, _S.USER, _S.PASSWORD)),
        "metaWeblog.newMediaObject": MethodSchema(
            commands.NewMediaObject, (_S.BLOG_ID, _S.USER, _S.PASSWORD, _S.MEDIA_STRUCT)
        ),
        "metaWeblog.getCategories": MethodSchema(commands.GetCategories, _BLOG_QUERY),
        "metaWeblog.getRecentPosts": MethodSchema(
            commands.GetRecentPosts, (_S.BLOG_ID, _S.USER, _S.PASSWORD, _S.COUNT)
        ),
        "metaWeblog.getUsersBlogs": MethodSchema(commands.GetUsersBlogs, _APP_QUERY),
        # blogger
        "blogger.getUsersBlogs": MethodSchema(commands.GetUsersBlogs, _APP_QUERY),
        "blogger.deletePost": MethodSchema(
            commands.DeletePost, (_S.APP_KEY, _S.POST_ID, _S.USER, _S.PASSWORD, _S.PUBLISH)
        ),
        "blogger.getUserInfo": MethodSchema(commands.GetUserInfo, _APP_QUERY),
        # wp
        "wp.getAuthors": MethodSchema(commands.GetAuthors, _BLOG_QUERY),
        "wp.getPageList": MethodSchema(commands.GetPageList, _BLOG_QUERY),
        "wp.getPages": MethodSchema(commands.GetPages, _BLOG_QUERY),
        "wp.getTags": MethodSchema(commands.GetTags, _BLOG_QUERY),
        "wp.newPage": MethodSchema(
            commands.NewPage, (_S.BLOG_ID, _S.USER, _S.PASSWORD, _S.PAGE_STRUCT, _S.PUBLISH)
        ),
        "wp.getPage": MethodSchema(commands.GetPage, (_S.BLOG_ID, _S.PAGE_ID, _S.USER, _S.PASSWORD)),
        "wp.editPage": MethodSchema(
            commands.EditPage,
            (_S.BLOG_ID, _S.PAGE_ID, _S.USER, _S.PASSWORD, _S.PAGE_STRUCT, _S.PUBLISH),
        ),
        "wp.deletePage": MethodSchema(
            commands.DeletePage, (_S.BLOG_ID, _S.USER, _S.PASSWORD, _S.PAGE_ID)
        ),
    }
)


def lookup(method: str) -> MethodSchema | None:
    return METHODS.get(method)
