from dataclasses import dataclass, fields

from blogrpc.domain.model import MediaObjectValue, PageValue, PostValue


class Command:
    """Marker base class for commands."""

    def fields(self) -> dict:
        """
        Decoded values keyed by field name, in declaration order. The
        ``method`` tag is left out.
        """
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name != "method"}


# --- metaWeblog ---


@dataclass(frozen=True)
class NewPost(Command):
    method: str
    blog_id: str
    username: str
    password: str
    post: PostValue
    publish: bool


@dataclass(frozen=True)
class EditPost(Command):
    method: str
    post_id: str
    username: str
    password: str
    post: PostValue
    publish: bool


@dataclass(frozen=True)
class GetPost(Command):
    method: str
    post_id: str
    username: str
    password: str


@dataclass(frozen=True)
class NewMediaObject(Command):
    method: str
    blog_id: str
    username: str
    password: str
    media_object: MediaObjectValue


@dataclass(frozen=True)
class GetRecentPosts(Command):
    method: str
    blog_id: str
    username: str
    password: str
    number_of_posts: int


@dataclass(frozen=True)
class BlogQuery(Command):
    """Read-only listing scoped to one blog."""

    method: str
    blog_id: str
    username: str
    password: str


@dataclass(frozen=True)
class GetCategories(BlogQuery):
    pass


@dataclass(frozen=True)
class GetAuthors(BlogQuery):
    pass


@dataclass(frozen=True)
class GetPageList(BlogQuery):
    pass


@dataclass(frozen=True)
class GetPages(BlogQuery):
    pass


@dataclass(frozen=True)
class GetTags(BlogQuery):
    pass


# --- blogger ---


@dataclass(frozen=True)
class GetUsersBlogs(Command):
    method: str
    app_key: str
    username: str
    password: str


@dataclass(frozen=True)
class DeletePost(Command):
    method: str
    app_key: str
    post_id: str
    username: str
    password: str
    publish: bool


@dataclass(frozen=True)
class GetUserInfo(Command):
    method: str
    app_key: str
    username: str
    password: str


# --- wp ---


@dataclass(frozen=True)
class NewPage(Command):
    method: str
    blog_id: str
    username: str
    password: str
    page: PageValue
    publish: bool


@dataclass(frozen=True)
class GetPage(Command):
    method: str
    blog_id: str
    page_id: str
    username: str
    password: str


@dataclass(frozen=True)
class EditPage(Command):
    method: str
    blog_id: str
    page_id: str
    username: str
    password: str
    page: PageValue
    publish: bool


@dataclass(frozen=True)
class DeletePage(Command):
    method: str
    blog_id: str
    username: str
    password: str
    page_id: str
