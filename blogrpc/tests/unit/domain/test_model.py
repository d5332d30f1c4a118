import dataclasses

import pytest

from blogrpc.domain import commands
from blogrpc.domain.model import MIME_TYPE_NOT_SENT, MediaObjectValue, PageValue, PostValue


def test_post_value_is_frozen():
    post = PostValue(title="t", description="d", categories=("a",))

    with pytest.raises(dataclasses.FrozenInstanceError):
        post.title = "other"  # type: ignore[misc]


def test_value_defaults():
    assert PostValue(title="t", description="d").post_date is None
    assert PageValue(title="t", description="d").page_parent_id is None
    assert MediaObjectValue() == MediaObjectValue(name="", mime_type=MIME_TYPE_NOT_SENT, bits=b"")


def test_command_fields_follow_declaration_order_without_method():
    cmd = commands.DeletePage(method="wp.deletePage", blog_id="1", username="u", password="p", page_id="9")

    assert cmd.fields() == {"blog_id": "1", "username": "u", "password": "p", "page_id": "9"}


def test_commands_do_not_carry_fields_outside_their_schema():
    cmd = commands.GetPost(method="metaWeblog.getPost", post_id="1", username="u", password="p")

    assert not hasattr(cmd, "blog_id")
    assert not hasattr(cmd, "post")
    assert not hasattr(cmd, "publish")


def test_blog_queries_are_distinct_command_types():
    kwargs = dict(blog_id="1", username="u", password="p")

    tags = commands.GetTags(method="wp.getTags", **kwargs)
    pages = commands.GetPages(method="wp.getPages", **kwargs)

    assert isinstance(tags, commands.BlogQuery)
    assert tags != pages
    assert repr(tags).startswith("GetTags(")
