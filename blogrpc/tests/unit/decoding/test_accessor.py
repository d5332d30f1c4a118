import pytest
from defusedxml.ElementTree import fromstring

from blogrpc.decoding.accessor import StructAccessor, inner_text
from blogrpc.domain import exceptions
from blogrpc.tests.payloads import array, integer, string, struct, untyped


def param(value: str):
    return fromstring(f"<param>{value}</param>")


def test_inner_text_skips_indentation_but_keeps_inner_spaces():
    node = fromstring("<param>\n  <value>\n    <string> a b </string>\n  </value>\n</param>")

    assert inner_text(node) == " a b "
    assert inner_text(None) == ""


def test_required_member_returns_text():
    accessor = StructAccessor(param(struct(title=string("Hi"))), kind="Post")

    assert accessor.has("title")
    assert accessor.get_required("title") == "Hi"


def test_required_member_missing_raises_labelled_fault():
    accessor = StructAccessor(param(struct(title=string("Hi"))), kind="Page")

    with pytest.raises(exceptions.MissingRequiredField) as exc_info:
        accessor.get_required("description")

    assert exc_info.value.label == "Page.description"
    assert exc_info.value.code == "06"


def test_optional_member_falls_back_to_default():
    accessor = StructAccessor(param(struct(link=string(""))), kind="Post")

    assert accessor.get_optional("link", "x") == ""
    assert accessor.get_optional("slug", "") == ""
    assert accessor.get_optional("slug") is None


def test_first_member_with_a_name_wins():
    value = "<value><struct>" \
        "<member><name>title</name><value><string>first</string></value></member>" \
        "<member><name>title</name><value><string>second</string></value></member>" \
        "</struct></value>"

    assert StructAccessor(param(value), kind="Post").get_required("title") == "first"


def test_param_without_struct_has_no_members():
    accessor = StructAccessor(param(string("not a struct")), kind="Post")

    assert not accessor.has("title")
    with pytest.raises(exceptions.MissingRequiredField):
        accessor.get_required("title")


def test_array_keeps_order_and_duplicates():
    node = param(struct(categories=array(string("B"), string("A"), untyped("B"), integer(3))))

    assert StructAccessor(node, kind="Post").get_array("categories") == ("B", "A", "B")


def test_array_missing_member_is_empty():
    assert StructAccessor(param(struct()), kind="Post").get_array("categories") == ()
