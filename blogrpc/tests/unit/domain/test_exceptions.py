import pytest

from blogrpc.domain import exceptions


@pytest.mark.parametrize(
    "fault,code",
    [
        (exceptions.MalformedPayload("bad"), "01"),
        (exceptions.UnknownMethod("x.y"), "02"),
        (exceptions.MissingParameter("wp.getTags", 2), "03"),
        (exceptions.InvalidParameter("metaWeblog.getRecentPosts", 3, "not an integer"), "04"),
        (exceptions.MissingRequiredField("Post", "title"), "05"),
        (exceptions.MissingRequiredField("Page", "title"), "06"),
    ],
)
def test_fault_codes_are_stable(fault, code):
    assert fault.code == code
    assert fault.fault_code == int(code)
    assert isinstance(fault, exceptions.DomainError)
    assert str(fault) == fault.message


def test_fault_messages():
    assert exceptions.MalformedPayload("boom").message == "Invalid XMLRPC Request. (boom)"
    assert exceptions.UnknownMethod("x.y").message == "Unknown Method. (x.y)"
    assert exceptions.MissingRequiredField("Page", "description").message == \
        "Page Struct Element, Description, not Sent."


def test_missing_required_field_keeps_kind_and_name():
    fault = exceptions.MissingRequiredField("Post", "title")

    assert (fault.struct_kind, fault.field_name, fault.label) == ("Post", "title", "Post.title")


def test_unhandled_command_is_not_a_decode_fault():
    assert not issubclass(exceptions.UnhandledCommand, exceptions.DecodeFault)
