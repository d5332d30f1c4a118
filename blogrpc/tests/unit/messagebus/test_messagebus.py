import pytest

from blogrpc.domain import commands, exceptions
from blogrpc.service_layer.messagebus import MessageBus


class Dummy:
    def __init__(self):
        self.called = []

    def cmd_handler(self, cmd):
        self.called.append(("cmd", type(cmd).__name__))
        return "ok"


def get_tags():
    return commands.GetTags(method="wp.getTags", blog_id="1", username="u", password="p")


def test_messagebus_dispatches_command_and_returns_result():
    dummy = Dummy()
    bus = MessageBus(command_handlers={commands.GetTags: dummy.cmd_handler})

    assert bus.handle(get_tags()) == "ok"
    assert dummy.called == [("cmd", "GetTags")]


def test_messagebus_routes_on_exact_command_type():
    dummy = Dummy()
    bus = MessageBus(command_handlers={commands.BlogQuery: dummy.cmd_handler})

    with pytest.raises(exceptions.UnhandledCommand):
        bus.handle(get_tags())


def test_messagebus_requires_command_handler():
    bus = MessageBus(command_handlers={})

    with pytest.raises(exceptions.UnhandledCommand):
        bus.handle(get_tags())


def test_messagebus_propagates_handler_errors():
    def bad_handler(cmd):
        raise RuntimeError("boom")

    bus = MessageBus(command_handlers={commands.GetTags: bad_handler})

    with pytest.raises(RuntimeError):
        bus.handle(get_tags())
