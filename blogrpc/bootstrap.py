from __future__ import annotations

from functools import lru_cache, partial
from typing import Callable, Dict, Type

from blogrpc.adapters.executor import AbstractExecutor, EchoExecutor
from blogrpc.decoding.dispatch import METHODS
from blogrpc.domain import commands
from blogrpc.service_layer import handlers
from blogrpc.service_layer.messagebus import MessageBus


def bootstrap(executor: AbstractExecutor | None = None) -> MessageBus:
    executor = executor or EchoExecutor()

    command_handlers: Dict[Type[commands.Command], Callable] = {
        schema.command: partial(handlers.execute_command, executor=executor)
        for schema in METHODS.values()
    }

    return MessageBus(command_handlers=command_handlers)


@lru_cache()
def get_message_bus() -> MessageBus:
    return bootstrap()
