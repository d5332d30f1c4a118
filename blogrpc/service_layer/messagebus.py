from __future__ import annotations

import logging
import uuid
from typing import Any, Callable, Dict, Type

from blogrpc.domain import commands, exceptions

logger = logging.getLogger(__name__)


class MessageBus:
    def __init__(self, command_handlers: Dict[Type[commands.Command], Callable]) -> None:
        self.command_handlers = command_handlers

    def handle(self, command: commands.Command) -> Any:
        message_id = uuid.uuid4()
        logger.debug("message %s handling command %s", message_id, type(command).__name__)
        handler = self.command_handlers.get(type(command))
        if handler is None:
            raise exceptions.UnhandledCommand(f"No handler for command type {type(command).__name__}")
        return handler(command)
