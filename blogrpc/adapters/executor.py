from __future__ import annotations

import abc
import dataclasses
import logging
from typing import Any, Dict

from blogrpc.domain import commands
from blogrpc.domain.model import MediaObjectValue

logger = logging.getLogger(__name__)


class AbstractExecutor(abc.ABC):
    @abc.abstractmethod
    def execute(self, command: commands.Command) -> Any:
        raise NotImplementedError


def describe(command: commands.Command) -> Dict[str, Any]:
    """
    XML-RPC friendly view of a command: no password, no ``None`` values,
    media bits reduced to their size.
    """
    described: Dict[str, Any] = {"method": command.method}
    for name, value in command.fields().items():
        if name == "password":
            continue
        if isinstance(value, MediaObjectValue):
            value = {"name": value.name, "type": value.mime_type, "size": len(value.bits)}
        elif dataclasses.is_dataclass(value):
            value = {k: v for k, v in dataclasses.asdict(value).items() if v is not None}
        described[name] = value
    return described


class EchoExecutor(AbstractExecutor):
    def execute(self, command: commands.Command) -> Any:
        described = describe(command)
        logger.info("Echoing %s for %s", command.method, described.get("username"))
        return described


class FakeExecutor(AbstractExecutor):
    def __init__(self, result: Any = True):
        self.result = result
        self.executed = []

    def execute(self, command: commands.Command) -> Any:
        self.executed.append(command)
        return self.result
