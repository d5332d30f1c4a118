from __future__ import annotations

import logging
from typing import Any

from blogrpc.adapters.executor import AbstractExecutor
from blogrpc.domain import commands

logger = logging.getLogger(__name__)


# --- Command handlers ---


def execute_command(cmd: commands.Command, executor: AbstractExecutor) -> Any:
    logger.debug("Executing %s as %s", cmd.method, type(cmd).__name__)
    return executor.execute(cmd)
