from typing import AsyncGenerator
import os

# Force test configuration for all imports
os.environ.setdefault("ENV", "test")

import pytest
from httpx import AsyncClient, ASGITransport

from blogrpc import bootstrap
from blogrpc.adapters.executor import FakeExecutor
from blogrpc.main import app

@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"

@pytest.fixture()
def fake_executor(monkeypatch) -> FakeExecutor:
    """Route every decoded command to a recording executor instead of the echo one."""
    executor = FakeExecutor(result={"ok": True})
    bus = bootstrap.bootstrap(executor=executor)
    monkeypatch.setattr(bootstrap, "get_message_bus", lambda: bus)
    return executor

@pytest.fixture()
async def async_client() -> AsyncGenerator:
    """A client for making asynchronous requests to the app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver", timeout=5.0) as ac:
        yield ac
