from typing import AsyncGenerator

import pytest

from todo_api.client.client import TodoClient


@pytest.fixture
async def todo_client() -> AsyncGenerator[TodoClient, None]:
    async with TodoClient(base_url="http://todo.test/") as client:
        yield client
