import logging
from types import TracebackType
from typing import Any, Type
from urllib.parse import quote
from aiohttp import ClientError, ClientResponse, ClientSession

from todo_api.client.exceptions import TodoClientException
from todo_api.todos.schemas import Todo, TodoPriority


logger = logging.getLogger(__name__)


class TodoClient:
    def __init__(self, *, base_url: str, user_agent: str = "todo-api-client"):
        self.base_url = base_url.rstrip("/")
        self.session: ClientSession = ClientSession(
            headers={
                "Accept": "application/json",
                "User-Agent": user_agent,
            }
        )

    async def __aenter__(self):
        return self

    async def __aexit__(
        self, exc_type: Type[Exception], exc: Exception, tb: TracebackType
    ):
        if self.session:
            await self.session.close()

    async def _error_detail(self, response: ClientResponse) -> str:
        try:
            body = await response.json(content_type=None)
        except ValueError:
            return response.reason or "Unknown error"
        if isinstance(body, dict) and "detail" in body:
            return str(body["detail"])
        return str(body)

    async def request(
        self, method: str, path: str, json: dict[str, Any] | None = None
    ) -> Any | None:
        url = f"{self.base_url}{path}"
        try:
            async with self.session.request(method, url, json=json) as response:
                if response.status >= 400:
                    detail = await self._error_detail(response)
                    raise TodoClientException(
                        f"{method} {path} failed with status {response.status}: {detail}",
                        status=response.status,
                    )
                if response.status == 204:
                    return None
                return await response.json()
        except ClientError as e:
            logger.exception(f"HTTP request to {url} failed")
            raise TodoClientException(f"{method} {path} failed: {e}") from e

    async def list_todos(self) -> list[Todo]:
        data = await self.request("GET", "/todos")
        return [Todo.model_validate(todo) for todo in data or []]

    async def create_todo(
        self, text: str, category: str, priority: str = TodoPriority.LOW.value
    ) -> Todo:
        data = await self.request(
            "POST",
            "/todos",
            json={"text": text, "category": category, "priority": priority},
        )
        return Todo.model_validate(data)

    async def set_completed(self, todo_id: str, completed: bool) -> Todo | None:
        data = await self.request(
            "PATCH", f"/todos/{quote(todo_id, safe='')}", json={"completed": completed}
        )
        return Todo.model_validate(data) if data is not None else None

    async def delete_todo(self, todo_id: str) -> None:
        await self.request("DELETE", f"/todos/{quote(todo_id, safe='')}")

    async def delete_category(self, category: str) -> None:
        # "/todos/category/" does not match the route
        if not category:
            raise TodoClientException("Category must not be empty")
        await self.request("DELETE", f"/todos/category/{quote(category, safe='')}")
