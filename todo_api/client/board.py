import logging
from dataclasses import dataclass

from todo_api.client.client import TodoClient
from todo_api.todos.schemas import Todo, TodoPriority

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardSnapshot:
    todos: tuple[Todo, ...] = ()

    def get(self, todo_id: str) -> Todo | None:
        return next((todo for todo in self.todos if todo.id == todo_id), None)

    def categories(self) -> tuple[str, ...]:
        """Distinct categories in the order they first appear."""
        return tuple(dict.fromkeys(todo.category for todo in self.todos))

    def grouped(self) -> dict[str, tuple[Todo, ...]]:
        groups: dict[str, list[Todo]] = {}
        for todo in self.todos:
            groups.setdefault(todo.category, []).append(todo)
        return {category: tuple(todos) for category, todos in groups.items()}


class TodoBoard:
    """Client-side view of the todo collection.

    The board holds a single snapshot that is only ever replaced, never
    edited. Every mutation goes to the server first and is followed by a
    fresh fetch, so the snapshot always mirrors what the server stores.
    """

    def __init__(self, client: TodoClient):
        self.client = client
        self.snapshot = BoardSnapshot()

    async def refresh(self) -> BoardSnapshot:
        todos = await self.client.list_todos()
        self.snapshot = BoardSnapshot(todos=tuple(todos))
        return self.snapshot

    async def add(
        self, text: str, category: str, priority: str = TodoPriority.LOW.value
    ) -> BoardSnapshot:
        if not text.strip() or not category.strip():
            logger.debug("Ignoring todo with blank text or category")
            return self.snapshot

        await self.client.create_todo(text, category, priority)
        return await self.refresh()

    async def toggle(self, todo_id: str) -> BoardSnapshot:
        todo = self.snapshot.get(todo_id)
        if todo is None:
            logger.warning(f"Todo {todo_id} is not on the board")
            return await self.refresh()

        await self.client.set_completed(todo_id, not todo.completed)
        return await self.refresh()

    async def remove(self, todo_id: str) -> BoardSnapshot:
        await self.client.delete_todo(todo_id)
        return await self.refresh()

    async def remove_category(self, category: str) -> BoardSnapshot:
        await self.client.delete_category(category)
        return await self.refresh()
