from datetime import datetime
from typing import TypedDict
from redis.client import Pipeline

from todo_api.common.redis import RedisClient
from todo_api.todos.store.base import TodoStore
from todo_api.todos.schemas import Todo, TodoUpdate


class UpdateMapping(TypedDict, total=False):
    completed: int


TODO_FIELDS = ("id", "text", "category", "priority", "completed")


class RedisTodoStore(TodoStore):
    """Stores each todo as a hash and keeps one id set per category.

    Keys:
        ``{prefix}:todo:{id}``: hash with the todo fields and ``created_at``
        ``{prefix}:category:{category}``: set of todo ids in that category
    """

    def __init__(self, *, redis_client: RedisClient, key_prefix: str):
        self.client = redis_client
        self.key_prefix = key_prefix

    def _get_todo_key(self, todo_id: str) -> str:
        return f"{self.key_prefix}:todo:{todo_id}"

    def _get_category_key(self, category: str) -> str:
        return f"{self.key_prefix}:category:{category}"

    def _to_todo(self, todo: dict[str, str]) -> Todo:
        return Todo(
            id=todo["id"],
            text=todo["text"],
            category=todo["category"],
            priority=todo["priority"],
            completed=todo["completed"] == "1",
        )

    def _get_todo(self, todo_key: str) -> Todo | None:
        todo = self.client.hgetall(todo_key)
        if not todo:
            return None
        return self._to_todo(todo)

    def insert(self, todo: Todo, timestamp: datetime) -> Todo:
        pipeline = self.client.pipeline()
        pipeline.hset(
            self._get_todo_key(todo.id),
            mapping={
                "id": todo.id,
                "text": todo.text,
                "category": todo.category,
                "priority": todo.priority,
                "completed": int(todo.completed),
                "created_at": timestamp.isoformat(),
            },
        )
        pipeline.sadd(self._get_category_key(todo.category), todo.id)
        pipeline.execute()

        return todo

    def find_all(self) -> list[Todo]:
        todo_keys = self.client.keys(f"{self.key_prefix}:todo:*")

        todos: list[dict[str, str]] = []
        for key in todo_keys:
            todo = self.client.hgetall(key)
            # Deleted between the key scan and the read, or left partial
            if all(field in todo for field in TODO_FIELDS):
                todos.append(todo)

        todos.sort(key=lambda todo: todo.get("created_at", ""))
        return [self._to_todo(todo) for todo in todos]

    def update_by_id(self, todo_id: str, updates: TodoUpdate) -> Todo | None:
        todo_key = self._get_todo_key(todo_id)

        update_mapping: UpdateMapping = {}

        if updates.completed is not None:
            update_mapping["completed"] = int(updates.completed)

        def apply_update(pipeline: Pipeline) -> bool:
            # Runs under WATCH: a concurrent delete aborts and retries the write
            if not pipeline.exists(todo_key):
                return False
            pipeline.multi()
            if update_mapping:
                pipeline.hset(todo_key, mapping=update_mapping)  # type: ignore
            return True

        if not self.client.transaction(
            apply_update, todo_key, value_from_callable=True
        ):
            return None

        return self._get_todo(todo_key)

    def delete_by_id(self, todo_id: str) -> None:
        todo_key = self._get_todo_key(todo_id)
        category = self.client.hget(todo_key, "category")

        if category is None:
            return

        pipeline = self.client.pipeline()
        pipeline.delete(todo_key)
        pipeline.srem(self._get_category_key(category), todo_id)
        pipeline.execute()

    def delete_by_category(self, category: str) -> None:
        category_key = self._get_category_key(category)
        todo_ids = self.client.smembers(category_key)

        if not todo_ids:
            return

        # Only the ids read above leave the index, so todos inserted meanwhile stay
        pipeline = self.client.pipeline()
        for todo_id in todo_ids:
            pipeline.delete(self._get_todo_key(todo_id))
        pipeline.srem(category_key, *todo_ids)
        pipeline.execute()
