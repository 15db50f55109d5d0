import logging
from uuid import UUID, uuid4

from todo_api.common.current_datetime import get_current_datetime
from todo_api.common.exceptions import InvalidIdentifierException, ResourceType
from todo_api.todos.schemas import (
    CreateTodoRequest,
    Todo,
    TodoUpdate,
    UpdateTodoRequest,
)
from todo_api.todos.store.base import TodoStore

logger = logging.getLogger(__name__)


def validate_todo_id(todo_id: str) -> str:
    try:
        UUID(todo_id)
    except ValueError as e:
        raise InvalidIdentifierException(ResourceType.TODO, todo_id) from e
    return todo_id


class TodoService:
    def __init__(self, todo_store: TodoStore):
        self.todo_store = todo_store

    def list_todos(self) -> list[Todo]:
        return self.todo_store.find_all()

    def create_todo(self, todo_input: CreateTodoRequest) -> Todo:
        todo = self.todo_store.insert(
            Todo(
                id=str(uuid4()),
                text=todo_input.text,
                category=todo_input.category,
                priority=todo_input.priority,
                completed=False,
            ),
            timestamp=get_current_datetime(),
        )
        logger.info(f"Todo created: {todo.id} in category '{todo.category}'")
        return todo

    def update_todo(self, todo_id: str, todo_input: UpdateTodoRequest) -> Todo | None:
        todo = self.todo_store.update_by_id(
            validate_todo_id(todo_id),
            TodoUpdate(completed=todo_input.completed),
        )

        if todo is None:
            logger.info(f"Todo {todo_id} not found, nothing to update")
        else:
            logger.info(f"Todo updated: {todo_id} completed={todo.completed}")

        return todo

    def delete_todo(self, todo_id: str) -> None:
        self.todo_store.delete_by_id(validate_todo_id(todo_id))
        logger.info(f"Todo deleted: {todo_id}")

    def delete_category(self, category: str) -> None:
        self.todo_store.delete_by_category(category)
        logger.info(f"Todos deleted in category '{category}'")
