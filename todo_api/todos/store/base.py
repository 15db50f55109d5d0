from abc import ABC, abstractmethod
from datetime import datetime

from todo_api.todos.schemas import Todo, TodoUpdate


class TodoStore(ABC):
    """Keyed storage for todo records.

    Lookups by id that find nothing are not errors: updates return ``None`` and
    deletes do nothing.
    """

    @abstractmethod
    def insert(self, todo: Todo, timestamp: datetime) -> Todo:
        pass

    @abstractmethod
    def find_all(self) -> list[Todo]:
        pass

    @abstractmethod
    def update_by_id(self, todo_id: str, updates: TodoUpdate) -> Todo | None:
        pass

    @abstractmethod
    def delete_by_id(self, todo_id: str) -> None:
        pass

    @abstractmethod
    def delete_by_category(self, category: str) -> None:
        pass
