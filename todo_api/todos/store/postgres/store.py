from datetime import datetime
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from todo_api.todos.store.base import TodoStore
from todo_api.todos.store.postgres.model import Base, TodoModel
from todo_api.todos.schemas import Todo, TodoUpdate


def _to_schema(todo: TodoModel) -> Todo:
    return Todo(
        id=todo.id,
        text=todo.text,
        category=todo.category,
        priority=todo.priority,
        completed=todo.completed,
    )


class PostgresTodoStore(TodoStore):
    def __init__(self, database_url: str):
        self.engine = create_engine(database_url)
        self.Session = sessionmaker(bind=self.engine)
        Base.metadata.create_all(self.engine)

    def insert(self, todo: Todo, timestamp: datetime) -> Todo:
        with self.Session() as session:
            session.add(
                TodoModel(
                    id=todo.id,
                    text=todo.text,
                    category=todo.category,
                    priority=todo.priority,
                    completed=todo.completed,
                    created_at=timestamp,
                )
            )
            session.commit()

        return todo

    def find_all(self) -> list[Todo]:
        with self.Session() as session:
            todos = session.query(TodoModel).order_by(TodoModel.created_at).all()
            return [_to_schema(todo) for todo in todos]

    def update_by_id(self, todo_id: str, updates: TodoUpdate) -> Todo | None:
        with self.Session() as session:
            todo = session.get(TodoModel, todo_id)

            if not todo:
                return None

            if updates.completed is not None:
                todo.completed = updates.completed

            session.commit()
            session.refresh(todo)

            return _to_schema(todo)

    def delete_by_id(self, todo_id: str) -> None:
        with self.Session() as session:
            session.query(TodoModel).filter_by(id=todo_id).delete()
            session.commit()

    def delete_by_category(self, category: str) -> None:
        with self.Session() as session:
            session.query(TodoModel).filter_by(category=category).delete()
            session.commit()
