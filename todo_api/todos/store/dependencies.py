from fastapi import Request

from todo_api.todos.store.base import TodoStore


def get_todo_store(request: Request) -> TodoStore:
    return request.app.state.todo_store
