from fastapi import APIRouter, status, Depends

from todo_api.common.exceptions import ResourceType, invalid_identifier_response
from todo_api.todos.dependencies import get_todo_service
from todo_api.todos.schemas import CreateTodoRequest, Todo, UpdateTodoRequest
from todo_api.todos.service import TodoService


router = APIRouter(
    prefix="/todos",
    tags=["Todos"],
)


@router.get("")
def list_todos(
    todo_service: TodoService = Depends(get_todo_service),
) -> list[Todo]:
    return todo_service.list_todos()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_todo(
    todo_input: CreateTodoRequest,
    todo_service: TodoService = Depends(get_todo_service),
) -> Todo:
    return todo_service.create_todo(todo_input)


@router.patch(
    "/{todo_id}",
    responses={
        200: {"description": "The updated todo, or null when no todo has this id"},
        **invalid_identifier_response(ResourceType.TODO),
    },
)
def update_todo(
    todo_id: str,
    todo_input: UpdateTodoRequest,
    todo_service: TodoService = Depends(get_todo_service),
) -> Todo | None:
    return todo_service.update_todo(todo_id, todo_input)


@router.delete(
    "/category/{category}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_category(
    category: str, todo_service: TodoService = Depends(get_todo_service)
):
    todo_service.delete_category(category)


@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**invalid_identifier_response(ResourceType.TODO)},
)
def delete_todo(todo_id: str, todo_service: TodoService = Depends(get_todo_service)):
    todo_service.delete_todo(todo_id)
