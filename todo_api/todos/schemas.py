from enum import Enum
from pydantic import BaseModel, ConfigDict


class TodoPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Todo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    category: str
    priority: str
    completed: bool


class CreateTodoRequest(BaseModel):
    text: str
    category: str
    priority: str = TodoPriority.LOW.value


class UpdateTodoRequest(BaseModel):
    completed: bool


class TodoUpdate(BaseModel):
    completed: bool | None = None
