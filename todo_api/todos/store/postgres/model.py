from datetime import datetime
from sqlalchemy import Boolean, String, Text, DateTime
from sqlalchemy.orm import declarative_base, Mapped, mapped_column

from todo_api.config import get_settings


settings = get_settings()

Base = declarative_base()


class TodoModel(Base):
    __tablename__ = settings.TODO_STORE_NAMESPACE

    id: Mapped[str] = mapped_column(String, primary_key=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String, nullable=False, index=True)
    priority: Mapped[str] = mapped_column(String, nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )

    def __init__(
        self,
        id: str,
        text: str,
        category: str,
        priority: str,
        created_at: datetime,
        completed: bool = False,
    ):
        self.id = id
        self.text = text
        self.category = category
        self.priority = priority
        self.created_at = created_at
        self.completed = completed
