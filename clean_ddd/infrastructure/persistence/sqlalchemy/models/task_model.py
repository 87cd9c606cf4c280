"""Task ORM Model."""

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class TaskModel(Base):
    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    # Посилання на User aggregate (без FK: tasks видаляються eventually)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(nullable=False)
    updated_at: Mapped[Optional[datetime]] = mapped_column(nullable=True)

    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version, "version_id_generator": False}

    # Query: tasks користувача в порядку створення
    __table_args__ = (Index("ix_tasks_user_created", "user_id", "created_at"),)

    def __repr__(self) -> str:
        return (
            f"<TaskModel(id={self.id}, user_id={self.user_id}, "
            f"completed={self.completed}, version={self.version})>"
        )
