"""SQLAlchemy ORM models for Todo Chat."""

from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class TodoStatus:
    """Lifecycle values of ``Todo.status``."""

    ACTIVE = "active"
    DELETED = "deleted"


class Todo(Base):
    """Todo item model.

    Deletion is soft: ``status`` flips between active and deleted and rows
    are never removed.
    """

    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    content = Column(Text, nullable=False)
    status = Column(
        Text,
        default=TodoStatus.ACTIVE,
        server_default=TodoStatus.ACTIVE,
    )

    def __repr__(self) -> str:
        return f"<Todo {self.id}: [{self.status}] {self.content[:50]}>"
