"""Repository pattern for data access."""

from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from todo_chat.db.models import Todo, TodoStatus


class TodoRepository:
    """Repository for Todo operations.

    Every write commits immediately, so each method is one statement in its
    own transaction.
    """

    def __init__(self, session: Session):
        self.session = session

    def create(self, content: str) -> Todo:
        """Create a new active todo."""
        todo = Todo(content=content, status=TodoStatus.ACTIVE)
        self.session.add(todo)
        self.session.commit()
        self.session.refresh(todo)
        return todo

    def get(self, todo_id: int) -> Optional[Todo]:
        """Get a todo by ID, whatever its status."""
        return self.session.query(Todo).filter(Todo.id == todo_id).first()

    def list_active(self) -> List[Todo]:
        """List active todos, newest first."""
        return (
            self.session.query(Todo)
            .filter(Todo.status == TodoStatus.ACTIVE)
            .order_by(Todo.id.desc())
            .all()
        )

    def list_all(self) -> List[Todo]:
        """List every todo including deleted ones, newest first."""
        return self.session.query(Todo).order_by(Todo.id.desc()).all()

    def search_active(self, query: str) -> List[Todo]:
        """Active todos whose content contains ``query`` (case-insensitive)."""
        return (
            self.session.query(Todo)
            .filter(
                Todo.status == TodoStatus.ACTIVE,
                Todo.content.icontains(query, autoescape=True),
            )
            .order_by(Todo.id.desc())
            .all()
        )

    def set_status_matching(self, keyword: str, from_status: str, to_status: str) -> int:
        """Move matching todos from one status to another. Returns count moved."""
        count = (
            self.session.query(Todo)
            .filter(
                Todo.status == from_status,
                Todo.content.icontains(keyword, autoescape=True),
            )
            .update({Todo.status: to_status}, synchronize_session=False)
        )
        self.session.commit()
        return count

    def soft_delete_matching(self, keyword: str) -> int:
        """Mark active todos containing ``keyword`` as deleted."""
        return self.set_status_matching(keyword, TodoStatus.ACTIVE, TodoStatus.DELETED)

    def restore_matching(self, keyword: str) -> int:
        """Mark deleted todos containing ``keyword`` as active again."""
        return self.set_status_matching(keyword, TodoStatus.DELETED, TodoStatus.ACTIVE)

    def count_by_status(self) -> Dict[str, int]:
        """Count todos grouped by status."""
        rows = (
            self.session.query(Todo.status, func.count(Todo.id))
            .group_by(Todo.status)
            .all()
        )
        counts = {TodoStatus.ACTIVE: 0, TodoStatus.DELETED: 0}
        for status, count in rows:
            counts[status] = count
        return counts
