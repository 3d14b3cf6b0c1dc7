"""Todo service implementing the store contract over the todos table."""

import re
from typing import Dict, List, Optional

from todo_chat.db.connection import Database
from todo_chat.db.models import Todo
from todo_chat.db.repositories import TodoRepository
from todo_chat.utils.logger import log_debug

_TODO_ID_RE = re.compile(r"[+-]?[0-9]+")

# Upper bound of the INTEGER id column
MAX_TODO_ID = 2**31 - 1


def parse_todo_id(query: str) -> Optional[int]:
    """Return the todo ID if ``query`` is a bare integer, else None.

    "42" and " 42 " are IDs; "42 Main St" is a text search.
    """
    text = query.strip()
    if _TODO_ID_RE.fullmatch(text):
        return int(text)
    return None


class TodoService:
    """High-level service for todo operations.

    Each operation opens its own session against the given database, so a
    service can be shared by every tool for the life of the process.
    """

    def __init__(self, database: Database):
        self.database = database

    def add_todo(self, content: str) -> Todo:
        """Create a new active todo."""
        with self.database.session() as session:
            todo = TodoRepository(session).create(content)
        log_debug("Added todo", {"id": todo.id, "content": content})
        return todo

    def delete_todos(self, keyword: str) -> int:
        """Soft-delete every active todo containing ``keyword``.

        Returns:
            Number of todos moved to deleted, 0 if none matched
        """
        with self.database.session() as session:
            count = TodoRepository(session).soft_delete_matching(keyword)
        log_debug("Deleted todos", {"keyword": keyword, "count": count})
        return count

    def restore_todos(self, keyword: str) -> int:
        """Restore every deleted todo containing ``keyword``.

        Returns:
            Number of todos moved back to active, 0 if none matched
        """
        with self.database.session() as session:
            count = TodoRepository(session).restore_matching(keyword)
        log_debug("Restored todos", {"keyword": keyword, "count": count})
        return count

    def search_todos(self, query: str) -> List[Todo]:
        """
        Search todos by ID or keyword.

        A bare integer is looked up by ID regardless of status, so deleted
        todos can still be inspected. Anything else matches active todos by
        case-insensitive substring.

        Args:
            query: Todo ID or keyword

        Returns:
            Matching todos, newest first (at most one for an ID lookup)
        """
        todo_id = parse_todo_id(query)
        with self.database.session() as session:
            repo = TodoRepository(session)
            if todo_id is not None:
                # Out-of-range IDs cannot exist and overflow some drivers
                todo = repo.get(todo_id) if 1 <= todo_id <= MAX_TODO_ID else None
                results = [todo] if todo else []
            else:
                results = repo.search_active(query)
        log_debug(
            "Searched todos",
            {"query": query, "by_id": todo_id is not None, "results": len(results)},
        )
        return results

    def list_todos(self, show_all: bool = False) -> List[Todo]:
        """List active todos, or all todos when ``show_all`` is set. Newest first."""
        with self.database.session() as session:
            repo = TodoRepository(session)
            return repo.list_all() if show_all else repo.list_active()

    def get_todo(self, todo_id: int) -> Optional[Todo]:
        """Get a todo by ID."""
        with self.database.session() as session:
            return TodoRepository(session).get(todo_id)

    def get_todo_count(self) -> Dict[str, int]:
        """Get count of todos by status."""
        with self.database.session() as session:
            counts = TodoRepository(session).count_by_status()
        counts["total"] = sum(counts.values())
        return counts
