"""LangGraph tools for the agent."""

from typing import Iterable, List

from langchain_core.tools import BaseTool, tool

from todo_chat.agent.schemas import (
    AddTodoInput,
    DeleteTodoInput,
    ReadTodoInput,
    RestoreTodoInput,
    SearchTodoInput,
)
from todo_chat.core.todo_service import TodoService
from todo_chat.db.models import Todo

NO_TODOS_FOUND = "No todos found."


def format_todo(todo: Todo) -> str:
    """Render a todo as ``#<id> - <content> [<status>]``."""
    return f"#{todo.id} - {todo.content} [{todo.status}]"


def format_todos(todos: Iterable[Todo]) -> str:
    """Render todos one per line, or the empty-result message."""
    lines = [format_todo(todo) for todo in todos]
    return "\n".join(lines) if lines else NO_TODOS_FOUND


def create_tools(service: TodoService) -> List[BaseTool]:
    """Build the five todo tools bound to ``service``."""

    @tool("add_todo", args_schema=AddTodoInput)
    def add_todo(content: str) -> str:
        """Add a new todo item."""
        service.add_todo(content)
        return f'Added: "{content}"'

    @tool("delete_todo", args_schema=DeleteTodoInput)
    def delete_todo(keyword: str) -> str:
        """Soft delete every active todo whose text contains the keyword."""
        count = service.delete_todos(keyword)
        return f"Deleted {count} item(s)" if count else "No matching todos found."

    @tool("search_todo", args_schema=SearchTodoInput)
    def search_todo(keyword_or_id: str) -> str:
        """
        Search todos by keyword or ID.

        A value made only of digits is treated as a todo ID and finds that todo
        even if it was deleted. Any other value searches active todos.
        """
        return format_todos(service.search_todos(keyword_or_id))

    @tool("restore_todo", args_schema=RestoreTodoInput)
    def restore_todo(keyword: str) -> str:
        """Restore previously deleted todos whose text contains the keyword."""
        count = service.restore_todos(keyword)
        return f"Restored {count} item(s)" if count else "No deleted todos matched."

    @tool("read_todo", args_schema=ReadTodoInput)
    def read_todo(show_all: bool = False) -> str:
        """Read all todos, newest first. Set show_all to include deleted ones."""
        return format_todos(service.list_todos(show_all=show_all))

    return [add_todo, delete_todo, search_todo, restore_todo, read_todo]
