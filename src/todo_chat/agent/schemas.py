"""Pydantic input schemas for the agent tools."""

from pydantic import BaseModel, Field, field_validator


class AddTodoInput(BaseModel):
    """Input for add_todo."""

    content: str = Field(min_length=1, description="The todo description/task")

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("content must not be blank")
        return value


class DeleteTodoInput(BaseModel):
    """Input for delete_todo."""

    keyword: str = Field(
        min_length=1,
        description="Text contained in the todos to delete (case-insensitive)",
    )


class RestoreTodoInput(BaseModel):
    """Input for restore_todo."""

    keyword: str = Field(
        min_length=1,
        description="Text contained in the deleted todos to restore (case-insensitive)",
    )


class SearchTodoInput(BaseModel):
    """Input for search_todo."""

    keyword_or_id: str = Field(
        min_length=1,
        description="A todo ID (digits only) or a keyword to look for in active todos",
    )


class ReadTodoInput(BaseModel):
    """Input for read_todo."""

    show_all: bool = Field(
        default=False,
        description="Include deleted todos as well as active ones",
    )
