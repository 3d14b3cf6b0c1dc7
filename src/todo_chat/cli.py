"""Command-line interface for Todo Chat."""

import sys

import click
from sqlalchemy.exc import SQLAlchemyError

from todo_chat import __version__
from todo_chat.config import get_settings
from todo_chat.db.connection import Database


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="todo-chat")
@click.pass_context
def main(ctx):
    """Todo Chat - manage your todo list by chatting with an AI assistant."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(chat)


@main.command()
def chat() -> None:
    """Start the interactive todo chat."""
    try:
        settings = get_settings()
    except Exception as e:
        click.echo(click.style(f"Configuration error: {e}", fg="red"), err=True)
        sys.exit(1)

    if not settings.provider_api_key:
        key_name = "GOOGLE_API_KEY" if settings.llm_provider == "google" else "OPENAI_API_KEY"
        click.echo(
            click.style(f"Error: {key_name} is not set (add it to .env).", fg="red"),
            err=True,
        )
        sys.exit(1)

    from todo_chat.agent.graph import create_agent_graph
    from todo_chat.chat import ChatSession
    from todo_chat.core.todo_service import TodoService

    try:
        with Database(settings.database_url) as database:
            database.init_db()
            graph = create_agent_graph(TodoService(database), settings=settings)
            ChatSession(graph).run()
    except SQLAlchemyError as e:
        click.echo(click.style(f"Database error: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo("Goodbye!")


@main.command("init-db")
def init_db() -> None:
    """Create the todos table if needed and show how many todos it holds."""
    from todo_chat.core.todo_service import TodoService

    settings = get_settings()

    try:
        with Database(settings.database_url) as database:
            database.init_db()
            counts = TodoService(database).get_todo_count()
    except SQLAlchemyError as e:
        click.echo(click.style(f"Database error: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(click.style("Database ready.", fg="green"))
    click.echo(f"  Active:  {counts['active']}")
    click.echo(f"  Deleted: {counts['deleted']}")


if __name__ == "__main__":
    main()
