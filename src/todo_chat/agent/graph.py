"""LangGraph agent graph definition."""

import os
from typing import Optional

from langchain_core.language_models import BaseChatModel
from langgraph.graph import END, StateGraph
from langgraph.prebuilt import ToolNode

from todo_chat.agent.nodes import create_agent_node, create_chat_model, should_continue
from todo_chat.agent.state import AgentState
from todo_chat.agent.tools import create_tools
from todo_chat.config import Settings, get_settings
from todo_chat.core.todo_service import TodoService
from todo_chat.utils.logger import log_info


# Global flag to track if LangSmith tracing has been initialized
_tracing_initialized = False


def _initialize_tracing(settings: Settings) -> None:
    """Export LangSmith settings to the environment if tracing is enabled."""
    global _tracing_initialized

    if _tracing_initialized or not settings.langsmith_tracing:
        return

    if not settings.langsmith_api_key:
        log_info("LangSmith tracing requested but LANGSMITH_API_KEY is not set")
        return

    # LangChain picks these up on every run
    os.environ["LANGSMITH_TRACING"] = "true"
    os.environ["LANGSMITH_API_KEY"] = settings.langsmith_api_key
    os.environ["LANGSMITH_PROJECT"] = settings.langsmith_project

    _tracing_initialized = True
    log_info(f"LangSmith tracing enabled for project {settings.langsmith_project}")


def create_agent_graph(
    service: TodoService,
    llm: Optional[BaseChatModel] = None,
    settings: Optional[Settings] = None,
):
    """
    Create the agent graph.

    Args:
        service: Todo service the tools operate on
        llm: Optional chat model override (defaults to the configured provider)
        settings: Optional settings override

    Returns:
        Compiled LangGraph
    """
    settings = settings or get_settings()
    _initialize_tracing(settings)

    tools = create_tools(service)
    agent_node = create_agent_node(llm or create_chat_model(settings), tools)

    workflow = StateGraph(AgentState)

    workflow.add_node("agent", agent_node)
    workflow.add_node("tools", ToolNode(tools))

    workflow.set_entry_point("agent")

    workflow.add_conditional_edges(
        "agent",
        should_continue,
        {
            "tools": "tools",
            "end": END,
        },
    )

    workflow.add_edge("tools", "agent")

    return workflow.compile()


def reset_tracing() -> None:
    """Reset tracing initialization flag (for testing)."""
    global _tracing_initialized
    _tracing_initialized = False
