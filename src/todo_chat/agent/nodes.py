"""Agent nodes for LangGraph."""

from typing import List, Literal, Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, SystemMessage
from langchain_core.tools import BaseTool

from todo_chat.agent.prompts import SYSTEM_PROMPT
from todo_chat.agent.state import AgentState
from todo_chat.config import Settings, get_settings


def create_chat_model(settings: Optional[Settings] = None) -> BaseChatModel:
    """
    Create the chat model for the configured provider.

    Args:
        settings: Settings to read provider, model and key from

    Returns:
        LangChain chat model
    """
    settings = settings or get_settings()

    if settings.llm_provider == "google":
        from langchain_google_genai import ChatGoogleGenerativeAI

        return ChatGoogleGenerativeAI(
            model=settings.model_name,
            google_api_key=settings.google_api_key,
            max_output_tokens=settings.max_output_tokens,
        )

    from langchain_openai import ChatOpenAI

    return ChatOpenAI(
        model=settings.model_name,
        api_key=settings.openai_api_key,
        temperature=0,
        max_tokens=settings.max_output_tokens,
    )


def create_agent_node(llm: BaseChatModel, tools: List[BaseTool]):
    """
    Create the agent node function.

    Args:
        llm: Chat model that supports tool calling
        tools: Tools the model may call

    Returns:
        Agent node function
    """
    llm_with_tools = llm.bind_tools(tools)

    def agent_node(state: AgentState) -> AgentState:
        """Call the model on the conversation so far."""
        messages = list(state["messages"])

        if not messages or not isinstance(messages[0], SystemMessage):
            messages = [SystemMessage(content=SYSTEM_PROMPT)] + messages

        response = llm_with_tools.invoke(messages)

        return {"messages": [response]}

    return agent_node


def should_continue(state: AgentState) -> Literal["tools", "end"]:
    """
    Determine if we should continue to tools or end.

    Args:
        state: Current agent state

    Returns:
        "tools" if agent wants to call tools, "end" otherwise
    """
    last_message = state["messages"][-1]

    if isinstance(last_message, AIMessage) and last_message.tool_calls:
        return "tools"

    return "end"
