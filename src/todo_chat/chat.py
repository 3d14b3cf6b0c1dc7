"""Interactive chat loop between the user and the todo agent."""

from typing import Callable, List, Optional

import click
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage

from todo_chat.config import get_settings
from todo_chat.utils.logger import log_debug, log_error, log_info

WELCOME = "Welcome to Todo Chat! Type 'exit' to quit.\n"
PROMPT = "You: "
EXIT_COMMAND = "exit"


class ChatSession:
    """Read a line, run the agent on it, print the reply, repeat."""

    def __init__(
        self,
        agent_graph,
        read_line: Callable[[str], str] = input,
        write: Callable[..., None] = click.echo,
        max_history_messages: Optional[int] = None,
    ):
        self.agent_graph = agent_graph
        self.read_line = read_line
        self.write = write
        self.conversation_history: List[BaseMessage] = []
        if max_history_messages is None:
            max_history_messages = get_settings().max_history_messages
        self.max_history_messages = max_history_messages

    def add_to_conversation_history(self, message: BaseMessage) -> None:
        """Append a message, dropping the oldest ones past the limit."""
        self.conversation_history.append(message)

        if len(self.conversation_history) > self.max_history_messages:
            history = self.conversation_history[-self.max_history_messages:]
            # History must open on a user turn
            while history and not isinstance(history[0], HumanMessage):
                history = history[1:]
            removed = len(self.conversation_history) - len(history)
            self.conversation_history = history
            log_debug(f"Truncated conversation history, removed {removed} old messages")

    def clean_tool_execution_from_history(self) -> None:
        """
        Keep only user questions and final agent answers in the history.

        Tool results and tool-call-only AI messages are dropped, and tool
        calls are stripped from answers, so old requests are never re-executed.
        """
        cleaned: List[BaseMessage] = []
        for msg in self.conversation_history:
            if isinstance(msg, HumanMessage):
                cleaned.append(msg)
            elif isinstance(msg, AIMessage):
                if not msg.content:
                    continue
                cleaned.append(AIMessage(content=msg.content) if msg.tool_calls else msg)
        self.conversation_history = cleaned

    def ask(self, message: str) -> str:
        """
        Send one user message to the agent and return its reply text.

        Raises whatever the agent or the store raised.
        """
        self.add_to_conversation_history(HumanMessage(content=message))
        log_info(f"Calling agent with {len(self.conversation_history)} messages in history")

        try:
            result = self.agent_graph.invoke({"messages": self.conversation_history})
        except Exception:
            # The failed request should not be replayed on the next turn
            self.conversation_history.pop()
            raise

        last_message = result["messages"][-1]
        self.add_to_conversation_history(last_message)
        self.clean_tool_execution_from_history()

        return _message_text(last_message)

    def run(self) -> None:
        """Run the prompt loop until the user types exit or input ends."""
        self.write(WELCOME)

        while True:
            try:
                user_input = self.read_line(PROMPT)
            except (EOFError, KeyboardInterrupt):
                self.write("")
                break

            if user_input.strip().lower() == EXIT_COMMAND:
                break
            if not user_input.strip():
                continue

            try:
                reply = self.ask(user_input)
            except Exception as e:
                message = log_error(e, context="Chat turn failed")
                self.write(click.style(f"Error: {message}", fg="red"), err=True)
                continue

            self.write(f"Bot: {reply}")


def _message_text(message: BaseMessage) -> str:
    """Flatten message content that may be a list of content blocks."""
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)
