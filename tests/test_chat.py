"""Tests for the interactive chat loop."""

from langchain_core.messages import AIMessage, HumanMessage, ToolMessage
from sqlalchemy.exc import OperationalError

from todo_chat.chat import PROMPT, WELCOME, ChatSession
from todo_chat.config import get_settings


class StubGraph:
    """Answers each turn with a fixed reply, or raises if given an error."""

    def __init__(self, replies):
        self.replies = list(replies)
        self.inputs = []

    def invoke(self, state):
        self.inputs.append(list(state["messages"]))
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        tool_call = {"name": "read_todo", "args": {}, "id": "call_1"}
        return {
            "messages": list(state["messages"])
            + [
                AIMessage(content="", tool_calls=[tool_call]),
                ToolMessage(content="No todos found.", tool_call_id="call_1"),
                AIMessage(content=reply),
            ]
        }


def _session(graph, lines, max_history_messages=30):
    output = []
    prompts = []
    feed = iter(lines)

    def read_line(prompt):
        prompts.append(prompt)
        try:
            return next(feed)
        except StopIteration:
            raise EOFError

    def write(message="", err=False):
        output.append(message)

    session = ChatSession(
        graph, read_line=read_line, write=write, max_history_messages=max_history_messages
    )
    return session, output, prompts


def test_exit_is_case_insensitive():
    graph = StubGraph([])
    session, output, prompts = _session(graph, ["  EXIT "])

    session.run()

    assert output == [WELCOME]
    assert prompts == [PROMPT]
    assert graph.inputs == []


def test_replies_are_printed():
    graph = StubGraph(["You have no todos."])
    session, output, _ = _session(graph, ["what's on my list?", "exit"])

    session.run()

    assert output == [WELCOME, "Bot: You have no todos."]


def test_blank_lines_are_skipped():
    graph = StubGraph(["ok"])
    session, output, prompts = _session(graph, ["", "   ", "hello", "exit"])

    session.run()

    assert len(prompts) == 4
    assert len(graph.inputs) == 1


def test_error_turn_keeps_session_running():
    graph = StubGraph([OperationalError("SELECT 1", {}, Exception("connection lost")), "Done."])
    session, output, _ = _session(graph, ["delete milk", "add bread", "exit"])

    session.run()

    assert "Error:" in output[1]
    assert "connection lost" in output[1]
    assert output[2] == "Bot: Done."
    # The failed request is not replayed on the next turn
    assert [m.content for m in graph.inputs[1]] == ["add bread"]
    assert "Chat turn failed" in get_settings().error_log_path.read_text()


def test_end_of_input_stops_loop():
    session, output, _ = _session(StubGraph([]), [])

    session.run()

    assert output == [WELCOME, ""]


def test_history_keeps_only_text_turns():
    graph = StubGraph(["first answer", "second answer"])
    session, _, _ = _session(graph, [])

    session.ask("one")
    session.ask("two")

    history = session.conversation_history
    assert [type(m) for m in history] == [HumanMessage, AIMessage, HumanMessage, AIMessage]
    assert [m.content for m in history] == ["one", "first answer", "two", "second answer"]
    assert [m.content for m in graph.inputs[1]] == ["one", "first answer", "two"]


def test_history_is_truncated():
    graph = StubGraph(["a", "b", "c"])
    session, _, _ = _session(graph, [], max_history_messages=3)

    for text in ("1", "2", "3"):
        session.ask(text)

    history = session.conversation_history
    assert [m.content for m in history] == ["3", "c"]
    assert isinstance(history[0], HumanMessage)


def test_list_content_blocks_are_flattened():
    class BlockGraph:
        def invoke(self, state):
            return {"messages": [AIMessage(content=[{"type": "text", "text": "Hi "}, "there"])]}

    session, _, _ = _session(BlockGraph(), [])

    assert session.ask("hello") == "Hi there"
