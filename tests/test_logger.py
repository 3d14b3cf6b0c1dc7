"""Tests for the error log helpers."""

from todo_chat.config import get_settings, reset_settings
from todo_chat.utils.logger import log_debug, log_error, log_info


def test_log_error_writes_entry_and_returns_summary():
    try:
        raise ValueError("bad input")
    except ValueError as e:
        message = log_error(e, context="Adding todo")

    assert message == "Adding todo: bad input"
    text = get_settings().error_log_path.read_text()
    assert "[ERROR]" in text
    assert "ValueError: bad input" in text
    assert "Traceback" in text


def test_verbose_mode_echoes_to_stderr(monkeypatch, capsys):
    monkeypatch.setenv("VERBOSE_LOGGING", "true")
    reset_settings()

    log_debug("Searched todos", {"results": 2})
    log_info("hello")

    err = capsys.readouterr().err
    assert "debug: Searched todos" in err
    assert "results = 2" in err
    assert "info: hello" in err


def test_quiet_mode_only_writes_file(capsys):
    log_info("quiet")

    assert capsys.readouterr().err == ""
    assert "quiet" in get_settings().error_log_path.read_text()
