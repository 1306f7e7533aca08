# tests/test_console_connector.py

from __future__ import annotations

import io

import pytest

from duke.connectors import console_connector
from duke.connectors.console_connector import INTERNAL_ERROR_MESSAGE, run_console_loop
from duke.core.state import AppState
from duke.tasks.task_models import Task


def _feed(monkeypatch: pytest.MonkeyPatch, text: str) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_loop_runs_commands_until_bye(state: AppState, monkeypatch, capsys) -> None:
    _feed(monkeypatch, "todo buy milk\n  list  \nbye\ntodo never reached\n")

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Got it. I've added this task:" in out
    assert "1.[T][ ] buy milk" in out
    assert state.tasks == [Task.todo("buy milk")]


def test_exit_is_case_insensitive(state: AppState, monkeypatch, capsys) -> None:
    _feed(monkeypatch, "EXIT\ntodo never reached\n")
    run_console_loop(state)
    assert state.tasks == []


def test_loop_stops_at_end_of_input(state: AppState, monkeypatch, capsys) -> None:
    _feed(monkeypatch, "todo a\ntodo b")
    run_console_loop(state)
    assert [t.description for t in state.tasks] == ["a", "b"]


def test_errors_do_not_end_the_loop(state: AppState, monkeypatch, capsys) -> None:
    _feed(monkeypatch, "blah\ndone 7\n\ntodo a\n")

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "I don't know what that means... :(" in out
    assert "I couldn't find the task you requested!" in out
    assert state.tasks == [Task.todo("a")]


def test_unexpected_exception_is_reported(state: AppState, monkeypatch, capsys) -> None:
    def boom(state, line):
        raise RuntimeError("boom")

    monkeypatch.setattr(console_connector, "handle_line", boom)
    _feed(monkeypatch, "list\n")

    run_console_loop(state)

    assert INTERNAL_ERROR_MESSAGE in capsys.readouterr().out
