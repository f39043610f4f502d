import time
from types import SimpleNamespace

import pytest

import orchestrator
from grid_store import GridStore


class DummyScreen:
    def keypad(self, *_):
        pass

    def nodelay(self, *_):
        pass

    def timeout(self, *_):
        pass


@pytest.fixture
def make_app(monkeypatch):
    monkeypatch.setattr(orchestrator.curses, "curs_set", lambda *_: None)
    monkeypatch.setattr(orchestrator.curses, "raw", lambda: None)
    monkeypatch.setattr(orchestrator.curses, "mousemask", lambda *_: (0, 0))
    monkeypatch.setattr(
        orchestrator, "ScreenLayout", lambda stdscr: SimpleNamespace(table_y=1)
    )

    def _make(num_cols=3, num_rows=3, config=None):
        return orchestrator.Orchestrator(
            DummyScreen(), GridStore(num_cols, num_rows), config
        )

    return _make


def test_status_uses_configured_duration(make_app):
    app = make_app(config={"STATUS_SECONDS": 30})

    app.table.handle_add_row()

    assert app.status_msg == "Appended row 4"
    assert app.status_msg_until - time.time() > 20


def test_status_explicit_duration_wins(make_app):
    app = make_app(config={"STATUS_SECONDS": 30})

    app._set_status("short", 1)

    assert app.status_msg_until - time.time() <= 1


def test_typing_commits_to_the_selected_cell(make_app):
    app = make_app()

    app._start_editing()
    assert app.focus == 1

    app._handle_formula_key(ord("7"))
    assert app.table.store.get_value(1, 0) == "7"
    assert app.snapshot.footer[1] == "7"

    app._handle_formula_key(10)
    assert app.focus == 0
    assert app.table.store.get_value(1, 0) == "7"


def test_editing_refused_when_nothing_is_selected(make_app):
    app = make_app()
    app.table.selection.clear()
    app.table.render()

    app._start_editing()

    assert app.focus == 0
    assert app.status_msg == "Editor disabled: nothing is selected"


def test_editing_refused_for_a_selected_column(make_app):
    app = make_app()
    app.table.handle_column_header_click(2)

    app._start_editing()

    assert app.focus == 0
    assert app.status_msg == "Editor disabled: column B is selected"
