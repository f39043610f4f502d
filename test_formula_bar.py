import curses

from formula_bar import FormulaBar
from view_sync import EditorProjection


def _feed(bar: FormulaBar, keys):
    results = []
    for k in keys:
        results.append(bar.handle_key(k))
    return results


def _active_bar(text):
    bar = FormulaBar()
    bar.load(EditorProjection(text, True))
    assert bar.activate()
    return bar


def test_load_shows_projection_text():
    bar = FormulaBar()
    bar.load(EditorProjection(" < row 2 is selected > ", False))
    assert bar.get_buffer() == " < row 2 is selected > "
    assert not bar.enabled


def test_disabled_bar_cannot_be_activated():
    bar = FormulaBar()
    bar.load(EditorProjection(" < column B is selected > ", False))
    assert bar.activate() is False
    assert not bar.active
    assert bar.handle_key(ord("x")) is None
    assert bar.get_buffer() == " < column B is selected > "


def test_typing_reports_changes():
    bar = _active_bar("6")
    assert _feed(bar, [ord("5")]) == ["changed"]
    assert bar.get_buffer() == "65"


def test_load_does_not_clobber_buffer_while_editing():
    bar = _active_bar("abc")
    _feed(bar, [ord("d")])
    bar.load(EditorProjection("other", True))
    assert bar.get_buffer() == "abcd"

    bar.deactivate()
    bar.load(EditorProjection("other", True))
    assert bar.get_buffer() == "other"


def test_cursor_motion_is_not_a_change():
    bar = _active_bar("abc")
    assert _feed(bar, [curses.KEY_LEFT, 1, 5, curses.KEY_RIGHT]) == [None] * 4


def test_backspace_and_delete():
    bar = _active_bar("abc")
    assert _feed(bar, [127]) == ["changed"]
    assert bar.get_buffer() == "ab"
    bar.cursor = 0
    assert _feed(bar, [curses.KEY_DC]) == ["changed"]
    assert bar.get_buffer() == "b"
    assert _feed(bar, [127]) == [None]


def test_ctrl_w_deletes_prev_word():
    bar = _active_bar("foo,bar baz")
    _feed(bar, [23])  # Ctrl+W
    assert bar.get_buffer() == "foo,bar "


def test_ctrl_u_kills_to_start():
    bar = _active_bar("abc def")
    bar.cursor = len("abc de")
    _feed(bar, [21])  # Ctrl+U
    assert bar.get_buffer() == "f"
    assert bar.cursor == 0


def test_enter_submits_and_esc_cancels():
    bar = _active_bar("1")
    assert bar.handle_key(10) == "submit"
    assert bar.handle_key(27) == "cancel"
