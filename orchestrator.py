# ~/Apps/sumgrid/orchestrator.py
import curses
import time

from formula_bar import FormulaBar
from grid_pane import GridPane
from screen_layout import ScreenLayout
from status_bar import render_status
from table_view import TableView


class Orchestrator:
    def __init__(self, stdscr, store, config=None):
        self.stdscr = stdscr
        self.config = config or {}
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        curses.raw()
        self.stdscr.keypad(True)
        self.stdscr.nodelay(False)
        self.stdscr.timeout(100)
        try:
            curses.mousemask(curses.BUTTON1_CLICKED | curses.BUTTON1_PRESSED)
        except curses.error:
            pass

        self.layout = ScreenLayout(stdscr)
        self.grid = GridPane()
        self.formula = FormulaBar()

        self.focus = 0  # 0=grid, 1=formula bar
        self.leader_state = None  # None | 'leader' | 'a'

        # ---- status ----
        self.status_msg = None
        self.status_msg_until = 0
        self.status_seconds = self.config.get("STATUS_SECONDS", 3)

        self.snapshot = None
        self.table = TableView(store, self._set_status, self._on_render)
        self.table.init()

    # ---------------- helpers ----------------

    def _set_status(self, msg, seconds=None):
        self.status_msg = msg
        self.status_msg_until = time.time() + (
            self.status_seconds if seconds is None else seconds
        )

    def _on_render(self, snapshot):
        self.snapshot = snapshot
        self.formula.load(snapshot.editor)

    # ---------------- UI ----------------

    def redraw(self):
        if self.snapshot is None:
            return
        try:
            curses.curs_set(1 if self.focus == 1 else 0)
        except curses.error:
            pass

        self.grid.draw(self.layout.table_win, self.snapshot)

        sw = self.layout.status_win
        sw.erase()
        _, w = sw.getmaxyx()
        text = render_status(
            {
                "status_msg": self.status_msg,
                "status_until": self.status_msg_until,
                "focus": self.focus,
                "selection_label": self.snapshot.selection_label,
                "shape": self.snapshot.shape,
            },
            w,
        )
        try:
            sw.addnstr(0, 0, text, w)
        except curses.error:
            pass
        sw.refresh()

        # drawn last so the terminal cursor ends up in the editor
        self.formula.draw(self.layout.formula_win)

    # ---------------- input ----------------

    def _handle_mouse(self):
        try:
            _, x, y, _, _ = curses.getmouse()
        except curses.error:
            return
        event = self.grid.locate(y - self.layout.table_y, x)
        if event is None:
            return
        self._dispatch_click(event)

    def _dispatch_click(self, event):
        # a click moves the selection, so the editor must reload from it
        self.formula.deactivate()
        self.focus = 0
        kind = event[0]
        if kind == "cell":
            self.table.handle_cell_click(event[1], event[2])
        elif kind == "row":
            self.table.handle_row_label_click(event[1])
        elif kind == "column":
            self.table.handle_column_header_click(event[1])

    def _start_editing(self):
        if self.formula.activate():
            self.focus = 1
        else:
            label = self.snapshot.selection_label or "nothing"
            self._set_status(f"Editor disabled: {label} is selected")

    def _handle_leader(self, ch):
        if self.leader_state == "leader":
            self.leader_state = "a" if ch == ord("a") else None
            if self.leader_state is None:
                self._set_status("Unknown leader sequence")
            return
        self.leader_state = None
        if ch == ord("r"):
            self.table.handle_add_row()
        elif ch == ord("c"):
            self.table.handle_add_col()
        else:
            self._set_status("Unknown leader sequence")

    def _handle_grid_key(self, ch):
        if self.leader_state is not None:
            self._handle_leader(ch)
            return

        if ch == ord(","):
            self.leader_state = "leader"
            return

        if ch in (curses.KEY_LEFT, ord("h")):
            self.table.move(-1, 0)
        elif ch in (curses.KEY_RIGHT, ord("l")):
            self.table.move(1, 0)
        elif ch in (curses.KEY_UP, ord("k")):
            self.table.move(0, -1)
        elif ch in (curses.KEY_DOWN, ord("j")):
            self.table.move(0, 1)
        elif ch == ord("r"):
            self.table.select_row_at_cursor()
        elif ch == ord("c"):
            self.table.select_column_at_cursor()
        elif ch == 27:  # Esc
            self.table.return_to_cell()
        elif ch in (ord("i"), 10, 13):
            self._start_editing()

    def _handle_formula_key(self, ch):
        result = self.formula.handle_key(ch)
        if result == "changed":
            # commit on every edit, like a key-release handler would
            self.table.handle_editor_submit(self.formula.get_buffer())
        elif result in ("submit", "cancel"):
            self.formula.deactivate()
            self.focus = 0

    # ---------------- main loop ----------------

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        while True:
            ch = self.stdscr.getch()

            if ch in (3, 24):  # Ctrl+C / Ctrl+X
                break

            if ch == -1:
                self.redraw()
                continue

            if ch == curses.KEY_MOUSE:
                self._handle_mouse()
            elif ch == curses.KEY_RESIZE:
                self.layout = ScreenLayout(self.stdscr)
            elif self.focus == 0:
                self._handle_grid_key(ch)
            else:
                self._handle_formula_key(ch)

            self.redraw()
