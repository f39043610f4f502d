# ~/Apps/sumgrid/grid_pane.py
import curses

from view_sync import CURRENT_CELL, CURRENT_MULTIPLE


class GridPane:
    PAIR_CELL_TEXT = 6
    PAIR_CELL_MULTIPLE = 7
    MAX_COL_WIDTH = 40
    GUTTER_MIN_WIDTH = 3

    def __init__(self):
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_CELL_TEXT, curses.COLOR_WHITE, -1)
            curses.init_pair(self.PAIR_CELL_MULTIPLE, curses.COLOR_BLACK, curses.COLOR_CYAN)
        except curses.error:
            pass

        self.row_offset = 0
        self.col_offset = 1  # first data column drawn after the frozen gutter

        # (y, x0, x1, event) for every drawn header/label/cell; rebuilt on draw
        self.hit_regions = []

    # ---------- attributes ----------
    def _pair_attr(self, pair):
        try:
            return curses.color_pair(pair)
        except curses.error:
            return curses.A_NORMAL

    def attr_for(self, highlight):
        base = self._pair_attr(self.PAIR_CELL_TEXT)
        if highlight == CURRENT_CELL:
            return base | curses.A_REVERSE
        if highlight == CURRENT_MULTIPLE:
            return self._pair_attr(self.PAIR_CELL_MULTIPLE) | curses.A_STANDOUT
        return base

    # ---------- geometry ----------
    def col_widths(self, snapshot):
        widths = []
        for c, label in enumerate(snapshot.header):
            max_len = len(label)
            for row in snapshot.body:
                max_len = max(max_len, len(row[c]))
            if c < len(snapshot.footer):
                max_len = max(max_len, len(snapshot.footer[c]))
            if c == 0:
                widths.append(max(self.GUTTER_MIN_WIDTH, max_len + 1))
            else:
                widths.append(min(self.MAX_COL_WIDTH, max_len + 2))
        return widths

    def _visible_cols(self, widths, avail_w):
        cols = []
        used = 0
        for c in range(self.col_offset, len(widths)):
            if used + widths[c] + 1 > avail_w and cols:
                break
            cols.append(c)
            used += widths[c] + 1
        return cols

    def adjust_viewport(self, snapshot, widths, body_h, avail_w):
        num_cols = len(widths)
        num_rows = len(snapshot.body)
        self.col_offset = max(1, min(self.col_offset, max(1, num_cols - 1)))
        self.row_offset = max(0, min(self.row_offset, max(0, num_rows - 1)))
        if snapshot.focus is None:
            return
        focus_col, focus_row = snapshot.focus

        if focus_row < self.row_offset:
            self.row_offset = focus_row
        elif focus_row >= self.row_offset + body_h:
            self.row_offset = focus_row - body_h + 1

        if focus_col >= 1:
            if focus_col < self.col_offset:
                self.col_offset = focus_col
            while (
                self.col_offset < focus_col
                and focus_col not in self._visible_cols(widths, avail_w)
            ):
                self.col_offset += 1

    # ---------- hit testing ----------
    def locate(self, y, x):
        for ry, x0, x1, event in self.hit_regions:
            if ry == y and x0 <= x < x1:
                return event
        return None

    # ---------- rendering ----------
    @staticmethod
    def _put(win, y, x, text, width, attr=0):
        try:
            win.addnstr(y, x, text, width, attr)
        except curses.error:
            pass

    def draw(self, win, snapshot):
        win.erase()
        try:
            win.bkgd(" ", self._pair_attr(self.PAIR_CELL_TEXT))
        except curses.error:
            pass
        h, w = win.getmaxyx()
        self.hit_regions = []

        widths = self.col_widths(snapshot)
        if not widths:
            win.refresh()
            return

        gutter_w = widths[0]
        avail_w = max(1, w - (gutter_w + 1))
        # header line on top, footer line below the body
        body_h = max(1, h - 2)
        self.adjust_viewport(snapshot, widths, body_h, avail_w)

        visible_cols = self._visible_cols(widths, avail_w)
        visible_rows = list(
            range(self.row_offset, min(len(snapshot.body), self.row_offset + body_h))
        )

        # header
        self._put(win, 0, 0, "".rjust(gutter_w), gutter_w, curses.A_BOLD)
        x = gutter_w + 1
        for c in visible_cols:
            cw = min(widths[c], max(1, w - x))
            self._put(win, 0, x, snapshot.header[c][:cw].rjust(cw), cw, curses.A_BOLD)
            self.hit_regions.append((0, x, x + cw, ("column", c)))
            x += widths[c] + 1

        # body
        y = 1
        for r in visible_rows:
            cells = snapshot.body[r]
            label_attr = self.attr_for(snapshot.highlights.get((0, r)))
            self._put(win, y, 0, cells[0].rjust(gutter_w), gutter_w, label_attr)
            self.hit_regions.append((y, 0, gutter_w, ("row", r)))
            x = gutter_w + 1
            for c in visible_cols:
                cw = min(widths[c], max(1, w - x))
                attr = self.attr_for(snapshot.highlights.get((c, r)))
                self._put(win, y, x, cells[c][:cw].rjust(cw), cw, attr)
                self.hit_regions.append((y, x, x + cw, ("cell", c, r)))
                x += widths[c] + 1
            y += 1

        # footer
        if y < h:
            self._put(win, y, 0, snapshot.footer[0][:gutter_w].rjust(gutter_w), gutter_w, curses.A_BOLD)
            x = gutter_w + 1
            for c in visible_cols:
                cw = min(widths[c], max(1, w - x))
                self._put(win, y, x, snapshot.footer[c][:cw].rjust(cw), cw, curses.A_BOLD)
                x += widths[c] + 1

        win.refresh()
