import curses


class ScreenLayout:
    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.H, self.W = stdscr.getmaxyx()

        # layout: formula bar (1 line), table (main), status bar (1 line)
        self.formula_h = 1
        self.status_h = 1

        self.table_y = self.formula_h
        self.table_h = max(1, self.H - self.formula_h - self.status_h)

        self.formula_win = curses.newwin(self.formula_h, self.W, 0, 0)

        self.table_win = curses.newwin(self.table_h, self.W, self.table_y, 0)
        # grid pane must never own cursor
        self.table_win.leaveok(True)

        self.status_win = curses.newwin(
            self.status_h, self.W, self.table_y + self.table_h, 0
        )
        # do not let status bar steal cursor
        self.status_win.leaveok(True)
