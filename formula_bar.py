import curses


class FormulaBar:
    """Single-line editor bound to the active selection."""

    PROMPT = "fx "

    def __init__(self):
        self.buffer = ""
        self.cursor = 0
        self.hscroll = 0
        self.active = False
        self.enabled = True

    # ---------- state helpers ----------
    def load(self, projection):
        """Show the editor projection; ignored while the user is typing."""
        self.enabled = projection.enabled
        if self.active:
            return
        self.buffer = projection.text
        self.cursor = len(self.buffer)
        self.hscroll = 0

    def activate(self):
        if not self.enabled:
            return False
        self.active = True
        self.cursor = len(self.buffer)
        return True

    def deactivate(self):
        self.active = False

    def get_buffer(self):
        return self.buffer

    def set_buffer(self, text):
        self.buffer = text or ""
        self.cursor = len(self.buffer)
        self.hscroll = 0

    # ---------- word helpers ----------
    @staticmethod
    def _is_word_char(ch):
        return ch.isalnum() or ch == "_"

    def _word_boundary_left(self):
        i = self.cursor
        while i > 0 and self.buffer[i - 1].isspace():
            i -= 1
        while (
            i > 0
            and not self._is_word_char(self.buffer[i - 1])
            and not self.buffer[i - 1].isspace()
        ):
            i -= 1
        while i > 0 and self._is_word_char(self.buffer[i - 1]):
            i -= 1
        return i

    # ---------- input handling ----------
    def handle_key(self, ch):
        """Returns 'changed', 'submit', 'cancel' or None."""
        if not self.active:
            return None

        if ch in (10, 13):  # Enter
            return "submit"

        if ch == 27:  # Esc
            return "cancel"

        if ch == 23:  # Ctrl+W, delete word backward
            start = self._word_boundary_left()
            if start < self.cursor:
                self.buffer = self.buffer[:start] + self.buffer[self.cursor :]
                self.cursor = start
                return "changed"
            return None

        if ch == 21:  # Ctrl+U, kill to line start
            if self.cursor > 0:
                self.buffer = self.buffer[self.cursor :]
                self.cursor = 0
                return "changed"
            return None

        if ch in (curses.KEY_BACKSPACE, 127, 8):
            if self.cursor > 0:
                self.buffer = (
                    self.buffer[: self.cursor - 1] + self.buffer[self.cursor :]
                )
                self.cursor -= 1
                return "changed"
            return None

        if ch == curses.KEY_DC:
            if self.cursor < len(self.buffer):
                self.buffer = self.buffer[: self.cursor] + self.buffer[self.cursor + 1 :]
                return "changed"
            return None

        if ch == curses.KEY_LEFT:
            self.cursor = max(0, self.cursor - 1)
            return None

        if ch == curses.KEY_RIGHT:
            self.cursor = min(len(self.buffer), self.cursor + 1)
            return None

        if ch in (curses.KEY_HOME, 1):  # Home or Ctrl+A
            self.cursor = 0
            return None

        if ch in (curses.KEY_END, 5):  # End or Ctrl+E
            self.cursor = len(self.buffer)
            return None

        if 32 <= ch <= 126:
            self.buffer = (
                self.buffer[: self.cursor] + chr(ch) + self.buffer[self.cursor :]
            )
            self.cursor += 1
            return "changed"

        return None

    # ---------- rendering ----------
    def draw(self, win):
        win.erase()
        h, w = win.getmaxyx()
        prompt = self.PROMPT
        text_w = max(1, w - len(prompt) - 1)

        # adjust scroll to keep cursor visible
        if self.cursor < self.hscroll:
            self.hscroll = self.cursor
        elif self.cursor > self.hscroll + text_w:
            self.hscroll = self.cursor - text_w

        visible = self.buffer[self.hscroll : self.hscroll + text_w]
        attr = curses.A_NORMAL if self.enabled else curses.A_DIM

        try:
            win.addnstr(0, 0, prompt, len(prompt), curses.A_BOLD)
            win.addnstr(0, len(prompt), visible, text_w, attr)
        except curses.error:
            pass

        if self.active:
            cx = len(prompt) + (self.cursor - self.hscroll)
            try:
                win.move(0, max(0, min(cx, w - 1)))
            except curses.error:
                pass

        win.refresh()
