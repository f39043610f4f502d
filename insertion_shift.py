from enum import Enum
from typing import Optional

from selection import ColumnSelection, RowSelection, zero_based_row


class Axis(Enum):
    ROW = "row"
    COLUMN = "column"


class InsertionShiftEngine:
    """
    Opens a gap next to the selected row/column when the grid grows.

    Two phases: `request_growth` records the insertion point before the
    dimension is incremented, `apply_pending_shift` moves the values once
    afterwards and resets the request.
    """

    def __init__(self):
        self.row_growth_pending = False
        self.col_growth_pending = False
        self.row_insert_after: Optional[int] = None  # zero-based row
        self.col_insert_after: Optional[int] = None

    @property
    def pending(self) -> bool:
        return self.row_growth_pending or self.col_growth_pending

    def request_growth(self, axis: Axis, selection) -> bool:
        if axis is Axis.ROW and isinstance(selection, RowSelection):
            self.row_growth_pending = True
            self.row_insert_after = zero_based_row(selection.display_row)
            return True
        if axis is Axis.COLUMN and isinstance(selection, ColumnSelection):
            self.col_growth_pending = True
            self.col_insert_after = selection.col
            return True
        return False

    def apply_pending_shift(self, store) -> int:
        if not self.pending:
            return 0

        moves = 0
        num_cols = store.num_cols
        num_rows = store.num_rows

        # bottom-to-top, right-to-left: every value is read before it is overwritten.
        # Row 0 is visited for column moves only; row moves need row > insert point >= 0.
        for row in range(num_rows - 1, -1, -1):
            for col in range(num_cols - 1, 0, -1):
                if self.row_growth_pending and row > self.row_insert_after:
                    store.set_value(col, row, store.get_value(col, row - 1))
                    store.set_value(col, row - 1, "")
                    moves += 1
                if (
                    self.col_growth_pending
                    and col > self.col_insert_after
                    and col + 1 < num_cols
                ):
                    store.set_value(col + 1, row, store.get_value(col, row))
                    store.set_value(col, row, "")
                    moves += 1

        self._reset()
        return moves

    def _reset(self):
        self.row_growth_pending = False
        self.col_growth_pending = False
        self.row_insert_after = None
        self.col_insert_after = None
