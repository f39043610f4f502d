from typing import Callable, Optional

from array_util import MAX_LETTER_COLUMNS, column_letter
from footer_aggregator import FooterAggregator
from insertion_shift import Axis, InsertionShiftEngine
from selection import (
    CellSelection,
    ColumnSelection,
    RowSelection,
    SelectionState,
    display_row_index,
    zero_based_row,
)
from view_sync import GridSnapshot, ViewSync


class TableView:
    """Handles grid interactions and re-renders after every one of them."""

    def __init__(
        self,
        store,
        set_status_cb: Optional[Callable[..., None]] = None,
        on_render: Optional[Callable[[GridSnapshot], None]] = None,
    ):
        if store.num_cols - 1 > MAX_LETTER_COLUMNS:
            raise ValueError(
                f"Grid has {store.num_cols - 1} data columns; only A..{column_letter(MAX_LETTER_COLUMNS)} can be labelled"
            )
        self.store = store
        self.selection = SelectionState(store)
        self.shift_engine = InsertionShiftEngine()
        self.footer = FooterAggregator(store)
        self.view = ViewSync(store, self.selection, self.footer)
        self._set_status = set_status_cb or (lambda *_: None)
        self.on_render = on_render
        self.snapshot: Optional[GridSnapshot] = None

    def init(self):
        self.render()

    def render(self) -> GridSnapshot:
        self.snapshot = self.view.snapshot()
        if self.on_render is not None:
            self.on_render(self.snapshot)
        return self.snapshot

    # ---------- click handlers ----------
    def handle_cell_click(self, col: int, row: int):
        if col == 0:
            # gutter cell carries the row number
            self.selection.select_row(display_row_index(row))
        else:
            self.selection.select_cell(col, row)
        self.render()

    def handle_row_label_click(self, row: int):
        self.selection.select_row(display_row_index(row))
        self.render()

    def handle_column_header_click(self, col: int):
        if col == 0:
            return
        self.selection.select_column(col)
        self.render()

    # ---------- editor ----------
    def handle_editor_submit(self, text: str) -> bool:
        current = self.selection.current
        if not isinstance(current, CellSelection):
            label = self.view.selection_label() or "nothing"
            self._set_status(f"Editor disabled: {label} is selected")
            return False
        self.store.set_value(current.col, current.row, text)
        self.render()
        return True

    # ---------- growth ----------
    def handle_add_row(self):
        current = self.selection.current
        inserting = self.shift_engine.request_growth(Axis.ROW, current)
        self.store.add_row()
        self.shift_engine.apply_pending_shift(self.store)
        if inserting:
            # the selected row's values move down; the blank row takes its place
            self._set_status(f"Inserted row at row {current.display_row}")
        else:
            self._set_status(f"Appended row {self.store.num_rows}")
        self.render()

    def handle_add_col(self) -> bool:
        if self.store.num_cols - 1 >= MAX_LETTER_COLUMNS:
            self._set_status(f"Column limit reached ({column_letter(MAX_LETTER_COLUMNS)})")
            return False
        current = self.selection.current
        inserting = self.shift_engine.request_growth(Axis.COLUMN, current)
        self.store.add_col()
        self.shift_engine.apply_pending_shift(self.store)
        if inserting:
            self._set_status(
                f"Inserted column after column {column_letter(current.col)}"
            )
        else:
            self._set_status(
                f"Appended column {column_letter(self.store.num_cols - 1)}"
            )
        self.render()
        return True

    # ---------- keyboard navigation ----------
    def move(self, dc: int, dr: int):
        current = self.selection.current
        last_col = self.store.num_cols - 1
        last_row = self.store.num_rows - 1
        if isinstance(current, CellSelection):
            col = max(1, min(last_col, current.col + dc))
            row = max(0, min(last_row, current.row + dr))
            self.selection.select_cell(col, row)
        elif isinstance(current, RowSelection):
            row = max(0, min(last_row, zero_based_row(current.display_row) + dr))
            self.selection.select_row(display_row_index(row))
        elif isinstance(current, ColumnSelection):
            self.selection.select_column(max(1, min(last_col, current.col + dc)))
        else:
            self.selection.select_cell(1, 0)
        self.render()

    def select_row_at_cursor(self):
        current = self.selection.current
        if isinstance(current, CellSelection):
            row = current.row
        elif isinstance(current, RowSelection):
            row = zero_based_row(current.display_row)
        else:
            row = 0
        self.selection.select_row(display_row_index(row))
        self.render()

    def select_column_at_cursor(self):
        current = self.selection.current
        if isinstance(current, (CellSelection, ColumnSelection)):
            col = current.col
        else:
            col = 1
        self.selection.select_column(col)
        self.render()

    def return_to_cell(self):
        current = self.selection.current
        if isinstance(current, CellSelection):
            return
        if isinstance(current, RowSelection):
            self.selection.select_cell(1, zero_based_row(current.display_row))
        elif isinstance(current, ColumnSelection):
            self.selection.select_cell(current.col, 0)
        else:
            self.selection.select_cell(1, 0)
        self.render()
