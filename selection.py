from dataclasses import dataclass


@dataclass(frozen=True)
class NoSelection:
    pass


@dataclass(frozen=True)
class CellSelection:
    col: int
    row: int


@dataclass(frozen=True)
class RowSelection:
    # 1-based display index: zero-based row + 1
    display_row: int


@dataclass(frozen=True)
class ColumnSelection:
    col: int


def display_row_index(zero_based_row: int) -> int:
    return zero_based_row + 1


def zero_based_row(display_row: int) -> int:
    return display_row - 1


class SelectionState:
    """Tracks the single active selection: nothing, a cell, a row or a column."""

    def __init__(self, store):
        self.store = store
        # a gutter-only grid has no data cell to start on
        self.current = CellSelection(1, 0) if store.num_cols > 1 else NoSelection()

    # ---------- transitions ----------
    def select_cell(self, col: int, row: int):
        if not (1 <= col < self.store.num_cols and 0 <= row < self.store.num_rows):
            raise IndexError(f"Cell ({col}, {row}) is not selectable")
        self.current = CellSelection(col, row)

    def select_row(self, display_row: int):
        if not (1 <= display_row <= self.store.num_rows):
            raise IndexError(f"Row {display_row} is not selectable")
        self.current = RowSelection(display_row)

    def select_column(self, col: int):
        if not (1 <= col < self.store.num_cols):
            raise IndexError(f"Column {col} is not selectable")
        self.current = ColumnSelection(col)

    def clear(self):
        self.current = NoSelection()

    # ---------- queries ----------
    def is_cell(self) -> bool:
        return isinstance(self.current, CellSelection)

    def is_row(self) -> bool:
        return isinstance(self.current, RowSelection)

    def is_column(self) -> bool:
        return isinstance(self.current, ColumnSelection)
