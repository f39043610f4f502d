from dataclasses import dataclass
from typing import Optional

from array_util import column_letter, header_labels
from selection import (
    CellSelection,
    ColumnSelection,
    RowSelection,
    display_row_index,
    zero_based_row,
)

CURRENT_CELL = "current-cell"
CURRENT_MULTIPLE = "current-multiple"


@dataclass(frozen=True)
class EditorProjection:
    text: str
    enabled: bool


@dataclass
class GridSnapshot:
    header: list[str]
    body: list[list[str]]
    footer: list[str]
    highlights: dict[tuple[int, int], str]
    editor: EditorProjection
    selection_label: str = ""
    focus: Optional[tuple[int, int]] = None  # (col, row) the renderer keeps visible
    shape: tuple[int, int] = (0, 0)


class ViewSync:
    """Derives what the user sees from the selection and the grid store."""

    def __init__(self, store, selection, footer):
        self.store = store
        self.selection = selection
        self.footer = footer

    @staticmethod
    def normalize_value_for_rendering(value) -> str:
        return value or ""

    # ---------- highlights ----------
    def highlight_for(self, col: int, row: int) -> Optional[str]:
        current = self.selection.current
        if isinstance(current, ColumnSelection) and current.col == col:
            return CURRENT_MULTIPLE
        if isinstance(current, RowSelection) and current.display_row == row + 1:
            return CURRENT_MULTIPLE
        if isinstance(current, CellSelection) and (current.col, current.row) == (col, row):
            return CURRENT_CELL
        return None

    def highlight_map(self) -> dict[tuple[int, int], str]:
        highlights = {}
        for row in range(self.store.num_rows):
            for col in range(self.store.num_cols):
                cls = self.highlight_for(col, row)
                if cls is not None:
                    highlights[(col, row)] = cls
        return highlights

    # ---------- editor ----------
    def editor_projection(self) -> EditorProjection:
        current = self.selection.current
        if isinstance(current, CellSelection):
            value = self.store.get_value(current.col, current.row)
            return EditorProjection(self.normalize_value_for_rendering(value), True)
        if isinstance(current, RowSelection):
            return EditorProjection(f" < row {current.display_row} is selected > ", False)
        if isinstance(current, ColumnSelection):
            letter = column_letter(current.col)
            return EditorProjection(f" < column {letter} is selected > ", False)
        return EditorProjection("", False)

    # ---------- table ----------
    def header_labels(self) -> list[str]:
        return header_labels(self.store.num_cols)

    def body_rows(self) -> list[list[str]]:
        rows = []
        for row in range(self.store.num_rows):
            cells = [str(display_row_index(row))]
            for col in range(1, self.store.num_cols):
                cells.append(
                    self.normalize_value_for_rendering(self.store.get_value(col, row))
                )
            rows.append(cells)
        return rows

    def footer_cells(self) -> list[str]:
        return self.footer.footer_cells()

    def selection_label(self) -> str:
        current = self.selection.current
        if isinstance(current, CellSelection):
            return f"{column_letter(current.col)}{display_row_index(current.row)}"
        if isinstance(current, RowSelection):
            return f"row {current.display_row}"
        if isinstance(current, ColumnSelection):
            return f"column {column_letter(current.col)}"
        return ""

    def focus(self) -> Optional[tuple[int, int]]:
        current = self.selection.current
        if isinstance(current, CellSelection):
            return current.col, current.row
        if isinstance(current, RowSelection):
            return 0, zero_based_row(current.display_row)
        if isinstance(current, ColumnSelection):
            return current.col, 0
        return None

    def snapshot(self) -> GridSnapshot:
        return GridSnapshot(
            header=self.header_labels(),
            body=self.body_rows(),
            footer=self.footer_cells(),
            highlights=self.highlight_map(),
            editor=self.editor_projection(),
            selection_label=self.selection_label(),
            focus=self.focus(),
            shape=self.store.shape,
        )
