import numpy as np
import pandas as pd


class GridStore:
    """
    Owns cell values and grid dimensions.
    Every cell holds a string; unwritten cells read back as "".
    No selection or rendering logic.
    """

    def __init__(self, num_cols: int, num_rows: int):
        if num_cols < 1 or num_rows < 1:
            raise ValueError(f"Grid must be at least 1x1, got {num_cols}x{num_rows}")
        self.df = pd.DataFrame(np.full((num_rows, num_cols), "", dtype=object))

    # ---------- dimensions ----------
    @property
    def num_cols(self) -> int:
        return len(self.df.columns)

    @num_cols.setter
    def num_cols(self, value: int):
        self._resize(value, self.num_rows)

    @property
    def num_rows(self) -> int:
        return len(self.df)

    @num_rows.setter
    def num_rows(self, value: int):
        self._resize(self.num_cols, value)

    @property
    def shape(self) -> tuple[int, int]:
        return self.num_cols, self.num_rows

    def _resize(self, num_cols: int, num_rows: int):
        if num_cols < 1 or num_rows < 1:
            raise ValueError(f"Grid must be at least 1x1, got {num_cols}x{num_rows}")
        self.df = self.df.reindex(
            index=range(num_rows), columns=range(num_cols), fill_value=""
        )

    def add_row(self):
        self.num_rows += 1

    def add_col(self):
        self.num_cols += 1

    # ---------- values ----------
    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.num_cols and 0 <= row < self.num_rows

    def _check(self, col: int, row: int):
        if not self.in_bounds(col, row):
            raise IndexError(
                f"Cell ({col}, {row}) outside {self.num_cols}x{self.num_rows} grid"
            )

    @staticmethod
    def _normalize(value) -> str:
        if value is None or pd.isna(value):
            return ""
        return str(value)

    def get_value(self, col: int, row: int) -> str:
        self._check(col, row)
        return self._normalize(self.df.iat[row, col])

    def set_value(self, col: int, row: int, value):
        self._check(col, row)
        self.df.iat[row, col] = "" if value is None else str(value)

    def column_values(self, col: int) -> list[str]:
        if col < 0 or col >= self.num_cols:
            raise IndexError(f"Column {col} outside grid of {self.num_cols} columns")
        return [self._normalize(v) for v in self.df.iloc[:, col]]
