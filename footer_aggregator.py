import re
from typing import Optional, Union

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

SUM_LABEL = "Sum"


def parse_int_prefix(text) -> Optional[int]:
    """Leading-integer parse: '12abc' -> 12, ' -3' -> -3, 'abc' -> None."""
    if text is None:
        return None
    match = _LEADING_INT.match(str(text))
    if not match:
        return None
    return int(match.group(1))


class FooterAggregator:
    """Computes the footer row: a label over the gutter, column sums elsewhere."""

    def __init__(self, store):
        self.store = store

    def column_sum(self, col: int) -> Union[int, str]:
        total = 0
        has_valid_value = False
        for text in self.store.column_values(col):
            value = parse_int_prefix(text)
            if value is None:
                continue
            total += value
            has_valid_value = True
        # parsed values summing to zero report "0"; an all-blank column reports int 0
        if total == 0 and has_valid_value:
            return "0"
        return total

    def footer_cells(self) -> list[str]:
        cells = []
        for col in range(self.store.num_cols):
            if col == 0:
                cells.append(SUM_LABEL)
            else:
                cells.append(str(self.column_sum(col)))
        return cells
