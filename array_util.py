MAX_LETTER_COLUMNS = 26


def get_range(from_num: int, to_num: int) -> list[int]:
    return list(range(from_num, to_num + 1))


def get_letter_range(first_letter: str = "A", num_letters: int = 0) -> list[str]:
    range_start = ord(first_letter)
    range_end = range_start + num_letters - 1
    return [chr(code) for code in get_range(range_start, range_end)]


def get_letter(first_letter: str = "A", num_cols: int = 1) -> str:
    return chr(ord(first_letter) + num_cols - 1)


def column_letter(col: int) -> str:
    """Spreadsheet label for data column `col` (1 -> 'A').

    Only single letters are produced; columns past Z are not labelled.
    """
    if col < 1 or col > MAX_LETTER_COLUMNS:
        raise ValueError(f"No column label for index {col}")
    return get_letter("A", col)


def header_labels(num_cols: int) -> list[str]:
    # first header sits above the row-label gutter
    if num_cols < 1:
        return []
    if num_cols - 1 > MAX_LETTER_COLUMNS:
        raise ValueError(f"No column labels past {get_letter('A', MAX_LETTER_COLUMNS)}")
    return [""] + get_letter_range("A", num_cols - 1)
