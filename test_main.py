import pytest


from main import _parse_dims

CFG = {"NUM_COLS": 6, "NUM_ROWS": 10}


@pytest.mark.parametrize(
    "args, expected",
    [
        ([], (6, 10)),
        (["3", "4"], (4, 4)),
        (["26", "1"], (27, 1)),
    ],
)
def test_parse_dims(args, expected):
    assert _parse_dims(args, CFG) == expected


@pytest.mark.parametrize(
    "args",
    [
        ["3"],
        ["a", "4"],
        ["0", "4"],
        ["3", "-1"],
        ["27", "4"],
    ],
)
def test_parse_dims_rejects_bad_input(args):
    with pytest.raises(ValueError):
        _parse_dims(args, CFG)
