import sys
import os
import curses

from config_paths import clamp_num_cols, clamp_num_rows, ensure_config_dirs, load_config
from grid_store import GridStore

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")
from orchestrator import Orchestrator

try:
    from _version import __version__
except Exception:
    __version__ = "0.0.0"


USAGE = (
    "sumgrid - terminal spreadsheet grid with column sums\n\n"
    "Usage:\n  sumgrid [COLS ROWS]\n  sumgrid -v\n  sumgrid -h\n\n"
    "COLS counts data columns (A..Z), ROWS counts data rows.\n"
)


def _parse_dims(args, cfg):
    """Returns (num_cols, num_rows) for the store; num_cols includes the gutter."""
    if not args:
        return cfg["NUM_COLS"], cfg["NUM_ROWS"]
    if len(args) != 2:
        raise ValueError("expected COLS and ROWS")
    try:
        data_cols = int(args[0])
        rows = int(args[1])
    except ValueError:
        raise ValueError(f"dimensions must be integers, got {args[0]!r} {args[1]!r}") from None
    if data_cols < 1 or rows < 1:
        raise ValueError("dimensions must be positive")
    num_cols = data_cols + 1
    if clamp_num_cols(num_cols) != num_cols:
        raise ValueError("at most 26 columns (A..Z) are supported")
    return num_cols, clamp_num_rows(rows)


def main():
    args = sys.argv[1:]

    if "-v" in args or "-V" in args:
        print(__version__)
        return

    if "-h" in args:
        print(USAGE)
        return

    ensure_config_dirs()
    cfg = load_config()

    try:
        num_cols, num_rows = _parse_dims(args, cfg)
    except ValueError as e:
        print(f"sumgrid: {e}\n", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        sys.exit(2)

    def curses_main(stdscr):
        store = GridStore(num_cols, num_rows)
        Orchestrator(stdscr, store, cfg).run()

    curses.wrapper(curses_main)


if __name__ == "__main__":
    main()
