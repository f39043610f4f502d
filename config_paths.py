import json
import os

from array_util import MAX_LETTER_COLUMNS

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "sumgrid")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
NUM_COLS_DEFAULT = 6  # gutter + A..E
NUM_ROWS_DEFAULT = 10
STATUS_SECONDS_DEFAULT = 3

MIN_NUM_COLS = 2
MAX_NUM_COLS = MAX_LETTER_COLUMNS + 1


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def clamp_num_cols(value: int) -> int:
    return max(MIN_NUM_COLS, min(MAX_NUM_COLS, value))


def clamp_num_rows(value: int) -> int:
    return max(1, value)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def load_config():
    cfg = {
        "NUM_COLS": NUM_COLS_DEFAULT,
        "NUM_ROWS": NUM_ROWS_DEFAULT,
        "STATUS_SECONDS": STATUS_SECONDS_DEFAULT,
    }

    if os.path.exists(CONFIG_JSON):
        try:
            with open(CONFIG_JSON, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError):
            return cfg

        if isinstance(data, dict):
            grid = data.get("grid")
            if isinstance(grid, dict):
                num_cols = grid.get("num_cols")
                if _is_int(num_cols):
                    cfg["NUM_COLS"] = clamp_num_cols(num_cols)
                num_rows = grid.get("num_rows")
                if _is_int(num_rows):
                    cfg["NUM_ROWS"] = clamp_num_rows(num_rows)
            seconds = data.get("status_seconds")
            if isinstance(seconds, (int, float)) and not isinstance(seconds, bool) and seconds > 0:
                cfg["STATUS_SECONDS"] = seconds

    return cfg
