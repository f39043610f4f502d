import json
import tempfile
from pathlib import Path

import config_paths


def _load_with(cfg_path: Path):
    orig_dir = config_paths.CONFIG_DIR
    orig_json = config_paths.CONFIG_JSON
    try:
        config_paths.CONFIG_DIR = str(cfg_path.parent)
        config_paths.CONFIG_JSON = str(cfg_path)
        return config_paths.load_config()
    finally:
        config_paths.CONFIG_DIR = orig_dir
        config_paths.CONFIG_JSON = orig_json


def test_load_config_defaults_without_json():
    with tempfile.TemporaryDirectory() as tmp:
        cfg = _load_with(Path(tmp) / "sumgrid" / "config.json")
        assert cfg["NUM_COLS"] == 6
        assert cfg["NUM_ROWS"] == 10
        assert cfg["STATUS_SECONDS"] == 3


def test_load_config_reads_json_overrides():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_path = Path(tmp) / "config.json"
        cfg_path.write_text(
            json.dumps({"grid": {"num_cols": 4, "num_rows": 25}, "status_seconds": 1.5})
        )
        cfg = _load_with(cfg_path)
        assert cfg["NUM_COLS"] == 4
        assert cfg["NUM_ROWS"] == 25
        assert cfg["STATUS_SECONDS"] == 1.5


def test_load_config_clamps_and_ignores_bad_values():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_path = Path(tmp) / "config.json"
        cfg_path.write_text(
            json.dumps(
                {
                    "grid": {"num_cols": 100, "num_rows": "many"},
                    "status_seconds": True,
                }
            )
        )
        cfg = _load_with(cfg_path)
        assert cfg["NUM_COLS"] == 27
        assert cfg["NUM_ROWS"] == 10
        assert cfg["STATUS_SECONDS"] == 3


def test_load_config_survives_broken_json():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_path = Path(tmp) / "config.json"
        cfg_path.write_text("{not json")
        cfg = _load_with(cfg_path)
        assert cfg["NUM_COLS"] == 6
