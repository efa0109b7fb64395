"""
Tests for config loading, validation and helpers.
"""

import json
import logging
from pathlib import Path

import numpy as np
import pytest

from utils import load_config, setup_logging, uniform_int, validate_config


class TestUniformInt:
    def test_inclusive_on_both_ends(self):
        rng = np.random.default_rng(0)
        draws = {uniform_int(rng, 0, 2) for _ in range(300)}
        assert draws == {0, 1, 2}

    def test_returns_python_int(self):
        assert isinstance(uniform_int(np.random.default_rng(0), 0, 100), int)


class TestLoadConfig:
    def test_loads_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"scene": {"manual": True}}), encoding="utf-8")
        assert load_config(str(path)) == {"scene": {"manual": True}}

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "absent.json"))

    def test_bad_json_raises(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_config(str(path))

    def test_shipped_config_is_valid(self):
        validate_config(load_config(str(Path(__file__).parent.parent / "config.json")))


class TestValidateConfig:
    def test_empty_config_uses_defaults(self):
        validate_config({})

    @pytest.mark.parametrize("config", [
        {'scene': {'frame_interval_ms': 0}},
        {'scene': {'frame_interval_ms': 'fast'}},
        {'visualization': {'cell_size': -4}},
        {'run_control': {'log_throttle_steps': 0}},
        {'run_control': {'max_frames': -1}},
    ])
    def test_rejects_bad_values(self, config):
        with pytest.raises(ValueError, match="Configuration error"):
            validate_config(config)


class TestSetupLogging:
    def test_creates_log_file(self, tmp_path):
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        log_file = tmp_path / "logs" / "snow.log"
        try:
            setup_logging({'logging': {'level': 'debug', 'log_file': str(log_file)}})
            logging.info("hello snow")
            for handler in root.handlers:
                handler.flush()
            assert root.level == logging.DEBUG
            assert "hello snow" in log_file.read_text()
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
