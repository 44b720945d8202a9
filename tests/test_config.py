"""
Tests for configuration handling in seatrows.config
"""

import os
import tempfile
import unittest
from unittest.mock import patch

from seatrows.config import Config, load_config


class TestConfig(unittest.TestCase):
    """Tests for Config"""

    def test_defaults(self):
        """Test default settings"""
        config = Config()
        self.assertEqual(config.log_level, "INFO")
        self.assertIsNone(config.log_dir)
        self.assertEqual(config.estimator.rounding, "half_up")
        self.assertEqual(config.estimator.min_seats_per_row, 1)
        self.assertEqual(config.search.max_rows_factor, 1.0)
        self.assertEqual(config.balancer.metric_update, "carry")

    def test_from_dict(self):
        """Test that partial dictionaries keep the other defaults"""
        config = Config.from_dict(
            {"log_level": "DEBUG", "balancer": {"metric_update": "scale"}, "unknown": 1}
        )
        self.assertEqual(config.log_level, "DEBUG")
        self.assertEqual(config.balancer.metric_update, "scale")
        self.assertEqual(config.estimator.rounding, "half_up")
        self.assertFalse(hasattr(config, "unknown"))

    def test_yaml_round_trip(self):
        """Test saving and loading a YAML file"""
        config = Config()
        config.estimator.rounding = "half_even"
        config.search.max_rows_factor = 2.0

        with tempfile.TemporaryDirectory() as temp_dir:
            path = os.path.join(temp_dir, "config.yaml")
            config.to_yaml(path)
            loaded = load_config(path)

        self.assertEqual(loaded.to_dict(), config.to_dict())

    def test_empty_yaml(self):
        """Test that an empty file gives the defaults"""
        with tempfile.TemporaryDirectory() as temp_dir:
            path = os.path.join(temp_dir, "empty.yaml")
            open(path, "w").close()
            self.assertEqual(Config.from_yaml(path).to_dict(), Config().to_dict())

    def test_environment(self):
        """Test environment overrides when no file is given"""
        with patch.dict(os.environ, {"SEATROWS_LOG_LEVEL": "debug", "SEATROWS_ROUNDING": "half_even"}):
            config = load_config(None)
        self.assertEqual(config.log_level, "DEBUG")
        self.assertEqual(config.estimator.rounding, "half_even")


if __name__ == "__main__":
    unittest.main()
