#!/usr/bin/env python3

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from commitmcp import config


class TestConfig(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.temp_dir.cleanup)
        env_patch = patch.dict(
            os.environ, {"COMMITMCP_CONFIG_DIR": self.temp_dir.name}, clear=False
        )
        env_patch.start()
        self.addCleanup(env_patch.stop)
        self.config_path = Path(self.temp_dir.name) / "commitmcprc"

    def write_config(self, content: str) -> None:
        self.config_path.write_text(content)

    def test_config_dir_takes_precedence(self):
        self.write_config("")
        self.assertEqual(config.get_config_path(), self.config_path)

    def test_defaults_without_file(self):
        with patch("commitmcp.config.get_config_path", return_value=self.config_path):
            loaded = config.load_config()
        self.assertEqual(loaded["logger"]["verbosity"], "INFO")
        self.assertEqual(loaded["git"]["log_count"], 10)

    def test_user_config_is_merged(self):
        self.write_config('[logger]\nverbosity = "DEBUG"\n\n[git]\nlog_count = 3\n')
        loaded = config.load_config()
        self.assertEqual(loaded["logger"]["verbosity"], "DEBUG")
        # Keys missing from the user file keep their defaults
        self.assertEqual(loaded["logger"]["path"], config.DEFAULT_CONFIG["logger"]["path"])
        self.assertEqual(config.get_log_count(), 3)

    def test_merge_does_not_leak_into_defaults(self):
        self.write_config('[logger]\nverbosity = "ERROR"\n')
        config.load_config()
        self.assertEqual(config.DEFAULT_CONFIG["logger"]["verbosity"], "INFO")

    def test_malformed_config_falls_back_to_defaults(self):
        self.write_config("[logger\nverbosity = ")
        with self.assertLogs(level="WARNING"):
            loaded = config.load_config()
        self.assertEqual(loaded["logger"]["verbosity"], "INFO")

    def test_invalid_log_count_uses_default(self):
        self.write_config('[git]\nlog_count = "many"\n')
        self.assertEqual(config.get_log_count(), config.DEFAULT_LOG_COUNT)
        self.write_config("[git]\nlog_count = 0\n")
        self.assertEqual(config.get_log_count(), config.DEFAULT_LOG_COUNT)

    def test_logger_path_expands_tilde(self):
        self.write_config('[logger]\npath = "~/logs"\n')
        self.assertEqual(config.get_logger_path(), os.path.expanduser("~/logs"))


if __name__ == "__main__":
    unittest.main()
