"""Tests for config override behavior with defaults."""

import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ElasticDSL.config import DEFAULT_CONFIG_PATH, load_config_with_defaults


_BASE_YAML = """
log:
  level: INFO
  to_file: false
  dir: log

client:
  server_url: http://localhost:9200
  timeout: 30
  max_attempts: 3
  username: ""
  password_env: ELASTIC_PASSWORD
"""


class TestConfigOverride(unittest.TestCase):
    def test_override_merges_with_defaults(self) -> None:
        override_yaml = """
log:
  level: debug

client:
  server_url: http://search.internal:9200
"""
        with tempfile.TemporaryDirectory() as tmp:
            base_path = Path(tmp) / "base.yml"
            base_path.write_text(_BASE_YAML, encoding="utf-8")
            override_path = Path(tmp) / "override.yml"
            override_path.write_text(override_yaml, encoding="utf-8")

            config = load_config_with_defaults(override_path, default_path=base_path)

        self.assertEqual(config.runtime.level, "DEBUG")
        self.assertEqual(config.client.server_url, "http://search.internal:9200")
        self.assertEqual(config.client.timeout, 30.0)
        self.assertEqual(config.client.max_attempts, 3)
        self.assertIsNone(config.client.auth)

    def test_password_comes_from_environment(self) -> None:
        override_yaml = """
client:
  username: elastic
  password_env: TEST_ES_PASSWORD
"""
        with tempfile.TemporaryDirectory() as tmp:
            override_path = Path(tmp) / "override.yml"
            override_path.write_text(override_yaml, encoding="utf-8")

            with patch.dict(os.environ, {"TEST_ES_PASSWORD": " s3cret "}):
                config = load_config_with_defaults(override_path)

        self.assertEqual(config.client.auth, ("elastic", "s3cret"))

    def test_packaged_defaults_load(self) -> None:
        config = load_config_with_defaults(DEFAULT_CONFIG_PATH)

        self.assertEqual(config.client.server_url, "http://localhost:9200")
        self.assertEqual(config.runtime.level, "INFO")
        self.assertFalse(config.runtime.to_file)


if __name__ == "__main__":
    unittest.main()
