"""Tests for config parsing and validation of each section."""

import sys
import unittest
from pathlib import Path
from unittest.mock import patch

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ElasticDSL.clients import clear_client, current_client
from ElasticDSL.clients.http_client import HttpClient
from ElasticDSL.config import ClientConfig, configure_from_file, create_client, parse_config_dict
from ElasticDSL.config.app import merge_config_dicts, parse_yaml


def _raw(**client: object) -> dict:
    section = {"server_url": "http://localhost:9200"}
    section.update(client)
    return {"client": section}


class TestConfigParsing(unittest.TestCase):
    def test_log_section_is_optional(self) -> None:
        config = parse_config_dict(_raw())

        self.assertEqual(config.runtime.level, "INFO")
        self.assertEqual(config.runtime.dir, "log")
        self.assertEqual(config.client.timeout, 30.0)

    def test_missing_client_section(self) -> None:
        with self.assertRaisesRegex(ValueError, "Missing required config: client"):
            parse_config_dict({})

    def test_missing_server_url(self) -> None:
        with self.assertRaisesRegex(ValueError, "client.server_url"):
            parse_config_dict({"client": {}})

    def test_type_errors_name_the_key(self) -> None:
        with self.assertRaisesRegex(TypeError, "client.timeout must be a number"):
            parse_config_dict(_raw(timeout="fast"))
        with self.assertRaisesRegex(TypeError, "client.max_attempts must be an integer"):
            parse_config_dict(_raw(max_attempts=True))
        with self.assertRaisesRegex(TypeError, "log.to_file must be a boolean"):
            parse_config_dict({**_raw(), "log": {"to_file": "yes"}})

    def test_domain_constraints(self) -> None:
        with self.assertRaisesRegex(ValueError, "client.timeout must be > 0"):
            parse_config_dict(_raw(timeout=0))
        with self.assertRaisesRegex(ValueError, "client.max_attempts must be >= 1"):
            parse_config_dict(_raw(max_attempts=0))
        with self.assertRaisesRegex(ValueError, "client.password_env is required"):
            parse_config_dict(_raw(username="elastic", password_env=" "))
        with self.assertRaisesRegex(ValueError, "log.level must be one of"):
            parse_config_dict({**_raw(), "log": {"level": "chatty"}})

    def test_section_must_be_mapping(self) -> None:
        with self.assertRaisesRegex(TypeError, "client must be an object"):
            parse_config_dict({"client": ["http://localhost:9200"]})


class TestConfigHelpers(unittest.TestCase):
    def test_merge_is_deep(self) -> None:
        merged = merge_config_dicts(
            {"log": {"level": "INFO", "dir": "log"}, "client": {"timeout": 30}},
            {"log": {"level": "DEBUG"}},
        )

        self.assertEqual(merged, {"log": {"level": "DEBUG", "dir": "log"}, "client": {"timeout": 30}})

    def test_parse_yaml_rejects_non_mapping_root(self) -> None:
        self.assertEqual(parse_yaml(""), {})
        with self.assertRaisesRegex(ValueError, "Config root must be a mapping"):
            parse_yaml("- a\n- b\n")


class TestClientWiring(unittest.TestCase):
    def tearDown(self) -> None:
        clear_client()

    def test_create_client_from_section(self) -> None:
        client_config = ClientConfig(
            server_url="http://es.local:9200",
            timeout=5.0,
            max_attempts=2,
            username="",
            password_env="ELASTIC_PASSWORD",
            password="",
        )

        client = create_client(client_config)

        self.assertIsInstance(client, HttpClient)
        self.assertEqual(client.server_url(), "http://es.local:9200")
        client.close()

    def test_configure_from_file_registers_client(self) -> None:
        config_path = REPO_ROOT / "src" / "ElasticDSL" / "config" / "default.yml"

        with patch("ElasticDSL.config.app.load_dotenv") as load_dotenv, patch(
            "ElasticDSL.config.app.configure_logging"
        ) as configure_logging:
            client = configure_from_file(config_path)

        load_dotenv.assert_called_once()
        configure_logging.assert_called_once_with(level="INFO", action="search", log_to_file=False, log_dir="log")
        self.assertIs(current_client(), client)
        self.assertEqual(client.server_url(), "http://localhost:9200")


if __name__ == "__main__":
    unittest.main()
