"""Application config orchestration and YAML loading entrypoints."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml
from dotenv import load_dotenv

from ElasticDSL.clients.http_client import HttpClient
from ElasticDSL.clients.registry import register_client
from ElasticDSL.config.client import ClientConfig, check_client, load_client
from ElasticDSL.config.runtime import RuntimeConfig, check_runtime, load_runtime
from ElasticDSL.utils.log import configure_logging, log

DEFAULT_CONFIG_PATH = Path(__file__).with_name("default.yml")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Root configuration."""

    runtime: RuntimeConfig
    client: ClientConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    client = load_client(raw)

    check_runtime(runtime)
    check_client(client)

    return AppConfig(runtime=runtime, client=client)


def load_config(path: Path) -> AppConfig:
    """Load YAML config file without default merge."""
    return load_config_with_defaults(path, default_path=path)


def load_config_with_defaults(config_path: Path, default_path: Path = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load config by merging defaults and optional override."""
    base = parse_yaml(default_path.read_text(encoding="utf-8"))
    if config_path == default_path:
        return parse_config_dict(base)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    merged = merge_config_dicts(base, override)
    return parse_config_dict(merged)


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def create_client(config: AppConfig | ClientConfig) -> HttpClient:
    """Build an HttpClient from the ``client`` section."""
    client_config = config.client if isinstance(config, AppConfig) else config
    return HttpClient(
        client_config.server_url,
        timeout=client_config.timeout,
        max_attempts=client_config.max_attempts,
        auth=client_config.auth,
    )


def configure_from_file(path: Path | str, *, action: str = "search") -> HttpClient:
    """Load config, set up logging, and register the configured client.

    ``.env`` is loaded first so ``client.password_env`` can point at it.

    Args:
        path: YAML file overriding the packaged defaults.
        action: Log file name prefix when logging to file is enabled.

    Returns:
        The registered client.
    """
    load_dotenv()
    config = load_config_with_defaults(Path(path))
    configure_logging(
        level=config.runtime.level,
        action=action,
        log_to_file=config.runtime.to_file,
        log_dir=config.runtime.dir,
    )
    client = register_client(create_client(config))
    log.info("Search client ready: %s", client.server_url())
    return client
