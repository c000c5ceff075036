"""Public configuration API for ElasticDSL."""

from ElasticDSL.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    configure_from_file,
    create_client,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from ElasticDSL.config.client import ClientConfig
from ElasticDSL.config.runtime import RuntimeConfig

__all__ = [
    "AppConfig",
    "ClientConfig",
    "DEFAULT_CONFIG_PATH",
    "RuntimeConfig",
    "configure_from_file",
    "create_client",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
]
