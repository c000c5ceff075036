"""Search client configuration section."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from ElasticDSL.config.common import (
    expect_float,
    expect_int,
    expect_str,
    get_optional_value,
    get_required_value,
    get_section,
)

DEFAULT_PASSWORD_ENV = "ELASTIC_PASSWORD"


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Validated ``client`` section.

    ``password`` is read from the environment variable named by
    ``client.password_env`` and never from the YAML file.
    """

    server_url: str
    timeout: float
    max_attempts: int
    username: str
    password_env: str
    password: str

    @property
    def auth(self) -> tuple[str, str] | None:
        """Basic auth pair, or None when no username is configured."""
        if not self.username:
            return None
        return (self.username, self.password)


def load_client(raw: Mapping[str, Any]) -> ClientConfig:
    """Load the ``client`` section.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = get_section(raw, "client", required=True)
    password_env = expect_str(
        get_optional_value(section, "password_env", DEFAULT_PASSWORD_ENV), "client.password_env"
    ).strip()
    return ClientConfig(
        server_url=expect_str(get_required_value(section, "server_url", "client.server_url"), "client.server_url").strip(),
        timeout=expect_float(get_optional_value(section, "timeout", 30), "client.timeout"),
        max_attempts=expect_int(get_optional_value(section, "max_attempts", 3), "client.max_attempts"),
        username=expect_str(get_optional_value(section, "username", ""), "client.username").strip(),
        password_env=password_env,
        password=_load_password_from_env(password_env),
    )


def check_client(config: ClientConfig) -> None:
    """Validate client domain constraints.

    Raises:
        ValueError: If values violate client constraints.
    """
    if not config.server_url:
        raise ValueError("client.server_url must not be empty")
    if config.timeout <= 0:
        raise ValueError("client.timeout must be > 0")
    if config.max_attempts < 1:
        raise ValueError("client.max_attempts must be >= 1")
    if config.username and not config.password_env:
        raise ValueError("client.password_env is required when client.username is set")


def _load_password_from_env(password_env: str) -> str:
    if not password_env:
        return ""
    return os.getenv(password_env, "").strip()
