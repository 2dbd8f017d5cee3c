"""Configuration loader for the `node:` section of config.yaml."""
from __future__ import annotations

import base64
import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_URL = "http://127.0.0.1:8648"

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CredentialsConfig:
    username: str = ""
    password: str = ""

    @property
    def enabled(self) -> bool:
        return bool(self.username)


@dataclass(frozen=True)
class ClientConfig:
    url: str = DEFAULT_URL
    timeout: int = 30
    credentials: CredentialsConfig = field(default_factory=CredentialsConfig)

    def authorization_header(self) -> str | None:
        """HTTP Basic ``Authorization`` value, or None without credentials."""
        if not self.credentials.enabled:
            return None
        token = f"{self.credentials.username}:{self.credentials.password}"
        return "Basic " + base64.b64encode(token.encode()).decode("ascii")


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _build_credentials(raw: dict[str, Any]) -> CredentialsConfig:
    return CredentialsConfig(
        username=str(raw.get("username") or ""),
        password=str(raw.get("password") or ""),
    )


def _build_client(raw: dict[str, Any]) -> ClientConfig:
    return ClientConfig(
        url=str(raw.get("url") or DEFAULT_URL),
        timeout=int(raw.get("timeout", 30)),
        credentials=_build_credentials(raw),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> ClientConfig:
    """Load and validate client configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            current working directory.
    """
    load_dotenv()

    if config_path is None:
        config_path = Path.cwd() / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = _build_client(raw.get("node") or {})

    validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def validate(cfg: ClientConfig) -> None:
    """Raise on invalid configuration."""
    parsed = urlparse(cfg.url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Node url '{cfg.url}' must be an http(s) URL with a host")

    if cfg.timeout <= 0:
        raise ValueError(f"Node timeout must be positive, got {cfg.timeout}")

    if cfg.credentials.password and not cfg.credentials.username:
        raise ValueError("Node password is set but username is empty")
