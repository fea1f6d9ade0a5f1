"""
Client configuration.

Values come from, in increasing priority: built-in defaults, the
``~/.shine/.env`` file, ``SHINE_*`` environment variables, and explicit
overrides (CLI flags). The resulting ``ShineConfig`` is passed to the
translator and the submitters; nothing reads configuration globally.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from .errors import ConfigError
from .utils import is_account_name

SHINE_DIR = Path.home() / ".shine"
SHINE_ENV = SHINE_DIR / ".env"

DEFAULT_API_URL = "http://localhost:8888"
DEFAULT_WALLET_URL = "http://localhost:6667"

_ENV_VARS = {
    "account": "SHINE_ACCOUNT",
    "contract": "SHINE_CONTRACT",
    "api_url": "SHINE_API_URL",
    "wallet_url": "SHINE_WALLET_URL",
    "wallet_name": "SHINE_WALLET_NAME",
    "private_key": "SHINE_PRIVATE_KEY",
    "retries": "SHINE_RETRIES",
}


@dataclass(frozen=True)
class ShineConfig:
    account: str = "shine"
    contract: str = "shine"
    api_url: str = DEFAULT_API_URL
    wallet_url: str = DEFAULT_WALLET_URL
    wallet_name: str = "default"
    private_key: Optional[str] = None
    retries: int = 3
    timeout: float = 30.0

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None, **overrides: Any) -> "ShineConfig":
        """
        Build a config from the .env file, the environment and overrides.

        Args:
            env_path: Path to .env file (default: ~/.shine/.env)
            **overrides: Field values that win over everything else.
                         ``None`` values are ignored.

        Returns:
            Validated ShineConfig
        """
        env_path = env_path or SHINE_ENV
        if env_path.exists():
            load_dotenv(env_path, override=False)

        values: dict[str, Any] = {}
        for field_name, var in _ENV_VARS.items():
            raw = os.environ.get(var)
            if raw:
                values[field_name] = raw
        values.update({k: v for k, v in overrides.items() if v is not None})

        if "retries" in values:
            try:
                values["retries"] = int(values["retries"])
            except (TypeError, ValueError):
                raise ConfigError(f"retries must be an integer, got {values['retries']!r}")

        config = cls(**values)
        config.validate()
        return config

    def validate(self) -> None:
        for field_name in ("account", "contract"):
            value = getattr(self, field_name)
            if not is_account_name(value):
                raise ConfigError(f"Invalid {field_name} name: {value!r}")
        for field_name in ("api_url", "wallet_url"):
            value = getattr(self, field_name)
            if not value or not value.startswith(("http://", "https://")):
                raise ConfigError(f"{field_name} must be an http(s) URL, got {value!r}")
        if self.retries < 1:
            raise ConfigError("retries must be at least 1")
        if self.timeout <= 0:
            raise ConfigError("timeout must be positive")

