"""Tests for ShineConfig loading and validation."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from shine.config import ShineConfig
from shine.errors import ConfigError

CLEAN_ENV = {k: v for k, v in os.environ.items() if not k.startswith("SHINE_")}


class TestFromEnv:
    def test_defaults(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, CLEAN_ENV, clear=True):
            config = ShineConfig.from_env(env_path=tmp_path / "missing.env")
        assert config == ShineConfig()
        assert config.api_url == "http://localhost:8888"
        assert config.wallet_url == "http://localhost:6667"

    def test_env_file(self, tmp_path: Path) -> None:
        env_path = tmp_path / ".env"
        env_path.write_text("SHINE_ACCOUNT=bot\nSHINE_RETRIES=5\n", encoding="utf-8")
        with patch.dict(os.environ, CLEAN_ENV, clear=True):
            config = ShineConfig.from_env(env_path=env_path)
        assert config.account == "bot"
        assert config.retries == 5

    def test_environment_wins_over_file(self, tmp_path: Path) -> None:
        env_path = tmp_path / ".env"
        env_path.write_text("SHINE_ACCOUNT=fromfile\n", encoding="utf-8")
        env = dict(CLEAN_ENV, SHINE_ACCOUNT="fromenv")
        with patch.dict(os.environ, env, clear=True):
            config = ShineConfig.from_env(env_path=env_path)
        assert config.account == "fromenv"

    def test_overrides_win(self, tmp_path: Path) -> None:
        env = dict(CLEAN_ENV, SHINE_API_URL="http://node:8888")
        with patch.dict(os.environ, env, clear=True):
            config = ShineConfig.from_env(
                env_path=tmp_path / "missing.env",
                api_url="https://api.example.com",
                account=None,
            )
        assert config.api_url == "https://api.example.com"
        assert config.account == "shine"

    def test_bad_retries(self, tmp_path: Path) -> None:
        env = dict(CLEAN_ENV, SHINE_RETRIES="many")
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ConfigError):
                ShineConfig.from_env(env_path=tmp_path / "missing.env")


class TestValidate:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"account": "Bad_Name"},
            {"contract": ""},
            {"api_url": "localhost:8888"},
            {"wallet_url": ""},
            {"retries": 0},
            {"timeout": 0},
        ],
    )
    def test_invalid(self, kwargs: dict) -> None:
        with pytest.raises(ConfigError):
            ShineConfig(**kwargs).validate()

    def test_valid(self) -> None:
        ShineConfig(account="eos.user3", api_url="https://node.example.com").validate()
