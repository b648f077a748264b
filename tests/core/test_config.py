# tests/core/test_config.py
from __future__ import annotations

import pytest
from pydantic import ValidationError

from lattice.constants import Environment
from lattice.core.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("LATTICE_ENVIRONMENT", "LATTICE_BASE_URL", "LATTICE_HTTP_TIMEOUT_SECONDS", "LATTICE_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        cfg = Settings(_env_file=None)
        assert cfg.environment is Environment.LOCAL
        assert cfg.base_url is None
        assert cfg.http_timeout_seconds == 30.0
        assert cfg.resolved_base_url() == "http://localhost:8080"

    def test_environment_from_env(self, monkeypatch):
        monkeypatch.delenv("LATTICE_BASE_URL", raising=False)
        monkeypatch.setenv("LATTICE_ENVIRONMENT", "PROD")

        cfg = Settings(_env_file=None)
        assert cfg.environment is Environment.PROD
        assert cfg.resolved_base_url() == "https://api.loom.digital"

    def test_base_url_wins_and_is_normalized(self, monkeypatch):
        monkeypatch.setenv("LATTICE_ENVIRONMENT", "PROD")
        monkeypatch.setenv("LATTICE_BASE_URL", " http://staging.loom.test/ ")

        cfg = Settings(_env_file=None)
        assert cfg.base_url == "http://staging.loom.test"
        assert cfg.resolved_base_url() == "http://staging.loom.test"

    def test_blank_base_url_is_unset(self):
        assert Settings(_env_file=None, base_url="  ").base_url is None

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, http_timeout_seconds=0)

    def test_unknown_environment_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, environment="STAGING")
