"""
Storefront Backend - Configuration Tests
=========================================

What we test:
    ✅ Development mode detection (ENVIRONMENT and NODE_ENV)
    ✅ Defaults: port 5000, production mode
    ✅ Log level validation
"""

import pytest
from pydantic import ValidationError

from storefront.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("ENVIRONMENT", "NODE_ENV", "PRODUCT_SEED", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.backend_port == 5000
        assert settings.environment == "production"
        assert settings.is_development is False
        assert settings.product_seed is None

    def test_development_mode(self):
        assert Settings(_env_file=None, environment="Development").is_development is True

    def test_other_modes_are_not_development(self):
        assert Settings(_env_file=None, environment="staging").is_development is False

    def test_node_env_is_accepted(self, monkeypatch):
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.setenv("NODE_ENV", "development")

        assert Settings(_env_file=None).is_development is True

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")

    def test_cors_origins_list(self):
        settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
