"""
Tests de la configuration (pydantic-settings) et du logging (loguru).
"""

import pytest
from loguru import logger
from pydantic import ValidationError

from src.config import Settings
from src.logging_config import configure_logging


class TestSettings:
    """Chargement depuis les variables d'environnement ORDERDESK_."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ORDERDESK_DATABASE_URL", raising=False)
        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite+aiosqlite:///orderdesk.db"
        assert settings.default_page_limit == 10
        assert settings.api_title == "OrderDesk"

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("ORDERDESK_DATABASE_URL", "sqlite+aiosqlite:///autre.db")
        monkeypatch.setenv("ORDERDESK_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite+aiosqlite:///autre.db"
        assert settings.log_level == "DEBUG"

    def test_page_limit_bounds(self, monkeypatch):
        monkeypatch.setenv("ORDERDESK_DEFAULT_PAGE_LIMIT", "500")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestConfigureLogging:
    """Handlers loguru."""

    def test_file_sink_writes_json(self, tmp_path):
        log_file = tmp_path / "logs" / "orderdesk.log"
        configure_logging(log_level="INFO", log_file=log_file)

        logger.info("Commande creee", order_id="abc")
        logger.complete()
        logger.remove()

        assert log_file.exists()
        assert '"order_id": "abc"' in log_file.read_text()

    def test_without_file_sink(self, tmp_path):
        log_file = tmp_path / "absent.log"
        configure_logging(log_level="WARNING", log_file=log_file, file_logging=False)

        logger.warning("Reservation de stock refusee")

        assert not log_file.exists()
        logger.remove()
