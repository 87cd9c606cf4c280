"""Tests для Settings та logging setup."""

import logging

import pytest
from pydantic import ValidationError

from clean_ddd.bootstrap import bootstrap
from clean_ddd.config import Settings, setup_logging
from clean_ddd.config.logging import filter_sensitive_data


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.default_currency == "USD"
    assert settings.outbox_batch_size == 100
    assert settings.is_development
    assert settings.database_url == "sqlite+aiosqlite:///:memory:"
    assert settings.db_echo is False


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("CLEAN_DDD_DEFAULT_CURRENCY", "eur")
    monkeypatch.setenv("CLEAN_DDD_OUTBOX_BATCH_SIZE", "7")
    monkeypatch.setenv("CLEAN_DDD_ENVIRONMENT", "production")

    settings = Settings(_env_file=None)

    assert settings.default_currency == "EUR"
    assert settings.outbox_batch_size == 7
    assert settings.is_production


@pytest.mark.parametrize("size", [0, 1001])
def test_outbox_batch_size_bounds(size):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, outbox_batch_size=size)


@pytest.mark.parametrize("currency", ["US", "U5D"])
def test_invalid_default_currency(currency):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, default_currency=currency)


def test_sensitive_keys_redacted():
    event = filter_sensitive_data(
        logging.getLogger("test"),
        "info",
        {"event": "user.registered", "email": "a@example.com", "nested": {"token": "x"}},
    )

    assert event["email"] == "[REDACTED]"
    assert event["nested"]["token"] == "[REDACTED]"
    assert event["event"] == "user.registered"


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.mark.parametrize("log_format", ["json", "console"])
def test_setup_logging(restore_root_logger, log_format):
    setup_logging(Settings(_env_file=None, log_format=log_format, log_level="WARNING"))

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == logging.WARNING


@pytest.mark.asyncio
async def test_bootstrap_uses_settings(settings):
    app = await bootstrap(settings, configure_logging=False)

    assert app.settings is settings
    assert app.relay is not None
    assert app.place_order().default_currency == "USD"
    assert app.place_order().uow is not app.place_order().uow
    assert app.database.shares_connection

    await app.close()
