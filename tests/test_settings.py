import logging

import pytest

from chatcore.config.logging_config import (
    CorrelationIdFilter,
    correlation_id_var,
    setup_logging,
)
from chatcore.config.settings import (
    Config,
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    get_config,
    validate_config,
)


def test_get_config_by_environment():
    assert get_config("testing") is TestingConfig
    assert get_config("production") is ProductionConfig
    assert get_config("unknown") is DevelopmentConfig


def test_active_config_follows_app_env():
    # conftest sets APP_ENV=testing before chatcore is imported
    assert Config is TestingConfig
    assert Config.STORAGE_BACKEND == "memory"
    assert DevelopmentConfig.DEBUG is True


def test_testing_config_is_valid():
    validate_config(TestingConfig)
    validate_config()


def test_validate_config_lists_every_problem():
    class Broken(Config):
        STORAGE_BACKEND = "prisma"
        DATABASE_URL = ""
        MESSAGE_PAGE_DEFAULT_LIMIT = 500
        MESSAGE_PAGE_MAX_LIMIT = 100
        LOG_LEVEL = "LOUD"

    with pytest.raises(ValueError) as excinfo:
        validate_config(Broken)

    message = str(excinfo.value)
    assert message.startswith("Environment variable validation failed:")
    assert "DATABASE_URL" in message
    assert "MESSAGE_PAGE_DEFAULT_LIMIT" in message
    assert "LOG_LEVEL" in message


def test_unknown_storage_backend():
    class Sqlite(Config):
        STORAGE_BACKEND = "sqlite"

    with pytest.raises(ValueError, match="STORAGE_BACKEND"):
        validate_config(Sqlite)


def test_correlation_id_reaches_log_records():
    record = logging.LogRecord("chatcore.test", logging.INFO, __file__, 1, "msg", None, None)
    token = correlation_id_var.set("req-123")
    try:
        CorrelationIdFilter().filter(record)
    finally:
        correlation_id_var.reset(token)

    assert record.correlation_id == "req-123"


def test_setup_logging_twice_adds_no_handlers():
    root = setup_logging("INFO")
    handlers = list(root.handlers)

    setup_logging("DEBUG")

    assert root.handlers == handlers
