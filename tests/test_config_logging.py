"""Tests for config and logging."""

import json
import logging
import os
import sys
from unittest.mock import patch

import pytest

from realty_crm.config import CRMConfig, QueryConfig, SeedConfig, StoreConfig
from realty_crm.exceptions import ConfigurationError
from realty_crm.logging import JsonFormatter, get_logger, log_context, setup_logging

ENV_VARS = [
    "CRM_STORE_LATENCY",
    "CRM_STORE_TIMEOUT",
    "CRM_CUSTOMER_PAGE_SIZE",
    "CRM_PROPERTY_PAGE_SIZE",
    "CRM_PROJECT_PAGE_SIZE",
    "CRM_RECENT_DAYS",
    "CRM_EXPIRING_DAYS",
    "CRM_NUM_CUSTOMERS",
    "CRM_NUM_PROPERTIES",
    "CRM_INCLUDE_FIXTURES",
    "CRM_LOCALE",
    "CRM_SEED",
    "LOG_LEVEL",
    "LOG_FORMAT",
]


@pytest.fixture
def clean_env():
    """Environment without any CRM settings."""
    env = {k: v for k, v in os.environ.items() if k not in ENV_VARS}
    with patch.dict(os.environ, env, clear=True):
        yield


class TestConfigDefaults:
    """Tests for config dataclass defaults."""

    def test_store_config(self) -> None:
        config = StoreConfig()
        assert config.latency_seconds == 0.0
        assert config.timeout_seconds is None

    def test_query_config(self) -> None:
        config = QueryConfig()
        assert config.customer_page_size == 10
        assert config.property_page_size == 12
        assert config.project_page_size == 12
        assert config.recent_days == 30
        assert config.expiring_days == 7

    def test_seed_config(self) -> None:
        config = SeedConfig()
        assert config.num_customers == 0
        assert config.include_fixtures is True
        assert config.locale == "vi_VN"
        assert config.seed is None

    def test_crm_config(self) -> None:
        config = CRMConfig()
        assert isinstance(config.store, StoreConfig)
        assert config.log_level == "INFO"
        assert config.log_format == "standard"


class TestCRMConfigFromEnv:
    """Tests for CRMConfig.from_env."""

    def test_from_env_default(self, clean_env) -> None:
        config = CRMConfig.from_env()

        assert config == CRMConfig()

    def test_from_env_custom(self, clean_env) -> None:
        env_vars = {
            "CRM_STORE_LATENCY": "0.05",
            "CRM_STORE_TIMEOUT": "2.5",
            "CRM_CUSTOMER_PAGE_SIZE": "20",
            "CRM_PROPERTY_PAGE_SIZE": "24",
            "CRM_EXPIRING_DAYS": "14",
            "CRM_NUM_CUSTOMERS": "100",
            "CRM_INCLUDE_FIXTURES": "false",
            "CRM_SEED": "7",
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "json",
        }
        with patch.dict(os.environ, env_vars):
            config = CRMConfig.from_env()

        assert config.store.latency_seconds == 0.05
        assert config.store.timeout_seconds == 2.5
        assert config.query.customer_page_size == 20
        assert config.query.property_page_size == 24
        assert config.query.expiring_days == 14
        assert config.seed.num_customers == 100
        assert config.seed.include_fixtures is False
        assert config.seed.seed == 7
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    def test_malformed_number(self, clean_env) -> None:
        with patch.dict(os.environ, {"CRM_CUSTOMER_PAGE_SIZE": "ten"}):
            with pytest.raises(ConfigurationError, match="CRM_CUSTOMER_PAGE_SIZE"):
                CRMConfig.from_env()

    def test_malformed_seed(self, clean_env) -> None:
        with patch.dict(os.environ, {"CRM_SEED": "abc"}):
            with pytest.raises(ConfigurationError, match="CRM_SEED"):
                CRMConfig.from_env()

    @pytest.mark.parametrize(
        "name,value",
        [
            ("CRM_STORE_LATENCY", "-1"),
            ("CRM_STORE_TIMEOUT", "0"),
            ("CRM_PROPERTY_PAGE_SIZE", "0"),
            ("CRM_NUM_PROPERTIES", "-3"),
            ("LOG_FORMAT", "xml"),
        ],
    )
    def test_out_of_range(self, clean_env, name: str, value: str) -> None:
        with patch.dict(os.environ, {name: value}):
            with pytest.raises(ConfigurationError):
                CRMConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        setup_logging()

        assert logging.getLogger("realty_crm").level == logging.INFO

    def test_setup_logging_debug(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        """Test logging with invalid level defaults to INFO."""
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        setup_logging(format_type="json")

        logger = logging.getLogger()
        assert any(isinstance(h.formatter, JsonFormatter) for h in logger.handlers)

    def test_setup_logging_replaces_handlers(self) -> None:
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1

    def test_faker_logger_quieted(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger("faker").level == logging.WARNING
        assert logging.getLogger("asyncio").level == logging.WARNING

    def teardown_method(self) -> None:
        setup_logging()


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs) -> logging.LogRecord:
        fields = {
            "name": "realty_crm.services",
            "level": logging.INFO,
            "pathname": "/path/to/file.py",
            "lineno": 42,
            "msg": "Created customer %s",
            "args": ("Nguyễn Văn An",),
            "exc_info": None,
        }
        fields.update(kwargs)
        return logging.LogRecord(**fields)

    def test_format_basic(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "realty_crm.services"
        assert data["message"] == "Created customer Nguyễn Văn An"
        assert "timestamp" in data

    def test_non_ascii_kept(self) -> None:
        assert "Nguyễn" in JsonFormatter().format(self._record())

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        data = json.loads(JsonFormatter().format(self._record(level=logging.ERROR, exc_info=exc_info)))

        assert data["level"] == "ERROR"
        assert "ValueError" in data["exception"]

    def test_format_with_log_context(self, caplog) -> None:
        logger = logging.getLogger("realty_crm.services.base")
        with caplog.at_level(logging.INFO, logger="realty_crm.services.base"):
            logger.info(
                "Updated customer %s", "1", extra=log_context("customer", "1", fields=["notes"])
            )

        data = json.loads(JsonFormatter().format(caplog.records[-1]))

        assert data["message"] == "Updated customer 1"
        assert data["entity"] == "customer"
        assert data["record_id"] == "1"
        assert data["fields"] == ["notes"]

    def test_format_without_context(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))
        assert "entity" not in data


class TestLogContext:
    """Tests for log_context."""

    def test_wraps_context(self) -> None:
        assert log_context("property", "p1") == {"extra": {"entity": "property", "record_id": "p1"}}

    def test_extra_fields(self) -> None:
        context = log_context("customer", "1", fields=["status"])
        assert context["extra"]["fields"] == ["status"]


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger(self) -> None:
        logger = get_logger("realty_crm.test")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "realty_crm.test"

    def test_get_logger_same_instance(self) -> None:
        assert get_logger("test.same") is get_logger("test.same")
