"""Tests for config and logging."""

import json
import logging
import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from ledger_export.config import LedgerConfig, OfxConfig, OutputConfig, QifConfig
from ledger_export.exceptions import ConfigurationError
from ledger_export.logging import JsonFormatter, export_context, setup_logging
from ledger_export.models import OfxAccountType

ENV_VARS = [
    "LEDGER_DEFAULT_CURRENCY",
    "LEDGER_OFX_BANK_ID",
    "LEDGER_QIF_DATE_FORMAT",
    "LEDGER_OUTPUT_DIR",
    "LEDGER_EXPORT_ALL",
    "SEED",
    "LOG_LEVEL",
    "LOG_FORMAT",
]


@pytest.fixture
def clean_env() -> dict[str, str]:
    """Environment without any ledger-export variables."""
    return {k: v for k, v in os.environ.items() if k not in ENV_VARS}


class TestOfxConfig:
    """Tests for OfxConfig."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        config = OfxConfig()

        assert config.bank_id == "ledger_export"
        assert config.transfer_account_type == OfxAccountType.CHECKING


class TestQifConfig:
    """Tests for QifConfig."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        assert QifConfig().date_format == "%m/%d/%Y"


class TestOutputConfig:
    """Tests for OutputConfig."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        config = OutputConfig()

        assert config.output_dir == Path("output")
        assert config.export_all is False


class TestLedgerConfig:
    """Tests for LedgerConfig."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        config = LedgerConfig()

        assert config.default_currency == "USD"
        assert isinstance(config.ofx, OfxConfig)
        assert isinstance(config.qif, QifConfig)
        assert isinstance(config.output, OutputConfig)
        assert config.seed is None
        assert config.log_level == "INFO"
        assert config.log_format == "standard"

    def test_currency_is_upper_cased(self) -> None:
        """Test lowercase currency codes are normalized."""
        assert LedgerConfig(default_currency="eur").default_currency == "EUR"

    def test_invalid_currency(self) -> None:
        """Test malformed currency codes are rejected."""
        with pytest.raises(ConfigurationError):
            LedgerConfig(default_currency="EURO")

    def test_from_env_defaults(self, clean_env: dict[str, str]) -> None:
        """Test creating config from empty environment."""
        with patch.dict(os.environ, clean_env, clear=True):
            config = LedgerConfig.from_env()

        assert config.default_currency == "USD"
        assert config.ofx.bank_id == "ledger_export"
        assert config.qif.date_format == "%m/%d/%Y"
        assert config.output.output_dir == Path("output")
        assert config.output.export_all is False
        assert config.seed is None
        assert config.log_level == "INFO"

    def test_from_env_custom(self, clean_env: dict[str, str]) -> None:
        """Test creating config from custom environment variables."""
        env = {
            **clean_env,
            "LEDGER_DEFAULT_CURRENCY": "EUR",
            "LEDGER_OFX_BANK_ID": "my-bank",
            "LEDGER_QIF_DATE_FORMAT": "%d/%m/%Y",
            "LEDGER_OUTPUT_DIR": "/data/exports",
            "LEDGER_EXPORT_ALL": "true",
            "SEED": "12345",
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "json",
        }
        with patch.dict(os.environ, env, clear=True):
            config = LedgerConfig.from_env()

        assert config.default_currency == "EUR"
        assert config.ofx.bank_id == "my-bank"
        assert config.qif.date_format == "%d/%m/%Y"
        assert config.output.output_dir == Path("/data/exports")
        assert config.output.export_all is True
        assert config.seed == 12345
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    def test_invalid_log_format(self) -> None:
        """Test unknown log formats are rejected."""
        with pytest.raises(ConfigurationError):
            LedgerConfig(log_format="xml")

    def test_from_env_invalid_seed(self, clean_env: dict[str, str]) -> None:
        """Test a non-numeric SEED raises ConfigurationError."""
        with patch.dict(os.environ, {**clean_env, "SEED": "abc"}, clear=True):
            with pytest.raises(ConfigurationError):
                LedgerConfig.from_env()

    def test_from_env_invalid_currency(self, clean_env: dict[str, str]) -> None:
        """Test a malformed currency from the environment is rejected."""
        env = {**clean_env, "LEDGER_DEFAULT_CURRENCY": "12"}
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ConfigurationError):
                LedgerConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        """Test default logging setup."""
        setup_logging()
        logger = logging.getLogger("ledger_export")
        assert logger.level == logging.INFO

    def test_setup_logging_debug(self) -> None:
        """Test debug level logging setup."""
        setup_logging(level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        """Test logging with invalid level defaults to INFO."""
        setup_logging(level="INVALID")
        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        """Test JSON format logging."""
        setup_logging(format_type="json")
        logger = logging.getLogger()
        assert any(isinstance(h.formatter, JsonFormatter) for h in logger.handlers)

    def test_setup_logging_replaces_handlers(self) -> None:
        """Test that setup_logging replaces existing handlers."""
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1

    def test_faker_logger_quieted(self) -> None:
        """Test that the Faker logger stays at WARNING."""
        setup_logging(level="DEBUG")
        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_format_basic(self) -> None:
        """Test basic log formatting."""
        formatter = JsonFormatter()
        record = logging.LogRecord(
            name="ledger_export.export.ofx",
            level=logging.INFO,
            pathname="ofx.py",
            lineno=1,
            msg="Exported %d transactions",
            args=(3,),
            exc_info=None,
        )

        data = json.loads(formatter.format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "ledger_export.export.ofx"
        assert data["message"] == "Exported 3 transactions"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        """Test exception info is included."""
        formatter = JsonFormatter()
        try:
            raise ValueError("boom")
        except ValueError:
            exc_info = sys.exc_info()
        record = logging.LogRecord(
            name="test",
            level=logging.ERROR,
            pathname="test.py",
            lineno=1,
            msg="failed",
            args=(),
            exc_info=exc_info,
        )

        data = json.loads(formatter.format(record))

        assert "ValueError: boom" in data["exception"]

    def test_format_with_extra(self) -> None:
        """Test extra fields are merged."""
        formatter = JsonFormatter()
        record = logging.LogRecord(
            name="test",
            level=logging.INFO,
            pathname="test.py",
            lineno=1,
            msg="message",
            args=(),
            exc_info=None,
        )
        record.export = {"account_uid": "acct-001", "exported": 2}

        data = json.loads(formatter.format(record))

        assert data["account_uid"] == "acct-001"
        assert data["exported"] == 2

    def test_logger_extra_reaches_output(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test export figures passed through a logging call are rendered."""
        logger = logging.getLogger("ledger_export.test_json")
        with caplog.at_level(logging.INFO, logger="ledger_export.test_json"):
            logger.warning("done", extra=export_context("acct-9", 3, 4, format="qif"))

        data = json.loads(JsonFormatter().format(caplog.records[-1]))

        assert data["account_uid"] == "acct-9"
        assert data["exported"] == 3
        assert data["total"] == 4
        assert data["format"] == "qif"


class TestExportContext:
    """Tests for export_context."""

    def test_wraps_figures(self) -> None:
        assert export_context("acct", 1, 5) == {
            "export": {"account_uid": "acct", "exported": 1, "total": 5}
        }

    def test_extra_fields(self) -> None:
        context = export_context("acct", 0, 0, format="ofx")
        assert context["export"]["format"] == "ofx"

