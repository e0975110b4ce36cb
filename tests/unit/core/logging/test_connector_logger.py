"""Тесты ConnectorLogger, фильтров и форматтеров."""

import asyncio
import json
import logging

import pytest

from api_connector.core.logging import (
    ConnectorLogger,
    CorrelationIdFilter,
    ExtraFieldsFilter,
    JSONFormatter,
    LogFormat,
    LoggingConfig,
    LogLevel,
    TextFormatter,
    clear_correlation_id,
    get_correlation_id,
    get_formatter,
    set_correlation_id,
)


def make_record(message="hello", **extra):
    record = logging.LogRecord("api_connector.test", logging.INFO, __file__, 1, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestLoggingConfig:
    def test_create_from_strings(self):
        config = LoggingConfig.create(level="debug", format="JSON")

        assert config.level == LogLevel.DEBUG
        assert config.format == LogFormat.JSON

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            LoggingConfig.create(level="LOUD")


class TestFormatters:
    def test_json(self):
        output = json.loads(JSONFormatter().format(make_record(method="GET", status=200)))

        assert output["message"] == "hello"
        assert output["level"] == "INFO"
        assert output["method"] == "GET"
        assert output["status"] == 200

    def test_text(self):
        output = TextFormatter().format(make_record(method="GET"))

        assert "[INFO]" in output
        assert output.endswith("hello method=GET")

    def test_get_formatter(self):
        assert isinstance(get_formatter("json"), JSONFormatter)
        assert isinstance(get_formatter("TEXT"), TextFormatter)

        with pytest.raises(ValueError, match="Unknown format type"):
            get_formatter("xml")


class TestFilters:
    def test_correlation_id(self):
        set_correlation_id("req-1")
        record = make_record()

        CorrelationIdFilter().filter(record)
        clear_correlation_id()

        assert record.correlation_id == "req-1"
        assert get_correlation_id() is None

    @pytest.mark.asyncio
    async def test_correlation_id_isolated_between_tasks(self):
        """Параллельные корутины не перетирают и не сбрасывают чужой id."""
        first_set = asyncio.Event()
        first_cleared = asyncio.Event()

        async def first():
            set_correlation_id("req-a")
            first_set.set()
            await asyncio.sleep(0)
            seen = get_correlation_id()
            clear_correlation_id()
            first_cleared.set()
            return seen

        async def second():
            await first_set.wait()
            set_correlation_id("req-b")
            await first_cleared.wait()
            return get_correlation_id()

        assert await asyncio.gather(first(), second()) == ["req-a", "req-b"]

    def test_extra_fields(self):
        record = make_record()

        ExtraFieldsFilter({"service": "billing"}).filter(record)

        assert record.service == "billing"


class TestConnectorLogger:
    def test_file_output_masked(self, logging_config_with_file):
        with ConnectorLogger(logging_config_with_file, name="api_connector.test.file") as logger:
            logger.info(
                "Request started",
                url="https://api.example.com/token?client_secret=abc&page=1",
                authorization="Bearer xyz",
            )

        with open(logging_config_with_file.file_path, encoding="utf-8") as f:
            record = json.loads(f.readline())

        assert record["message"] == "Request started"
        assert record["url"] == "https://api.example.com/token?client_secret=***REDACTED***&page=1"
        assert record["authorization"] == "***REDACTED***"

    def test_level_respected(self, tmp_path):
        config = LoggingConfig.create(
            level="WARNING", format="json", enable_console=False, file_path=str(tmp_path / "warn.log")
        )

        with ConnectorLogger(config, name="api_connector.test.level") as logger:
            logger.info("skipped")
            logger.warning("kept")

        with open(config.file_path, encoding="utf-8") as f:
            lines = [json.loads(line)["message"] for line in f if line.strip()]

        assert lines == ["kept"]

    def test_console_output(self, capsys):
        config = LoggingConfig.create(level="INFO", format="text")

        logger = ConnectorLogger(config, name="api_connector.test.console")
        logger.error("boom", error_type="TimeoutError")
        logger.close()

        assert "boom error_type=TimeoutError" in capsys.readouterr().out

    def test_close_idempotent(self):
        logger = ConnectorLogger(LoggingConfig.create(enable_console=False), name="api_connector.test.close")

        logger.close()
        logger.close()


class TestLoggingConfigValidation:
    def test_invalid_max_bytes(self):
        with pytest.raises(ValueError, match="max_bytes"):
            LoggingConfig(max_bytes=0)

    def test_has_output(self, tmp_path):
        assert LoggingConfig().has_output()
        assert not LoggingConfig(enable_console=False).has_output()
        assert LoggingConfig(enable_console=False, file_path=str(tmp_path / "x.log")).has_output()
