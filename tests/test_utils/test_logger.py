from __future__ import annotations

import io
import logging
from unittest.mock import patch

import pytest

from tagver.utils.logger import (
    ColoredFormatter,
    disable_logging,
    get_logger,
    setup_cli_logging,
    setup_logging,
)


def _record(level: int = logging.INFO, msg: str = "Test message") -> logging.LogRecord:
    return logging.LogRecord(
        name="tagver.test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture(autouse=True)
def isolated(clean_env: None, clean_logger_state: None) -> None:
    pass


@pytest.mark.unit
class TestColoredFormatter:
    """Tests for ColoredFormatter ANSI color formatting."""

    def test_color_codes_defined(self) -> None:
        for level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            assert ColoredFormatter.COLORS[level].startswith("\033[")
        assert ColoredFormatter.RESET == "\033[0m"

    def test_format_with_color_enabled(self) -> None:
        formatter = ColoredFormatter("%(levelname)s: %(message)s", use_color=True)

        with patch.object(ColoredFormatter, "_should_use_color", return_value=True):
            result = formatter.format(_record())

        assert result == "\033[32mINFO\033[0m: Test message"

    def test_format_with_color_disabled(self) -> None:
        formatter = ColoredFormatter("%(levelname)s: %(message)s", use_color=False)

        assert formatter.format(_record(logging.WARNING)) == "WARNING: Test message"

    def test_record_levelname_is_restored(self) -> None:
        formatter = ColoredFormatter("%(levelname)s", use_color=True)
        record = _record()

        with patch.object(ColoredFormatter, "_should_use_color", return_value=True):
            formatter.format(record)

        assert record.levelname == "INFO"

    def test_no_color_env_disables_color(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")

        assert ColoredFormatter._should_use_color(io.StringIO()) is False

    def test_ci_env_disables_color(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CI", "true")

        assert ColoredFormatter._should_use_color(io.StringIO()) is False

    def test_non_tty_stream_disables_color(self) -> None:
        assert ColoredFormatter._should_use_color(io.StringIO()) is False


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging and setup_cli_logging."""

    def test_configures_single_handler(self) -> None:
        stream = io.StringIO()

        setup_logging(level=logging.INFO, stream=stream)
        setup_logging(level=logging.INFO, stream=stream)

        root_logger = logging.getLogger("tagver")
        assert len(root_logger.handlers) == 1
        assert root_logger.propagate is False

    def test_messages_reach_stream(self) -> None:
        stream = io.StringIO()
        setup_logging(level=logging.INFO, stream=stream)

        get_logger("core.test").info("hello %s", "world")

        assert stream.getvalue() == "INFO: hello world\n"

    def test_level_filters_messages(self) -> None:
        stream = io.StringIO()
        setup_logging(level=logging.WARNING, stream=stream)

        get_logger("core.test").info("hidden")

        assert stream.getvalue() == ""

    def test_verbose_format_includes_logger_name(self) -> None:
        stream = io.StringIO()
        setup_logging(level=logging.DEBUG, verbose=True, stream=stream)

        get_logger("core.test").debug("details")

        assert " - tagver.core.test - DEBUG - details" in stream.getvalue()

    def test_color_false_never_colors(self) -> None:
        stream = io.StringIO()
        setup_logging(level=logging.INFO, color=False, stream=stream)

        with patch.object(ColoredFormatter, "_should_use_color", return_value=True):
            get_logger().info("plain")

        assert "\033[" not in stream.getvalue()

    @pytest.mark.parametrize(
        "debug,level",
        [(True, logging.DEBUG), (False, logging.WARNING)],
    )
    def test_cli_levels(self, debug: bool, level: int) -> None:
        setup_cli_logging(debug=debug, color=False)

        assert logging.getLogger("tagver").level == level

    def test_disable_logging(self) -> None:
        stream = io.StringIO()
        setup_logging(level=logging.INFO, stream=stream)

        disable_logging()
        get_logger().warning("silenced")

        assert stream.getvalue() == ""


@pytest.mark.unit
class TestGetLogger:
    """Tests for logger naming."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            (None, "tagver"),
            ("tagver", "tagver"),
            ("cli", "tagver.cli"),
            ("tagver.core.git", "tagver.core.git"),
        ],
    )
    def test_names(self, name, expected: str) -> None:
        assert get_logger(name).name == expected
