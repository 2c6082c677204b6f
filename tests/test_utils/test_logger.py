from __future__ import annotations

import io
import logging
from typing import Generator
from unittest.mock import patch

import pytest

import verformat.utils.logger as logger_module
from verformat.utils.logger import (
    ROOT_LOGGER_NAME,
    ColoredFormatter,
    disable_logging,
    get_logger,
    level_for_verbosity,
    setup_logging,
    stream_supports_color,
)


@pytest.fixture(autouse=True)
def clean_logger_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Reset the verformat logger before and after each test."""
    monkeypatch.setenv("NO_COLOR", "1")
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)

    yield

    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True


def _record(level: int = logging.WARNING, msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord("verformat.test", level, __file__, 1, msg, None, None)


@pytest.mark.unit
class TestColoredFormatter:
    """Tests for ColoredFormatter ANSI color formatting."""

    def test_defaults(self) -> None:
        """Test the formatter uses color unless told otherwise."""
        formatter = ColoredFormatter("%(levelname)s: %(message)s")
        assert formatter.use_color is True

    def test_no_color_when_disabled(self) -> None:
        """Test use_color=False leaves the level name plain."""
        formatter = ColoredFormatter("%(levelname)s: %(message)s", use_color=False)
        assert formatter.format(_record()) == "WARNING: hello"

    def test_color_on_terminal(self) -> None:
        """Test the level name is wrapped in ANSI codes on a terminal."""
        formatter = ColoredFormatter("%(levelname)s: %(message)s")

        with patch.object(logger_module, "stream_supports_color", return_value=True):
            output = formatter.format(_record(logging.ERROR))

        assert output == f"{ColoredFormatter.COLORS['ERROR']}ERROR{ColoredFormatter.RESET}: hello"

    def test_record_is_not_mutated(self) -> None:
        """Test coloring leaves the original record untouched."""
        formatter = ColoredFormatter("%(levelname)s")
        record = _record()

        with patch.object(logger_module, "stream_supports_color", return_value=True):
            formatter.format(record)

        assert record.levelname == "WARNING"


@pytest.mark.unit
class TestStreamSupportsColor:
    """Tests for stream_supports_color."""

    def test_no_color_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test NO_COLOR disables color even on a terminal."""
        monkeypatch.setenv("NO_COLOR", "1")
        stream = io.StringIO()

        with patch.object(stream, "isatty", return_value=True):
            assert stream_supports_color(stream) is False

    def test_non_tty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test plain streams get no color."""
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("CI", raising=False)

        assert stream_supports_color(io.StringIO()) is False


@pytest.mark.unit
class TestLevelForVerbosity:
    """Tests for mapping -v counts to levels."""

    @pytest.mark.parametrize(
        "verbose, level",
        [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
    )
    def test_mapping(self, verbose: int, level: int) -> None:
        """Test each -v step lowers the level down to DEBUG."""
        assert level_for_verbosity(verbose) == level


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging."""

    def test_installs_single_handler(self) -> None:
        """Test repeated setup replaces the handler instead of stacking."""
        setup_logging(level=logging.INFO, stream=io.StringIO())
        setup_logging(level=logging.INFO, stream=io.StringIO())

        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        assert len(root_logger.handlers) == 1
        assert root_logger.level == logging.INFO
        assert root_logger.propagate is False

    def test_writes_to_stream(self) -> None:
        """Test messages at or above the level reach the stream."""
        stream = io.StringIO()
        setup_logging(level=logging.INFO, stream=stream)

        get_logger("core.parser").info("parsed")
        get_logger("core.parser").debug("hidden")

        assert "INFO: parsed" in stream.getvalue()
        assert "hidden" not in stream.getvalue()

    def test_debug_uses_verbose_format(self) -> None:
        """Test the DEBUG format includes the logger name."""
        stream = io.StringIO()
        setup_logging(level=logging.DEBUG, stream=stream)

        get_logger("cli").debug("details")

        assert "verformat.cli - DEBUG - details" in stream.getvalue()


@pytest.mark.unit
class TestGetLogger:
    """Tests for get_logger naming."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            (None, "verformat"),
            ("verformat", "verformat"),
            ("core.parser", "verformat.core.parser"),
            ("verformat.cli", "verformat.cli"),
        ],
    )
    def test_names(self, name, expected: str) -> None:
        """Test names are qualified into the verformat namespace once."""
        assert get_logger(name).name == expected

    def test_silent_by_default(self) -> None:
        """Test library use attaches a NullHandler until configured."""
        get_logger("core")

        handlers = logging.getLogger(ROOT_LOGGER_NAME).handlers
        assert handlers
        assert all(isinstance(h, logging.NullHandler) for h in handlers)


@pytest.mark.unit
class TestDisableLogging:
    """Tests for disable_logging."""

    def test_disable(self) -> None:
        """Test disabling leaves only a NullHandler behind."""
        stream = io.StringIO()
        setup_logging(level=logging.INFO, stream=stream)

        disable_logging()
        get_logger("cli").warning("gone")

        assert stream.getvalue() == ""
        handlers = logging.getLogger(ROOT_LOGGER_NAME).handlers
        assert [type(h) for h in handlers] == [logging.NullHandler]
