# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

import datetime
import io
import logging
from logging.handlers import QueueHandler

import pytest

import clia.log
from clia.log import (
    ColorMode,
    Logger,
    Loglevel,
    _format_record,
    get_logger,
    resolve_color_mode,
    setup_logging,
)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("trace", Loglevel.TRACE),
        ("DEBUG", Loglevel.DEBUG),
        ("Warning", Loglevel.WARNING),
        ("5", Loglevel.TRACE),
        ("40", Loglevel.ERROR),
    ],
)
def test_loglevel_from_str(raw: str, expected: Loglevel) -> None:
    assert Loglevel.from_str(raw) is expected


@pytest.mark.parametrize("raw", ["verbose", "notice", "7", ""])
def test_loglevel_from_str_invalid(raw: str) -> None:
    with pytest.raises(ValueError):
        Loglevel.from_str(raw)


@pytest.mark.parametrize(
    "verbosity,expected",
    [(0, Loglevel.INFO), (1, Loglevel.DEBUG), (2, Loglevel.TRACE), (5, Loglevel.TRACE)],
)
def test_loglevel_from_verbosity(verbosity: int, expected: Loglevel) -> None:
    assert Loglevel.from_verbosity(verbosity) is expected


def test_resolve_color_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    stream = io.StringIO()

    assert resolve_color_mode(ColorMode.NEVER, stream) is False
    # StringIO is not a tty
    assert resolve_color_mode(ColorMode.AUTO, stream) is False

    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(ColorMode.AUTO, stream) is False


def test_format_record() -> None:
    dt = datetime.datetime(2024, 3, 1, 12, 30, 15, 123456)

    plain = _format_record(dt, "clia.parser", "hello", Loglevel.INFO, None)
    assert plain == "Mar 01 12:30:15.123 clia.parser: hello\n"

    colored = _format_record(dt, "clia.parser", "hello", Loglevel.ERROR, None, colored=True)
    assert colored == "Mar 01 12:30:15.123 clia.parser: \033[31mhello\033[0m\n"


def test_get_logger() -> None:
    logger = get_logger("clia.parser")
    assert isinstance(logger, Logger)
    assert hasattr(logger, "trace")


def test_setup_logging_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLIA_LOGLEVEL", "trace")
    setup_logging(color_mode=ColorMode.NEVER, logger_name="clia.test")

    logger = logging.getLogger("clia.test")
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], QueueHandler)

    # Handlers are replaced, not stacked
    setup_logging(Loglevel.INFO, ColorMode.NEVER, logger_name="clia.test")
    assert len(logger.handlers) == 1


def test_setup_logging_invalid_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLIA_LOGLEVEL", "loud")
    with pytest.raises(ValueError):
        setup_logging(logger_name="clia.test")


def test_setup_logging_stops_previous_listener() -> None:
    setup_logging(Loglevel.INFO, ColorMode.NEVER, logger_name="clia.test")
    first = clia.log._listeners["clia.test"]
    assert first._thread is not None

    setup_logging(Loglevel.DEBUG, ColorMode.NEVER, logger_name="clia.test")
    second = clia.log._listeners["clia.test"]

    assert second is not first
    assert first._thread is None
    assert second._thread is not None


def test_setup_logging_keeps_other_loggers() -> None:
    setup_logging(Loglevel.INFO, ColorMode.NEVER, logger_name="clia.test.a")
    setup_logging(Loglevel.INFO, ColorMode.NEVER, logger_name="clia.test.b")

    assert clia.log._listeners["clia.test.a"]._thread is not None
    assert clia.log._listeners["clia.test.b"]._thread is not None
