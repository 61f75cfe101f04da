# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

"""Logging for clia.

The library modules only create loggers via :func:`get_logger` and emit
``TRACE`` and ``DEBUG`` records. Output appears once an application
calls :func:`setup_logging`, which routes records through a queue to a
stderr handler running in a listener thread.
"""

from __future__ import annotations

import atexit
import datetime
import logging
import os
import sys
import traceback
from enum import Enum, IntEnum, unique
from logging.handlers import QueueHandler, QueueListener
from queue import Queue
from typing import TYPE_CHECKING, Any, TextIO, cast

if TYPE_CHECKING:
    from logging import _ExcInfoType

LOGLEVEL_ENV = "CLIA_LOGLEVEL"


@unique
class ColorMode(Enum):
    """ColorMode is used as an argument to :func:`setup_logging`."""

    #: Always emit ANSI escape codes.
    ALWAYS = "always"
    #: Emit colors only when the stream is a tty and ``NO_COLOR`` is unset.
    AUTO = "auto"
    #: Plain text output.
    NEVER = "never"


def resolve_color_mode(mode: ColorMode, stream: TextIO = sys.stderr) -> bool:
    """Decides whether the console log handler emits colors.

    :param mode: The available options are described in :class:`ColorMode`.
    :param stream: Used as a reference for :attr:`ColorMode.AUTO`.
    """
    if sys.platform == "win32":
        return False

    match mode:
        case ColorMode.ALWAYS:
            return True
        case ColorMode.AUTO:
            return os.getenv("NO_COLOR") is None and stream.isatty()
        case ColorMode.NEVER:
            return False


TRACE_LEVEL = 5

logging.addLevelName(TRACE_LEVEL, "TRACE")


@unique
class Loglevel(IntEnum):
    """The levels of python's ``logging`` module plus ``TRACE``,
    which the parser uses to report each classified token.
    """

    CRITICAL = logging.CRITICAL
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG
    TRACE = TRACE_LEVEL

    @classmethod
    def from_str(cls, string: str) -> Loglevel:
        """Converts a numeric level or a case insensitive level name
        (e.g. ``debug``) to a Loglevel.
        """
        try:
            if string.isnumeric():
                return cls(int(string))
            return cls[string.upper()]
        except (KeyError, ValueError):
            raise ValueError(f"{string} not a valid loglevel") from None

    @classmethod
    def from_verbosity(cls, verbosity: int) -> Loglevel:
        if verbosity >= 2:
            return cls.TRACE
        if verbosity == 1:
            return cls.DEBUG
        return cls.INFO


# One running listener per configured logger name
_listeners: dict[str, QueueListener] = {}


def _stop_listener(logger_name: str) -> None:
    if (listener := _listeners.pop(logger_name, None)) is not None:
        listener.stop()


@atexit.register
def _stop_all_listeners() -> None:
    for logger_name in list(_listeners):
        _stop_listener(logger_name)


def setup_logging(
    level: Loglevel | None = None,
    color_mode: ColorMode = ColorMode.AUTO,
    logger_name: str = "clia",
) -> None:
    """Enable and configure clia's logging system.

    Calling it again replaces the previous configuration: the old
    handlers are removed and the old listener thread is stopped.

    :param level: The loglevel to enable for the console handler.
                  If this argument is None, the env variable
                  ``CLIA_LOGLEVEL`` is read.
    :param color_mode: The color mode to use for the console.
    :param logger_name: The logger the handlers are attached to.
    """
    if level is None:
        raw = os.getenv(LOGLEVEL_ENV)
        level = Loglevel.INFO if raw is None else Loglevel.from_str(raw)

    logging.logMultiprocessing = False
    logging.logThreads = False
    logging.logProcesses = False

    logger = logging.getLogger(logger_name)
    # NOTSET would defer to the root logger's level
    logger.setLevel(1)

    _stop_listener(logger_name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    _start_listener(logger, level, resolve_color_mode(color_mode))


def _start_listener(logger: logging.Logger, level: Loglevel, colored: bool) -> None:
    queue: Queue[Any] = Queue()
    logger.addHandler(QueueHandler(queue))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(level)
    # _format_record appends the newline
    stderr_handler.terminator = ""
    stderr_handler.setFormatter(_ConsoleFormatter(colored))

    listener = QueueListener(queue, stderr_handler, respect_handler_level=True)
    listener.start()
    _listeners[logger.name] = listener


@unique
class _Color(Enum):
    NOP = ""
    RESET = "\033[0m"
    RED = "\033[31m"
    YELLOW = "\033[33m"
    GRAY = "\033[0;38;5;245m"


_LEVEL_COLORS = {
    Loglevel.TRACE: _Color.GRAY,
    Loglevel.DEBUG: _Color.GRAY,
    Loglevel.WARNING: _Color.YELLOW,
    Loglevel.ERROR: _Color.RED,
    Loglevel.CRITICAL: _Color.RED,
}


def _format_record(
    dt: datetime.datetime,
    name: str,
    data: str,
    levelno: int,
    stacktrace: str | None,
    colored: bool = False,
) -> str:
    if colored:
        color = _LEVEL_COLORS.get(cast(Loglevel, levelno), _Color.NOP)
        data = f"{color.value}{data}{_Color.RESET.value}"

    msg = f"{dt.strftime('%b %d %H:%M:%S.%f')[:-3]} {name}: {data}\n"
    if stacktrace is not None:
        msg += f"\n{stacktrace}"
    return msg


class _ConsoleFormatter(logging.Formatter):
    def __init__(self, colored: bool = False) -> None:
        super().__init__()
        self.colored = colored

    def format(self, record: logging.LogRecord) -> str:
        stacktrace = None
        if record.exc_info:
            stacktrace = "".join(traceback.format_exception(*record.exc_info))

        return _format_record(
            dt=datetime.datetime.fromtimestamp(record.created),
            name=record.name,
            data=record.getMessage(),
            levelno=record.levelno,
            stacktrace=stacktrace,
            colored=self.colored,
        )


class Logger(logging.Logger):
    def trace(
        self,
        msg: Any,
        *args: Any,
        exc_info: _ExcInfoType = None,
        stack_info: bool = False,
        extra: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        if self.isEnabledFor(Loglevel.TRACE):
            self._log(
                Loglevel.TRACE,
                msg,
                args,
                exc_info=exc_info,
                extra=extra,
                stack_info=stack_info,
                **kwargs,
            )


logging.setLoggerClass(Logger)


def get_logger(name: str) -> Logger:
    return cast(Logger, logging.getLogger(name))
