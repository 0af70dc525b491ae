# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_azlog

import logging
import os
from typing import Any, Optional

from loguru import logger

from coreason_azlog.interfaces import MessageTransform
from coreason_azlog.router import LevelRouter
from coreason_azlog.schemas import LogLevel
from coreason_azlog.transformers import SeverityInvariantError

FORMAT_ENV = "COREASON_AZLOG_FORMAT"
DEFAULT_FORMAT = "{message}"


class HostSeveritySink:
    """
    Loguru sink writing each record to stdout or stderr the way the Azure Functions host expects.

    Usage:
        logger.add(HostSeveritySink(), level="INFO", format="{message}", catch=False)
    """

    def __init__(self, router: Optional[LevelRouter] = None) -> None:
        self.router = router or LevelRouter()

    def __call__(self, message: Any) -> None:
        level = LogLevel.from_severity(message.record["level"].no)
        if level is None:
            return
        # loguru appends exactly one newline to every formatted message; the router adds its own.
        self.router.emit(level, str(message).removesuffix("\n"))


class HostSeverityHandler(logging.Handler):
    """
    Standard library logging handler with the same routing as HostSeveritySink.
    """

    def __init__(self, router: Optional[LevelRouter] = None, level: int = logging.INFO) -> None:
        super().__init__(level=level)
        self.router = router or LevelRouter()

    def emit(self, record: logging.LogRecord) -> None:
        level = LogLevel.from_severity(record.levelno)
        if level is None:
            return
        try:
            self.router.emit(level, self.format(record))
        except (RecursionError, SeverityInvariantError):
            raise
        except Exception:
            self.handleError(record)


def init(fmt: Optional[str] = None) -> int:
    """
    Routes the global loguru logger through a HostSeveritySink with the default transforms.
    """
    return init_transform(None, fmt=fmt)


def init_transform(
    error_transform: Optional[MessageTransform],
    warning_transform: Optional[MessageTransform] = None,
    fmt: Optional[str] = None,
) -> int:
    """
    Routes the global loguru logger through a HostSeveritySink using custom transforms.

    Existing loguru handlers are removed. The format falls back to the
    COREASON_AZLOG_FORMAT environment variable, then to the bare message.

    Returns:
        The loguru handler id of the installed sink.
    """
    fmt = fmt or os.getenv(FORMAT_ENV, DEFAULT_FORMAT)
    router = LevelRouter(error_transform=error_transform, warning_transform=warning_transform)

    logger.remove()
    handler_id: int = logger.add(
        HostSeveritySink(router),
        level="INFO",
        format=fmt,
        colorize=False,
        # Misclassification must reach the caller instead of loguru's stderr report.
        catch=False,
    )
    logger.debug(f"Host severity sink installed with format {fmt!r}")
    return handler_id


__all__ = [
    "HostSeveritySink",
    "HostSeverityHandler",
    "init",
    "init_transform",
]
