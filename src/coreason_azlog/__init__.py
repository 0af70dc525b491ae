# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_azlog

"""
coreason-azlog

Logging for Azure Functions custom handlers. The host reports stdout as
Information, and stderr as Warning when the line contains `warn` (case
insensitive) or as Error otherwise. This package picks the stream and
rewrites messages so each record is reported at its intended level.
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .detector import contains_warn, host_level
from .interfaces import MessageTransform
from .router import LevelRouter
from .schemas import LogLevel, LogRecord, RoutedRecord, Stream
from .sink import HostSeverityHandler, HostSeveritySink, init, init_transform
from .transformers import (
    ConfusableTransform,
    PrefixTransform,
    SeverityInvariantError,
    to_error_log,
)

__all__ = [
    "contains_warn",
    "host_level",
    "to_error_log",
    "MessageTransform",
    "ConfusableTransform",
    "PrefixTransform",
    "SeverityInvariantError",
    "LevelRouter",
    "LogLevel",
    "LogRecord",
    "RoutedRecord",
    "Stream",
    "HostSeveritySink",
    "HostSeverityHandler",
    "init",
    "init_transform",
]
