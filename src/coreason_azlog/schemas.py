# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_azlog

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class LogLevel(str, Enum):
    """
    Severity levels the Azure Functions host can report for a custom handler.
    """

    INFORMATION = "Information"
    WARNING = "Warning"
    ERROR = "Error"

    @classmethod
    def from_severity(cls, no: int) -> Optional["LogLevel"]:
        """
        Maps a numeric severity (stdlib logging / loguru numbering) onto the host levels.

        Returns None for anything below INFO, which the host cannot represent.
        """
        if no >= 40:
            return cls.ERROR
        if no >= 30:
            return cls.WARNING
        if no >= 20:
            return cls.INFORMATION
        return None


class Stream(str, Enum):
    STDOUT = "stdout"
    STDERR = "stderr"


class LogRecord(BaseModel):
    """
    A single log call: the intended level and the message text.
    """

    model_config = ConfigDict(frozen=True)

    level: LogLevel
    message: str


class RoutedRecord(BaseModel):
    """
    Result of routing a LogRecord: the stream to write to and the final text.
    """

    model_config = ConfigDict(frozen=True)

    stream: Stream
    text: str
