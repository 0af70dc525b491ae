# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_azlog

import re

from coreason_azlog.schemas import LogLevel, Stream

# ASCII-only case folding: the host compares w/a/r/n ignoring ASCII case.
WARN_PATTERN = re.compile("warn", re.IGNORECASE | re.ASCII)


def contains_warn(text: str) -> bool:
    """
    Returns True if the text contains `warn` (case insensitive).
    """
    return WARN_PATTERN.search(text) is not None


def host_level(stream: Stream, text: str) -> LogLevel:
    """
    The level the Azure Functions host infers for a line written to `stream`.

    stdout is always Information. stderr is Warning when the line contains
    `warn` in any case, otherwise Error.
    """
    if stream == Stream.STDOUT:
        return LogLevel.INFORMATION
    if contains_warn(text):
        return LogLevel.WARNING
    return LogLevel.ERROR
