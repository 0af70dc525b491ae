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
from typing import Dict

from coreason_azlog.detector import WARN_PATTERN, contains_warn
from coreason_azlog.interfaces import MessageTransform

# Sans-serif mathematical letters: render like r/R, never fold to them.
CONFUSABLES: Dict[str, str] = {
    "r": "\U0001d5cb",
    "R": "\U0001d5b1",
}

WARNING_PREFIX = "warning: "


class SeverityInvariantError(AssertionError):
    """
    Raised when a rewritten message would be classified at the wrong level by the host.

    This signals a defect in a transform strategy, not a runtime condition to recover from.
    """


def _disarm(match: "re.Match[str]") -> str:
    # "warn" has no self-overlap, so the third character of every match is the r/R.
    span = match.group(0)
    return span[:2] + CONFUSABLES[span[2]] + span[3:]


def to_error_log(text: str) -> str:
    """
    Rewrites an Error-level message so it no longer contains `warn` (case insensitive).

    Every occurrence of `warn` has its `r`/`R` swapped for a look-alike character;
    the rest of the message is kept verbatim. Text without `warn` is returned unchanged.

    Args:
        text: The message to rewrite.

    Returns:
        The rewritten message.

    Raises:
        SeverityInvariantError: If the result still contains `warn`.
    """
    result = WARN_PATTERN.sub(_disarm, text)
    if contains_warn(result):
        raise SeverityInvariantError(f"Rewritten error log still contains 'warn': {result!r}")
    return result


class ConfusableTransform(MessageTransform):
    """
    Default Error-level strategy: replaces the `r` of every `warn` with a confusable character.
    """

    def transform(self, text: str) -> str:
        return to_error_log(text)


class PrefixTransform(MessageTransform):
    """
    Default Warning-level strategy: prepends a prefix that itself contains `warn`.
    """

    def __init__(self, prefix: str = WARNING_PREFIX) -> None:
        if not contains_warn(prefix):
            raise ValueError(f"Warning prefix must contain 'warn': {prefix!r}")
        self.prefix = prefix

    def transform(self, text: str) -> str:
        return self.prefix + text
