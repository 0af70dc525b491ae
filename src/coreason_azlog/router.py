# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_azlog

import sys
from typing import Optional, TextIO

from coreason_azlog.detector import contains_warn
from coreason_azlog.interfaces import MessageTransform
from coreason_azlog.schemas import LogLevel, LogRecord, RoutedRecord, Stream
from coreason_azlog.transformers import ConfusableTransform, PrefixTransform, SeverityInvariantError


class LevelRouter:
    """
    Chooses the output stream and rewrites messages so the Azure Functions host
    infers the intended level.

    Information goes to stdout untouched. Error and Warning go to stderr, with
    Error messages scrubbed of `warn` and Warning messages given a prefix when
    they lack it. The router holds no per-call state.
    """

    def __init__(
        self,
        error_transform: Optional[MessageTransform] = None,
        warning_transform: Optional[MessageTransform] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> None:
        """
        Args:
            error_transform: Strategy applied to Error messages containing `warn`.
            warning_transform: Strategy applied to Warning messages lacking `warn`.
            stdout: Stream for Information records. Defaults to sys.stdout at write time.
            stderr: Stream for Warning and Error records. Defaults to sys.stderr at write time.
        """
        self.error_transform = error_transform or ConfusableTransform()
        self.warning_transform = warning_transform or PrefixTransform()
        self._stdout = stdout
        self._stderr = stderr

    def route(self, record: LogRecord) -> RoutedRecord:
        """
        Decides where a record goes and what text is written, without writing it.

        Raises:
            SeverityInvariantError: If a transform produced text the host would misclassify.
        """
        message = record.message

        if record.level == LogLevel.INFORMATION:
            return RoutedRecord(stream=Stream.STDOUT, text=message)

        if record.level == LogLevel.ERROR:
            if contains_warn(message):
                message = self.error_transform.transform(message)
                if contains_warn(message):
                    raise SeverityInvariantError(f"Error log would be reported as Warning: {message!r}")
            return RoutedRecord(stream=Stream.STDERR, text=message)

        if not contains_warn(message):
            message = self.warning_transform.transform(message)
            if not contains_warn(message):
                raise SeverityInvariantError(f"Warning log would be reported as Error: {message!r}")
        return RoutedRecord(stream=Stream.STDERR, text=message)

    def emit(self, level: LogLevel, message: str) -> RoutedRecord:
        """
        Routes a message and writes it with a single write to the chosen stream.

        The message is one record even when it spans several lines: a Warning
        prefix is added only at its start. A host that classifies each stderr
        line on its own reports the later lines of such a Warning as Error.
        """
        return self.emit_record(LogRecord(level=level, message=message))

    def emit_record(self, record: LogRecord) -> RoutedRecord:
        routed = self.route(record)
        stream = self._resolve(routed.stream)
        stream.write(routed.text + "\n")
        stream.flush()
        return routed

    def _resolve(self, stream: Stream) -> TextIO:
        if stream == Stream.STDOUT:
            return self._stdout if self._stdout is not None else sys.stdout
        return self._stderr if self._stderr is not None else sys.stderr
