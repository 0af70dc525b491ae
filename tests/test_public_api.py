# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_azlog

import coreason_azlog


def test_public_api_exposure() -> None:
    """
    Verify that the core functions and classes are exposed at the package level.
    """
    expected_symbols = [
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

    for symbol in expected_symbols:
        assert hasattr(coreason_azlog, symbol), f"{symbol} not exposed in coreason_azlog"


def test_contains_warn_callable() -> None:
    assert callable(coreason_azlog.contains_warn)


def test_to_error_log_callable() -> None:
    assert callable(coreason_azlog.to_error_log)


def test_version_exposure() -> None:
    """Verify version is exposed."""
    assert hasattr(coreason_azlog, "__version__")
    assert isinstance(coreason_azlog.__version__, str)
