# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_azlog

import io
from typing import Generator, Tuple

import pytest
from loguru import logger

from coreason_azlog.router import LevelRouter


@pytest.fixture
def streams() -> Tuple[io.StringIO, io.StringIO]:
    """
    In-memory stand-ins for stdout and stderr.
    """
    return io.StringIO(), io.StringIO()


@pytest.fixture
def router(streams: Tuple[io.StringIO, io.StringIO]) -> LevelRouter:
    stdout, stderr = streams
    return LevelRouter(stdout=stdout, stderr=stderr)


@pytest.fixture(autouse=True)
def reset_loguru() -> Generator[None, None, None]:
    """
    init()/init_transform() replace the global loguru handlers; drop whatever a test installed.
    """
    yield
    logger.remove()
