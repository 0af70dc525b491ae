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
from typing import Annotated

import typer
from loguru import logger

from coreason_azlog import __version__
from coreason_azlog.detector import host_level
from coreason_azlog.router import LevelRouter
from coreason_azlog.schemas import LogLevel, Stream
from coreason_azlog.sink import init
from coreason_azlog.transformers import to_error_log

app = typer.Typer(
    name="coreason-azlog",
    help="CLI for coreason-azlog: log levels for Azure Functions custom handlers.",
    add_completion=False,
)


@app.callback()
def configure() -> None:
    """
    Route the CLI's own logging through the host severity sink.
    """
    init()


def _parse_level(value: str) -> LogLevel:
    for level in LogLevel:
        if level.value.lower() == value.lower():
            return level
    raise typer.BadParameter(f"Unknown level {value!r}. Expected one of: information, warning, error.")


@app.command()
def emit(
    level: Annotated[str, typer.Argument(help="Intended level: information, warning or error")],
    message: Annotated[str, typer.Argument(help="Message to write")],
) -> None:
    """
    Write a message so the Functions host reports it at the given level.
    """
    log_level = _parse_level(level)
    try:
        routed = LevelRouter().emit(log_level, message)
        logger.debug(f"Emitted {log_level.value} record to {routed.stream.value}")
    except Exception:
        logger.exception("Emit Failed")
        sys.exit(1)


@app.command()
def sanitize(
    text: Annotated[str, typer.Argument(help="Error message to rewrite")],
) -> None:
    """
    Print the message with every `warn` disarmed for Error-level output.
    """
    try:
        typer.echo(to_error_log(text))
    except Exception:
        logger.exception("Sanitize Failed")
        sys.exit(1)


@app.command()
def classify(
    text: Annotated[str, typer.Argument(help="Line as written by the handler")],
    stderr: Annotated[bool, typer.Option("--stderr", help="The line was written to stderr")] = False,
) -> None:
    """
    Print the level the Functions host would infer for a line.
    """
    stream = Stream.STDERR if stderr else Stream.STDOUT
    typer.echo(host_level(stream, text).value)


@app.command()
def version() -> None:
    """Print the version of coreason-azlog."""
    typer.echo(f"coreason-azlog v{__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()  # pragma: no cover
