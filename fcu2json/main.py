"""Command-line entry point: FCU XML file in, CBUS event state JSON out."""

import logging
import sys
from pathlib import Path
from typing import Any

import click
import structlog

from fcu2json.event_view import build, render
from fcu2json.exceptions import LoadError
from fcu2json.loader import load

logger = structlog.get_logger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    # sys.stderr looked up per logger, test runners swap it
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(level: str) -> None:
    """Send structured logs to stderr; stdout carries only the JSON output."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        logger_factory=_stderr_logger_factory,
    )


@click.command()
@click.argument("config_file", type=click.Path(path_type=str))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write JSON to this file instead of stdout",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="FCU2JSON_LOG_LEVEL",
    help="Log verbosity (env: FCU2JSON_LOG_LEVEL)",
)
def main(config_file: str, output: Path | None, log_level: str) -> None:
    """Convert an FCU XML configuration file to CBUS event state JSON."""
    configure_logging(log_level)
    logger.info("input_file", path=config_file)

    try:
        dataset = load(config_file)
    except LoadError as e:
        logger.error("conversion_failed", **e.to_dict())
        sys.exit(1)

    text = render(build(dataset))

    if output is None:
        click.echo(text)
        return

    try:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text)
            f.write("\n")
    except OSError as e:
        raise click.FileError(str(output), hint=e.strerror) from e
    logger.info("output_written", path=str(output))


if __name__ == "__main__":
    main()
