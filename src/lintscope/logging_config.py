"""Logging setup for the command-line entry point."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "lintscope"


def configure_logging(debug: bool = False) -> logging.Logger:
  """Attach a rich stderr handler to the package logger.

  Library callers keep whatever logging they configured; only the CLI calls
  this.
  """
  level = logging.DEBUG if debug else logging.WARNING
  logger = logging.getLogger(LOGGER_NAME)
  logger.setLevel(level)
  logger.handlers.clear()

  handler = RichHandler(
    console=Console(stderr=True),
    show_time=debug,
    show_path=False,
    rich_tracebacks=True,
  )
  handler.setLevel(level)
  logger.addHandler(handler)
  logger.propagate = False
  return logger
