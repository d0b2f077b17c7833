"""Logging for a workflow step.

Log lines go to stderr with the configured level and format. ERROR records
are also printed to stdout as ``::error::`` workflow commands, so a failed
run shows up as an annotation on the runner.

Levels (inclusive):
- ERROR: the failure that ends a run
- WARNING: non-critical issues and ERROR
- INFO: created files, commits, skips, WARNING, and ERROR
- DEBUG: each remote API step and all levels above

Configure via config.yaml (logging.level, logging.format) or env (LOGGING_LEVEL, LOGGING_FORMAT).
Re-running a job with debug logging enabled (RUNNER_DEBUG=1) forces DEBUG.
"""

import logging
import sys

from issue_adr.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: str) -> int:
    """Map level name to logging constant.

    Falls back to INFO if unknown.
    """
    return LEVELS.get(level.upper().strip(), logging.INFO)


def escape_command_data(message: str) -> str:
    """Escape %, CR and LF so a message stays on one workflow-command line."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class WorkflowCommandFormatter(logging.Formatter):
    """Formats a record as ``::error::<message>``."""

    def format(self, record: logging.LogRecord) -> str:
        return f"::error::{escape_command_data(record.getMessage())}"


class AdrLogging:
    """Configures the root logger from LoggingConfig."""

    def __init__(self, config: LoggingConfig) -> None:
        self._level = logging.DEBUG if config.runner_debug else _resolve_level(config.level)
        self._format = config.format or DEFAULT_FORMAT

    def setup(self) -> None:
        """Apply level and format, then attach the stdout annotation handler."""
        logging.basicConfig(
            level=self._level,
            format=self._format,
            force=True,
        )
        annotations = logging.StreamHandler(sys.stdout)
        annotations.setLevel(logging.ERROR)
        annotations.setFormatter(WorkflowCommandFormatter())
        logging.root.addHandler(annotations)
