"""issue-adr entry point.

Runs as a GitHub Actions step: reads INPUT_* / GITHUB_* from the environment
and the event payload from GITHUB_EVENT_PATH. Failures are logged at ERROR,
which also emits the ::error:: annotation. Usage: issue-adr [--config PATH]
[--event-path PATH] [--check].
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from issue_adr.config import ConfigurationError, LoggingConfig, load_config, require_inputs, resolve_status
from issue_adr.event import EventError, load_event
from issue_adr.logging import AdrLogging
from issue_adr.models import RunResult
from issue_adr.pipeline import run_pipeline

log = logging.getLogger("issue_adr")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="issue-adr",
        description="Turn a labeled issue into an Architecture Decision Record and commit it",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Optional YAML config file (inputs, github, logging sections)",
    )
    parser.add_argument(
        "--event-path",
        type=Path,
        default=None,
        help="Event payload JSON (default: GITHUB_EVENT_PATH)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    return parser.parse_args(argv)


def write_outputs(output_path: str | None, result: RunResult) -> None:
    """Append step outputs (adr_path, adr_number, commit_sha) to GITHUB_OUTPUT."""
    if not output_path or result.outcome != "created":
        return
    outputs = {
        "adr_path": result.remote_path or "",
        "adr_number": result.sequence or "",
        "commit_sha": result.commit_sha or "",
    }
    with open(output_path, "a", encoding="utf-8") as fh:
        for key, value in outputs.items():
            fh.write(f"{key}={value}\n")


def main(argv: list[str] | None = None) -> int:
    """Entry point: 0 on success or skip, 1 on failure."""
    args = parse_args(argv)
    try:
        config = load_config(args.config)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        AdrLogging(LoggingConfig()).setup()
        log.error("Cannot load configuration: %s", e)
        return 1
    AdrLogging(config.logging).setup()

    if args.check:
        try:
            require_inputs(config.inputs)
            status = resolve_status(config.inputs.adr_status)
        except ConfigurationError as e:
            log.error("%s", e)
            return 1
        print("Config OK:", config.inputs.label_name, config.inputs.destination_folder, status.value)
        return 0

    try:
        payload = load_event(args.event_path or config.github.event_path)
    except EventError as e:
        log.error("%s", e)
        return 1

    result = run_pipeline(config, payload)
    if not result.ok:
        return 1
    try:
        write_outputs(config.github.output, result)
    except OSError as e:
        log.error("Cannot write step outputs: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
