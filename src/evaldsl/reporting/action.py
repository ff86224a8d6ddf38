"""Workflow-command reporter for outputs and failures."""

from __future__ import annotations

import json
import logging
import sys
import uuid
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TextIO

from evaldsl.constants.reporting import (
    ANSI_CYAN,
    ANSI_RESET,
    ANSI_YELLOW,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    GITHUB_OUTPUT_ENV,
    OUTPUT_DELIMITER_PREFIX,
    RUNNER_DEBUG_ENV,
)

logger = logging.getLogger(__name__)


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def to_command_value(value: Any) -> str:
    """Render an output value; non-strings become compact JSON."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


class ActionReporter:
    """Collects outputs and failures for one action run.

    Failures do not stop the run; they accumulate and turn the exit code to 1.
    The caller decides whether later steps still run.
    """

    def __init__(
        self,
        env: Mapping[str, str] | None = None,
        *,
        stream: TextIO | None = None,
        color: bool = False,
    ) -> None:
        self._env = env if env is not None else {}
        self._stream = stream if stream is not None else sys.stdout
        self._color = color
        self.failures: list[str] = []
        self.outputs: dict[str, str] = {}

    @property
    def exit_code(self) -> int:
        return EXIT_FAILURE if self.failures else EXIT_SUCCESS

    @property
    def debug_enabled(self) -> bool:
        return self._env.get(RUNNER_DEBUG_ENV) == "1"

    def info(self, message: str) -> None:
        self._write(message)

    def step_started(self, message: str) -> None:
        self._write(self._colorize(message, ANSI_YELLOW))

    def step_done(self, message: str) -> None:
        self._write(self._colorize(message, ANSI_CYAN))

    def debug(self, message: str) -> None:
        if self.debug_enabled:
            self._command("debug", message)

    def warning(self, message: str) -> None:
        self._command("warning", message)

    def report_failure(self, message: str) -> None:
        """Emit an ``::error::`` command and mark the run as failed."""
        self.failures.append(message)
        logger.debug("Failure recorded (%d so far)", len(self.failures))
        self._command("error", message)

    def report_output(self, key: str, value: Any) -> None:
        """Publish a named output through ``GITHUB_OUTPUT`` or ``::set-output``."""
        rendered = to_command_value(value)
        self.outputs[key] = rendered

        output_file = self._env.get(GITHUB_OUTPUT_ENV)
        if output_file:
            _append_output_file(Path(output_file), key, rendered)
            return

        self._write("")
        self._command("set-output", rendered, {"name": key})

    def _colorize(self, text: str, color: str) -> str:
        return f"{color}{text}{ANSI_RESET}" if self._color else text

    def _command(self, command: str, message: str, properties: dict[str, str] | None = None) -> None:
        rendered = f"::{command}"
        if properties:
            rendered += " " + ",".join(f"{key}={escape_property(value)}" for key, value in properties.items())
        self._write(f"{rendered}::{escape_data(message)}")

    def _write(self, line: str) -> None:
        self._stream.write(f"{line}\n")
        self._stream.flush()


def _append_output_file(path: Path, key: str, value: str) -> None:
    delimiter = f"{OUTPUT_DELIMITER_PREFIX}{uuid.uuid4()}"
    if delimiter in key or delimiter in value:
        raise ValueError(f"Unexpected input: output delimiter {delimiter!r} found in {key!r}")
    with path.open("a", encoding="utf-8") as handle:
        handle.write(f"{key}<<{delimiter}\n{value}\n{delimiter}\n")
