"""Tests for the workflow-command reporter."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from evaldsl.reporting import ActionReporter, escape_data, escape_property, to_command_value


def test_escape_data_encodes_newlines_and_percent() -> None:
    assert escape_data("100%\r\nnext") == "100%25%0D%0Anext"


def test_escape_property_encodes_separators() -> None:
    assert escape_property("a:b,c") == "a%3Ab%2Cc"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, ""), ("plain", "plain"), ({"status": "ok"}, '{"status":"ok"}'), ([1, True], "[1,true]")],
    ids=["none", "string", "object", "list"],
)
def test_to_command_value(value: object, expected: str) -> None:
    assert to_command_value(value) == expected


def test_report_failure_accumulates(reporter: ActionReporter, stream: io.StringIO) -> None:
    reporter.report_failure("first")
    reporter.report_failure("second\nline")

    assert reporter.failures == ["first", "second\nline"]
    assert reporter.exit_code == 1
    assert stream.getvalue().splitlines() == ["::error::first", "::error::second%0Aline"]


def test_exit_code_success_without_failures(reporter: ActionReporter) -> None:
    assert reporter.failures == []
    assert reporter.exit_code == 0


def test_report_output_legacy_command(reporter: ActionReporter, stream: io.StringIO) -> None:
    reporter.report_output("response", {"status": "ok"})

    assert reporter.outputs == {"response": '{"status":"ok"}'}
    assert stream.getvalue() == '\n::set-output name=response::{"status":"ok"}\n'


def test_report_output_writes_github_output_file(tmp_path: Path) -> None:
    output_file = tmp_path / "output.txt"
    stream = io.StringIO()
    reporter = ActionReporter({"GITHUB_OUTPUT": str(output_file)}, stream=stream)

    reporter.report_output("response", {"status": "ok"})

    lines = output_file.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("response<<ghadelimiter_")
    assert lines[1] == '{"status":"ok"}'
    assert lines[2] == lines[0].removeprefix("response<<")
    assert stream.getvalue() == ""


def test_debug_only_when_runner_debug(stream: io.StringIO) -> None:
    ActionReporter({}, stream=stream).debug("hidden")
    ActionReporter({"RUNNER_DEBUG": "1"}, stream=stream).debug("shown")

    assert stream.getvalue() == "::debug::shown\n"


def test_step_messages_colored_when_enabled(stream: io.StringIO) -> None:
    reporter = ActionReporter({}, stream=stream, color=True)

    reporter.step_started("Read the inputs ......")
    reporter.step_done("done")

    assert stream.getvalue() == "\033[33mRead the inputs ......\033[0m\n\033[36mdone\033[0m\n"


def test_warning_emits_annotation(reporter: ActionReporter, stream: io.StringIO) -> None:
    reporter.warning("Both dsl and dsl-file are set")

    assert stream.getvalue() == "::warning::Both dsl and dsl-file are set\n"
    assert reporter.exit_code == 0
