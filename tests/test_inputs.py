"""Tests for workflow input access and DSL body resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from evaldsl.config import ActionInputs, get_boolean_input, get_input, read_inputs, resolve_dsl_body
from evaldsl.config.inputs import input_env_name
from evaldsl.exceptions import ConfigError


def test_input_env_name_matches_runner_convention() -> None:
    assert input_env_name("dsl-file") == "INPUT_DSL-FILE"
    assert input_env_name("my input") == "INPUT_MY_INPUT"


def test_get_input_trims_value() -> None:
    assert get_input({"INPUT_DSL": "  getProjects()\n"}, "dsl") == "getProjects()"


def test_get_input_missing_is_empty() -> None:
    assert get_input({}, "dsl") == ""


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("true", True), ("True", True), ("TRUE", True), ("false", False), ("FALSE", False), ("", False)],
)
def test_get_boolean_input_accepts_core_schema(raw: str, expected: bool) -> None:
    assert get_boolean_input({"INPUT_IGNORE-UNVERIFIED-CERT": raw}, "ignore-unverified-cert") is expected


def test_get_boolean_input_rejects_other_values() -> None:
    with pytest.raises(ConfigError, match="ignore-unverified-cert"):
        get_boolean_input({"INPUT_IGNORE-UNVERIFIED-CERT": "yes"}, "ignore-unverified-cert")


def test_read_inputs_requires_dsl_source() -> None:
    with pytest.raises(ConfigError, match="Either the DSL itself or the path to the DSL file"):
        read_inputs({"INPUT_DSL-ARGS": "a: 1"})


def test_read_inputs_collects_all_fields() -> None:
    inputs = read_inputs(
        {
            "INPUT_DSL-FILE": "dsl/project.groovy",
            "INPUT_DSL-ARGS": "a: 1",
            "INPUT_DSL-ACTUAL-PARAMETER": "b: 2",
            "INPUT_IGNORE-UNVERIFIED-CERT": "true",
        }
    )

    assert inputs == ActionInputs(
        dsl=None,
        dsl_file=Path("dsl/project.groovy"),
        dsl_args="a: 1",
        dsl_actual_parameter="b: 2",
        ignore_unverified_cert=True,
    )


def test_resolve_dsl_body_prefers_inline(tmp_path: Path) -> None:
    dsl_file = tmp_path / "project.groovy"
    dsl_file.write_text("fromFile()", encoding="utf-8")

    assert resolve_dsl_body(ActionInputs(dsl="inline()", dsl_file=dsl_file)) == "inline()"


def test_resolve_dsl_body_reads_file(tmp_path: Path) -> None:
    dsl_file = tmp_path / "project.groovy"
    dsl_file.write_text("project 'Default', {\n}\n", encoding="utf-8")

    assert resolve_dsl_body(ActionInputs(dsl_file=dsl_file)) == "project 'Default', {\n}\n"


def test_resolve_dsl_body_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Unable to read DSL file"):
        resolve_dsl_body(ActionInputs(dsl_file=tmp_path / "missing.groovy"))


def test_resolve_dsl_body_without_source() -> None:
    with pytest.raises(ConfigError):
        resolve_dsl_body(ActionInputs())
