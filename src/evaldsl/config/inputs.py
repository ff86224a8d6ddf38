"""Workflow input access in the manner of the Actions toolkit."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from evaldsl.config.model import ActionInputs
from evaldsl.constants.config import (
    FALSE_VALUES,
    INPUT_DSL,
    INPUT_DSL_ACTUAL_PARAMETER,
    INPUT_DSL_ARGS,
    INPUT_DSL_FILE,
    INPUT_ENV_PREFIX,
    INPUT_IGNORE_UNVERIFIED_CERT,
    TRUE_VALUES,
)
from evaldsl.exceptions import ConfigError


def input_env_name(name: str) -> str:
    """Return the variable the runner uses for input ``name``."""
    return f"{INPUT_ENV_PREFIX}{name.replace(' ', '_').upper()}"


def get_input(env: Mapping[str, str], name: str) -> str:
    """Return the trimmed value of a workflow input, or ``""`` when unset."""
    return env.get(input_env_name(name), "").strip()


def get_boolean_input(env: Mapping[str, str], name: str, *, default: bool = False) -> bool:
    """Return a boolean workflow input; only YAML 1.2 core booleans are accepted."""
    value = get_input(env, name)
    if not value:
        return default
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ConfigError(
        f"Input does not meet YAML 1.2 \"Core Schema\" specification: {name}\n"
        "Support boolean input list: `true | True | TRUE | false | False | FALSE`"
    )


def read_inputs(env: Mapping[str, str]) -> ActionInputs:
    """Read all action inputs and check that a DSL source is present."""
    dsl = get_input(env, INPUT_DSL)
    dsl_file = get_input(env, INPUT_DSL_FILE)
    if not dsl and not dsl_file:
        raise ConfigError("Either the DSL itself or the path to the DSL file must be specified")

    return ActionInputs(
        dsl=dsl or None,
        dsl_file=Path(dsl_file) if dsl_file else None,
        dsl_args=get_input(env, INPUT_DSL_ARGS) or None,
        dsl_actual_parameter=get_input(env, INPUT_DSL_ACTUAL_PARAMETER) or None,
        ignore_unverified_cert=get_boolean_input(env, INPUT_IGNORE_UNVERIFIED_CERT),
    )


def resolve_dsl_body(inputs: ActionInputs) -> str:
    """Return the inline DSL, or the contents of the DSL file."""
    if inputs.dsl:
        return inputs.dsl
    if inputs.dsl_file is None:
        raise ConfigError("Either the DSL itself or the path to the DSL file must be specified")
    try:
        return inputs.dsl_file.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read DSL file {inputs.dsl_file}: {exc}") from exc
