"""Environment configuration and workflow inputs for the EvalDSL action."""

from __future__ import annotations

from evaldsl.config.inputs import get_boolean_input, get_input, read_inputs, resolve_dsl_body
from evaldsl.config.loader import load_config, merge_dotenv
from evaldsl.config.model import ActionConfig, ActionInputs

__all__ = [
    "ActionConfig",
    "ActionInputs",
    "get_boolean_input",
    "get_input",
    "load_config",
    "merge_dotenv",
    "read_inputs",
    "resolve_dsl_body",
]
