"""Linear session-then-evaluate pipeline for one action invocation."""

from __future__ import annotations

import logging

import httpx

from evaldsl.config import ActionConfig, ActionInputs, resolve_dsl_body
from evaldsl.constants.config import INPUT_DSL, INPUT_DSL_FILE
from evaldsl.constants.reporting import RESPONSE_OUTPUT
from evaldsl.model import EvaluationRequest
from evaldsl.parameters import normalize_parameters, serialize_parameters
from evaldsl.remote import acquire_session, build_client, evaluate_dsl
from evaldsl.reporting import ActionReporter, to_command_value

logger = logging.getLogger(__name__)


def prepare_request(inputs: ActionInputs, reporter: ActionReporter) -> EvaluationRequest:
    """Decode parameters and read the DSL body; raises before any network call."""
    reporter.step_started("Read the inputs ......")
    parameters = normalize_parameters(inputs.dsl_args, inputs.dsl_actual_parameter)
    reporter.step_done("The inputs are successfully read!\n")

    if inputs.dsl and inputs.dsl_file is not None:
        reporter.warning(f"Both {INPUT_DSL} and {INPUT_DSL_FILE} are set; using inline {INPUT_DSL}")
    reporter.step_started("Read DSL file ......")
    dsl_body = resolve_dsl_body(inputs)
    reporter.step_done("DSL file is successfully read!\n")

    return EvaluationRequest(dsl=dsl_body, parameters=serialize_parameters(parameters))


def run_action(
    config: ActionConfig,
    inputs: ActionInputs,
    reporter: ActionReporter,
    *,
    client: httpx.Client | None = None,
) -> int:
    """Run the action and return its exit code.

    ``ConfigError`` and ``ParameterDecodeError`` propagate to the caller. Remote
    failures are reported; a failed session skips the evaluation step.
    """
    request = prepare_request(inputs, reporter)

    owns_client = client is None
    if client is None:
        client = build_client(config, verify=not inputs.ignore_unverified_cert)
    try:
        _run_remote_steps(client, config, request, reporter)
    finally:
        if owns_client:
            client.close()

    return reporter.exit_code


def _run_remote_steps(
    client: httpx.Client,
    config: ActionConfig,
    request: EvaluationRequest,
    reporter: ActionReporter,
) -> None:
    reporter.step_started("Send request to get the CD/RO session ......")
    session_outcome = acquire_session(client, config)
    if session_outcome.error is not None:
        reporter.report_failure(str(session_outcome.error))
        logger.info("Skipping DSL evaluation: no session")
        return
    reporter.step_done("The CD/RO session is successfully received!\n")

    reporter.step_started("Send request to evaluate DSL ......")
    eval_outcome = evaluate_dsl(client, config, request, session_outcome.value)
    if eval_outcome.error is not None:
        reporter.report_failure(str(eval_outcome.error))
        return

    reporter.info(to_command_value(eval_outcome.value))
    reporter.report_output(RESPONSE_OUTPUT, eval_outcome.value)
    reporter.step_done("DSL is successfully evaluated!")
