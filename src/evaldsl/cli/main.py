"""CLI entrypoint for the EvalDSL action."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path

from evaldsl import __version__
from evaldsl.config import load_config, merge_dotenv, read_inputs
from evaldsl.config.inputs import input_env_name
from evaldsl.constants.branding import CLI_DESCRIPTION
from evaldsl.constants.config import (
    INPUT_DSL,
    INPUT_DSL_ACTUAL_PARAMETER,
    INPUT_DSL_ARGS,
    INPUT_DSL_FILE,
    INPUT_IGNORE_UNVERIFIED_CERT,
)
from evaldsl.constants.reporting import EXIT_CONFIG_ERROR
from evaldsl.exceptions import ConfigError, ParameterDecodeError
from evaldsl.reporting import ActionReporter
from evaldsl.runner import run_action

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser; every flag overrides the matching ``INPUT_*`` variable."""
    parser = argparse.ArgumentParser(prog="evaldsl", description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--dsl", default=None, help="Inline DSL to evaluate")
    parser.add_argument("--dsl-file", default=None, help="Path to a file holding the DSL")
    parser.add_argument("--dsl-args", default=None, help="YAML mapping of DSL parameters")
    parser.add_argument(
        "--dsl-actual-parameter",
        default=None,
        help="YAML value stored as the actualParameter parameter",
    )
    parser.add_argument(
        "--ignore-unverified-cert",
        action="store_true",
        default=None,
        help="Skip TLS certificate verification",
    )
    parser.add_argument("--env-file", type=Path, default=None, help="Load CDRO_* variables from this .env file")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")
    return parser


def apply_cli_inputs(args: argparse.Namespace, env: Mapping[str, str]) -> dict[str, str]:
    """Return ``env`` with CLI flags written over the runner's input variables."""
    merged = dict(env)
    overrides = {
        INPUT_DSL: args.dsl,
        INPUT_DSL_FILE: args.dsl_file,
        INPUT_DSL_ARGS: args.dsl_args,
        INPUT_DSL_ACTUAL_PARAMETER: args.dsl_actual_parameter,
        INPUT_IGNORE_UNVERIFIED_CERT: "true" if args.ignore_unverified_cert else None,
    }
    for name, value in overrides.items():
        if value is not None:
            merged[input_env_name(name)] = value
    return merged


def main(argv: list[str] | None = None, env: Mapping[str, str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    environ = dict(os.environ if env is None else env)

    reporter = ActionReporter(environ, color=_use_color(args, environ))
    verbose = args.verbose or reporter.debug_enabled
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(message)s")

    try:
        environ = apply_cli_inputs(args, merge_dotenv(environ, args.env_file))
        config = load_config(environ)
        logger.debug("Using CD/RO server %s", config.url)
        inputs = read_inputs(environ)
        return run_action(config, inputs, reporter)
    except ConfigError as exc:
        reporter.report_failure(f"Configuration error: {exc}")
        return EXIT_CONFIG_ERROR
    except ParameterDecodeError as exc:
        reporter.report_failure(f"Parameter error: {exc}")
        return EXIT_CONFIG_ERROR


def _use_color(args: argparse.Namespace, env: Mapping[str, str]) -> bool:
    if args.no_color:
        return False
    return sys.stdout.isatty() or env.get("GITHUB_ACTIONS") == "true"


if __name__ == "__main__":
    raise SystemExit(main())
