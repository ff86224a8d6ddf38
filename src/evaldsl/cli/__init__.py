"""Command-line entrypoint for the EvalDSL action."""
