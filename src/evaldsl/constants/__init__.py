"""Constant values shared across EvalDSL modules."""
