"""Base exception for EvalDSL."""

from __future__ import annotations


class EvalDslError(Exception):
    """Base class for all EvalDSL errors."""
