"""Parameter decoding exceptions."""

from __future__ import annotations

from evaldsl.exceptions.base import EvalDslError


class ParameterDecodeError(EvalDslError, ValueError):
    """Raised when a DSL parameter block is not valid YAML."""
