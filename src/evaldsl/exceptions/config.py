"""Configuration-related exceptions."""

from __future__ import annotations

from evaldsl.exceptions.base import EvalDslError


class ConfigError(EvalDslError, ValueError):
    """Raised when environment configuration or workflow inputs are invalid."""
