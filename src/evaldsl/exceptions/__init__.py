"""Shared exception hierarchy for EvalDSL."""

from __future__ import annotations

from .base import EvalDslError
from .config import ConfigError
from .parameters import ParameterDecodeError
from .remote import AuthError, EvalError, RemoteError

__all__ = [
    "AuthError",
    "ConfigError",
    "EvalDslError",
    "EvalError",
    "ParameterDecodeError",
    "RemoteError",
]
