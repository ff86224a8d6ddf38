"""Errors describing a failed call to the CD/RO server."""

from __future__ import annotations

from evaldsl.exceptions.base import EvalDslError


class RemoteError(EvalDslError):
    """A remote step failed; carries the HTTP status and raw body when available.

    ``status_code`` is ``None`` when the request never produced a response
    (connection refused, TLS failure, timeout).
    """

    def __init__(self, message: str, *, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class AuthError(RemoteError):
    """Raised when the session endpoint does not return a usable session."""


class EvalError(RemoteError):
    """Raised when the DSL endpoint does not return a usable result."""
