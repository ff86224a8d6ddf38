"""Value objects passed between pipeline steps."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from evaldsl.constants.remote import DSL_FORMAT
from evaldsl.exceptions import RemoteError

T = TypeVar("T")


@dataclass(frozen=True)
class Session:
    """Short-lived CD/RO session obtained by exchanging a token."""

    username: str
    session_id: str

    def __repr__(self) -> str:
        return f"Session(username={self.username!r}, session_id='***')"


@dataclass(frozen=True)
class EvaluationRequest:
    """DSL payload submitted to the evaluation endpoint."""

    dsl: str
    parameters: str | None = None
    format: str = DSL_FORMAT

    def to_body(self) -> dict[str, str]:
        """Return the JSON request body; ``parameters`` is omitted when unset."""
        body = {"dsl": self.dsl, "format": self.format}
        if self.parameters is not None:
            body["parameters"] = self.parameters
        return body


@dataclass(frozen=True)
class StepOutcome(Generic[T]):
    """Result of one network step: either a value or a remote error."""

    value: T | None = None
    error: RemoteError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> StepOutcome[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: RemoteError) -> StepOutcome[T]:
        return cls(error=error)
