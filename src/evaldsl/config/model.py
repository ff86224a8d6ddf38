"""Config data model for the EvalDSL action."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from evaldsl.constants.config import DEFAULT_TIMEOUT_SECONDS


@dataclass(frozen=True)
class ActionConfig:
    """Resolved server connection settings."""

    url: str
    token: str
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    def __repr__(self) -> str:
        return f"ActionConfig(url={self.url!r}, token='***', timeout={self.timeout!r})"

    def endpoint(self, path: str) -> str:
        """Join the base URL with a REST path."""
        return f"{self.url}{path}"


@dataclass(frozen=True)
class ActionInputs:
    """Workflow inputs for one invocation."""

    dsl: str | None = None
    dsl_file: Path | None = None
    dsl_args: str | None = None
    dsl_actual_parameter: str | None = None
    ignore_unverified_cert: bool = False
