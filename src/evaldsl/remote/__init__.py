"""HTTP access to the CD/RO REST API."""

from __future__ import annotations

from evaldsl.remote.client import build_client
from evaldsl.remote.evaluate import build_session_cookie, evaluate_dsl
from evaldsl.remote.session import acquire_session

__all__ = ["acquire_session", "build_client", "build_session_cookie", "evaluate_dsl"]
