"""Submission of a DSL body to the CD/RO evaluation endpoint."""

from __future__ import annotations

import json
import logging
from urllib.parse import quote

import httpx

from evaldsl.config.model import ActionConfig
from evaldsl.constants.remote import COOKIE_HEADER, DSL_PATH, SESSION_COOKIE_NAME, URI_COMPONENT_SAFE
from evaldsl.exceptions import EvalError
from evaldsl.model import EvaluationRequest, Session, StepOutcome
from evaldsl.remote.client import post_json
from evaldsl.types import JsonValue

logger = logging.getLogger(__name__)


def build_session_cookie(session: Session) -> str:
    """Return ``session=<url-encoded JSON>`` for the cookie header."""
    value = json.dumps({"username": session.username, "sessionId": session.session_id}, separators=(",", ":"))
    return f"{SESSION_COOKIE_NAME}={quote(value, safe=URI_COMPONENT_SAFE)}"


def evaluate_dsl(
    client: httpx.Client,
    config: ActionConfig,
    request: EvaluationRequest,
    session: Session,
) -> StepOutcome[JsonValue]:
    """POST the DSL with the session cookie; failures are returned, not raised."""
    url = config.endpoint(DSL_PATH)
    try:
        response = post_json(
            client,
            url,
            request.to_body(),
            headers={COOKIE_HEADER: build_session_cookie(session)},
        )
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.debug("DSL request failed", exc_info=True)
        return StepOutcome.failure(EvalError(f"DSL request to {url} failed: {exc}"))

    if not response.succeeded:
        return StepOutcome.failure(
            EvalError(
                f"DSL is not evaluated; Response status code: {response.status_code}; "
                f"Response body: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )
        )

    return StepOutcome.success(response.payload)
