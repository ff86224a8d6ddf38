"""Exchange of a CD/RO token for a session."""

from __future__ import annotations

import logging

import httpx

from evaldsl.config.model import ActionConfig
from evaldsl.constants.remote import SESSIONS_PATH
from evaldsl.exceptions import AuthError
from evaldsl.model import Session, StepOutcome
from evaldsl.remote.client import post_json

logger = logging.getLogger(__name__)


def acquire_session(client: httpx.Client, config: ActionConfig) -> StepOutcome[Session]:
    """POST the token to the sessions endpoint; failures are returned, not raised."""
    url = config.endpoint(SESSIONS_PATH)
    try:
        response = post_json(client, url, {"token": config.token})
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.debug("Session request failed", exc_info=True)
        return StepOutcome.failure(AuthError(f"Session request to {url} failed: {exc}"))

    if not response.succeeded:
        return StepOutcome.failure(
            AuthError(
                f"Session is not received; Response status code: {response.status_code}; "
                f"Response body: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )
        )

    payload = response.payload
    username = payload.get("userName") if isinstance(payload, dict) else None
    session_id = payload.get("sessionId") if isinstance(payload, dict) else None
    if not isinstance(username, str) or not isinstance(session_id, str) or not session_id:
        return StepOutcome.failure(
            AuthError(
                f"Session response is missing userName or sessionId; Response status code: "
                f"{response.status_code}; Response body: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )
        )

    logger.debug("Session acquired for user %s", username)
    return StepOutcome.success(Session(username=username, session_id=session_id))
