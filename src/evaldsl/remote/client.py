"""HTTP client construction and the shared JSON POST helper."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from typing import Any

import httpx

from evaldsl.config.model import ActionConfig
from evaldsl.constants.branding import USER_AGENT
from evaldsl.constants.remote import SUCCESS_STATUS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JsonResponse:
    """Status, raw text and decoded JSON (``None`` when empty or not JSON)."""

    status_code: int
    text: str
    payload: Any = None

    @property
    def succeeded(self) -> bool:
        """Status 200 with a JSON body that is not null, false, 0, NaN or empty text."""
        return self.status_code == SUCCESS_STATUS and _is_truthy(self.payload)


def build_client(config: ActionConfig, *, verify: bool = True) -> httpx.Client:
    """Create the client used for both requests of one invocation."""
    if not verify:
        logger.warning("TLS certificate verification is disabled")
    return httpx.Client(
        headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
        timeout=config.timeout,
        verify=verify,
    )


def post_json(
    client: httpx.Client,
    url: str,
    body: dict[str, Any],
    *,
    headers: dict[str, str] | None = None,
) -> JsonResponse:
    """POST ``body`` as JSON; transport errors propagate as ``httpx.HTTPError``."""
    logger.debug("POST %s", url)
    response = client.post(url, json=body, headers=headers)
    logger.debug("POST %s -> %d (%d bytes)", url, response.status_code, len(response.content))

    text = response.text
    payload: Any = None
    if text.strip():
        try:
            payload = json.loads(text)
        except json.JSONDecodeError:
            logger.debug("Response from %s is not JSON", url)
    return JsonResponse(status_code=response.status_code, text=text, payload=payload)


def _is_truthy(payload: Any) -> bool:
    # Empty objects and arrays count as a result.
    if isinstance(payload, float) and math.isnan(payload):
        return False
    return payload not in (None, False, 0, "")
