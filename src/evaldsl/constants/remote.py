"""CD/RO REST endpoints and wire-format constants."""

from __future__ import annotations

SESSIONS_PATH: str = "/rest/v1.0/sessions"
DSL_PATH: str = "/rest/v1.0/server/dsl"

DSL_FORMAT: str = "groovy"
ACTUAL_PARAMETER_KEY: str = "actualParameter"

SESSION_COOKIE_NAME: str = "session"
COOKIE_HEADER: str = "cookie"

# Characters encodeURIComponent leaves untouched besides alphanumerics and ``-_.``.
URI_COMPONENT_SAFE: str = "!~*'()"

SUCCESS_STATUS: int = 200
