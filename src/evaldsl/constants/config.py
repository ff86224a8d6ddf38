"""Environment variable names, workflow input names and defaults."""

from __future__ import annotations

ENV_URL: str = "CDRO_URL"
ENV_TOKEN: str = "CDRO_TOKEN"
ENV_TIMEOUT: str = "CDRO_TIMEOUT"

# Loads ``.env`` when set to DEVELOPMENT_MODE.
ENV_MODE: str = "EVALDSL_ENV"
DEVELOPMENT_MODE: str = "development"
DOTENV_FILENAME: str = ".env"

DEFAULT_TIMEOUT_SECONDS: float = 60.0

INPUT_ENV_PREFIX: str = "INPUT_"
INPUT_DSL: str = "dsl"
INPUT_DSL_FILE: str = "dsl-file"
INPUT_DSL_ARGS: str = "dsl-args"
INPUT_DSL_ACTUAL_PARAMETER: str = "dsl-actual-parameter"
INPUT_IGNORE_UNVERIFIED_CERT: str = "ignore-unverified-cert"

# YAML 1.2 core schema booleans, as accepted by the Actions toolkit.
TRUE_VALUES: frozenset[str] = frozenset({"true", "True", "TRUE"})
FALSE_VALUES: frozenset[str] = frozenset({"false", "False", "FALSE"})
