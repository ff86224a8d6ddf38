"""Constants for action outputs, workflow commands and stdout colouring."""

from __future__ import annotations

RESPONSE_OUTPUT: str = "response"

GITHUB_OUTPUT_ENV: str = "GITHUB_OUTPUT"
RUNNER_DEBUG_ENV: str = "RUNNER_DEBUG"
OUTPUT_DELIMITER_PREFIX: str = "ghadelimiter_"

EXIT_SUCCESS: int = 0
EXIT_FAILURE: int = 1
EXIT_CONFIG_ERROR: int = 2

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_CYAN: str = "\033[36m"
ANSI_YELLOW: str = "\033[33m"
