"""Branding constants for HTTP identification and terminal output."""

from __future__ import annotations

BRAND_NAME: str = "EvalDSL"
USER_AGENT: str = "GitHub Action - CloudBees EvalDSL"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: evaluate DSL on a CloudBees CD/RO server"
