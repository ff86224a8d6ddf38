"""Reporting of progress, outputs and failures to the workflow runner."""

from __future__ import annotations

from evaldsl.reporting.action import ActionReporter, escape_data, escape_property, to_command_value

__all__ = ["ActionReporter", "escape_data", "escape_property", "to_command_value"]
