"""Shared type aliases for EvalDSL."""

from .common import JsonScalar, JsonValue, ParameterMap

__all__ = ["JsonScalar", "JsonValue", "ParameterMap"]
