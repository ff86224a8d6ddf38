"""Cross-module type aliases."""

from __future__ import annotations

from typing import Any, TypeAlias

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]

# Values come straight from the YAML loader.
ParameterMap: TypeAlias = dict[str, Any]
