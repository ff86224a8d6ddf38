"""Decoding of YAML parameter blocks into the map sent with a DSL request.

A parameter block is a YAML mapping whose string values may themselves be
YAML documents, e.g.::

    dsl-args: |
      projectName: Default
      config: "{retries: 3, verbose: true}"

Every string value is decoded once more, so ``config`` above becomes a
mapping. Decoding stops at that level; strings inside the nested documents are
left untouched.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

import yaml

from evaldsl.constants.remote import ACTUAL_PARAMETER_KEY
from evaldsl.exceptions import ParameterDecodeError
from evaldsl.types import ParameterMap

logger = logging.getLogger(__name__)


class CoreSchemaLoader(yaml.SafeLoader):
    """Safe loader resolving plain scalars with the YAML 1.2 core schema.

    Only ``true``/``false`` are booleans, integers are decimal, ``0o`` octal
    or ``0x`` hex, and there are no sexagesimal numbers, ``_`` separators or
    implicit timestamps: ``12:30`` and ``yes`` stay strings, ``0755`` is 755.
    """

    yaml_implicit_resolvers: dict = {}


def _construct_core_int(loader: CoreSchemaLoader, node: yaml.ScalarNode) -> int:
    value = loader.construct_scalar(node)
    if value.startswith("0o"):
        return int(value[2:], 8)
    if value.startswith("0x"):
        return int(value[2:], 16)
    return int(value, 10)


CoreSchemaLoader.add_implicit_resolver(
    "tag:yaml.org,2002:null",
    re.compile(r"^(?:~|null|Null|NULL|)$"),
    ["~", "n", "N", ""],
)
CoreSchemaLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool",
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)
# Registered before float so plain digits resolve to int.
CoreSchemaLoader.add_implicit_resolver(
    "tag:yaml.org,2002:int",
    re.compile(r"^(?:[-+]?[0-9]+|0o[0-7]+|0x[0-9a-fA-F]+)$"),
    list("-+0123456789"),
)
CoreSchemaLoader.add_implicit_resolver(
    "tag:yaml.org,2002:float",
    re.compile(
        r"^(?:[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?"
        r"|[-+]?\.(?:inf|Inf|INF)|\.(?:nan|NaN|NAN))$"
    ),
    list("-+.0123456789"),
)
CoreSchemaLoader.add_constructor("tag:yaml.org,2002:int", _construct_core_int)


def normalize_parameters(raw_block: str | None, actual_override: str | None = None) -> ParameterMap | None:
    """Decode a ``dsl-args`` block and overlay ``dsl-actual-parameter``.

    Returns ``None`` when there is no block (or it is an empty YAML document);
    the override is only applied on top of an existing block.
    """
    if raw_block is None or not raw_block.strip():
        return None

    decoded = _load_yaml(raw_block, "dsl-args")
    if decoded is None:
        return None
    if not isinstance(decoded, dict):
        raise ParameterDecodeError(f"dsl-args must be a YAML mapping, got {type(decoded).__name__}")

    parameters = decode_nested_values(decoded)

    if actual_override is not None and actual_override.strip():
        parameters[ACTUAL_PARAMETER_KEY] = _load_yaml(actual_override, "dsl-actual-parameter")

    logger.debug("Normalized %d parameter(s): %s", len(parameters), ", ".join(sorted(map(str, parameters))))
    return parameters


def decode_nested_values(parameters: dict[Any, Any]) -> ParameterMap:
    """Return a copy with every string value decoded as a YAML document."""
    decoded: ParameterMap = {}
    for key, value in parameters.items():
        name = key if isinstance(key, str) else json.dumps(key, default=str)
        if isinstance(value, str):
            decoded[name] = _load_yaml(value, f"dsl-args.{name}")
        else:
            decoded[name] = value
    return decoded


def serialize_parameters(parameters: ParameterMap | None) -> str | None:
    """Serialize parameters as compact JSON for the request body."""
    if parameters is None:
        return None
    return json.dumps(parameters, separators=(",", ":"), ensure_ascii=False, default=str)


def _load_yaml(text: str, source: str) -> Any:
    try:
        return yaml.load(text, Loader=CoreSchemaLoader)  # noqa: S506
    except yaml.YAMLError as exc:
        raise ParameterDecodeError(f"Invalid YAML in {source}: {exc}") from exc
