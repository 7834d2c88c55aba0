"""Shared utilities for the service layer."""

import json
from collections.abc import Mapping

# Decoded JSON object as handed out by the wire models.
JsonDict = dict[str, object]
Serializable = Mapping[str, object] | list[object]


def dump_json(obj: Serializable, *, indent: int | None = None) -> str:
    return json.dumps(obj, default=str, indent=indent)
