"""Canonical argument encoding for tool call signatures."""

from __future__ import annotations

import json
from hashlib import sha256
from typing import Any

from toolgate.exceptions import ArgumentEncodingError


def canonicalize(obj: Any) -> Any:
    """Convert ``obj`` into a JSON-serializable structure with deterministic ordering."""
    if obj is None or isinstance(obj, (bool, int, str)):
        return obj
    if isinstance(obj, float):
        # 123.0 and 123 are the same argument
        if obj.is_integer():
            return int(obj)
        return obj
    if isinstance(obj, bytes):
        return {"__bytes__": sha256(obj).hexdigest()}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    if isinstance(obj, (set, frozenset)):
        return sorted((canonicalize(x) for x in obj), key=lambda x: stable_json_dumps(x))
    if isinstance(obj, dict):
        items = [(str(k), canonicalize(v)) for k, v in obj.items()]
        return {k: v for k, v in sorted(items, key=lambda kv: kv[0])}
    return str(obj)


def stable_json_dumps(obj: Any) -> str:
    return json.dumps(canonicalize(obj), sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def encode_arguments(arguments: dict[str, Any] | str | None) -> str:
    """Canonical text form of a tool argument payload.

    JSON text is decoded first so that payloads differing only in
    whitespace or key order encode identically. A missing payload
    encodes the same as an empty one.

    Raises:
        ArgumentEncodingError: ``arguments`` is text that is not valid JSON.
    """
    if arguments is None:
        arguments = {}
    elif isinstance(arguments, str):
        if not arguments.strip():
            arguments = {}
        else:
            try:
                arguments = json.loads(arguments)
            except json.JSONDecodeError as e:
                raise ArgumentEncodingError(e.msg, details={"position": e.pos}) from e
    return stable_json_dumps(arguments)
