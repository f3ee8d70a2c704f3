# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Shallow response-shape checks for successful probes.

Missing fields never fail a probe; they are reported as warnings alongside the
HTTP outcome.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .endpoints import CHAT_COMPLETIONS, EMBEDDINGS, MODELS

CHAT_COMPLETION_OBJECT = "chat.completion"
NOT_AN_OBJECT_WARNING = "response body is not a JSON object"


def _data_array_warnings(body: dict[str, Any]) -> list[str]:
    if "data" not in body:
        return ["missing 'data' field"]
    if not isinstance(body["data"], list):
        return ["'data' field is not an array"]
    return []


def _chat_completion_warnings(body: dict[str, Any]) -> list[str]:
    warnings: list[str] = []
    if not body.get("id"):
        warnings.append("missing 'id' field")

    if "object" not in body:
        warnings.append("missing 'object' field")
    elif body["object"] != CHAT_COMPLETION_OBJECT:
        warnings.append(f"'object' field is {body['object']!r}, expected {CHAT_COMPLETION_OBJECT!r}")

    if "choices" not in body:
        warnings.append("missing 'choices' field")
    elif not isinstance(body["choices"], list):
        warnings.append("'choices' field is not an array")

    if "usage" not in body:
        warnings.append("missing 'usage' field")
    elif not isinstance(body["usage"], dict):
        warnings.append("'usage' field is not an object")
    return warnings


_VALIDATORS: dict[str, Callable[[dict[str, Any]], list[str]]] = {
    MODELS: _data_array_warnings,
    CHAT_COMPLETIONS: _chat_completion_warnings,
    EMBEDDINGS: _data_array_warnings,
}


def validate_shape(probe_name: str, body: Any) -> list[str]:
    """Return shape warnings for ``body`` as returned by the ``probe_name`` endpoint."""
    validator = _VALIDATORS.get(probe_name)
    if validator is None:
        return []
    if not isinstance(body, dict):
        return [NOT_AN_OBJECT_WARNING]
    return validator(body)


__all__ = ["CHAT_COMPLETION_OBJECT", "NOT_AN_OBJECT_WARNING", "validate_shape"]
