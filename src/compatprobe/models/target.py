# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe target and endpoint descriptor models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..config import DEFAULT_MODEL
from ..http.models import Headers


@dataclass(frozen=True)
class ProbeTarget:
    """
    The endpoint under test.

    ``base_url`` is stored without trailing slashes. An empty ``api_key`` means
    no credential was supplied, and an empty ``model`` falls back to the
    placeholder model name.
    """

    base_url: str
    api_key: str = ""
    model: str = DEFAULT_MODEL

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", str(self.base_url or "").strip().rstrip("/"))
        object.__setattr__(self, "api_key", str(self.api_key or ""))
        object.__setattr__(self, "model", str(self.model or "") or DEFAULT_MODEL)

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def auth_headers(self) -> Headers:
        if not self.has_credential:
            return {}
        return {"Authorization": f"Bearer {self.api_key}"}

    def to_dict(self) -> dict[str, Any]:
        return {
            "base_url": self.base_url,
            "api_key_provided": self.has_credential,
            "model": self.model,
        }


@dataclass(frozen=True)
class EndpointDescriptor:
    """One fixed endpoint of the OpenAI-style API surface."""

    key: str
    name: str
    path: str
    method: str = "POST"
    payload: dict[str, Any] | None = None
    headers: Headers = field(default_factory=dict)
    requires_credential: bool = False
