# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-memory HttpClient used by tests and offline runs."""

from __future__ import annotations

from ..errors import ErrorCategory, TransportError
from .client import HttpClient
from .models import HttpRequest, HttpResponse


class StubHttpClient(HttpClient):
    """
    Deterministic, programmable HttpClient for tests.

    Responses are keyed by ``(method, url)``. A stubbed ``TransportError`` is
    raised instead of returned.
    """

    def __init__(self, responses: dict[tuple[str, str], HttpResponse | TransportError] | None = None):
        self._responses = {(method.upper(), url): response for (method, url), response in (responses or {}).items()}
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, method: str, url: str, response: HttpResponse | TransportError) -> None:
        self._responses[(method.upper(), url)] = response

    def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        stubbed = self._responses.get((request.method.upper(), request.url))
        if stubbed is None:
            raise TransportError("No stubbed response configured", ErrorCategory.CONNECTION_ERROR)
        if isinstance(stubbed, TransportError):
            raise stubbed
        return stubbed

    def close(self) -> None:
        self.closed = True
