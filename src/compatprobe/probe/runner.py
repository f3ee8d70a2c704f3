# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Sequential compatibility probing of an OpenAI-style endpoint."""

from __future__ import annotations

import json
import logging
import time
from typing import Any

from ..config import ProbeSettings, load_probe_settings
from ..console import ProbeConsole
from ..errors import TransportError
from ..http.client import HttpClient, create_default_http_client
from ..http.models import HttpRequest
from ..models import EndpointDescriptor, ProbeResult, ProbeTarget, Report, ReportEntry
from .endpoints import build_endpoints
from .shape import validate_shape

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def parse_body(text: str) -> Any:
    """
    Decode a JSON body, returning the raw text when it is not valid JSON.

    NaN and Infinity are rejected so the parsed body always re-serializes as strict JSON.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return text


class CompatibilityProber:
    """
    Runs the models, chat-completions and embeddings probes against one target.

    The prober owns its HTTP client unless one is injected; use it as a context
    manager (or call ``close``) to release the connection pool.
    """

    def __init__(
        self,
        target: ProbeTarget,
        http_client: HttpClient | None = None,
        *,
        settings: ProbeSettings | None = None,
        console: ProbeConsole | None = None,
    ):
        self.target = target
        self.settings = settings or load_probe_settings()
        self.http_client = http_client or create_default_http_client(self.settings)
        self.console = console or ProbeConsole()

    def build_request(self, endpoint: EndpointDescriptor) -> HttpRequest:
        headers = {"Content-Type": JSON_CONTENT_TYPE, **endpoint.headers}
        body = json.dumps(endpoint.payload) if endpoint.payload is not None else None
        return HttpRequest(
            url=self.target.url_for(endpoint.path),
            method=endpoint.method,
            headers=headers,
            body=body,
            timeout=self.settings.timeout,
        )

    def probe(self, endpoint: EndpointDescriptor) -> ProbeResult:
        """Issue one request; never raises for transport failures."""
        self.console.info(f"Testing {endpoint.name}...")
        request = self.build_request(endpoint)
        logger.debug("Probing %s %s", request.method, request.url)

        started = time.monotonic()
        try:
            response = self.http_client.request(request)
        except TransportError as exc:
            elapsed = time.monotonic() - started
            self.console.error(f"{endpoint.name} ✗ - {exc.message}")
            return ProbeResult(
                success=False,
                error_message=exc.message,
                error_category=exc.category,
                elapsed=elapsed,
            )
        elapsed = time.monotonic() - started

        logger.debug("%s %s -> HTTP %s in %.2fs", request.method, request.url, response.status_code, elapsed)
        success = response.is_success
        if success:
            self.console.success(f"{endpoint.name} ✓ (HTTP {response.status_code})")
        else:
            self.console.error(f"{endpoint.name} ✗ (HTTP {response.status_code})")
        if response.meta.get("body_truncated"):
            limit = response.meta.get("body_bytes_limit")
            logger.info("%s %s body truncated at %s bytes", request.method, request.url, limit)
            return ProbeResult(
                success=success,
                status_code=response.status_code,
                body=response.text,
                elapsed=elapsed,
                truncated_at=limit,
            )
        return ProbeResult(
            success=success,
            status_code=response.status_code,
            body=parse_body(response.text),
            elapsed=elapsed,
        )

    def validate_shape(self, probe_name: str, body: Any) -> list[str]:
        return validate_shape(probe_name, body)

    def _check_shape(self, endpoint: EndpointDescriptor, result: ProbeResult) -> list[str]:
        if not result.success or result.body in (None, ""):
            return []
        if result.truncated_at is not None:
            warning = f"response body truncated at {result.truncated_at} bytes, shape not checked"
            self.console.warn(warning)
            return [warning]
        warnings = self.validate_shape(endpoint.key, result.body)
        if warnings:
            self.console.warn("Response format partially matches the OpenAI specification")
            for warning in warnings:
                self.console.warn(f"  - {warning}")
        else:
            self.console.success("Response format matches the OpenAI specification ✓")
        return warnings

    def _run_endpoint(self, report: Report, endpoint: EndpointDescriptor) -> Report:
        result = self.probe(endpoint)
        warnings = self._check_shape(endpoint, result)
        return report.with_entry(ReportEntry(key=endpoint.key, name=endpoint.name, result=result, warnings=warnings))

    def run_all(self) -> Report:
        report = Report(target=self.target)

        for endpoint in build_endpoints(self.target):
            if endpoint.requires_credential and not self.target.has_credential:
                self.console.warn(f"Skipping {endpoint.name} (requires an API key)")
                report = report.with_skipped(endpoint.key, "no API key supplied")
            else:
                report = self._run_endpoint(report, endpoint)
            self.console.blank()

        logger.info("Probe run finished: %d passed, %d failed", report.passed, report.failed)
        return report

    def close(self) -> None:
        close = getattr(self.http_client, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "CompatibilityProber":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()
