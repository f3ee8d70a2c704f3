# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
compatprobe package entrypoint.

This package probes an HTTP endpoint for compatibility with the OpenAI
chat/completions API: it calls the models, chat-completions and embeddings
endpoints in sequence, checks the response shapes and derives a score.
HTTP behavior is abstracted behind an injectable client interface, and domain
objects are modeled with typed dataclasses for clarity.
"""

from .config import ProbeSettings, load_probe_settings
from .errors import ErrorCategory, TransportError
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .models import CompatibilityTier, EndpointDescriptor, ProbeResult, ProbeTarget, Report, ReportEntry
from .probe import CompatibilityProber, validate_shape
from .version import __version__

__all__ = [
    "CompatibilityProber",
    "CompatibilityTier",
    "EndpointDescriptor",
    "ErrorCategory",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "ProbeResult",
    "ProbeSettings",
    "ProbeTarget",
    "Report",
    "ReportEntry",
    "StubHttpClient",
    "TransportError",
    "create_default_http_client",
    "load_probe_settings",
    "setup_logging",
    "validate_shape",
    "__version__",
]
