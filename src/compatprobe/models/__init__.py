# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for compatprobe."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .probe import ProbeResult, ReportEntry
from .report import CompatibilityTier, Report, compatibility_score, compatibility_tier
from .target import EndpointDescriptor, ProbeTarget

__all__ = [
    "CompatibilityTier",
    "EndpointDescriptor",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "ProbeResult",
    "ProbeTarget",
    "Report",
    "ReportEntry",
    "compatibility_score",
    "compatibility_tier",
]
