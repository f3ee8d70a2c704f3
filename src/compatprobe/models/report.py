# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Compatibility report accumulator and scoring."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from .probe import ReportEntry
from .target import ProbeTarget

HIGH_TIER_THRESHOLD = 90
MEDIUM_TIER_THRESHOLD = 70


class CompatibilityTier(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def label(self) -> str:
        return {
            CompatibilityTier.HIGH: "High compatibility",
            CompatibilityTier.MEDIUM: "Medium compatibility",
            CompatibilityTier.LOW: "Low compatibility",
        }[self]


def compatibility_score(passed: int, failed: int) -> int:
    """Percentage of passed probes, rounded half up. Zero when nothing ran."""
    total = passed + failed
    if total <= 0:
        return 0
    return int(math.floor(100 * passed / total + 0.5))


def compatibility_tier(score: int) -> CompatibilityTier:
    if score >= HIGH_TIER_THRESHOLD:
        return CompatibilityTier.HIGH
    if score >= MEDIUM_TIER_THRESHOLD:
        return CompatibilityTier.MEDIUM
    return CompatibilityTier.LOW


@dataclass(frozen=True)
class Report:
    """
    Immutable accumulator for one probe run.

    Each step returns a new Report via ``with_entry``/``with_skipped``; counts,
    score and tier are always derived from the recorded entries.
    """

    target: ProbeTarget
    entries: tuple[ReportEntry, ...] = ()
    skipped: tuple[tuple[str, str], ...] = ()

    def with_entry(self, entry: ReportEntry) -> Report:
        return replace(self, entries=self.entries + (entry,))

    def with_skipped(self, key: str, reason: str) -> Report:
        return replace(self, skipped=self.skipped + ((key, reason),))

    @property
    def passed(self) -> int:
        return sum(1 for entry in self.entries if entry.result.success)

    @property
    def failed(self) -> int:
        return sum(1 for entry in self.entries if not entry.result.success)

    @property
    def total(self) -> int:
        return len(self.entries)

    @property
    def score(self) -> int:
        return compatibility_score(self.passed, self.failed)

    @property
    def tier(self) -> CompatibilityTier:
        return compatibility_tier(self.score)

    @property
    def failures(self) -> list[ReportEntry]:
        return [entry for entry in self.entries if not entry.result.success]

    def entry(self, key: str) -> ReportEntry | None:
        for entry in self.entries:
            if entry.key == key:
                return entry
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "target": self.target.to_dict(),
            "tests": [entry.to_dict() for entry in self.entries],
            "skipped": [{"key": key, "reason": reason} for key, reason in self.skipped],
            "passed": self.passed,
            "failed": self.failed,
            "score": self.score,
            "tier": self.tier.value,
        }
