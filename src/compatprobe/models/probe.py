# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..errors import ErrorCategory


@dataclass
class ProbeResult:
    success: bool
    status_code: int | None = None
    body: Any = None
    error_message: str | None = None
    error_category: ErrorCategory = ErrorCategory.NONE
    elapsed: float | None = None
    truncated_at: int | None = None

    @property
    def transport_failed(self) -> bool:
        return self.status_code is None and self.error_message is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "status_code": self.status_code,
            "body": self.body,
            "error_message": self.error_message,
            "error_category": self.error_category.value,
            "elapsed": self.elapsed,
            "truncated_at": self.truncated_at,
        }


@dataclass
class ReportEntry:
    key: str
    name: str
    result: ProbeResult
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "name": self.name,
            **self.result.to_dict(),
            "warnings": list(self.warnings),
        }
