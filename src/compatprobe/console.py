# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Marker-prefixed console output shared by the prober and the CLI."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

MARKERS = {
    "success": ("[✓]", "green"),
    "error": ("[✗]", "red"),
    "warn": ("[!]", "yellow"),
    "info": ("[i]", "cyan"),
}
RULE_WIDTH = 50


def make_console(*, quiet: bool = False, stderr: bool = False) -> Console:
    return Console(highlight=False, emoji=False, soft_wrap=True, quiet=quiet, stderr=stderr)


class ProbeConsole:
    """Thin wrapper over a rich Console that prints ``[✓]``/``[✗]``/``[!]``/``[i]`` lines."""

    def __init__(self, console: Console | None = None):
        self.console = console or make_console()

    def log(self, message: str, kind: str = "info") -> None:
        marker, _ = MARKERS.get(kind, MARKERS["info"])
        self.console.print(f"{escape(marker)} {escape(message)}")

    def success(self, message: str) -> None:
        self.log(message, "success")

    def error(self, message: str) -> None:
        self.log(message, "error")

    def warn(self, message: str) -> None:
        self.log(message, "warn")

    def info(self, message: str) -> None:
        self.log(message, "info")

    def styled(self, message: str, style: str) -> None:
        self.console.print(f"[{style}]{escape(message)}[/{style}]")

    def rule(self) -> None:
        self.styled("=" * RULE_WIDTH, "cyan")

    def blank(self) -> None:
        self.console.print()

    def plain(self, message: str) -> None:
        self.console.print(escape(message))
