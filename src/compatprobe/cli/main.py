# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""compatprobe CLI."""

import argparse
import json
import logging
import math
import sys
from typing import Any

from ..config import ProbeSettings, load_probe_settings
from ..console import ProbeConsole, make_console
from ..errors import error_category_to_reason
from ..http import create_default_http_client
from ..log import setup_logging
from ..models import CompatibilityTier, ProbeTarget, Report
from ..probe import CompatibilityProber

logger = logging.getLogger(__name__)

CLI_TEXT_TRUNCATION_BYTES = 4096
EXAMPLES = """\
examples:
  compatprobe https://api.example.com/v1
  compatprobe https://api.example.com/v1 sk-xxx
  compatprobe https://api.example.com/v1 sk-xxx gpt-4
  compatprobe https://api.example.com/v1 "" claude-3-haiku
"""
_TIER_STYLES: dict[CompatibilityTier, tuple[str, str]] = {
    CompatibilityTier.HIGH: ("green", " ✓"),
    CompatibilityTier.MEDIUM: ("yellow", ""),
    CompatibilityTier.LOW: ("red", " ✗"),
}


def _positive_float(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from None
    if not math.isfinite(parsed) or parsed <= 0:
        raise argparse.ArgumentTypeError(f"must be a finite number greater than 0, got {value}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compatprobe",
        description="Check whether an endpoint is compatible with the OpenAI chat/completions API",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("base_url", nargs="?", help="API base URL (e.g. https://api.example.com/v1)")
    parser.add_argument("api_key", nargs="?", default="", help="Optional API key, sent as a bearer token")
    parser.add_argument("model", nargs="?", default="", help="Optional model name used in request payloads")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of human-friendly summary",
    )
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )
    parser.add_argument("--timeout", type=_positive_float, default=None, help="Per-request timeout in seconds")
    return parser


def _truncate_text_bytes(text: str, max_bytes: int) -> str:
    raw = text.encode("utf-8")
    if len(raw) <= max_bytes:
        return text
    suffix = "...[truncated]"
    keep = max(max_bytes - len(suffix.encode("utf-8")), 0)
    return raw[:keep].decode("utf-8", errors="ignore") + suffix


def _truncate_for_cli(value: Any, *, max_bytes: int) -> Any:
    """Truncate large strings (typically non-JSON error pages) in JSON output."""
    if isinstance(value, str):
        return _truncate_text_bytes(value, max_bytes)
    if isinstance(value, dict):
        return {k: _truncate_for_cli(v, max_bytes=max_bytes) for k, v in value.items()}
    if isinstance(value, list):
        return [_truncate_for_cli(v, max_bytes=max_bytes) for v in value]
    return value


def _print_json(report: Report) -> None:
    json.dump(_truncate_for_cli(report.to_dict(), max_bytes=CLI_TEXT_TRUNCATION_BYTES), sys.stdout, indent=2, sort_keys=True, allow_nan=False)
    sys.stdout.write("\n")


def _print_banner(console: ProbeConsole, target: ProbeTarget) -> None:
    console.blank()
    console.styled("🤖 OpenAI API compatibility test", "cyan")
    console.rule()
    console.plain(f"Base URL: {target.base_url}")
    console.plain(f"API Key: {'provided ✓' if target.has_credential else 'not provided (some tests may fail)'}")
    console.plain(f"Model: {target.model}")
    console.blank()


def _pretty_print(report: Report, console: ProbeConsole) -> None:
    console.rule()
    console.styled(
        f"Results: {report.passed} passed, {report.failed} failed",
        "green" if report.failed == 0 else "yellow",
    )
    console.rule()

    style, suffix = _TIER_STYLES[report.tier]
    console.styled(f"Compatibility score: {report.score}% - {report.tier.label}{suffix}", style)
    console.blank()

    if not report.failures:
        return
    console.info("Suggested improvements:")
    for entry in report.failures:
        if entry.result.transport_failed:
            reason = error_category_to_reason(entry.result.error_category)
            hint = "check network connectivity and URL format"
            console.plain(f"  - {entry.name}: {hint} ({reason})" if reason else f"  - {entry.name}: {hint}")
        else:
            console.plain(
                f"  - {entry.name}: check the API endpoint path and authentication (HTTP {entry.result.status_code})"
            )


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.base_url:
        parser.print_help(sys.stdout)
        return 1

    settings: ProbeSettings = load_probe_settings()
    if args.ignore_ssl_errors:
        settings.verify_ssl = False
    if args.timeout is not None:
        settings.timeout = args.timeout

    target = ProbeTarget(base_url=args.base_url, api_key=args.api_key, model=args.model or settings.default_model)
    console = ProbeConsole(make_console(quiet=args.json))

    try:
        _print_banner(console, target)
        http_client = create_default_http_client(settings)
        with CompatibilityProber(target, http_client, settings=settings, console=console) as prober:
            report = prober.run_all()
        if args.json:
            _print_json(report)
        else:
            _pretty_print(report, console)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Probe run failed", exc_info=True)
        ProbeConsole(make_console(stderr=True)).styled(f"\nProbe run failed: {exc}", "red")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
