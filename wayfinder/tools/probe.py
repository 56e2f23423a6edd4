"""Check endpoint detection and location search from a shell.

Usage:
    python -m wayfinder.tools.probe endpoint
    python -m wayfinder.tools.probe endpoint --candidate 10.0.2.2 --candidate localhost
    python -m wayfinder.tools.probe search Sigiriya --mode local
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from wayfinder.adapters.probe.httpx_probe import HttpxLivenessProbe
from wayfinder.application.use_cases.resolve_endpoint import ResolveEndpointUseCase
from wayfinder.config import settings
from wayfinder.domain.value_objects.endpoint import EndpointProbeConfig
from wayfinder.domain.value_objects.enums import SuggestionMode
from wayfinder.resolvers import resolve_suggestions

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)


async def _run_endpoint(args: argparse.Namespace) -> int:
    config = settings.endpoint_probe_config()
    if args.candidate or args.timeout_ms:
        config = EndpointProbeConfig(
            candidates=tuple(args.candidate or config.candidates),
            fallback=config.fallback,
            probe_path=config.probe_path,
            timeout_ms=args.timeout_ms or config.timeout_ms,
            port=config.port,
            secure=config.secure,
        )

    resolved = await ResolveEndpointUseCase(HttpxLivenessProbe()).execute(config)

    print(f"\n{'='*50}")
    print("ENDPOINT DETECTION")
    print(f"{'='*50}")
    for a in resolved.attempts:
        outcome = f"OK {a.status_code}" if a.ok else (a.failure.value if a.failure else "failed")
        print(f"{a.url:<40} {outcome:<14} {a.elapsed_ms} ms")
    print(f"Base URL: {resolved.base_url}{' (fallback)' if resolved.fallback_used else ''}")
    print(f"{'='*50}\n")
    return 1 if resolved.fallback_used else 0


async def _run_search(args: argparse.Namespace) -> int:
    mode = SuggestionMode(args.mode) if args.mode else settings.default_suggestion_mode
    result = await resolve_suggestions(args.query, mode)
    if result.is_configuration_error:
        logger.error("%s (%s)", result.error.message, result.error.setting)
        return 2

    for s in result:
        print(f"[{s.icon.icon_name:<16}] {s.primary_label}, {s.secondary_label}")
    print(f"{len(result)} suggestion(s) via {mode.value}")
    return 0


def main():
    parser = argparse.ArgumentParser(description="Probe backend endpoints or search locations")
    sub = parser.add_subparsers(dest="command", required=True)

    endpoint = sub.add_parser("endpoint", help="Detect the reachable backend host")
    endpoint.add_argument(
        "--candidate", action="append",
        help="Candidate host, repeatable, in priority order (default: ENDPOINT_CANDIDATES)",
    )
    endpoint.add_argument("--timeout-ms", type=int, help="Per-probe timeout in milliseconds")

    search = sub.add_parser("search", help="Resolve location suggestions")
    search.add_argument("query", type=str)
    search.add_argument("--mode", choices=[m.value for m in SuggestionMode])

    args = parser.parse_args()
    if args.command == "endpoint":
        sys.exit(asyncio.run(_run_endpoint(args)))
    sys.exit(asyncio.run(_run_search(args)))


if __name__ == "__main__":
    main()
