#!/usr/bin/env python3
"""Render the rover dashboard against a running proxy.

Starts a dashboard session, optionally opens one rover's detail page
the way a card click would, and prints the root markup.

Usage
-----
Start the proxy, then run::

    export MARSDASH_BASE_URL="http://localhost:3000"
    python scripts/render_dashboard.py

Options::

    --rover NAME         Open NAME's detail view after the list loads
    --twice              Click the rover card twice concurrently
    --dedupe             Share one in-flight fetch between concurrent clicks
    --output FILE        Write markup to FILE instead of stdout
    --base-url URL       Proxy base URL (overrides MARSDASH_BASE_URL)
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from marsdash import Dashboard, DashboardConfig, MarsDashError, ProxyClient  # noqa: E402
from marsdash.state import find_rover  # noqa: E402
from marsdash.view import templates  # noqa: E402


async def main() -> int:
    parser = argparse.ArgumentParser(
        description="Render the Mars rover dashboard markup for debugging / development.",
    )
    parser.add_argument("--rover", help="Open this rover's detail view after the list loads")
    parser.add_argument("--twice", action="store_true", help="Click the rover card twice concurrently")
    parser.add_argument("--dedupe", action="store_true", help="De-duplicate concurrent fetches")
    parser.add_argument("--output", "-o", help="Write markup to FILE instead of stdout")
    parser.add_argument("--base-url", help="Proxy base URL")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    overrides: dict[str, Any] = {}
    if args.base_url:
        overrides["base_url"] = args.base_url
    if args.dedupe:
        overrides["dedupe_requests"] = True

    try:
        config = DashboardConfig.from_env(**overrides)
    except MarsDashError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    async with ProxyClient(config) as client:
        dashboard = Dashboard(client)
        await dashboard.start()

        if args.rover:
            rover = find_rover(dashboard.store, args.rover)
            if rover is None:
                print(f"Rover {args.rover!r} not in the list", file=sys.stderr)
                return 1
            clicks = 2 if args.twice else 1
            await asyncio.gather(*(dashboard.root.click(templates.card_id(rover)) for _ in range(clicks)))

    markup = dashboard.root.inner_html
    if args.output:
        Path(args.output).write_text(markup + "\n", encoding="utf-8")
    else:
        print(markup)

    return 1 if dashboard.store.loading_error else 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
