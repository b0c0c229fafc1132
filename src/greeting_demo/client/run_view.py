"""Terminal front end for the greeting view: one run is one trigger."""
from __future__ import annotations
import argparse
import asyncio
import logging
import sys

from greeting_demo.client.view import GreetingView
from greeting_demo.common.logging_setup import setup_logging

LOGGER = logging.getLogger("greeting.client.cli")

async def run_view(url: str, timeout: float) -> GreetingView:
    view = GreetingView(url, timeout=timeout)
    await view.submit()
    return view

def main(argv: list[str] | None = None) -> int:
    setup_logging(logging.WARNING)
    ap = argparse.ArgumentParser(description="Fetch five greetings from the proxy")
    ap.add_argument("--url", default="http://127.0.0.1:3000", help="Proxy base URL")
    ap.add_argument("--timeout", type=float, default=30.0)
    args = ap.parse_args(argv)

    view = asyncio.run(run_view(args.url, args.timeout))
    print(view.render())
    if not view.last_ok:
        LOGGER.warning("No greetings received from %s", args.url)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
