"""CLI entrypoints for running and probing the BeatCrest API."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from collections.abc import Sequence
from typing import TextIO

import httpx
import uvicorn

from beatcrest.config import get_settings
from storefront.client import BeatCrestClient
from storefront.exceptions import StorefrontError


async def _run_probe(
    base_url: str,
    http_client: httpx.AsyncClient | None = None,
    out: TextIO | None = None,
) -> int:
    """Call the health and test endpoints and print a JSON summary."""
    summary: dict[str, object] = {"base_url": base_url}
    async with BeatCrestClient(base_url=base_url, http_client=http_client) as client:
        try:
            health = await client.check_health()
            test = await client.test_connection()
        except StorefrontError as exc:
            summary.update({"ok": False, "error": getattr(exc, "detail", str(exc))})
            print(json.dumps(summary), file=out or sys.stdout)
            return 1

    summary.update({"ok": True, "health": health, "test": test})
    print(json.dumps(summary), file=out or sys.stdout)
    return 0


def _run_serve(host: str | None, port: int | None) -> int:
    """Serve the API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "beatcrest.main:app",
        host=host or settings.app.host,
        port=port or settings.app.port,
        log_level=settings.app.log_level.lower(),
    )
    return 0


def _build_parser() -> argparse.ArgumentParser:
    """Build command-line parser for supported operational commands."""
    parser = argparse.ArgumentParser(prog="python -m beatcrest.cli")
    subcommands = parser.add_subparsers(dest="command", required=True)

    serve_parser = subcommands.add_parser("serve")
    serve_parser.add_argument("--host", default=None, help="Override APP__HOST.")
    serve_parser.add_argument("--port", type=int, default=None, help="Override APP__PORT.")

    probe_parser = subcommands.add_parser("probe")
    probe_parser.add_argument(
        "--base-url",
        default="http://localhost:5000",
        help="BeatCrest API root to probe.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI command."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "serve":
        return _run_serve(host=args.host, port=args.port)
    if args.command == "probe":
        return asyncio.run(_run_probe(base_url=args.base_url))
    parser.error("Unsupported command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
