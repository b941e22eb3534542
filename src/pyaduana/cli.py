"""Command-line rendering of the vehicle tax page.

Example::

    python -m pyaduana --brand Toyota --select '#0' --select '#2'
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from typing import Any

from pyaduana import __version__
from pyaduana._transport import Transport
from pyaduana.client import AduanaClient
from pyaduana.config import AduanaConfig
from pyaduana.exceptions import AduanaConfigError
from pyaduana.models.filters import VehicleFilters
from pyaduana.models.vehicle import Vehicle
from pyaduana.page import VehicleTaxPage, render_text

_logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyaduana",
        description="List vehicles and compute import taxes for the selected ones.",
    )
    parser.add_argument("--brand", default="", help="Brand substring filter")
    parser.add_argument("--model", default="", help="Model substring filter")
    parser.add_argument("--year", default="", help="Year filter")
    parser.add_argument(
        "--select",
        "-s",
        action="append",
        default=[],
        metavar="KEY",
        help="Select a row by key, or by position as '#N' (repeatable)",
    )
    parser.add_argument("--all", action="store_true", dest="select_all", help="Select every listed row")
    parser.add_argument("--base-url", help="Inventory service base URL (default: $ADUANA_BASE_URL)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("--currency", help="Local currency code (default: DOP)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_selection(tokens: Sequence[str], rows: Sequence[Vehicle]) -> list[str]:
    """Map ``--select`` tokens to row keys; ``#N`` picks the row at position N."""
    keys: list[str] = []
    for token in tokens:
        if token.startswith("#"):
            try:
                position = int(token[1:])
            except ValueError:
                _logger.warning("Ignoring selection %r: not a row position", token)
                continue
            if not 0 <= position < len(rows):
                _logger.warning("Ignoring selection %r: only %d rows listed", token, len(rows))
                continue
            keys.append(rows[position].key)
        else:
            keys.append(token)
    return keys


async def run(args: argparse.Namespace, client: AduanaClient) -> str:
    """Load the page for *args* and return its text rendering."""
    page = VehicleTaxPage(
        client,
        filters=VehicleFilters(brand=args.brand, model=args.model, year=args.year),
    )
    await page.load()
    if args.select_all:
        page.select_all()
    else:
        page.select(resolve_selection(args.select, page.rows))
    return render_text(page.view())


def _config_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if args.base_url:
        overrides["base_url"] = args.base_url
    if args.timeout is not None:
        overrides["request_timeout"] = args.timeout
    if args.currency:
        overrides["local_currency"] = args.currency
    return overrides


async def _main(args: argparse.Namespace, config: AduanaConfig, transport: Transport | None) -> str:
    async with AduanaClient(config, transport=transport) as client:
        return await run(args, client)


def main(argv: Sequence[str] | None = None, *, transport: Transport | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    try:
        config = AduanaConfig.from_env(**_config_overrides(args))
    except AduanaConfigError as exc:
        parser.error(str(exc))

    output = asyncio.run(_main(args, config, transport))
    sys.stdout.write(output)
    return 0
