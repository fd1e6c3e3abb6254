"""Command-line live dashboard.

Reads ``ANTARES_*`` environment variables (see :class:`AntaresConfig`),
polls the device and redraws the terminal on every update.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from pyparkir import __version__
from pyparkir.config import AntaresConfig
from pyparkir.exceptions import ParkirConfigError
from pyparkir.models.status import DashboardState
from pyparkir.monitor import ParkingMonitor
from pyparkir.render import render_dashboard

_logger = logging.getLogger(__name__)

_CLEAR_SCREEN = "\x1b[2J\x1b[H"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyparkir",
        description="Live parking occupancy dashboard for an Antares IoT counter.",
    )
    parser.add_argument("--once", action="store_true", help="Fetch a single time, print and exit")
    parser.add_argument("--interval", type=float, default=None, help="Seconds between fetches (default 3)")
    parser.add_argument("--baseline-file", default=None, help="JSON file keeping the daily baseline")
    parser.add_argument("--no-clear", action="store_true", help="Do not clear the screen between frames")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _config_from_args(args: argparse.Namespace) -> AntaresConfig:
    overrides: dict[str, object] = {}
    if args.interval is not None:
        overrides["poll_interval"] = args.interval
    if args.baseline_file is not None:
        overrides["baseline_path"] = args.baseline_file
    return AntaresConfig.from_env(**overrides)


async def _run(config: AntaresConfig, *, once: bool, clear: bool) -> int:
    def _draw(state: DashboardState) -> None:
        # Skip the transient "loading" frame when only printing once.
        if once and state.loading:
            return
        prefix = _CLEAR_SCREEN if clear and not once else ""
        print(prefix + render_dashboard(state), flush=True)

    async with ParkingMonitor(config, on_update=_draw) as monitor:
        if once:
            state = await monitor.refresh()
            return 1 if state.error else 0
        await monitor.run_forever()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _config_from_args(args)
    except ParkirConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        return asyncio.run(_run(config, once=args.once, clear=not args.no_clear))
    except KeyboardInterrupt:
        _logger.debug("Interrupted, stopping")
        return 0


if __name__ == "__main__":
    sys.exit(main())
