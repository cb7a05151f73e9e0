#!/usr/bin/env python3
"""Print current bus positions from RTTI.

Reads configuration from ``RTTI_*`` environment variables; command-line
flags override them. With ``--interval`` the fetch repeats until
interrupted, the same way a map view polls.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyrtti import RttiClient, RttiConfig, RttiError  # noqa: E402


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--route", help="Only show buses on this route (e.g. 099)")
    parser.add_argument("--api-key", help="RTTI API key (default: RTTI_API_KEY)")
    parser.add_argument("--relay", help="Custom relay URL template tried first")
    parser.add_argument("--simulate", action="store_true", help="Serve the synthetic fleet")
    parser.add_argument(
        "--on-exhaustion",
        choices=("simulate", "raise"),
        help="What to do when every relay fails",
    )
    parser.add_argument("--interval", type=float, default=0.0, help="Poll every N seconds (0 = once)")
    parser.add_argument("--json", action="store_true", help="Emit JSON lines instead of a table")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _build_config(args: argparse.Namespace) -> RttiConfig:
    overrides: dict[str, object] = {}
    if args.api_key:
        overrides["api_key"] = args.api_key
    if args.relay:
        overrides["custom_relay"] = args.relay
    if args.simulate:
        overrides["simulation"] = True
    if args.on_exhaustion:
        overrides["exhaustion_policy"] = args.on_exhaustion
    return RttiConfig.from_env(**overrides)


async def _run(args: argparse.Namespace) -> int:
    async with RttiClient(_build_config(args)) as client:
        while True:
            try:
                buses = await client.get_buses(args.route)
            except RttiError as exc:
                print(f"error: {exc}", file=sys.stderr)
                return 1

            if args.json:
                for bus in buses:
                    print(json.dumps(bus.model_dump(mode="json")))
            else:
                print(f"{len(buses)} buses")
                for bus in buses:
                    heading = bus.direction.value if bus.direction else "-"
                    print(
                        f"  {bus.route_id:>6} {bus.vehicle_id:>12} {heading:<5} "
                        f"{bus.latitude:9.4f} {bus.longitude:10.4f} {bus.recorded_at} {bus.destination}"
                    )

            if args.interval <= 0:
                return 0
            await asyncio.sleep(args.interval)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return asyncio.run(_run(args))
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
