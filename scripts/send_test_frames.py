#!/usr/bin/env python3
"""Push a fixed two-frame payload to the LaMetric indicator app.

Checks the LaMetric side of the setup (app id, access token, network)
without waking the car. Only ``LAMETRIC_AUTH_TOKEN`` and
``LAMETRIC_APP_ID`` need real values; the Tesla variables may be dummies.

Usage::

    python scripts/send_test_frames.py --text Hello --text Again
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from dotenv import find_dotenv, load_dotenv  # noqa: E402

from teslametric import (  # noqa: E402
    DisplayFrame,
    DisplayPayload,
    DisplayPublisher,
    TeslaClient,
    TeslaMetricConfig,
    TeslaMetricConfigError,
)
from teslametric._constants import ICON_CHARGING_ANIMATION  # noqa: E402


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--text", action="append", help="frame text (repeatable, default: Hello, Again)")
    parser.add_argument("--icon", default=ICON_CHARGING_ANIMATION, help="icon id for every frame")
    return parser.parse_args()


async def _run(args: argparse.Namespace) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    try:
        config = TeslaMetricConfig.from_env()
    except TeslaMetricConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    texts = args.text or ["Hello", "Again"]
    payload = DisplayPayload(frames=tuple(DisplayFrame(text=text, icon=args.icon) for text in texts))

    async with TeslaClient(config) as client:
        publisher = DisplayPublisher(config, client.transport)
        publisher.publish(payload)
        await publisher.drain()
    return 0


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    return asyncio.run(_run(_parse_args()))


if __name__ == "__main__":
    raise SystemExit(main())
