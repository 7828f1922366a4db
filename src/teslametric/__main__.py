"""Command line entry point: ``python -m teslametric``."""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import logging
import signal
import sys

from dotenv import find_dotenv, load_dotenv

from teslametric.config import TeslaMetricConfig
from teslametric.exceptions import TeslaMetricConfigError, TeslaMetricError
from teslametric.scheduler import TeslaMetricService

_logger = logging.getLogger("teslametric")


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="teslametric",
        description="Push Tesla charge data to a LaMetric Time indicator app on a schedule.",
    )
    parser.add_argument("--once", action="store_true", help="run a single update and exit")
    parser.add_argument("--env-file", default=None, help="path of a .env file (default: search upwards from cwd)")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: INFO)",
    )
    return parser.parse_args(argv)


async def _serve(service: TeslaMetricService) -> None:
    stop = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        with contextlib.suppress(NotImplementedError):
            loop.add_signal_handler(sig, stop.set)
    await service.serve(stop)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    load_dotenv(args.env_file or find_dotenv(usecwd=True))

    try:
        config = TeslaMetricConfig.from_env()
    except TeslaMetricConfigError as exc:
        _logger.error("Configuration error: %s", exc)
        return 2

    service = TeslaMetricService(config)
    if args.once:
        try:
            outcome = asyncio.run(service.run_once())
        except TeslaMetricError as exc:
            _logger.error("Run failed: %s", exc)
            return 1
        _logger.info("Run finished: %s", outcome.value)
        return 0

    asyncio.run(_serve(service))
    return 0


if __name__ == "__main__":
    sys.exit(main())
