from __future__ import annotations

import argparse
import logging
import sys

from sitewatch.config import settings
from sitewatch.registry import build_config, resolve_registry
from sitewatch.runner import loop_forever, run_round
from sitewatch.sinks import StdoutSink

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sitewatch",
        description="Periodically check a list of HTTP endpoints and print one status record per endpoint.",
    )
    p.add_argument("--endpoints", help="YAML endpoints file (default: endpoints.yml or built-in list)")
    p.add_argument("--workers", type=int, help="number of worker threads per round")
    p.add_argument("--timeout", dest="timeout_s", type=float, help="per-attempt timeout in seconds")
    p.add_argument("--connect-timeout", dest="connect_timeout_s", type=float, help="connect timeout in seconds")
    p.add_argument("--retries", type=int, help="retries after the first failed attempt")
    p.add_argument("--interval", dest="interval_s", type=float, help="seconds to sleep between rounds")
    p.add_argument(
        "--format",
        choices=("json", "text"),
        default=settings.SITEWATCH_OUTPUT_FORMAT,
        help="record output format",
    )
    p.add_argument("--once", action="store_true", help="run a single round and exit")
    return p


def log_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name!r}")
    return level


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        logging.basicConfig(
            level=log_level(settings.SITEWATCH_LOG_LEVEL),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
        reg = resolve_registry(args.endpoints)
        cfg = build_config(
            reg,
            workers=args.workers,
            timeout_s=args.timeout_s,
            connect_timeout_s=args.connect_timeout_s,
            retries=args.retries,
            interval_s=args.interval_s,
        )
        sink = StdoutSink(args.format)
    except (ValueError, FileNotFoundError) as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    logger.info(
        "Monitoring %d endpoint(s) with %d worker(s), timeout=%ss retries=%d interval=%ss",
        len(cfg.urls),
        cfg.workers,
        cfg.timeout_s,
        cfg.retries,
        cfg.interval_s,
    )
    if args.once:
        run_round(cfg, sink)
        return 0

    try:
        loop_forever(cfg, sink)
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting")
    return 0


if __name__ == "__main__":
    sys.exit(main())
