from __future__ import annotations

import logging
import queue
import time

from sitewatch.collector import Sink, collect
from sitewatch.dispatcher import dispatch, join_workers
from sitewatch.models import MonitorConfig

logger = logging.getLogger(__name__)


def run_round(cfg: MonitorConfig, sink: Sink) -> int:
    results: queue.Queue = queue.Queue()
    workers = dispatch(
        cfg.urls,
        cfg.workers,
        timeout_s=cfg.timeout_s,
        max_retries=cfg.retries,
        results=results,
        connect_timeout_s=cfg.connect_timeout_s,
    )
    delivered = collect(results, len(workers), sink)
    join_workers(workers)
    return delivered


def loop_forever(cfg: MonitorConfig, sink: Sink) -> None:
    """Run rounds back to back, sleeping the full interval after each one."""
    cycle = 0
    while True:
        cycle += 1
        logger.info("round %d: checking %d endpoint(s)", cycle, len(cfg.urls))
        start = time.perf_counter()
        delivered = run_round(cfg, sink)
        elapsed = time.perf_counter() - start
        logger.info(
            "round %d: %d record(s) in %.2fs, next round in %ss",
            cycle,
            delivered,
            elapsed,
            cfg.interval_s,
        )
        time.sleep(cfg.interval_s)
