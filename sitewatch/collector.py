from __future__ import annotations

import queue
from typing import Callable

from sitewatch.checks.results import StatusRecord
from sitewatch.dispatcher import WorkerDone

Sink = Callable[[StatusRecord], None]


def collect(results: queue.Queue, num_workers: int, sink: Sink) -> int:
    """
    Forward records to ``sink`` in arrival order until every worker is done.

    Returns the number of records delivered.
    """
    remaining = num_workers
    delivered = 0
    while remaining:
        item = results.get()
        if isinstance(item, WorkerDone):
            remaining -= 1
            continue
        sink(item)
        delivered += 1
    return delivered
