from __future__ import annotations

import logging
import queue
import threading
from dataclasses import dataclass
from typing import Sequence

from sitewatch.checks.http_check import check

logger = logging.getLogger(__name__)


class WorkerError(RuntimeError):
    pass


@dataclass(frozen=True)
class WorkerDone:
    """Posted by a worker as its last message, after all of its records."""

    worker: int


def worker_indices(worker: int, num_workers: int, length: int) -> range:
    """Indices handled by ``worker``: every j in [0, length) with j % num_workers == worker."""
    if num_workers < 1:
        raise ValueError(f"num_workers must be >= 1, got {num_workers}")
    if not 0 <= worker < num_workers:
        raise ValueError(f"worker {worker} out of range for {num_workers} workers")
    return range(worker, length, num_workers)


def partition(urls: Sequence[str], num_workers: int) -> list[list[str]]:
    if num_workers < 1:
        raise ValueError(f"num_workers must be >= 1, got {num_workers}")
    return [
        [urls[j] for j in worker_indices(i, num_workers, len(urls))]
        for i in range(num_workers)
    ]


class Worker(threading.Thread):
    def __init__(
        self,
        index: int,
        urls: Sequence[str],
        num_workers: int,
        timeout_s: float,
        max_retries: int,
        results: queue.Queue,
        connect_timeout_s: float | None = None,
    ) -> None:
        super().__init__(name=f"sitewatch-worker-{index}", daemon=True)
        self.index = index
        self.urls = urls
        self.num_workers = num_workers
        self.timeout_s = timeout_s
        self.max_retries = max_retries
        self.results = results
        self.connect_timeout_s = connect_timeout_s
        self.error: BaseException | None = None

    def run(self) -> None:
        indices = worker_indices(self.index, self.num_workers, len(self.urls))
        logger.debug("worker %d assigned %d endpoint(s)", self.index, len(indices))
        try:
            for j in indices:
                self.results.put(
                    check(
                        self.urls[j],
                        timeout_s=self.timeout_s,
                        max_retries=self.max_retries,
                        connect_timeout_s=self.connect_timeout_s,
                    )
                )
        except Exception as e:
            # check() turns network errors into records; anything else is a bug.
            logger.exception("worker %d crashed", self.index)
            self.error = e
        finally:
            self.results.put(WorkerDone(self.index))


def dispatch(
    urls: Sequence[str],
    num_workers: int,
    timeout_s: float,
    max_retries: int,
    results: queue.Queue,
    connect_timeout_s: float | None = None,
) -> list[Worker]:
    """
    Start one worker per residue class of endpoint indices.

    Records are put on ``results`` as each check completes, followed by one
    WorkerDone per worker. Call join_workers() once they have been drained.
    """
    if num_workers < 1:
        raise ValueError(f"num_workers must be >= 1, got {num_workers}")
    urls = tuple(urls)

    workers = [
        Worker(
            i,
            urls,
            num_workers,
            timeout_s=timeout_s,
            max_retries=max_retries,
            results=results,
            connect_timeout_s=connect_timeout_s,
        )
        for i in range(num_workers)
    ]
    for w in workers:
        w.start()
    return workers


def join_workers(workers: Sequence[Worker]) -> None:
    for w in workers:
        w.join()
    failed = [w for w in workers if w.error is not None]
    if failed:
        first = failed[0]
        raise WorkerError(
            f"{len(failed)} worker(s) failed; worker {first.index}: {first.error!r}"
        ) from first.error
