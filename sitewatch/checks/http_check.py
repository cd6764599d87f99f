from __future__ import annotations

import time
from datetime import datetime, timezone

import requests

from sitewatch.checks.results import Failure, Outcome, StatusRecord, Success
from sitewatch.checks.retry import RetryPolicy

MAX_RETRIES_REACHED = "max retries reached"


def check(
    url: str,
    timeout_s: float,
    max_retries: int,
    connect_timeout_s: float | None = None,
) -> StatusRecord:
    """
    GET ``url`` until a response arrives or the retries run out.

    Any HTTP response counts as a successful check, 4xx/5xx included.
    Transport errors are retried immediately with no backoff. ``timeout_s``
    applies to each attempt; ``elapsed_ms`` and ``observed_at`` cover the
    whole call.
    """
    observed_at = datetime.now(timezone.utc)
    start = time.perf_counter()
    connect_timeout = timeout_s if connect_timeout_s is None else connect_timeout_s
    policy = RetryPolicy(max_retries)

    def record(outcome: Outcome) -> StatusRecord:
        elapsed_ms = (time.perf_counter() - start) * 1000
        return StatusRecord(
            url=url, outcome=outcome, elapsed_ms=elapsed_ms, observed_at=observed_at
        )

    while policy.can_attempt():
        try:
            # stream=True returns once headers arrive; the body is never read.
            r = requests.get(url, timeout=(connect_timeout, timeout_s), stream=True)
        except requests.RequestException as e:
            if policy.on_failure():
                continue
            return record(Failure(str(e)))
        status_code = r.status_code
        r.close()
        return record(Success(status_code))

    # Only reachable if the policy stops before a terminal failure is returned.
    return record(Failure(MAX_RETRIES_REACHED))
