from __future__ import annotations

from sitewatch.checks.results import StatusRecord, Success


def format_record(record: StatusRecord) -> str:
    if isinstance(record.outcome, Success):
        status = f"UP   HTTP {record.outcome.status_code}"
    else:
        status = f"DOWN {record.outcome.error}"
    ts = record.observed_at.isoformat(timespec="seconds")
    return f"{ts} {record.url} {status} ({record.elapsed_ms:.0f} ms)"
