from __future__ import annotations

import sys
from typing import Literal, TextIO

from sitewatch.checks.results import StatusRecord
from sitewatch.formatting import format_record

OutputFormat = Literal["json", "text"]


class StdoutSink:
    """Writes one line per record to a text stream (stdout by default)."""

    def __init__(self, fmt: OutputFormat = "json", stream: TextIO | None = None) -> None:
        if fmt not in ("json", "text"):
            raise ValueError(f"Unknown output format: {fmt!r}")
        self.fmt = fmt
        self.stream = stream

    def __call__(self, record: StatusRecord) -> None:
        line = record.to_json() if self.fmt == "json" else format_record(record)
        print(line, file=self.stream or sys.stdout, flush=True)
