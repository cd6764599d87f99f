import io
import json
import unittest
from datetime import datetime, timezone

from sitewatch.checks.results import Failure, StatusRecord, Success
from sitewatch.formatting import format_record
from sitewatch.sinks import StdoutSink

OBSERVED = datetime(2026, 10, 18, 9, 30, 0, 500000, tzinfo=timezone.utc)


class FormattingTests(unittest.TestCase):
    def test_success_line(self) -> None:
        rec = StatusRecord("https://a.test", Success(404), 87.6, OBSERVED)
        self.assertEqual(
            format_record(rec),
            "2026-10-18T09:30:00+00:00 https://a.test UP   HTTP 404 (88 ms)",
        )

    def test_failure_line(self) -> None:
        rec = StatusRecord("https://b.test", Failure("timed out"), 15000.0, OBSERVED)
        self.assertEqual(
            format_record(rec),
            "2026-10-18T09:30:00+00:00 https://b.test DOWN timed out (15000 ms)",
        )


class StdoutSinkTests(unittest.TestCase):
    def test_json_lines(self) -> None:
        out = io.StringIO()
        sink = StdoutSink("json", stream=out)
        sink(StatusRecord("https://a.test", Success(200), 10.0, OBSERVED))
        sink(StatusRecord("https://b.test", Failure("refused"), 20.0, OBSERVED))

        lines = out.getvalue().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertEqual(json.loads(lines[0])["outcome"], {"status": "success", "status_code": 200})
        self.assertEqual(StatusRecord.from_json(lines[1]).outcome, Failure("refused"))

    def test_text_lines(self) -> None:
        out = io.StringIO()
        StdoutSink("text", stream=out)(StatusRecord("https://a.test", Success(200), 10.0, OBSERVED))
        self.assertIn("https://a.test UP   HTTP 200", out.getvalue())

    def test_unknown_format(self) -> None:
        with self.assertRaises(ValueError):
            StdoutSink("xml")


if __name__ == "__main__":
    unittest.main()
