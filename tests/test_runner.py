import unittest
from datetime import datetime, timezone
from unittest.mock import Mock, patch

import requests

from sitewatch.checks.results import StatusRecord, Success
from sitewatch.dispatcher import WorkerError
from sitewatch.models import MonitorConfig
from sitewatch.runner import loop_forever, run_round


class StopLoop(Exception):
    pass


def fake_check(url, timeout_s, max_retries, connect_timeout_s=None):
    return StatusRecord(
        url=url,
        outcome=Success(200),
        elapsed_ms=1.0,
        observed_at=datetime.now(timezone.utc),
    )


class RunRoundTests(unittest.TestCase):
    def test_ten_endpoints_ten_workers_deliver_ten_records(self) -> None:
        cfg = MonitorConfig(urls=tuple(f"https://site{i}.test" for i in range(10)), workers=10)
        records = []
        with patch("sitewatch.dispatcher.check", side_effect=fake_check):
            delivered = run_round(cfg, records.append)

        self.assertEqual(delivered, 10)
        self.assertEqual(len(records), 10)
        self.assertEqual({r.url for r in records}, set(cfg.urls))

    def test_worker_failure_is_fatal(self) -> None:
        cfg = MonitorConfig(urls=("https://a.test",), workers=1)
        with patch("sitewatch.dispatcher.check", side_effect=RuntimeError("boom")), self.assertLogs(
            "sitewatch.dispatcher", level="ERROR"
        ):
            with self.assertRaises(WorkerError):
                run_round(cfg, lambda r: None)


class LoopForeverTests(unittest.TestCase):
    def test_rounds_never_overlap_and_sleep_full_interval(self) -> None:
        cfg = MonitorConfig(
            urls=("https://a.test", "https://b.test", "https://c.test"),
            workers=2,
            interval_s=60,
        )
        timeline = []

        def sleep(seconds):
            timeline.append(("sleep", seconds))
            if len([e for e in timeline if e[0] == "sleep"]) == 3:
                raise StopLoop

        with patch("sitewatch.dispatcher.check", side_effect=fake_check), patch(
            "sitewatch.runner.time.sleep", side_effect=sleep
        ):
            with self.assertRaises(StopLoop):
                loop_forever(cfg, lambda r: timeline.append(("record", r.url)))

        # Three rounds, each fully delivered before its sleep.
        self.assertEqual(len(timeline), 12)
        for round_no in range(3):
            chunk = timeline[round_no * 4 : round_no * 4 + 4]
            self.assertEqual([e[0] for e in chunk], ["record"] * 3 + ["sleep"])
            self.assertEqual(chunk[-1], ("sleep", 60))
            self.assertEqual(
                sorted(e[1] for e in chunk[:3]),
                ["https://a.test", "https://b.test", "https://c.test"],
            )

    def test_failing_endpoint_does_not_stop_the_loop(self) -> None:
        cfg = MonitorConfig(urls=("https://down.test", "https://up.test"), workers=2, retries=1, interval_s=5)
        records = []

        def get(url, timeout, **kwargs):
            if "down" in url:
                raise requests.ConnectionError("refused")
            return Mock(status_code=200)

        with patch("sitewatch.checks.http_check.requests.get", side_effect=get), patch(
            "sitewatch.runner.time.sleep", side_effect=[None, StopLoop]
        ):
            with self.assertRaises(StopLoop):
                loop_forever(cfg, records.append)

        self.assertEqual(len(records), 4)
        by_url = {}
        for r in records:
            by_url.setdefault(r.url, []).append(r.ok)
        self.assertEqual(by_url, {"https://down.test": [False, False], "https://up.test": [True, True]})


if __name__ == "__main__":
    unittest.main()
