from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Success:
    status_code: int


@dataclass(frozen=True)
class Failure:
    error: str


Outcome = Success | Failure


@dataclass(frozen=True)
class StatusRecord:
    url: str
    outcome: Outcome
    elapsed_ms: float
    observed_at: datetime

    @property
    def ok(self) -> bool:
        return isinstance(self.outcome, Success)

    def to_dict(self) -> dict[str, Any]:
        if isinstance(self.outcome, Success):
            outcome = {"status": "success", "status_code": self.outcome.status_code}
        else:
            outcome = {"status": "failure", "error": self.outcome.error}
        return {
            "url": self.url,
            "outcome": outcome,
            "elapsed_ms": self.elapsed_ms,
            "observed_at": self.observed_at.isoformat(),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StatusRecord:
        raw = data["outcome"]
        if raw["status"] == "success":
            outcome: Outcome = Success(status_code=int(raw["status_code"]))
        elif raw["status"] == "failure":
            outcome = Failure(error=str(raw["error"]))
        else:
            raise ValueError(f"Unknown outcome status: {raw['status']!r}")
        return cls(
            url=data["url"],
            outcome=outcome,
            elapsed_ms=float(data["elapsed_ms"]),
            observed_at=datetime.fromisoformat(data["observed_at"]),
        )

    @classmethod
    def from_json(cls, raw: str) -> StatusRecord:
        return cls.from_dict(json.loads(raw))
