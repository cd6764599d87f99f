from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RetryPolicy:
    """
    Attempt counter for one check.

    A check starts with ``attempts == 0``. Every failed attempt calls
    ``on_failure()``: while ``attempts < max_retries`` the counter moves on
    and the caller should try again, otherwise the policy is exhausted and
    the failure is terminal. Total attempts are therefore ``max_retries + 1``.
    """

    max_retries: int
    attempts: int = 0
    exhausted: bool = False

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")

    def can_attempt(self) -> bool:
        return not self.exhausted and self.attempts <= self.max_retries

    def on_failure(self) -> bool:
        """Record a failed attempt; return True when another attempt is allowed."""
        if self.attempts < self.max_retries:
            self.attempts += 1
            return True
        self.exhausted = True
        return False
