from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sitewatch.config import DEFAULT_URLS


class Defaults(BaseModel):
    workers: Optional[int] = Field(default=None, ge=1)
    timeout_s: Optional[float] = Field(default=None, gt=0)
    connect_timeout_s: Optional[float] = Field(default=None, gt=0)
    retries: Optional[int] = Field(default=None, ge=0)
    interval_s: Optional[float] = Field(default=None, ge=0)


class Registry(BaseModel):
    """Contents of an endpoints file."""

    defaults: Defaults = Defaults()
    endpoints: Optional[List[str]] = None


class MonitorConfig(BaseModel):
    """Fully resolved settings for the monitoring loop."""

    model_config = ConfigDict(frozen=True)

    urls: Tuple[str, ...] = DEFAULT_URLS
    workers: int = Field(default=8, ge=1)
    timeout_s: float = Field(default=5.0, gt=0)
    connect_timeout_s: Optional[float] = Field(default=None, gt=0)
    retries: int = Field(default=3, ge=0)
    interval_s: float = Field(default=60.0, ge=0)

    @field_validator("urls")
    @classmethod
    def _urls_not_blank(cls, urls: Tuple[str, ...]) -> Tuple[str, ...]:
        cleaned = tuple(u.strip() for u in urls)
        for i, u in enumerate(cleaned):
            if not u:
                raise ValueError(f"endpoint #{i} is empty")
        return cleaned
