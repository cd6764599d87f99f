from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from sitewatch.config import DEFAULT_URLS, settings
from sitewatch.models import MonitorConfig, Registry

REGISTRY_PATH = Path(__file__).resolve().parents[1] / "endpoints.yml"


class ConfigError(ValueError):
    pass


def load_registry(path: Path = REGISTRY_PATH) -> Registry:
    if not path.exists():
        raise FileNotFoundError(f"Missing endpoints file at {path}")

    data = yaml.safe_load(path.read_text()) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")
    reg = Registry.model_validate(data)

    if reg.endpoints is not None:
        if not reg.endpoints:
            raise ConfigError(f"{path}: endpoints list is empty")
        seen = set()
        for url in reg.endpoints:
            url = url.strip()
            if not url:
                raise ConfigError(f"{path}: blank endpoint entry")
            if url in seen:
                raise ConfigError(f"Duplicate endpoint: {url}")
            seen.add(url)

    return reg


def resolve_registry(path: str | Path | None = None) -> Registry:
    """
    Find the endpoints file to use.

    An explicit path (argument or SITEWATCH_ENDPOINTS_PATH) must exist. The
    default path next to the package is optional; without it the built-in
    endpoint list is used.
    """
    if path is None:
        path = settings.SITEWATCH_ENDPOINTS_PATH
    if path is not None:
        return load_registry(Path(path))
    if REGISTRY_PATH.exists():
        return load_registry(REGISTRY_PATH)
    return Registry()


def build_config(reg: Registry, **overrides: Any) -> MonitorConfig:
    """
    Merge the configuration layers into one validated MonitorConfig.

    Precedence: overrides (CLI) > registry defaults > environment settings.
    Overrides set to None are ignored.
    """
    d = reg.defaults
    env = {
        "workers": settings.SITEWATCH_WORKERS,
        "timeout_s": settings.SITEWATCH_TIMEOUT_S,
        "connect_timeout_s": settings.SITEWATCH_CONNECT_TIMEOUT_S,
        "retries": settings.SITEWATCH_RETRIES,
        "interval_s": settings.SITEWATCH_INTERVAL_S,
    }

    values: dict[str, Any] = {}
    for key, env_value in env.items():
        value = overrides.get(key)
        if value is None:
            value = getattr(d, key)
        if value is None:
            value = env_value
        values[key] = value

    urls = overrides.get("urls") or reg.endpoints or DEFAULT_URLS
    return MonitorConfig(urls=tuple(urls), **values)
