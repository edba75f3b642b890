"""Configuration helpers for the IGDB client."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .urls import DEFAULT_ROOT_URL, normalize_root_url

DEFAULT_AUTH_HEADER = "user-key"


@dataclass(slots=True)
class ClientConfig:
    api_key: str = ""
    root_url: str = DEFAULT_ROOT_URL
    auth_header: str = DEFAULT_AUTH_HEADER
    timeout_seconds: float | None = None
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "ClientConfig":
        api_key = _trim_or_none(os.getenv("IGDB_API_KEY")) or ""
        root_url = normalize_root_url(os.getenv("IGDB_ROOT_URL"))
        auth_header = _trim_or_default(os.getenv("IGDB_AUTH_HEADER"), DEFAULT_AUTH_HEADER)
        timeout_ms = _parse_positive_int(os.getenv("IGDB_TIMEOUT_MS"))
        timeout_seconds = (timeout_ms / 1000.0) if timeout_ms else None

        return cls(
            api_key=api_key,
            root_url=root_url,
            auth_header=auth_header,
            timeout_seconds=timeout_seconds,
        )

    @classmethod
    def from_profile(
        cls,
        profile: str | None = None,
        *,
        config_path: str | Path | None = None,
    ) -> "ClientConfig":
        payload = load_config_file(config_path=config_path)
        profiles = payload.get("profiles")
        current_profile = payload.get("currentProfile")

        selected_name = (profile or current_profile or "default").strip() or "default"
        profile_entry: dict[str, Any] = {}
        if isinstance(profiles, dict) and isinstance(profiles.get(selected_name), dict):
            profile_entry = dict(profiles[selected_name])
        elif isinstance(profiles, dict) and isinstance(profiles.get("default"), dict):
            profile_entry = dict(profiles["default"])

        api_key = _trim_or_default(profile_entry.get("apiKey"), "")
        root_url = normalize_root_url(_trim_or_none(profile_entry.get("rootUrl")))
        auth_header = _trim_or_default(profile_entry.get("authHeader"), DEFAULT_AUTH_HEADER)
        timeout_ms = _parse_positive_int(profile_entry.get("timeoutMs"))
        timeout_seconds = (timeout_ms / 1000.0) if timeout_ms else None

        headers: dict[str, str] = {}
        raw_headers = profile_entry.get("headers")
        if isinstance(raw_headers, dict):
            for key, value in raw_headers.items():
                if isinstance(key, str) and isinstance(value, str) and key.strip() and value.strip():
                    headers[key] = value

        return cls(
            api_key=api_key,
            root_url=root_url,
            auth_header=auth_header,
            timeout_seconds=timeout_seconds,
            headers=headers,
        )


def default_config_path() -> Path:
    xdg = os.getenv("XDG_CONFIG_HOME")
    root = Path(xdg) if xdg else Path.home() / ".config"
    return root / "igdb-client" / "config.json"


def load_config_file(*, config_path: str | Path | None = None) -> dict[str, Any]:
    path = Path(config_path) if config_path else default_config_path()
    if not path.exists():
        return {"currentProfile": "default", "profiles": {}}

    try:
        with path.open("r", encoding="utf-8") as handle:
            parsed = json.load(handle)
    except (OSError, json.JSONDecodeError):
        return {"currentProfile": "default", "profiles": {}}

    if not isinstance(parsed, dict):
        return {"currentProfile": "default", "profiles": {}}
    return parsed


def _trim_or_none(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    return trimmed if trimmed else None


def _trim_or_default(value: Any, fallback: str) -> str:
    if not isinstance(value, str):
        return fallback
    trimmed = value.strip()
    return trimmed if trimmed else fallback


def _parse_positive_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str):
        try:
            parsed = int(value)
        except ValueError:
            return None
        return parsed if parsed > 0 else None
    return None
