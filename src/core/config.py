"""Core configuration.

Responsibility:
- Centralize environment variables (pydantic-settings) away from the CLI.
- Let adapters (HTTP, webhook) read config consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from urllib.parse import urlsplit

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.exceptions import ConfigurationError


def ensure_http_url(url: str, *, setting: str = "url") -> str:
    """Return `url` unchanged, or raise `ConfigurationError` if it is not http(s)."""

    parts = urlsplit(url.strip())
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ConfigurationError(
            f"{setting} must be an http:// or https:// URL, got {url!r}",
            details={"setting": setting, "url": url},
        )
    return url


def get_user_config_dir() -> Path:
    """Per-user config directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "giveone"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "giveone"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "giveone"
    return Path.home() / ".config" / "giveone"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Write/update variables in the user's global .env."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# GiveOne user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Application settings.

    Sources, in order: process env (``GIVEONE_*``), the project ``.env``,
    then the per-user ``.env`` written by ``giveone doctor setup``.
    """

    model_config = SettingsConfigDict(
        env_prefix="GIVEONE_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    webhook_base_url: str = Field(
        default="https://example.app.n8n.cloud",
        min_length=8,
        description="Base URL of the workflow instance receiving webhooks.",
    )
    donation_webhook_path: str = Field(
        default="webhook/donation",
        min_length=1,
        description="Webhook path for donation submissions, relative to the base URL.",
    )
    donation_url: str | None = Field(
        default=None,
        description="Full donation endpoint URL. Overrides base URL + path when set.",
    )
    donation_event_webhook_path: str | None = Field(
        default=None,
        description="Workflow webhook path notified after a successful donation. Disabled when unset.",
    )

    api_key: str | None = Field(
        default=None,
        description="Optional webhook API key, sent in `api_key_header`.",
    )
    api_key_header: str = Field(
        default="X-API-Key",
        min_length=1,
        description="Header name used to send the API key.",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        le=300,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="giveone/0.1",
        min_length=1,
        description="User-Agent for outgoing requests.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value!r}")
        return level

    def webhook_url(self, path: str) -> str:
        """Join `webhook_base_url` with a webhook path."""

        return f"{self.webhook_base_url.rstrip('/')}/{path.lstrip('/')}"

    def resolved_donation_url(self) -> str:
        """Donation endpoint. Raises `ConfigurationError` when it is not http(s)."""

        if self.donation_url:
            return ensure_http_url(self.donation_url, setting="donation_url")
        return ensure_http_url(self.webhook_url(self.donation_webhook_path), setting="webhook_base_url")

    def auth_headers(self) -> dict[str, str]:
        """Headers carrying the API key, empty when no key is configured."""

        if not self.api_key:
            return {}
        return {self.api_key_header: self.api_key}
