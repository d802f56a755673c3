"""Process configuration, read once from the environment at startup."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from github_dev_intel.errors import ConfigError

AGENT_NAME = "github-dev-intel"
AGENT_VERSION = "1.0.0"

GITHUB_API_URL = "https://api.github.com"
USER_AGENT = "github-dev-intel/1.0 (AI Agent)"

DEFAULT_PUBLIC_URL = "https://github-dev-intel-production.up.railway.app"
DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_ICON_PATH = "./icon.png"


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime settings for the server and the GitHub client."""

    github_token: str | None = None
    public_domain: str | None = None
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    icon_path: Path = Path(DEFAULT_ICON_PATH)
    github_api_url: str = GITHUB_API_URL
    user_agent: str = USER_AGENT

    @property
    def public_base_url(self) -> str:
        if self.public_domain:
            return f"https://{self.public_domain}"
        return DEFAULT_PUBLIC_URL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``environ`` (defaults to ``os.environ``).

        Blank values count as unset. Raises ConfigError when PORT is not
        an integer.
        """
        env = os.environ if environ is None else environ

        raw_port = env.get("PORT", "").strip()
        try:
            port = int(raw_port) if raw_port else DEFAULT_PORT
        except ValueError as exc:
            raise ConfigError(f"PORT must be an integer, got '{raw_port}'") from exc

        return cls(
            github_token=env.get("GITHUB_TOKEN", "").strip() or None,
            public_domain=env.get("RAILWAY_PUBLIC_DOMAIN", "").strip() or None,
            port=port,
            host=env.get("HOST", "").strip() or DEFAULT_HOST,
            icon_path=Path(env.get("ICON_PATH", "").strip() or DEFAULT_ICON_PATH),
        )
