from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigurationError

DEFAULT_JIRA_URL = "https://issues.liferay.com"
DEFAULT_COOKIE_FILE = "~/.jpt/cookies.txt"


@dataclass(frozen=True)
class Settings:
    """Runtime configuration, read from the environment."""

    github_token: str
    jira_url: str = DEFAULT_JIRA_URL
    jira_browse_url: str = f"{DEFAULT_JIRA_URL}/browse"
    cookie_file: Path = Path(DEFAULT_COOKIE_FILE).expanduser()
    jira_username: str | None = None
    jira_password: str | None = None
    http_timeout: float = 30.0

    @property
    def session_url(self) -> str:
        return f"{self.jira_url}/rest/auth/1/session"

    @property
    def masked_token(self) -> str:
        if len(self.github_token) <= 8:
            return "****"
        return f"{self.github_token[:4]}...{self.github_token[-4:]}"

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        env = os.environ if environ is None else environ
        token = env.get("GITHUB_TOKEN")
        if not token:
            raise ConfigurationError("GITHUB_TOKEN env var missing.")
        jira_url = env.get("JIRA_URL", DEFAULT_JIRA_URL).rstrip("/")
        browse_url = env.get("JIRA_BROWSE_URL") or f"{jira_url}/browse"
        cookie_file = Path(env.get("JPT_COOKIE_FILE", DEFAULT_COOKIE_FILE)).expanduser()
        try:
            timeout = float(env.get("JPT_HTTP_TIMEOUT", "30"))
        except ValueError:
            raise ConfigurationError(f"JPT_HTTP_TIMEOUT must be a number, got {env['JPT_HTTP_TIMEOUT']!r}")
        return cls(
            github_token=token,
            jira_url=jira_url,
            jira_browse_url=browse_url.rstrip("/"),
            cookie_file=cookie_file,
            jira_username=env.get("JIRA_USERNAME") or None,
            jira_password=env.get("JIRA_PASSWORD") or None,
            http_timeout=timeout,
        )
