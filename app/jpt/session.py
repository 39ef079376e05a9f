from __future__ import annotations

from http.cookiejar import MozillaCookieJar
from pathlib import Path
from typing import Dict, Iterable

import requests

from .config import Settings
from .credentials import CredentialProvider
from .errors import AuthenticationError


class SessionStore:
    """Jira session cookies persisted in a Netscape cookie file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> MozillaCookieJar:
        jar = MozillaCookieJar(str(self.path))
        if self.exists():
            # JSESSIONID and friends are session cookies; keep them anyway
            jar.load(ignore_discard=True, ignore_expires=True)
        return jar

    def save(self, cookies: Iterable) -> int:
        jar = MozillaCookieJar(str(self.path))
        count = 0
        for cookie in cookies:
            jar.set_cookie(cookie)
            count += 1
        self.path.parent.mkdir(parents=True, exist_ok=True)
        jar.save(ignore_discard=True, ignore_expires=True)
        return count

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)

    def as_dict(self) -> Dict[str, str]:
        return {cookie.name: cookie.value for cookie in self.load()}


def check_session(store: SessionStore, settings: Settings) -> str | None:
    """Return the Jira error message for the stored session, ``None`` if valid."""
    try:
        resp = requests.get(settings.session_url, cookies=store.load(), timeout=settings.http_timeout)
    except requests.RequestException as e:
        raise AuthenticationError(f"Could not reach Jira at {settings.jira_url}: {e}")
    try:
        data = resp.json()
    except ValueError:
        return f"Unexpected response from Jira session check (HTTP {resp.status_code})"
    error_messages = data.get("errorMessages") if isinstance(data, dict) else None
    if error_messages and error_messages[0] is not None:
        return str(error_messages[0])
    return None


def login(store: SessionStore, provider: CredentialProvider, settings: Settings) -> None:
    print("Jira Credentials Required")
    username, password = provider.get_credentials()
    try:
        resp = requests.get(settings.session_url, auth=(username, password), timeout=settings.http_timeout)
    except requests.RequestException as e:
        raise AuthenticationError(f"Could not reach Jira at {settings.jira_url}: {e}")
    if resp.status_code in (401, 403):
        raise AuthenticationError(f"Jira login failed for {username} (HTTP {resp.status_code})")
    saved = store.save(resp.cookies)
    if not saved:
        raise AuthenticationError("Jira login did not return a session cookie")
    print(f"   ✅ Session saved to {store.path}")


def ensure_session(store: SessionStore, provider: CredentialProvider, settings: Settings) -> None:
    if not store.exists():
        login(store, provider, settings)
        return

    error_message = check_session(store, settings)
    if error_message is not None:
        print(error_message)
        print(" ")
        store.clear()
        login(store, provider, settings)
    else:
        print("Cookie is still valid")
        print("Proceeding with pull request submission")

