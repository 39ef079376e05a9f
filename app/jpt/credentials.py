from __future__ import annotations

import getpass
from abc import ABC, abstractmethod
from typing import Tuple

from .config import Settings
from .errors import AuthenticationError


class CredentialProvider(ABC):
    """Supplies a Jira username and password when a new session is needed."""

    @abstractmethod
    def get_credentials(self) -> Tuple[str, str]:
        ...


class InteractiveCredentialProvider(CredentialProvider):
    def __init__(self, input_func=input, getpass_func=getpass.getpass):
        self._input = input_func
        self._getpass = getpass_func

    def get_credentials(self) -> Tuple[str, str]:
        try:
            username = self._input("Username: ").strip()
            if not username:
                raise AuthenticationError("Jira username is required")
            password = self._getpass(f"Password for {username}: ")
        except (KeyboardInterrupt, EOFError):
            raise AuthenticationError("Jira login cancelled")
        return username, password


class EnvironmentCredentialProvider(CredentialProvider):
    def __init__(self, username: str, password: str):
        self._username = username
        self._password = password

    def get_credentials(self) -> Tuple[str, str]:
        print(f"   🔐 Using Jira credentials from environment for {self._username}")
        return self._username, self._password


def get_credential_provider(settings: Settings) -> CredentialProvider:
    if settings.jira_username and settings.jira_password:
        return EnvironmentCredentialProvider(settings.jira_username, settings.jira_password)
    return InteractiveCredentialProvider()
