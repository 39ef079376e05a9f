from __future__ import annotations

from typing import Any


class JptError(Exception):
    """Base error; ``str(err)`` is what gets printed to the user."""


class ConfigurationError(JptError):
    pass


class ToolMissingError(JptError):
    pass


class GitError(JptError):
    def __init__(self, message: str, returncode: int):
        super().__init__(message)
        self.returncode = returncode


class AuthenticationError(JptError):
    pass


class JiraIssueError(JptError):
    pass


class ApiError(JptError):
    def __init__(self, message: str, status: int | None = None, data: Any = None):
        super().__init__(message)
        self.status = status
        self.data = data


def extract_error_message(data: Any) -> str | None:
    """Return ``"Error: ..."`` if an API response body reports an error.

    A response is an error when its top-level ``message`` is set. The first
    entry of ``errors`` carries the detailed reason and wins over the generic
    ``message`` when present.
    """
    if not isinstance(data, dict):
        return None
    message = data.get("message")
    if message is None:
        return None
    errors = data.get("errors")
    if isinstance(errors, list) and errors:
        first = errors[0]
        detailed = first.get("message") if isinstance(first, dict) else None
        if detailed is not None:
            return f"Error: {detailed}"
    return f"Error: {message}"
