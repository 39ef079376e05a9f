from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Dict, List, Optional


def split_words(words: str | None) -> List[str]:
    """Split a comma separated flag value, dropping blanks and duplicates."""
    if not words:
        return []
    seen = set()
    result: List[str] = []
    for word in words.split(","):
        word = word.strip()
        if word and word not in seen:
            seen.add(word)
            result.append(word)
    return result


def wrap_words_in_quotes(words: str | None) -> str:
    """``a,b,c`` -> ``"a","b","c"``; every word is kept and JSON-escaped."""
    if not words:
        return ""
    return ",".join(json.dumps(word) for word in words.split(","))


@dataclass(frozen=True)
class JiraIssue:
    key: str
    summary: str
    issue_type: Optional[str] = None

    @classmethod
    def from_json(cls, data: dict) -> "JiraIssue":
        fields = data.get("fields") or {}
        issue_type = (fields.get("issuetype") or {}).get("name")
        return cls(key=data["key"], summary=fields.get("summary") or "", issue_type=issue_type)


@dataclass(frozen=True)
class PullRequestDescriptor:
    title: str
    body: str
    head: str
    base: str
    base_owner: str

    def to_payload(self) -> Dict[str, str]:
        return {"title": self.title, "body": self.body, "head": self.head, "base": self.base}


@dataclass(frozen=True)
class PullRequestPatch:
    assignees: List[str] = field(default_factory=list)
    labels: List[str] = field(default_factory=list)

    @classmethod
    def from_flags(cls, assignees: str | None, labels: str | None) -> "PullRequestPatch":
        return cls(assignees=split_words(assignees), labels=split_words(labels))

    def is_empty(self) -> bool:
        return not self.assignees and not self.labels

    def to_payload(self) -> Dict[str, List[str]]:
        return {"assignees": list(self.assignees), "labels": list(self.labels)}


@dataclass(frozen=True)
class CreatedPullRequest:
    number: int
    title: str
    html_url: str
