from __future__ import annotations

import requests
from jira import JIRA, JIRAError

from .config import Settings
from .errors import JiraIssueError
from .models import JiraIssue
from .session import SessionStore

ISSUE_FIELDS = "summary,issuetype"


def get_jira_client(settings: Settings, store: SessionStore) -> JIRA:
    print("🔗 Connecting to Jira...")
    print(f"   Server: {settings.jira_url}")
    print(f"   Session: {store.path}")
    options = {"cookies": store.as_dict()}
    return JIRA(server=settings.jira_url, options=options, get_server_info=False, max_retries=0)


def fetch_issue(jira: JIRA, branch_name: str) -> JiraIssue:
    """Fetch the issue whose key is the branch name."""
    print(f"📋 Fetching Jira issue: {branch_name}")
    try:
        issue = jira.issue(branch_name, fields=ISSUE_FIELDS)
    except JIRAError as e:
        detail = e.text or f"HTTP {e.status_code}"
        raise JiraIssueError(f"Error: could not fetch Jira issue {branch_name}: {detail}")
    except requests.RequestException as e:
        raise JiraIssueError(f"Error: could not reach Jira for issue {branch_name}: {e}")
    except ValueError as e:
        raise JiraIssueError(f"Error: unreadable Jira response for issue {branch_name}: {e}")
    raw = getattr(issue, "raw", None) or {}
    if not raw.get("key"):
        raise JiraIssueError(f"Error: Jira returned no issue for branch {branch_name}")
    result = JiraIssue.from_json(raw)
    print(f"   ✅ Found issue: {result.summary}")
    if result.issue_type:
        print(f"   🏷️ Type: {result.issue_type}")
    return result
