from __future__ import annotations

from .config import Settings
from .credentials import CredentialProvider, get_credential_provider
from .git_utils import get_branch_name, get_repo_name
from .github_utils import build_pull_request, create_pull_request, get_github_client, patch_pull_request
from .jira_client import fetch_issue, get_jira_client
from .models import CreatedPullRequest, PullRequestPatch, wrap_words_in_quotes
from .session import SessionStore, ensure_session


def run_pipeline(
    settings: Settings,
    base_user: str,
    base_branch: str,
    head: str,
    patch: PullRequestPatch,
    provider: CredentialProvider | None = None,
) -> CreatedPullRequest:
    print("📄 STEP 1: Checking Jira session")
    print("-" * 30)
    store = SessionStore(settings.cookie_file)
    ensure_session(store, provider or get_credential_provider(settings), settings)

    print("\n📄 STEP 2: Fetching Jira issue")
    print("-" * 30)
    jira = get_jira_client(settings, store)
    issue = fetch_issue(jira, get_branch_name())

    print("\n📄 STEP 3: Creating pull request")
    print("-" * 30)
    repo_name = get_repo_name()
    gh = get_github_client(settings)
    print(f"   🔐 GitHub token: {settings.masked_token}")
    descriptor = build_pull_request(issue, base_user, base_branch, head, settings.jira_browse_url)
    pr = create_pull_request(gh, repo_name, descriptor)

    print()
    print("Pull request successfully submitted")
    print(pr.title)
    print(pr.html_url)

    if patch.is_empty():
        print("\nNo assignees or labels to add")
        print("Done!")
        return pr

    print("\n📄 STEP 4: Adding assignees and labels")
    print("-" * 30)
    patch_pull_request(gh, base_user, repo_name, pr.number, patch)
    print("Done!")
    if patch.assignees:
        print(f"   👤 Assignees: {wrap_words_in_quotes(','.join(patch.assignees))}")
    if patch.labels:
        print(f"   🏷️ Labels: {wrap_words_in_quotes(','.join(patch.labels))}")
    return pr
