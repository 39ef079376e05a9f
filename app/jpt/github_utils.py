from __future__ import annotations

import requests
from github import Github, GithubException

from .config import Settings
from .errors import ApiError, extract_error_message
from .models import CreatedPullRequest, JiraIssue, PullRequestDescriptor, PullRequestPatch


def get_github_client(settings: Settings) -> Github:
    return Github(settings.github_token)


def _api_error(e: GithubException) -> ApiError:
    message = extract_error_message(e.data) or f"Error: GitHub API returned HTTP {e.status}"
    return ApiError(message, status=e.status, data=e.data)


def build_pull_request(issue: JiraIssue, base_user: str, base_branch: str, head: str, browse_url: str) -> PullRequestDescriptor:
    return PullRequestDescriptor(
        title=f"{issue.key} {issue.summary}",
        body=f"Jira Issue: [{issue.key}]({browse_url}/{issue.key})",
        head=head,
        base=base_branch,
        base_owner=base_user,
    )


def create_pull_request(gh: Github, repo_name: str, descriptor: PullRequestDescriptor) -> CreatedPullRequest:
    repo_full_name = f"{descriptor.base_owner}/{repo_name}"
    print(f"🔄 Creating pull request...")
    print(f"   📁 Repository: {repo_full_name}")
    print(f"   🌿 Source branch: {descriptor.head}")
    print(f"   🌿 Target branch: {descriptor.base}")
    print(f"   🏷️ Title: {descriptor.title}")
    try:
        repo = gh.get_repo(repo_full_name, lazy=True)
        pr = repo.create_pull(**descriptor.to_payload())
    except GithubException as e:
        raise _api_error(e)
    except requests.RequestException as e:
        raise ApiError(f"Error: could not reach GitHub: {e}")
    return CreatedPullRequest(number=pr.number, title=pr.title, html_url=pr.html_url)


def patch_pull_request(gh: Github, base_user: str, repo_name: str, pr_id: int, patch: PullRequestPatch) -> None:
    """Set assignees and labels on an existing pull request (via its issue)."""
    repo_full_name = f"{base_user}/{repo_name}"
    print(f"🏷️ Updating pull request #{pr_id}...")
    try:
        repo = gh.get_repo(repo_full_name, lazy=True)
        issue = repo.get_issue(pr_id)
        issue.edit(**patch.to_payload())
    except GithubException as e:
        raise _api_error(e)
    except requests.RequestException as e:
        raise ApiError(f"Error: could not reach GitHub: {e}")
