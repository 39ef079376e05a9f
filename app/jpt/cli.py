from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Tuple

import requests

from .config import Settings
from .errors import JptError
from .git_utils import check_git_available, default_head, get_branch_name, get_github_user
from .models import PullRequestPatch
from .pipeline import run_pipeline

BRANCH_REQUIRED = "Branch is required: e.g. -b liferay:7.1.x"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jpt",
        description="jira-pr-tool: open a pull request for the Jira issue named by the current branch",
    )
    parser.add_argument("-a", dest="assignees", metavar="<assignees>",
                        help='Add assignees for pull request, e.g. "-a user1,user2"')
    parser.add_argument("-b", dest="branch", metavar="<branch>",
                        help='Set branch to send pull request to, e.g. "-b liferay:7.1.x"')
    parser.add_argument("-H", dest="head", metavar="<head>",
                        help='Set the name of the branch where your changes are implemented, e.g. "-H user1:LRAC-0"')
    parser.add_argument("-l", dest="labels", metavar="<labels>",
                        help='Set labels to add to pull request, e.g. "-l reviewRequired"')
    return parser


def parse_base(value: str | None) -> Optional[Tuple[str, str]]:
    """Split ``owner:branch``; ``None`` if either part is missing."""
    if not value or ":" not in value:
        return None
    owner, branch = value.split(":", 1)
    if not owner or not branch:
        return None
    return owner, branch


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    base = parse_base(args.branch)
    if base is None:
        print(BRANCH_REQUIRED)
        return 1
    base_user, base_branch = base

    try:
        check_git_available()
        settings = Settings.from_env()
        head = args.head or default_head(get_github_user(), get_branch_name())
        patch = PullRequestPatch.from_flags(args.assignees, args.labels)
        run_pipeline(settings, base_user, base_branch, head, patch)
    except JptError as e:
        print(e)
        return 1
    except requests.RequestException as e:
        print(f"Error: {e}")
        return 1
    return 0


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n⚠️  Process interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    run()
