from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import List

from .errors import GitError, ToolMissingError


def run(cmd: List[str], cwd: str | Path | None = None, quiet: bool = False) -> str:
    """Run a git query and return its stripped stdout."""
    proc = subprocess.run(cmd, cwd=cwd, text=True, capture_output=True)
    if proc.returncode == 0:
        return proc.stdout.strip()
    if not quiet:
        if proc.stderr:
            print("   🔻 stderr:")
            print(proc.stderr.strip())
        print(f"   ❌ Command failed with exit code {proc.returncode}")
    raise GitError(f"Error: `{' '.join(cmd)}` failed with exit code {proc.returncode}", proc.returncode)


def check_git_available() -> None:
    if shutil.which("git") is None:
        raise ToolMissingError("git is missing. Please install it via your package manager.")


def get_branch_name(cwd: str | Path | None = None) -> str:
    return run(["git", "rev-parse", "--abbrev-ref", "HEAD"], cwd=cwd)


def get_repo_name(cwd: str | Path | None = None) -> str:
    return Path(run(["git", "rev-parse", "--show-toplevel"], cwd=cwd)).name


def get_github_user(cwd: str | Path | None = None) -> str:
    """``git config github.user``, or an empty string when it is not set."""
    try:
        return run(["git", "config", "github.user"], cwd=cwd, quiet=True)
    except GitError:
        return ""


def default_head(github_user: str, branch_name: str) -> str:
    if not github_user:
        return branch_name
    return f"{github_user}:{branch_name}"
