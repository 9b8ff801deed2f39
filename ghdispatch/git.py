"""
Git helpers for ghdispatch.

Resolves a local checkout's upstream remote into a GitHub owner/repo pair by
asking the ``git`` binary.
"""

import os
import re
import subprocess
from pathlib import Path

from ghdispatch.exceptions import (
    NoRemoteError,
    NotAGitRepositoryError,
    NotGitHubRemoteError,
    NoUpstreamError,
)
from ghdispatch.logging import get_logger
from ghdispatch.types.repos import RepositoryDescription

logger = get_logger("git")

# host must be github.com: after scheme:// and optional user@, or at the
# start of an scp-like address
_GITHUB_REMOTE = re.compile(
    r"^(?:[a-z][a-z0-9+.-]*://(?:[^@/]+@)?|(?:[^@/:]+@)?)"
    r"github\.com[:/](.+?)(?:\.git)?/?$",
    re.IGNORECASE,
)


class GitCommandError(Exception):
    """A git command exited non-zero or could not be started."""

    def __init__(self, args: list[str], stderr: str) -> None:
        self.args_list = args
        self.stderr = stderr
        super().__init__(f"{' '.join(args)}: {stderr}")


def _run_git(args: list[str], cwd: Path) -> str:
    """Run ``git <args>`` in cwd and return its stripped stdout."""
    cmd = ["git", *args]
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
        )
    except OSError as e:
        # git missing, or cwd does not exist
        raise GitCommandError(cmd, str(e)) from e

    if result.returncode != 0:
        raise GitCommandError(cmd, result.stderr.strip())

    return result.stdout.strip()


def parse_github_remote(url: str) -> RepositoryDescription:
    """
    Extract the owner/repo identity from a GitHub remote URL.

    Accepts scp-like (``git@github.com:owner/repo.git``), ssh and https
    forms. A trailing ``.git`` is stripped.

    Raises:
        NotGitHubRemoteError: If the URL is not a GitHub remote
    """
    match = _GITHUB_REMOTE.search(url.strip())
    repo_id = match.group(1) if match else ""

    parts = repo_id.split("/")
    owner = parts[0] if parts else ""
    repo = parts[1] if len(parts) > 1 else ""
    if not owner or not repo:
        raise NotGitHubRemoteError(".", f"unrecognized remote URL {url!r}")

    return RepositoryDescription(owner=owner, repo=repo, repo_id=f"{owner}/{repo}")


def resolve_github_project(directory: str | os.PathLike | None = None) -> RepositoryDescription:
    """
    Given a directory, resolve the GitHub repository its current branch tracks.

    Args:
        directory: Path inside a git work tree (default: current directory)

    Returns:
        RepositoryDescription for the upstream remote

    Raises:
        NotAGitRepositoryError: If the directory is not a git work tree
        NoUpstreamError: If HEAD is detached or its branch has no upstream
        NoRemoteError: If the upstream's remote does not exist
        NotGitHubRemoteError: If the remote is not on github.com
    """
    cwd = Path(directory) if directory is not None else Path.cwd()

    try:
        inside = _run_git(["rev-parse", "--is-inside-work-tree"], cwd)
    except GitCommandError as e:
        raise NotAGitRepositoryError(cwd, e.stderr) from e
    if inside != "true":
        raise NotAGitRepositoryError(cwd, "not inside a work tree")

    # works on an unborn branch; fails only on a detached HEAD
    try:
        branch = _run_git(["symbolic-ref", "--short", "HEAD"], cwd)
    except GitCommandError as e:
        raise NoUpstreamError(cwd, e.stderr or "HEAD is detached") from e

    try:
        upstream = _run_git(["rev-parse", "--abbrev-ref", f"{branch}@{{upstream}}"], cwd)
    except GitCommandError as e:
        raise NoUpstreamError(cwd, e.stderr) from e

    remote = upstream.split("/", 1)[0]
    try:
        url = _run_git(["remote", "get-url", remote], cwd)
    except GitCommandError as e:
        raise NoRemoteError(cwd, e.stderr) from e

    logger.debug("Branch %s tracks %s (%s)", branch, upstream, url)

    try:
        return parse_github_remote(url)
    except NotGitHubRemoteError as e:
        raise NotGitHubRemoteError(cwd, e.detail) from e
