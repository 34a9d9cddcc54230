#!/usr/bin/env python3
"""
Git repository helpers.

Wraps the git CLI for cloning with provider credentials and for committing
and pushing generated changes.
"""

import logging
import os
import shutil
import subprocess
from typing import Optional

from cloudops_utils.domain.errors import GitOperationError, MandatoryArgumentError
from cloudops_utils.domain.log_level import TRACE
from cloudops_utils.infrastructure.commands import run_cmd, run_output
from cloudops_utils.infrastructure.config import UtilityConfig

__version__ = "0.1.0"
__author__ = "John Ayers"

logger = logging.getLogger(__name__)


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "git_client",
        "description": "Git repository helpers",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


def _require(**arguments: Optional[str]) -> None:
    missing = [name for name, value in arguments.items() if not value]
    if missing:
        logger.critical("Mandatory arguments missing. Check usage via -h option.")
        raise MandatoryArgumentError(*missing)


def _redact(url: str) -> str:
    """Hide credentials embedded in an https URL."""
    scheme, sep, rest = url.partition("://")
    if sep and "@" in rest:
        return f"{scheme}://***@{rest.split('@', 1)[1]}"
    return url


def in_git_repo(cwd: Optional[str] = None) -> bool:
    """Check whether ``cwd`` is inside a git work tree."""
    try:
        return run_cmd(["git", "status"], cwd=cwd, check=False, quiet=True) == 0
    except FileNotFoundError:
        return False


def clone_git_repo(
    repo_provider: str,
    repo_host: str,
    repo_path: str,
    repo_branch: str,
    local_dir: str,
) -> str:
    """Clone a repository and check out a branch.

    Credentials are read from ``<PROVIDER>_CREDENTIALS``.

    Returns:
        The local directory

    Raises:
        MandatoryArgumentError: If any argument is empty
        GitOperationError: If the clone fails
    """
    _require(
        repo_provider=repo_provider,
        repo_host=repo_host,
        repo_path=repo_path,
        repo_branch=repo_branch,
        local_dir=local_dir,
    )

    credentials = UtilityConfig.git_credentials(repo_provider)
    repo_url = f"https://{credentials}@{repo_host}/{repo_path}"

    logger.log(
        TRACE,
        f"Cloning the {_redact(repo_url)} repo and checking out the {repo_branch} branch ...",
    )
    try:
        run_cmd(["git", "clone", "-b", repo_branch, repo_url, local_dir])
    except subprocess.CalledProcessError as e:
        logger.critical(f"Can't clone {_redact(repo_url)} repo")
        raise GitOperationError(f"Can't clone {_redact(repo_url)} repo") from e

    return local_dir


def push_git_repo(
    repo_url: str,
    repo_branch: str,
    repo_remote: str,
    commit_message: str,
    git_user: str,
    git_email: str,
    cwd: Optional[str] = None,
) -> bool:
    """Commit all changes in the work tree and push them upstream.

    Nothing is committed or pushed when the tree is clean.

    Returns:
        True if a commit was pushed

    Raises:
        MandatoryArgumentError: If any argument is empty
        GitOperationError: If the remote is missing or commit/push fails
    """
    _require(
        repo_url=repo_url,
        repo_branch=repo_branch,
        repo_remote=repo_remote,
        commit_message=commit_message,
        git_user=git_user,
        git_email=git_email,
    )
    display_url = _redact(repo_url)

    if run_cmd(["git", "remote", "show", repo_remote], cwd=cwd, check=False, quiet=True) != 0:
        logger.critical(f"Remote {repo_remote} is not initialised")
        raise GitOperationError(f"Remote {repo_remote} is not initialised")

    # Ensure git knows who we are
    run_cmd(["git", "config", "user.name", git_user], cwd=cwd)
    run_cmd(["git", "config", "user.email", git_email], cwd=cwd)

    run_cmd(["git", "add", "-A"], cwd=cwd)

    if not run_output(["git", "status", "--porcelain"], cwd=cwd).strip():
        logger.info(f"No changes to commit to the {display_url} repo")
        return False

    logger.log(TRACE, f"Committing to the {display_url} repo...")
    try:
        run_cmd(["git", "commit", "-m", commit_message], cwd=cwd)
    except subprocess.CalledProcessError as e:
        logger.critical(f"Can't commit to the {display_url} repo")
        raise GitOperationError(f"Can't commit to the {display_url} repo") from e

    logger.log(TRACE, f"Pushing the {display_url} repo upstream...")
    try:
        run_cmd(["git", "push", repo_remote, repo_branch], cwd=cwd)
    except subprocess.CalledProcessError as e:
        message = f"Can't push the {display_url} repo changes to upstream repo {repo_remote}"
        logger.critical(message)
        raise GitOperationError(message) from e

    return True


def git_mv(source: str, destination: str, cwd: Optional[str] = None) -> None:
    """Move a file with ``git mv`` inside a repository, plain move otherwise."""
    if in_git_repo(cwd):
        run_cmd(["git", "mv", source, destination], cwd=cwd)
    else:
        base = cwd or os.getcwd()
        shutil.move(os.path.join(base, source), os.path.join(base, destination))


def git_rm(*paths: str, cwd: Optional[str] = None) -> None:
    """Remove files with ``git rm`` inside a repository, plain delete otherwise."""
    if in_git_repo(cwd):
        run_cmd(["git", "rm", *paths], cwd=cwd)
    else:
        base = cwd or os.getcwd()
        for path in paths:
            os.remove(os.path.join(base, path))


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
