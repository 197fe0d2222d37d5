# -*- coding: utf-8 -*-
"""
Source Control Info - Owner, branch and build number from git.

Runs ``git`` through ``subprocess``. The owner is the account or
organization segment of the ``origin`` remote URL, the branch is the
checked-out branch and the build number is the commit count of HEAD.

Author
------
Steven Siebert

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-17

Modified
--------
2026-10-17
"""

# Standard library
import logging
import re
import subprocess
from pathlib import Path
from typing import List, Tuple, Union

logger = logging.getLogger(__name__)

# git@github.com:owner/repo.git, ssh://git@host/owner/repo, https://host/owner/repo.git
_REMOTE_RE = re.compile(r'[:/]([^/:]+)/[^/]+?(?:\.git)?/?$')


class SourceControlError(RuntimeError):
    """A git command failed or its output could not be interpreted."""


def owner_from_remote(url: str) -> str:
    """Extract the owner segment from a git remote URL.

    Parameters
    ----------
    url : str

    Returns
    -------
    str

    Raises
    ------
    SourceControlError
        If the URL has no owner segment.
    """
    match = _REMOTE_RE.search(url.strip())
    if match is None:
        raise SourceControlError(f"Cannot determine owner from remote {url!r}")
    return match.group(1)


class SourceControlInfo:
    """Query git metadata for a working copy.

    Parameters
    ----------
    git : str
        git executable. Default 'git'.
    remote : str
        Remote whose URL names the owner. Default 'origin'.
    timeout : float
        Seconds to wait for each git command. Default 30.0.
    """

    def __init__(
        self,
        git: str = 'git',
        remote: str = 'origin',
        timeout: float = 30.0,
    ) -> None:
        self._git = git
        self._remote = remote
        self._timeout = timeout

    def _run(self, path: Union[str, Path], args: List[str]) -> str:
        cmd = [self._git, '-C', str(path)] + args
        logger.debug("Running %s", ' '.join(cmd))
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, timeout=self._timeout
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise SourceControlError(f"Failed to run {' '.join(cmd)}: {e}") from e
        if result.returncode != 0:
            raise SourceControlError(
                f"{' '.join(cmd)} exited with {result.returncode}: "
                f"{result.stderr.strip()}"
            )
        return result.stdout.strip()

    def get_owner_and_branch(self, path: Union[str, Path]) -> Tuple[str, str]:
        """Return ``(owner, branch)`` for the working copy at ``path``.

        Raises
        ------
        SourceControlError
            If git fails, HEAD is detached or the remote has no owner.
        """
        url = self._run(path, ['config', '--get', f'remote.{self._remote}.url'])
        owner = owner_from_remote(url)
        branch = self._run(path, ['rev-parse', '--abbrev-ref', 'HEAD'])
        if not branch or branch == 'HEAD':
            raise SourceControlError(f"No branch checked out at {path}")
        return owner, branch

    def get_build_number(self, path: Union[str, Path]) -> int:
        """Number of commits reachable from HEAD."""
        out = self._run(path, ['rev-list', '--count', 'HEAD'])
        try:
            return int(out)
        except ValueError as e:
            raise SourceControlError(f"Unexpected commit count {out!r}") from e

    def get_commit(self, path: Union[str, Path]) -> str:
        return self._run(path, ['rev-parse', 'HEAD'])
