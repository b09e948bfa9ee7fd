"""Thin wrapper around the git command line."""

import logging
import subprocess
from datetime import datetime
from typing import List, Optional

from .exceptions import GitCommandError


class GitRepository:
    """Runs git commands against a local checkout."""

    def __init__(self, cwd: str = None):
        """Initialize the repository wrapper.

        Args:
            cwd: Working directory of the checkout (defaults to the process cwd)
        """
        self.cwd = cwd

    def _run(self, args: List[str]) -> subprocess.CompletedProcess:
        command = ['git'] + args
        logging.debug(f"Running: {' '.join(command)}")
        return subprocess.run(
            command,
            cwd=self.cwd,
            capture_output=True,
            text=True,
            check=False
        )

    def run(self, args: List[str]) -> str:
        """Run a git command and return its stdout.

        Raises:
            GitCommandError: If git exits with a non-zero status
        """
        result = self._run(args)
        if result.returncode != 0:
            raise GitCommandError(['git'] + args, result.returncode, result.stderr)
        if result.stderr:
            logging.debug(f"Command stderr: {result.stderr}")
        return result.stdout

    def file_exists(self, filename: str, ref: str) -> bool:
        """Check whether a path exists at the given revision."""
        result = self._run(['cat-file', '-e', f'{ref}:{filename}'])
        return result.returncode == 0

    def get_diff(self, filename: str, base_ref: str, head_ref: str) -> str:
        """Unified diff of one path between two revisions."""
        return self.run(['diff', f'{base_ref}..{head_ref}', '--', filename])

    def get_blame(self, filename: str, ref: str, since: Optional[datetime] = None) -> str:
        """Line-porcelain blame of one path at a revision, optionally time-bounded."""
        args = ['blame', '--line-porcelain']
        if since is not None:
            # Root commits inside the window must not be reported as boundaries
            args += ['--root', f'--since={since.isoformat()}']
        args += [ref, '--', filename]
        return self.run(args)
