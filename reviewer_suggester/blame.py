"""Per-file attribution of changed lines to the commits that last touched them."""

import logging
from collections import defaultdict
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from .blame_parser import parse_blame_output
from .diff_parser import parse_changed_lines
from .git import GitRepository
from .models import ChangedFile


def lookback_since(lookback_days: int, now: datetime = None) -> Optional[datetime]:
    """Start of the blame window, or None when history is unbounded."""
    if not lookback_days or lookback_days <= 0:
        return None
    now = now or datetime.now(timezone.utc)
    return now - timedelta(days=lookback_days)


def analyze_file_blame(
    changed_file: ChangedFile,
    git: GitRepository,
    base_ref: str,
    head_ref: str,
    lookback_days: int = 0
) -> Dict[str, int]:
    """Count how many changed lines of one file each commit last touched.

    Args:
        changed_file: File from the pull request
        git: Repository to read diff and blame from
        base_ref: Base revision SHA
        head_ref: Head revision SHA
        lookback_days: Only attribute lines touched in the last N days (0 = all)

    Returns:
        Dictionary mapping commit SHA to attributed line count. Empty for new
        files and for diffs without removals.
    """
    filename = changed_file.filename

    if not git.file_exists(filename, base_ref):
        logging.debug(f"Skipping new file: {filename}")
        return {}

    changed_lines = parse_changed_lines(git.get_diff(filename, base_ref, head_ref))
    if not changed_lines:
        logging.debug(f"No removed or modified lines in {filename}")
        return {}

    since = lookback_since(lookback_days)
    blame_data = parse_blame_output(
        git.get_blame(filename, base_ref, since),
        drop_boundary=since is not None
    )

    commit_counts: Dict[str, int] = defaultdict(int)
    for line_num in changed_lines:
        blame = blame_data.get(line_num)
        if blame is None:
            continue
        commit_counts[blame.commit] += 1

    logging.debug(f"{filename}: {len(changed_lines)} changed lines across {len(commit_counts)} commits")
    return dict(commit_counts)
