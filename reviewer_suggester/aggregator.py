"""Cross-file accumulation of per-commit line counts."""

import logging
from typing import Dict, Iterator, Set, Tuple

from .models import AuthorStats


def commit_key(commit: str) -> str:
    """Bucket key for a commit before it is resolved to a user."""
    return f"commit:{commit}"


class CommitStatsAccumulator:
    """Merges each file's commit -> line count map into per-commit buckets.

    Buckets stay keyed by commit until resolution, where several buckets may
    collapse onto one GitHub user. Buckets iterate in first-seen order.
    """

    def __init__(self):
        self.commit_groups: Dict[str, Set[str]] = {}
        self.stats: Dict[str, AuthorStats] = {}

    def add_file(self, commit_counts: Dict[str, int]):
        """Record one file's attribution.

        files_affected grows by one per file contributing lines to a bucket.
        """
        for commit, line_count in commit_counts.items():
            key = commit_key(commit)

            self.commit_groups.setdefault(key, set()).add(commit)
            stats = self.stats.setdefault(key, AuthorStats())
            stats.lines_changed += line_count
            stats.files_affected += 1
            stats.commits.add(commit)

        if commit_counts:
            logging.debug(f"Recorded {sum(commit_counts.values())} lines from {len(commit_counts)} commits")

    def buckets(self) -> Iterator[Tuple[str, Set[str], AuthorStats]]:
        for key, commits in self.commit_groups.items():
            yield key, commits, self.stats[key]

    def __len__(self) -> int:
        return len(self.commit_groups)
