"""Resolution of commit buckets to GitHub users and reviewer ranking."""

import logging
from typing import Callable, Dict, Iterable, List, Optional, Set, Tuple

from .aggregator import CommitStatsAccumulator
from .models import AuthorStats, PotentialReviewer


def representative_commit(commits: Iterable[str]) -> str:
    """Commit used to resolve a bucket: the lexicographically smallest SHA."""
    return min(commits)


def resolve_authors(
    accumulator: CommitStatsAccumulator,
    resolve_commit: Callable[[str], Optional[str]],
    pr_author: str,
    ignore_authors: Set[str] = None
) -> Tuple[Dict[str, AuthorStats], List[str]]:
    """Resolve every commit bucket to a GitHub user and merge per user.

    Buckets resolving to the PR author or an ignored user are discarded.
    Buckets that cannot be resolved contribute their commits to the
    unresolved list and nothing to any user.

    Args:
        accumulator: Per-commit buckets for the whole pull request
        resolve_commit: Callable mapping a commit SHA to a login or None
        pr_author: Login of the pull request author
        ignore_authors: Logins never suggested

    Returns:
        Tuple of (login -> merged AuthorStats, unresolved commit SHAs)
    """
    ignore_authors = ignore_authors or set()
    resolved: Dict[str, AuthorStats] = {}
    unresolved_commits: List[str] = []

    for _, commits, stats in accumulator.buckets():
        github_user = resolve_commit(representative_commit(commits))

        if not github_user:
            unresolved_commits.extend(sorted(commits))
            continue

        if github_user == pr_author:
            logging.debug(f"Skipping PR author: {github_user}")
            continue

        if github_user in ignore_authors:
            logging.debug(f"Skipping ignored author: {github_user}")
            continue

        if github_user in resolved:
            resolved[github_user].merge(stats)
        else:
            resolved[github_user] = AuthorStats(
                lines_changed=stats.lines_changed,
                files_affected=stats.files_affected,
                commits=set(stats.commits)
            )

        logging.info(f"Resolved {len(commits)} commits to @{github_user}")

    return resolved, unresolved_commits


def total_lines_changed(resolved: Dict[str, AuthorStats]) -> int:
    return sum(stats.lines_changed for stats in resolved.values())


def rank_reviewers(
    resolved: Dict[str, AuthorStats],
    threshold: float,
    max_reviewers: int
) -> List[PotentialReviewer]:
    """Rank resolved users by their share of the attributed lines.

    Sets percentage_of_changes on every user, keeps those at or above the
    threshold, sorts by share descending and truncates to max_reviewers.

    Args:
        resolved: Login -> merged AuthorStats
        threshold: Minimum share in percent
        max_reviewers: Maximum number of reviewers returned

    Returns:
        Ranked reviewers, empty when nothing was attributed
    """
    total = total_lines_changed(resolved)
    if total == 0:
        return []

    candidates = []
    for username, stats in resolved.items():
        stats.percentage_of_changes = (stats.lines_changed / total) * 100
        if stats.percentage_of_changes >= threshold:
            candidates.append(PotentialReviewer(username=username, stats=stats))

    candidates.sort(key=lambda reviewer: reviewer.stats.percentage_of_changes, reverse=True)
    return candidates[:max_reviewers]
