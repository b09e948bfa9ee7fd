"""Data models for change attribution and reviewer suggestion."""

from dataclasses import dataclass, field
from typing import List, Set


@dataclass
class ChangedFile:
    """A file touched by the pull request."""
    filename: str
    status: str = 'modified'


@dataclass
class BlameLine:
    """Last commit and author to touch one line at the base revision."""
    commit: str
    author: str
    author_email: str
    line_number: int


@dataclass
class AuthorStats:
    """Attribution totals for a commit bucket or a resolved user."""
    lines_changed: int = 0
    files_affected: int = 0  # File-touches, not unique files
    percentage_of_changes: float = 0.0
    commits: Set[str] = field(default_factory=set)

    def merge(self, other: 'AuthorStats'):
        """Fold another bucket's totals into this one."""
        self.lines_changed += other.lines_changed
        self.files_affected += other.files_affected
        self.commits.update(other.commits)


@dataclass
class PotentialReviewer:
    """A resolved user ranked for review."""
    username: str
    stats: AuthorStats


@dataclass
class SuggestionResult:
    """Outcome of one suggestion run."""
    reviewers: List[PotentialReviewer] = field(default_factory=list)
    unresolved_commits: List[str] = field(default_factory=list)
    total_lines_changed: int = 0
    files_analyzed: int = 0

    @property
    def usernames(self) -> List[str]:
        return [reviewer.username for reviewer in self.reviewers]
