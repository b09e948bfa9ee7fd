"""Reviewer Suggester - suggests pull request reviewers from the blame of changed lines."""

from .models import AuthorStats, BlameLine, ChangedFile, PotentialReviewer, SuggestionResult
from .api_client import GitHubAPIClient
from .config import SuggesterConfig, PullRequestContext, load_config, load_pull_request_context
from .diff_parser import parse_changed_lines
from .blame_parser import parse_blame_output
from .blame import analyze_file_blame
from .aggregator import CommitStatsAccumulator
from .ranking import resolve_authors, rank_reviewers
from .file_filters import FileFilter, DEFAULT_EXCLUDED_FILE_PATTERNS
from .git import GitRepository
from .output import OutputFormatter
from .suggester import ReviewerSuggester

__all__ = [
    'AuthorStats',
    'BlameLine',
    'ChangedFile',
    'PotentialReviewer',
    'SuggestionResult',
    'GitHubAPIClient',
    'SuggesterConfig',
    'PullRequestContext',
    'load_config',
    'load_pull_request_context',
    'parse_changed_lines',
    'parse_blame_output',
    'analyze_file_blame',
    'CommitStatsAccumulator',
    'resolve_authors',
    'rank_reviewers',
    'FileFilter',
    'DEFAULT_EXCLUDED_FILE_PATTERNS',
    'GitRepository',
    'OutputFormatter',
    'ReviewerSuggester',
]
