"""
Configuration for the reviewer suggester.

Values are read from the environment the way GitHub Actions passes action
inputs (INPUT_<NAME>), with plain variables as a fallback for local runs
driven by a .env file.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Set

from .api_client import DEFAULT_API_URL
from .exceptions import ReviewerSuggestionError

DEFAULT_MAX_REVIEWERS = 3
DEFAULT_THRESHOLD = 20.0
DEFAULT_LOOKBACK_DAYS = 0
DEFAULT_ANALYSIS_WORKERS = 1


@dataclass
class SuggesterConfig:
    """Settings controlling attribution and ranking."""
    token: str
    max_reviewers: int = DEFAULT_MAX_REVIEWERS
    threshold: float = DEFAULT_THRESHOLD
    ignore_authors: Set[str] = field(default_factory=set)
    lookback_days: int = DEFAULT_LOOKBACK_DAYS
    exclude_generated_files: bool = False
    excluded_file_patterns: Optional[List[str]] = None
    analysis_workers: int = DEFAULT_ANALYSIS_WORKERS
    api_url: str = DEFAULT_API_URL
    workspace: Optional[str] = None


@dataclass
class PullRequestContext:
    """The pull request a run suggests reviewers for."""
    repo: str
    number: int
    author: str
    base_sha: str
    head_sha: str


def get_input(name: str, environ: Mapping[str, str] = None) -> str:
    """Read an action input, e.g. 'max-reviewers' from INPUT_MAX-REVIEWERS or MAX_REVIEWERS."""
    environ = os.environ if environ is None else environ
    value = environ.get(f"INPUT_{name.upper()}")
    if value is None:
        value = environ.get(name.upper().replace('-', '_'), '')
    return value.strip()


def parse_list(value: str) -> List[str]:
    """Split a comma-separated value, trimming entries and dropping empties."""
    return [item.strip() for item in value.split(',') if item.strip()]


def parse_bool(value: str, default: bool = False) -> bool:
    if not value:
        return default
    return value.lower() in ('true', '1', 'yes')


def _parse_number(name: str, value: str, default, cast, minimum=None, maximum=None):
    if not value:
        return default
    try:
        number = cast(value)
    except ValueError:
        logging.warning(f"Invalid {name} value '{value}', using default: {default}")
        return default

    if (minimum is not None and number < minimum) or (maximum is not None and number > maximum):
        logging.warning(f"Out of range {name} value '{value}', using default: {default}")
        return default
    return number


def load_config(environ: Mapping[str, str] = None) -> SuggesterConfig:
    """Build the configuration from action inputs.

    Raises:
        ReviewerSuggestionError: If no token is available
    """
    environ = os.environ if environ is None else environ

    token = get_input('token', environ) or environ.get('GITHUB_TOKEN', '')
    if not token:
        raise ReviewerSuggestionError("Input required and not supplied: token")

    ignore_authors = set(parse_list(get_input('ignore-authors', environ)))
    if ignore_authors:
        logging.info(f"Ignoring authors: {', '.join(sorted(ignore_authors))}")

    excluded_file_patterns = parse_list(get_input('excluded-file-patterns', environ)) or None

    return SuggesterConfig(
        token=token,
        max_reviewers=_parse_number('max-reviewers', get_input('max-reviewers', environ),
                                    DEFAULT_MAX_REVIEWERS, int, minimum=1),
        threshold=_parse_number('threshold', get_input('threshold', environ),
                                DEFAULT_THRESHOLD, float, minimum=0, maximum=100),
        ignore_authors=ignore_authors,
        lookback_days=_parse_number('lookback-days', get_input('lookback-days', environ),
                                    DEFAULT_LOOKBACK_DAYS, int, minimum=0),
        exclude_generated_files=parse_bool(get_input('exclude-generated-files', environ)),
        excluded_file_patterns=excluded_file_patterns,
        analysis_workers=_parse_number('analysis-workers', get_input('analysis-workers', environ),
                                       DEFAULT_ANALYSIS_WORKERS, int, minimum=1),
        api_url=environ.get('GITHUB_API_URL') or DEFAULT_API_URL,
        workspace=environ.get('GITHUB_WORKSPACE') or None
    )


def load_pull_request_context(environ: Mapping[str, str] = None) -> Optional[PullRequestContext]:
    """Read the pull request from the workflow event payload.

    Returns:
        The pull request context, or None if the event is not a pull request

    Raises:
        ReviewerSuggestionError: If the event payload or repository is missing
    """
    environ = os.environ if environ is None else environ

    event_path = environ.get('GITHUB_EVENT_PATH')
    if not event_path or not os.path.exists(event_path):
        raise ReviewerSuggestionError("GITHUB_EVENT_PATH is not set or does not exist")

    with open(event_path, 'r', encoding='utf-8') as f:
        payload = json.load(f)

    pull_request = payload.get('pull_request')
    if not pull_request:
        return None

    repo = environ.get('GITHUB_REPOSITORY') or payload.get('repository', {}).get('full_name')
    if not repo:
        raise ReviewerSuggestionError("GITHUB_REPOSITORY is not set")

    return PullRequestContext(
        repo=repo,
        number=pull_request['number'],
        author=pull_request['user']['login'],
        base_sha=pull_request['base']['sha'],
        head_sha=pull_request['head']['sha']
    )
