"""Reviewer suggestion pipeline for a single pull request."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List

from .aggregator import CommitStatsAccumulator
from .api_client import GitHubAPIClient
from .blame import analyze_file_blame
from .config import PullRequestContext, SuggesterConfig
from .exceptions import FileAnalysisError
from .file_filters import FileFilter
from .git import GitRepository
from .models import ChangedFile, SuggestionResult
from .output import OutputFormatter
from .ranking import rank_reviewers, resolve_authors, total_lines_changed


class ReviewerSuggester:
    """Attributes a pull request's changed lines to their authors and suggests reviewers."""

    def __init__(
        self,
        config: SuggesterConfig,
        context: PullRequestContext,
        api_client: GitHubAPIClient = None,
        git: GitRepository = None,
        output_formatter: OutputFormatter = None
    ):
        """Initialize the suggester.

        Args:
            config: Attribution and ranking settings
            context: Pull request being analyzed
            api_client: GitHub client (built from config if omitted)
            git: Checkout to blame (built from config if omitted)
            output_formatter: Comment formatter
        """
        self.config = config
        self.context = context
        self.api_client = api_client or GitHubAPIClient(config.token, config.api_url)
        self.git = git or GitRepository(config.workspace)
        self.output_formatter = output_formatter or OutputFormatter()

        self.file_filter = None
        if config.exclude_generated_files or config.excluded_file_patterns:
            self.file_filter = FileFilter(config.excluded_file_patterns)

        logging.info(f"Initialized suggester for {context.repo}#{context.number}")

    def get_changed_files(self) -> List[ChangedFile]:
        logging.info("Getting changed files...")
        files = self.api_client.get_changed_files(self.context.repo, self.context.number)
        logging.info(f"Found {len(files)} changed files")

        if self.file_filter:
            files = self.file_filter.filter_files(files)
        return files

    def _analyze_file(self, changed_file: ChangedFile) -> Dict[str, int]:
        try:
            return analyze_file_blame(
                changed_file,
                self.git,
                self.context.base_sha,
                self.context.head_sha,
                self.config.lookback_days
            )
        except Exception as e:
            raise FileAnalysisError(changed_file.filename, e) from e

    def analyze_files(self, files: List[ChangedFile]) -> CommitStatsAccumulator:
        """Attribute every file's changed lines and merge them per commit.

        Files are merged in changed-file order whether or not they were
        analyzed in parallel. The first failing file aborts the run.
        """
        logging.info("Analyzing git blame for changed lines...")
        accumulator = CommitStatsAccumulator()

        if self.config.analysis_workers <= 1 or len(files) <= 1:
            for changed_file in files:
                accumulator.add_file(self._analyze_file(changed_file))
            return accumulator

        max_workers = min(self.config.analysis_workers, len(files))
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [executor.submit(self._analyze_file, changed_file) for changed_file in files]
            try:
                for future in futures:
                    accumulator.add_file(future.result())
            except FileAnalysisError:
                for future in futures:
                    future.cancel()
                raise

        return accumulator

    def resolve_commit(self, sha: str):
        return self.api_client.resolve_commit_author(self.context.repo, sha)

    def run(self) -> SuggestionResult:
        """Compute the ranked reviewers and post them as a PR comment.

        Returns:
            The suggestion; its reviewer list is empty when no lines could be
            attributed or nobody meets the threshold
        """
        files = self.get_changed_files()
        accumulator = self.analyze_files(files)

        logging.info("Resolving commit authors to GitHub users...")
        resolved, unresolved_commits = resolve_authors(
            accumulator,
            self.resolve_commit,
            self.context.author,
            self.config.ignore_authors
        )

        result = SuggestionResult(
            unresolved_commits=unresolved_commits,
            total_lines_changed=total_lines_changed(resolved),
            files_analyzed=len(files)
        )

        if unresolved_commits:
            logging.warning(f"Could not resolve {len(unresolved_commits)} commits to GitHub users")

        if result.total_lines_changed == 0:
            logging.info("No lines changed by resolved authors")
            return result

        result.reviewers = rank_reviewers(resolved, self.config.threshold, self.config.max_reviewers)

        if not result.reviewers:
            logging.info("No reviewers meet the threshold criteria")
            return result

        logging.info(f"Creating comment to suggest reviewers: {', '.join(result.usernames)}")
        self.api_client.create_review_comment(
            self.context.repo,
            self.context.number,
            self.output_formatter.format_comment(result.reviewers)
        )
        return result
