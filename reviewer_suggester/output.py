"""Output formatting for reviewer suggestions."""

import logging
from typing import List

from .models import PotentialReviewer, SuggestionResult


# ANSI color codes
GREEN = '\033[92m'
YELLOW = '\033[93m'
CYAN = '\033[96m'
BOLD = '\033[1m'
RESET = '\033[0m'


class OutputFormatter:
    """Formats suggestions for the PR comment, the console and step outputs."""

    def __init__(self, use_color: bool = True):
        """Initialize the output formatter.

        Args:
            use_color: Whether console output uses ANSI colors
        """
        self.use_color = use_color

    def _c(self, code: str, text: str) -> str:
        return f"{code}{text}{RESET}" if self.use_color else text

    def format_comment(self, reviewers: List[PotentialReviewer]) -> str:
        """Render the markdown body of the suggestion comment."""
        lines = [
            "## Suggested reviewers",
            "",
            "These people last modified the lines this pull request changes or removes:",
            "",
            "| Reviewer | Share of changed lines | Lines |",
            "| --- | ---: | ---: |",
        ]
        for reviewer in reviewers:
            lines.append(
                f"| @{reviewer.username} "
                f"| {reviewer.stats.percentage_of_changes:.1f}% "
                f"| {reviewer.stats.lines_changed:,} |"
            )
        lines.append("")
        lines.append("_Based on `git blame` of the base revision._")
        return "\n".join(lines)

    def print_summary(self, result: SuggestionResult):
        """Print the suggested reviewers with their share of the changes."""
        print("\n" + self._c(BOLD, "Review Suggestion Summary:"))

        if not result.reviewers:
            print(self._c(YELLOW, "   No reviewers to suggest."))
            return

        for reviewer in result.reviewers:
            stats = reviewer.stats
            print(
                f"   {self._c(CYAN, '@' + reviewer.username)}: "
                f"{self._c(GREEN, f'{stats.percentage_of_changes:.1f}%')} "
                f"({stats.lines_changed} lines in {stats.files_affected} files)"
            )

        if result.unresolved_commits:
            print(self._c(YELLOW, f"   {len(result.unresolved_commits)} commits could not be matched to GitHub users"))

    def write_outputs(self, result: SuggestionResult, output_path: str = None):
        """Append the `reviewers` and `reviewer-count` step outputs.

        Args:
            result: Suggestion to publish
            output_path: File named by GITHUB_OUTPUT (skipped when None)
        """
        if not output_path:
            logging.debug("GITHUB_OUTPUT not set, skipping step outputs")
            return

        with open(output_path, 'a', encoding='utf-8') as f:
            f.write(f"reviewers={','.join(result.usernames)}\n")
            f.write(f"reviewer-count={len(result.reviewers)}\n")
