"""Exceptions raised while suggesting reviewers."""


class ReviewerSuggestionError(Exception):
    """Base class for all failures that abort a suggestion run."""


class GitCommandError(ReviewerSuggestionError):
    """A git command exited with a non-zero status."""

    def __init__(self, command, returncode: int, stderr: str = ''):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or f"Command failed with exit code {returncode}"
        super().__init__(f"Failed to execute command: {' '.join(command)}\nError: {detail}")


class GitHubAPIError(ReviewerSuggestionError):
    """The GitHub API refused a request or returned an unusable response."""


class FileAnalysisError(ReviewerSuggestionError):
    """Attribution failed for one changed file."""

    def __init__(self, filename: str, cause: Exception):
        self.filename = filename
        self.cause = cause
        super().__init__(f"Failed to analyze {filename}: {cause}")
