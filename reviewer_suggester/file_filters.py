"""Exclusion of generated files from attribution."""

import fnmatch
import logging
import posixpath
from typing import List

from .models import ChangedFile


# Lock files and build output whose history says nothing about ownership
DEFAULT_EXCLUDED_FILE_PATTERNS = [
    'package-lock.json',
    'yarn.lock',
    'pnpm-lock.yaml',
    'poetry.lock',
    'Pipfile.lock',
    'Cargo.lock',
    'go.sum',
    '*.lock',
    '*-lock.json',
    '*.min.js',
    '*.min.css',
    '*.bundle.js',
    '*.generated.*',
    'dist/*',
    'build/*',
]


class FileFilter:
    """Drops changed files matching any exclusion pattern."""

    def __init__(self, excluded_file_patterns: List[str] = None):
        """Initialize the file filter.

        Args:
            excluded_file_patterns: Glob patterns to exclude (uses default if None)
        """
        self.excluded_file_patterns = excluded_file_patterns or DEFAULT_EXCLUDED_FILE_PATTERNS

    def is_excluded(self, filename: str) -> bool:
        """Check a path, and its base name, against every pattern."""
        basename = posixpath.basename(filename)
        return any(
            fnmatch.fnmatch(filename, pattern) or fnmatch.fnmatch(basename, pattern)
            for pattern in self.excluded_file_patterns
        )

    def filter_files(self, files: List[ChangedFile]) -> List[ChangedFile]:
        kept = []
        for changed_file in files:
            if self.is_excluded(changed_file.filename):
                logging.debug(f"Excluding file: {changed_file.filename}")
            else:
                kept.append(changed_file)

        excluded = len(files) - len(kept)
        if excluded:
            logging.info(f"Excluded {excluded} generated file(s) from analysis")
        return kept
