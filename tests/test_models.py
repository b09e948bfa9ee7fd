"""
Unit tests for data models
"""

import pytest
from reviewer_suggester.models import AuthorStats, PotentialReviewer, SuggestionResult


class TestAuthorStats:
    """Test cases for AuthorStats dataclass."""

    def test_initialization(self):
        """Test that AuthorStats initializes with default values."""
        stats = AuthorStats()
        assert stats.lines_changed == 0
        assert stats.files_affected == 0
        assert stats.percentage_of_changes == 0.0
        assert stats.commits == set()

    def test_commit_sets_not_shared(self):
        """Test that each instance gets its own commit set."""
        first, second = AuthorStats(), AuthorStats()
        first.commits.add('abc')
        assert second.commits == set()

    def test_merge(self):
        """Test that merge sums counters and unions commits."""
        stats = AuthorStats(lines_changed=3, files_affected=1, commits={'a'})
        stats.merge(AuthorStats(lines_changed=2, files_affected=2, commits={'a', 'b'}))

        assert stats.lines_changed == 5
        assert stats.files_affected == 3
        assert stats.commits == {'a', 'b'}


class TestSuggestionResult:
    """Test cases for SuggestionResult."""

    def test_usernames(self):
        """Test that usernames follow reviewer order."""
        result = SuggestionResult(reviewers=[
            PotentialReviewer('bob', AuthorStats()),
            PotentialReviewer('alice', AuthorStats()),
        ])
        assert result.usernames == ['bob', 'alice']

    def test_empty(self):
        """Test the default empty result."""
        result = SuggestionResult()
        assert result.reviewers == []
        assert result.unresolved_commits == []
        assert result.usernames == []


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
