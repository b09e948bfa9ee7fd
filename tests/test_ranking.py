"""
Unit tests for author resolution and reviewer ranking
"""

import pytest
from unittest.mock import Mock

from reviewer_suggester.aggregator import CommitStatsAccumulator
from reviewer_suggester.models import AuthorStats
from reviewer_suggester.ranking import (
    rank_reviewers,
    representative_commit,
    resolve_authors,
    total_lines_changed,
)

from conftest import SHA_ALICE, SHA_BOB, SHA_CAROL

SHA_ALICE_2 = 'a' * 39 + '1'


def accumulate(*files):
    accumulator = CommitStatsAccumulator()
    for counts in files:
        accumulator.add_file(counts)
    return accumulator


class TestResolveAuthors:
    """Test cases for resolve_authors."""

    @pytest.fixture
    def logins(self):
        return {
            SHA_ALICE: 'alice',
            SHA_ALICE_2: 'alice',
            SHA_BOB: 'bob',
            SHA_CAROL: 'carol',
        }

    def test_resolves_each_bucket(self, logins):
        """Test that each commit bucket maps to its login."""
        accumulator = accumulate({SHA_ALICE: 3, SHA_BOB: 1})

        resolved, unresolved = resolve_authors(accumulator, logins.get, pr_author='dave')

        assert set(resolved) == {'alice', 'bob'}
        assert resolved['alice'].lines_changed == 3
        assert resolved['bob'].commits == {SHA_BOB}
        assert unresolved == []

    def test_merges_same_user(self, logins):
        """Test that commits resolving to one login are merged."""
        accumulator = accumulate({SHA_ALICE: 3}, {SHA_ALICE_2: 2, SHA_ALICE: 1})

        resolved, _ = resolve_authors(accumulator, logins.get, pr_author='dave')

        stats = resolved['alice']
        assert stats.lines_changed == 6
        assert stats.files_affected == 3
        assert stats.commits == {SHA_ALICE, SHA_ALICE_2}

    def test_excludes_pr_author(self, logins):
        """Test that the PR author is never a candidate, even as majority owner."""
        accumulator = accumulate({SHA_ALICE: 90, SHA_BOB: 10})

        resolved, _ = resolve_authors(accumulator, logins.get, pr_author='alice')

        assert 'alice' not in resolved
        assert set(resolved) == {'bob'}

    def test_excludes_ignored_authors(self, logins):
        """Test that ignored logins are discarded."""
        accumulator = accumulate({SHA_ALICE: 90, SHA_CAROL: 10})

        resolved, _ = resolve_authors(accumulator, logins.get, pr_author='dave', ignore_authors={'alice'})

        assert set(resolved) == {'carol'}

    def test_unresolved_commits_collected(self, logins):
        """Test that unknown commits are reported and contribute nothing."""
        unknown = 'd' * 40
        accumulator = accumulate({unknown: 5, SHA_BOB: 1})

        resolved, unresolved = resolve_authors(accumulator, logins.get, pr_author='dave')

        assert unresolved == [unknown]
        assert total_lines_changed(resolved) == 1

    def test_resolver_called_once_per_bucket(self):
        """Test that each bucket is resolved with one lookup."""
        resolver = Mock(return_value='bob')
        accumulator = accumulate({SHA_ALICE: 1}, {SHA_ALICE: 1, SHA_BOB: 1})

        resolve_authors(accumulator, resolver, pr_author='dave')

        assert [c.args[0] for c in resolver.call_args_list] == [SHA_ALICE, SHA_BOB]

    def test_accumulator_not_mutated(self, logins):
        """Test that merging does not alter the accumulator's buckets."""
        accumulator = accumulate({SHA_ALICE: 3}, {SHA_ALICE_2: 2})

        resolve_authors(accumulator, logins.get, pr_author='dave')

        assert [stats.lines_changed for _, _, stats in accumulator.buckets()] == [3, 2]


class TestRepresentativeCommit:
    """Test cases for representative_commit."""

    def test_smallest_sha(self):
        """Test that the lexicographically smallest hash is chosen."""
        assert representative_commit({SHA_CAROL, SHA_ALICE, SHA_BOB}) == SHA_ALICE


class TestRankReviewers:
    """Test cases for rank_reviewers."""

    def test_percentages_and_order(self):
        """Test an 80/20 split with a 20% threshold keeps both, alice first."""
        resolved = {
            'bob': AuthorStats(lines_changed=20),
            'alice': AuthorStats(lines_changed=80),
        }

        reviewers = rank_reviewers(resolved, threshold=20, max_reviewers=3)

        assert [r.username for r in reviewers] == ['alice', 'bob']
        assert reviewers[0].stats.percentage_of_changes == pytest.approx(80.0)
        assert reviewers[1].stats.percentage_of_changes == pytest.approx(20.0)

    def test_threshold_filters(self):
        """Test that users below the threshold are dropped."""
        resolved = {
            'alice': AuthorStats(lines_changed=85),
            'bob': AuthorStats(lines_changed=15),
        }

        reviewers = rank_reviewers(resolved, threshold=20, max_reviewers=3)

        assert [r.username for r in reviewers] == ['alice']
        assert all(r.stats.percentage_of_changes >= 20 for r in reviewers)

    def test_max_reviewers_truncates(self):
        """Test that only the top candidate survives max_reviewers=1."""
        resolved = {
            'alice': AuthorStats(lines_changed=30),
            'bob': AuthorStats(lines_changed=45),
            'carol': AuthorStats(lines_changed=25),
        }

        reviewers = rank_reviewers(resolved, threshold=20, max_reviewers=1)

        assert len(reviewers) == 1
        assert reviewers[0].username == 'bob'

    def test_zero_total_yields_nothing(self):
        """Test that no attributed lines means no suggestions."""
        assert rank_reviewers({}, threshold=0, max_reviewers=3) == []
        assert rank_reviewers({'alice': AuthorStats()}, threshold=0, max_reviewers=3) == []

    def test_none_meet_threshold(self):
        """Test an even split under a high threshold."""
        resolved = {name: AuthorStats(lines_changed=1) for name in ('a', 'b', 'c', 'd')}
        assert rank_reviewers(resolved, threshold=50, max_reviewers=3) == []


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
