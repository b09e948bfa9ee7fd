"""
Shared fixtures for reviewer suggester tests
"""

import pytest

SHA_ALICE = 'a' * 40
SHA_BOB = 'b' * 40
SHA_CAROL = 'c' * 40


def make_porcelain(entries, boundary_lines=()):
    """Render `git blame --line-porcelain` output.

    Args:
        entries: Iterable of (final_line, sha, author, email) tuples
        boundary_lines: Final line numbers whose block carries a boundary marker
    """
    blocks = []
    for final_line, sha, author, email in entries:
        block = [
            f"{sha} {final_line} {final_line} 1",
            f"author {author}",
            f"author-mail <{email}>",
            "author-time 1700000000",
            "author-tz +0000",
            f"committer {author}",
            f"committer-mail <{email}>",
            "committer-time 1700000000",
            "committer-tz +0000",
            "summary Some change",
        ]
        if final_line in boundary_lines:
            block.append("boundary")
        block += ["filename a.txt", f"\tcontent of line {final_line}"]
        blocks.append("\n".join(block))
    return "\n".join(blocks) + "\n"


@pytest.fixture
def porcelain():
    """Builder for line-porcelain blame output."""
    return make_porcelain
