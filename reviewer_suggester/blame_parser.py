"""Parser for `git blame --line-porcelain` output."""

import re
from typing import Dict, Optional

from .models import BlameLine

# <40-hex sha> <original line> <final line> [<lines in group>]
COMMIT_HEADER_PATTERN = re.compile(r'^([0-9a-f]{40}) (\d+) (\d+)')

AUTHOR_PREFIX = 'author '
AUTHOR_MAIL_PREFIX = 'author-mail '
BOUNDARY_MARKER = 'boundary'


def parse_blame_output(blame_output: str, drop_boundary: bool = False) -> Dict[int, BlameLine]:
    """Build a line number -> BlameLine map from line-porcelain output.

    An entry is emitted when the author-mail line of a block is reached and
    the block already supplied a commit, a line number and a non-empty author
    name. Incomplete blocks are left out of the map.

    Args:
        blame_output: Raw `git blame --line-porcelain` output
        drop_boundary: Drop blocks marked as boundary commits, which is how
            blame reports lines older than a --since bound

    Returns:
        Dictionary mapping base-revision line numbers to their authorship
    """
    blame_data: Dict[int, BlameLine] = {}

    current_commit: Optional[str] = None
    current_line_num: Optional[int] = None
    current_author: Optional[str] = None

    for line in blame_output.split('\n'):
        commit_match = COMMIT_HEADER_PATTERN.match(line)
        if commit_match:
            current_commit = commit_match.group(1)
            current_line_num = int(commit_match.group(3))
            current_author = None
            continue

        if line.startswith(AUTHOR_PREFIX):
            current_author = line[len(AUTHOR_PREFIX):]
            continue

        if line.startswith(AUTHOR_MAIL_PREFIX):
            current_email = line[len(AUTHOR_MAIL_PREFIX):].replace('<', '').replace('>', '')

            if current_commit and current_line_num and current_author:
                blame_data[current_line_num] = BlameLine(
                    commit=current_commit,
                    author=current_author,
                    author_email=current_email,
                    line_number=current_line_num
                )
            continue

        if drop_boundary and line == BOUNDARY_MARKER and current_line_num is not None:
            blame_data.pop(current_line_num, None)

    return blame_data
