"""Unified diff parsing for locating base-revision lines touched by a change."""

import re
from typing import List

# @@ -10,7 +10,7 @@ and @@ -3 +3 @@
HUNK_HEADER_PATTERN = re.compile(r'^@@ -(\d+)(?:,\d+)? \+(\d+)(?:,\d+)? @@')


def parse_changed_lines(diff_text: str) -> List[int]:
    """Collect the base-revision line numbers removed or modified by a diff.

    The cursor starts at the hunk's base-side start line and only advances on
    context lines. Removals record the cursor without moving it, so a run of
    consecutive removals records the same line number once per removed line.
    Callers count each entry, duplicates included.

    Args:
        diff_text: Unified diff for a single file

    Returns:
        Recorded line numbers in diff order (may contain duplicates)
    """
    changed_lines = []
    current_line = 0
    in_hunk = False

    for line in diff_text.split('\n'):
        hunk_match = HUNK_HEADER_PATTERN.match(line)
        if hunk_match:
            current_line = int(hunk_match.group(1))
            in_hunk = True
            continue

        # File headers (diff --git, index, ---, +++) precede the first hunk
        if not in_hunk:
            continue

        if line.startswith('-'):
            changed_lines.append(current_line)
        elif not line.startswith('+'):
            current_line += 1

    return changed_lines
