"""
Line set difference engine.

Compares two files as collections of lines rather than as aligned
sequences. A line is reported when no equal line exists in the other
file, regardless of where it appears.

Lines only found in the first file are reported once per occurrence.
Lines only found in the second file are reported once in total.
"""

from __future__ import annotations

import logging
from typing import Sequence

from textdiff.core.models import DifferenceResult, LineDifference


class LineSetDiffEngine:
    """
    Engine for computing the lines that differ between two files.

    The engine is stateless; one instance can be shared freely.
    """

    def compare(
        self,
        left_lines: Sequence[str],
        right_lines: Sequence[str]
    ) -> LineDifference:
        """
        Compare two sequences of lines.

        Args:
            left_lines: Lines from the first file
            right_lines: Lines from the second file

        Returns:
            LineDifference with the differing lines and counts
        """
        left_only, right_only = self._split(left_lines, right_lines)

        result = LineDifference(
            lines=left_only + right_only,
            left_only_count=len(left_only),
            right_only_count=len(right_only),
            left_line_count=len(left_lines),
            right_line_count=len(right_lines),
        )
        logging.debug(f"LineSetDiffEngine - {result.summary()}")
        return result

    def get_differences(
        self,
        left_lines: Sequence[str],
        right_lines: Sequence[str]
    ) -> DifferenceResult:
        """Return only the differing lines."""
        left_only, right_only = self._split(left_lines, right_lines)
        return left_only + right_only

    def _split(
        self,
        left_lines: Sequence[str],
        right_lines: Sequence[str]
    ) -> tuple[list[str], list[str]]:
        """Compute (left-only, right-only) lines."""
        # An empty side means everything on the other side differs,
        # duplicates included.
        if not left_lines:
            return [], list(right_lines)
        if not right_lines:
            return list(left_lines), []

        left_set = set(left_lines)
        right_set = set(right_lines)

        left_only = [line for line in left_lines if line not in right_set]

        # Right-only lines can never equal a left-only line, so deduplicating
        # against what this loop appended covers the whole result.
        right_only: list[str] = []
        seen: set[str] = set()
        for line in right_lines:
            if line in left_set or line in seen:
                continue
            seen.add(line)
            right_only.append(line)

        return left_only, right_only


def get_differences(
    left_lines: Sequence[str],
    right_lines: Sequence[str]
) -> DifferenceResult:
    """
    Get the lines present in only one of two line sequences.

    If either side is empty the other side is returned unchanged.
    """
    return LineSetDiffEngine().get_differences(left_lines, right_lines)
