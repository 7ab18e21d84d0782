"""
Plain text rendering of word frequency snapshots.

Produces the two emissions of every flush: a one-line summary and a
multi-line listing of count groups, highest count first.
"""
from typing import List

from tabulate import tabulate

from models.frequency_snapshot_models import FrequencyGroup, FrequencySnapshot


def format_summary(snapshot: FrequencySnapshot) -> str:
    """
    Format the one-line summary of a snapshot.

    Example:
        At 2024-05-01 12:00:00, total # of words received in run#3: 42
    """
    return (
        f"At {snapshot.timestamp:%Y-%m-%d %H:%M:%S}, "
        f"total # of words received in run#{snapshot.run_number}: {snapshot.total_words}"
    )


def format_words(words: List[str]) -> str:
    """Render words as '[a, b]', escaping line breaks so each group stays on one row."""
    return "[" + ", ".join(_escape_line_breaks(word) for word in words) + "]"


# Every character str.splitlines() treats as a line boundary
_LINE_BREAKS = frozenset("\n\r\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029")


def _escape_line_breaks(word: str) -> str:
    return "".join(
        ch.encode("unicode_escape").decode("ascii") if ch in _LINE_BREAKS else ch
        for ch in word
    )


def format_listing(snapshot: FrequencySnapshot) -> str:
    """
    Format the grouped listing of a snapshot.

    Each row is the count, right-aligned to the widest count in the listing,
    followed by ``==>`` and the group's sorted words:

         12 ==> [the]
          3 ==> [cat, dog]

    Returns:
        The listing, or an empty string when no group passed the threshold
    """
    if not snapshot.groups:
        return ""

    rows = [_group_row(group) for group in snapshot.groups]
    table = tabulate(
        rows,
        tablefmt="plain",
        colalign=("right", "left"),
        disable_numparse=True
    )
    # tabulate pads the last column, rows are compared without it
    return "\n".join(line.rstrip() for line in table.splitlines())


def _group_row(group: FrequencyGroup) -> List[str]:
    return [str(group.count), f"==> {format_words(group.words)}"]
