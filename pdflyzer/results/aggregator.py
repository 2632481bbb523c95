"""
Grouping of matches for the results panel.

Works on MatchRecord or AnnotatedMatch alike; only file_index,
page_number and term are read. Order within each group is the
search order.
"""

from collections import OrderedDict
from typing import Dict, List, Sequence, TypeVar

M = TypeVar("M")


def group_by_term(matches: Sequence[M]) -> "OrderedDict[str, List[M]]":
    """
    Group matches by search term.

    Args:
        matches: Matches in search order.

    Returns:
        Mapping term -> matches, terms in first-seen order.
    """
    groups: "OrderedDict[str, List[M]]" = OrderedDict()
    for match in matches:
        groups.setdefault(match.term, []).append(match)
    return groups


def group_by_file(matches: Sequence[M]) -> "OrderedDict[int, List[M]]":
    """Group matches by file index, files in first-seen order."""
    groups: "OrderedDict[int, List[M]]" = OrderedDict()
    for match in matches:
        groups.setdefault(match.file_index, []).append(match)
    return groups


def group_by_file_and_term(matches: Sequence[M]) -> "OrderedDict[int, OrderedDict[str, List[M]]]":
    """Two-level grouping: file index, then term."""
    return OrderedDict(
        (file_index, group_by_term(file_matches))
        for file_index, file_matches in group_by_file(matches).items()
    )


def count_by_term(matches: Sequence[M]) -> Dict[str, int]:
    """Number of matches per term."""
    return {term: len(group) for term, group in group_by_term(matches).items()}
