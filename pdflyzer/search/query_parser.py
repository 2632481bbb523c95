"""
Search term parsing.

Turns raw user input into the ordered list of distinct, non-empty
literal terms the match engine expects. Terms are literal substrings:
no operators, wildcards or regular expressions.
"""

from typing import Iterable, List, Union

from ..core import get_logger

logger = get_logger(__name__)


TERM_SEPARATOR = ","


def normalize_terms(raw: Union[str, Iterable[str], None]) -> List[str]:
    """
    Normalize search terms.

    Strips surrounding whitespace, drops empty terms and removes
    duplicates that differ only by case, keeping the first spelling.

    Args:
        raw: A list of terms, or a single comma-separated string.

    Returns:
        Ordered list of distinct non-empty terms.
    """
    if raw is None:
        return []

    if isinstance(raw, str):
        raw = raw.split(TERM_SEPARATOR)

    terms = []
    seen = set()

    for term in raw:
        term = (term or "").strip()
        key = term.lower()

        if not term or key in seen:
            continue

        seen.add(key)
        terms.append(term)

    return terms


def add_term(terms: List[str], candidate: str) -> List[str]:
    """
    Append a term to a term list if it is new.

    Args:
        terms: Current terms.
        candidate: Term typed by the user.

    Returns:
        A new list; the input list is not modified.
    """
    return normalize_terms(list(terms) + [candidate])


def remove_term(terms: List[str], term: str) -> List[str]:
    """Return a new list without the given term."""
    return [t for t in terms if t != term]


if __name__ == "__main__":
    print(normalize_terms("invoice, Total ,total,, due date"))
    print(add_term(["invoice"], "  Invoice "))
    print(remove_term(["invoice", "total"], "invoice"))
