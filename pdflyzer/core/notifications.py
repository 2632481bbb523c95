"""
User-facing notices emitted by workspace operations.

Every operation reports its outcome as one of three categories:
success, validation (including empty results) and error. How a notice
is delivered (toast, log line, console) is up to the caller.
"""

from dataclasses import dataclass
from enum import Enum


class NoticeKind(Enum):
    """Categories of user-facing notices."""
    SUCCESS = "success"
    VALIDATION = "validation"
    ERROR = "error"


@dataclass(frozen=True)
class Notice:
    """
    A short message describing the outcome of an operation.

    Attributes:
        kind: Notice category.
        title: Short headline.
        description: One-sentence detail.
    """
    kind: NoticeKind
    title: str
    description: str = ""

    @property
    def is_error(self) -> bool:
        return self.kind is NoticeKind.ERROR


def success_notice(title: str, description: str = "") -> Notice:
    return Notice(NoticeKind.SUCCESS, title, description)


def validation_notice(title: str, description: str = "") -> Notice:
    return Notice(NoticeKind.VALIDATION, title, description)


def error_notice(title: str, description: str = "") -> Notice:
    return Notice(NoticeKind.ERROR, title, description)


def empty_search_notice() -> Notice:
    """Search was requested before any document was loaded."""
    return validation_notice("No PDFs loaded", "Please upload PDF files first.")


def no_matches_notice() -> Notice:
    """Search ran but found nothing."""
    return validation_notice(
        "No matches found",
        "Try different search terms or upload other PDFs."
    )


if __name__ == "__main__":
    for notice in (empty_search_notice(), no_matches_notice(), error_notice("Search error")):
        print(f"[{notice.kind.value}] {notice.title}: {notice.description}")
