"""
CSV export of search results.

Rows are built from matches, then serialized completely in memory
before anything is handed to a download, so a failure never leaves
a partial file behind.

Every text field is double-quoted with embedded quotes doubled;
the page number is written unquoted.
"""

import csv
import io
from dataclasses import dataclass, field
from typing import Any, List, Sequence

from ..core import get_logger, ExportError
from ..utils import file_stem

logger = get_logger(__name__)


HEADERS = ["File", "Page", "Before Match", "Match", "Next Word", "After Match", "Full Context"]
SINGLE_FILE_HEADERS = ["Page", "Before Match", "Match", "After Match", "Full Context"]

DEFAULT_EXPORT_FILENAME = "pdf_search_results.csv"


@dataclass
class ResultTable:
    """
    Flat tabular view of matches.

    Attributes:
        headers: Column names.
        rows: One list of cell values per match.
    """
    headers: List[str]
    rows: List[List[Any]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)


def to_table(matches: Sequence[Any], single_file: bool = False) -> ResultTable:
    """
    Build export rows from matches.

    AnnotatedMatch rows use the user's next word; plain MatchRecord
    rows use the derived one.

    Args:
        matches: Matches to export, in output order.
        single_file: Drop the File and Next Word columns.

    Returns:
        ResultTable with one row per match.
    """
    table = ResultTable(headers=list(SINGLE_FILE_HEADERS if single_file else HEADERS))

    for match in matches:
        next_word = getattr(match, "next_word", None)
        if next_word is None:
            next_word = match.derived_next_word

        if single_file:
            row = [
                int(match.page_number),
                match.before_context,
                match.matched_text,
                match.after_context,
                match.full_context
            ]
        else:
            row = [
                match.file_name,
                int(match.page_number),
                match.before_context,
                match.matched_text,
                next_word,
                match.after_context,
                match.full_context
            ]
        table.rows.append(row)

    return table


def serialize(table: ResultTable, encoding: str = "utf-8") -> bytes:
    """
    Serialize a table to CSV bytes, header row first.

    Args:
        table: Rows to write.
        encoding: Output text encoding.

    Returns:
        Complete CSV content.

    Raises:
        ExportError: If any row cannot be written or encoded.
    """
    buffer = io.StringIO()

    try:
        csv.writer(buffer, lineterminator="\n").writerow(table.headers)

        writer = csv.writer(
            buffer,
            quoting=csv.QUOTE_NONNUMERIC,
            lineterminator="\n"
        )
        for row in table.rows:
            writer.writerow([_cell(value) for value in row])

        content = buffer.getvalue().encode(encoding)

    except Exception as e:
        logger.error(f"CSV serialization failed: {e}")
        raise ExportError(
            f"Could not serialize results: {e}",
            {"rows": len(table.rows), "encoding": encoding}
        )

    logger.debug(f"Serialized {len(table.rows)} rows ({len(content)} bytes)")
    return content


def export_filename(file_names: Sequence[str], default: str = DEFAULT_EXPORT_FILENAME) -> str:
    """
    Name of the downloaded CSV.

    Args:
        file_names: Names of the documents being exported.
        default: Name used when several documents are active.

    Returns:
        "<stem>_search_results.csv" for a single document, default otherwise.
    """
    if len(file_names) == 1:
        return f"{file_stem(file_names[0])}_search_results.csv"
    return default


def _cell(value: Any) -> Any:
    """Numbers stay unquoted; everything else is written as quoted text."""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, (int, float)):
        return value
    return "" if value is None else str(value)


if __name__ == "__main__":
    from ..extraction.models import Document
    from ..search.match_engine import MatchEngine

    doc = Document(0, "quotes.pdf", ('He said "stop" and then: left the room',))
    records = MatchEngine().search([doc], ['"stop"', "said"])

    print(serialize(to_table(records)).decode("utf-8"))
    print(export_filename([doc.file_name]))
