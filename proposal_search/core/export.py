"""CSV export of cross-match results."""

import csv
import io
from typing import Iterable

from ..models.response import CrossMatchRow

CSV_HEADER = ["Terms", "Fuzzy Search Results", "Contains Match Results", "Exact Match Results"]
ID_SEPARATOR = ", "


def rows_to_csv(rows: Iterable[CrossMatchRow]) -> str:
    """
    Render cross-match rows as CSV text.

    Every value is quoted, so ids joined with commas stay in one cell.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for row in rows:
        writer.writerow([
            row.term,
            ID_SEPARATOR.join(row.fuzzy),
            ID_SEPARATOR.join(row.contains),
            ID_SEPARATOR.join(row.exact),
        ])
    return buffer.getvalue()
